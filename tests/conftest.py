"""Shared fixtures: a miniature BSB data tree on disk."""

import json
from collections import Counter

import pytest

from bsb_reader.fetch import ResourceFetcher
from bsb_reader.lexicon import LexiconStore
from bsb_reader.store import BibleDataStore


GENESIS_1 = {
    "1": {
        "w": [
            ["In", None], ["the", None], ["beginning", "H7225"], ["God", "H430"],
            ["created", "H1254"], ["the", None], ["heavens", "H8064"], ["and", None],
            ["the", None], ["earth", "H776"], [".", None],
        ],
        "heb": [
            ["בְּרֵאשִׁית", "H7225"], ["בָּרָא", "H1254"], ["אֱלֹהִים", "H430"], ["אֵת", "H853"],
            ["הַשָּׁמַיִם", "H8064"], ["וְאֵת", "H853"], ["הָאָרֶץ", "H776"], ["׃", None],
        ],
    },
    "2": {
        "w": [
            ["Now", None], ["the", None], ["earth", "H776"], ["was", "H1961"],
            ["formless", "H8414"], ["and", None], ["void", "H922"], ["vvv", "H1961"], [".", None],
        ],
        "heb": [
            ["וְהָאָרֶץ", "H776"], ["הָיְתָה", "H1961"], ["תֹהוּ", "H8414"], ["וָבֹהוּ", "H922"], ["׃", None],
        ],
    },
}

JOHN_1 = {
    "1": {
        "w": [
            ["In", "G1722"], ["the", None], ["beginning", "G746"], ["was", "G1510"],
            ["the", None], ["Word", "G3056"], [",", None], ["and", None], ["the", None],
            ["Word", "G3056"], ["was", "G1510"], ["with", "G4314"], ["God", "G2316"], [".", None],
        ],
        "grk": [
            ["Ἐν", "G1722"], ["ἀρχῇ", "G746"], ["ἦν", "G1510"], ["ὁ", "G3588"], ["λόγος", "G3056"],
            ["καὶ", "G2532"], ["ὁ", "G3588"], ["λόγος", "G3056"], ["ἦν", "G1510"], ["πρὸς", "G4314"],
            ["τὸν", "G3588"], ["θεόν", "G2316"],
        ],
    },
}

HEADINGS = [
    {"id": "h1", "b": "GEN", "c": 1, "before_v": 1, "level": "s1", "text": "The Creation", "refs": ["JHN.1.1"]},
    {"id": "h2", "b": "GEN", "c": 1, "before_v": 1, "level": "r", "text": "John 1:1-5; Hebrews 11:1-3", "refs": []},
    {"id": "h3", "b": "GEN", "c": 2, "before_v": 4, "level": "s1", "text": "The Garden of Eden", "refs": []},
    {"id": "h4", "b": "JHN", "c": 1, "before_v": 1, "level": "s1", "text": "The Word Became Flesh", "refs": []},
]

GENESIS_1_INDEX = [
    {
        "s": ["H7225", "H430", "H1254", "H8064", "H776"],
        "x": ["JHN.1.1", "HEB.11.3", "PSA.33.6", "ISA.42.5"],
        "m": [{"s": "H7225", "m": "HR/Ncfsa", "p": "noun", "l": "רֵאשִׁית"}],
        "topics": ["Creation"],
        "senses": {"H430": "God"},
    },
    {"s": ["H776", "H1961", "H8414", "H922"], "x": []},
]

CONCORDANCE = {
    "H7225": ["PRO.8.22", "JER.26.1", "GEN.10.10", "MAT.1.1", "GEN.1.1"],
    "G3056": ["MAT.5.37", "JHN.1.14", "JOH.1.1", "bad-ref"],
    "G0001": ["REV.1.8", "GEN.1.1"],
}

HEBREW_LEXICON = {
    "H7225": {
        "word": "רֵאשִׁית",
        "translit": "rê'shîyth",
        "pron": "ray-sheeth'",
        "def": "the <i>first</i>, in place, time, order or rank",
        "fullDef": "",
        "kjv": "beginning, chief(-est), first(-fruits, part, time)",
        "gloss": "beginning",
    },
    "H430": {
        "word": "אֱלֹהִים",
        "translit": "'ĕlôhîym",
        "pron": "el-o-heem'",
        "def": "gods in the ordinary sense",
        "fullDef": "",
        "kjv": "God, god",
    },
}

GREEK_LEXICON = {
    "G3056": {
        "word": "λόγος",
        "translit": "lógos",
        "pron": "log'-os",
        "def": "something said",
        "fullDef": "<b>something said</b> (including the <i>thought</i>)",
        "kjv": "account, cause, communication, word",
        "stepDef": "word, speech, divine utterance",
        "morph": "N-NSM",
    },
}


def write_json(path, data):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")


def write_jsonl(path, records):
    path.parent.mkdir(parents=True, exist_ok=True)
    lines = [json.dumps(r, ensure_ascii=False) for r in records]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")


class CountingFetcher(ResourceFetcher):
    """ResourceFetcher that records how often each path was fetched."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.calls = Counter()

    def fetch_text(self, path):
        self.calls[path] += 1
        return super().fetch_text(path)


@pytest.fixture
def data_dir(tmp_path):
    base = tmp_path / "bsb-data"
    write_json(base / "display" / "GEN" / "1.json", GENESIS_1)
    write_json(base / "display" / "JHN" / "1.json", JOHN_1)
    write_json(base / "display" / "EXO" / "1.json", {})
    write_jsonl(base / "headings.jsonl", HEADINGS)
    write_jsonl(base / "index" / "GEN" / "1.jsonl", GENESIS_1_INDEX)
    write_json(base / "concordance.json", CONCORDANCE)
    write_json(base / "lexicon" / "hebrew.json", HEBREW_LEXICON)
    write_json(base / "lexicon" / "greek.json", GREEK_LEXICON)
    return base


@pytest.fixture
def fetcher(data_dir):
    return CountingFetcher(str(data_dir))


@pytest.fixture
def store(fetcher):
    return BibleDataStore(fetcher)


@pytest.fixture
def lexicon(fetcher):
    return LexiconStore(fetcher)
