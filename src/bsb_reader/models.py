"""Data models for BSB chapter data, enrichment and lexicon entries."""

import json
from dataclasses import dataclass, field, asdict
from typing import Any, Optional

from bs4 import BeautifulSoup


@dataclass(frozen=True)
class Word:
    """A surface token paired with its Strong's number (None if untagged)."""

    text: str
    strongs: Optional[str] = None

    @classmethod
    def from_pair(cls, pair) -> "Word":
        """Build from a raw `[text, strongs_or_null]` pair."""
        text = pair[0] if len(pair) > 0 else ""
        strongs = pair[1] if len(pair) > 1 else None
        return cls(
            text=str(text) if text is not None else "",
            strongs=str(strongs) if strongs else None,
        )


def _words(pairs) -> list[Word]:
    if not isinstance(pairs, list):
        return []
    # null or scalar entries carry no token
    return [Word.from_pair(pair) for pair in pairs if isinstance(pair, (list, tuple))]


def _int(value, default: int = 0) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


@dataclass
class Verse:
    """One verse: English words plus the Hebrew (OT) or Greek (NT) words."""

    number: int
    words: list[Word] = field(default_factory=list)
    hebrew: Optional[list[Word]] = None
    greek: Optional[list[Word]] = None

    @property
    def original_words(self) -> list[Word]:
        """Original-language words in source reading order, or [] if absent."""
        return self.hebrew or self.greek or []

    @classmethod
    def from_dict(cls, number: int, data: dict) -> "Verse":
        return cls(
            number=number,
            words=_words(data.get("w")),
            hebrew=_words(data["heb"]) if data.get("heb") is not None else None,
            greek=_words(data["grk"]) if data.get("grk") is not None else None,
        )


@dataclass
class Chapter:
    """An ordered run of verses for one book and chapter."""

    book: str  # canonical USFM code
    chapter: int
    verses: list[Verse] = field(default_factory=list)

    def verse(self, number: int) -> Optional[Verse]:
        for verse in self.verses:
            if verse.number == number:
                return verse
        return None

    @classmethod
    def from_dict(cls, book: str, chapter: int, data: dict) -> "Chapter":
        """Build from the display resource: {"1": {"w": [...], "heb": [...]}, ...}."""
        verses = [
            Verse.from_dict(int(number), verse_data)
            for number, verse_data in data.items()
            if str(number).isdigit() and isinstance(verse_data, dict)
        ]
        verses.sort(key=lambda v: v.number)
        return cls(book=book, chapter=chapter, verses=verses)


@dataclass
class Heading:
    """A section heading shown before a verse."""

    id: str
    book: str
    chapter: int
    before_verse: int
    level: str  # "s1", "s2" or "r"
    text: str
    refs: list[str] = field(default_factory=list)

    @property
    def is_reference(self) -> bool:
        return self.level == "r"

    @classmethod
    def from_dict(cls, data: dict) -> "Heading":
        return cls(
            id=str(data.get("id", "")),
            book=data.get("b") or "",
            chapter=_int(data.get("c")),
            before_verse=_int(data.get("before_v")),
            level=data.get("level") or "s1",
            text=data.get("text") or "",
            refs=list(data["refs"]) if isinstance(data.get("refs"), list) else [],
        )


@dataclass
class MorphEntry:
    """Morphology for one original-language word."""

    strongs: str
    morph: str  # morphology code
    part_of_speech: str
    lemma: str

    @classmethod
    def from_dict(cls, data: dict) -> "MorphEntry":
        return cls(
            strongs=data.get("s", ""),
            morph=data.get("m", ""),
            part_of_speech=data.get("p", ""),
            lemma=data.get("l", ""),
        )


@dataclass
class IndexEntry:
    """Optional per-verse enrichment. Every field may be missing."""

    verse: int
    strongs: Optional[list[str]] = None
    cross_refs: Optional[list[str]] = None
    morphology: Optional[list[MorphEntry]] = None
    topics: Optional[list[str]] = None
    parallels: Optional[list[str]] = None
    images: Optional[list[str]] = None
    geo: Optional[list[dict[str, Any]]] = None
    domains: Optional[list[str]] = None
    senses: Optional[dict[str, str]] = None

    def sense_for(self, strongs_number: str) -> Optional[str]:
        """Gloss for this particular occurrence of a Strong's number."""
        if not self.senses or not strongs_number:
            return None
        return self.senses.get(strongs_number.upper())

    @classmethod
    def from_dict(cls, verse: int, data: dict) -> "IndexEntry":
        morphology = data.get("m")
        return cls(
            verse=verse,
            strongs=data.get("s"),
            cross_refs=data.get("x"),
            morphology=(
                [MorphEntry.from_dict(m) for m in morphology if isinstance(m, dict)]
                if isinstance(morphology, list) else None
            ),
            topics=data.get("topics"),
            parallels=data.get("parallels"),
            images=data.get("images"),
            geo=data.get("geo"),
            domains=data.get("domains"),
            senses=data.get("senses"),
        )


@dataclass
class LexiconEntry:
    """A Strong's lexicon entry (Hebrew or Greek)."""

    word: str  # lemma in the original script
    translit: str = ""
    pron: str = ""
    gloss: str = ""
    definition: str = ""
    full_definition: str = ""
    extended_definition: str = ""
    kjv: str = ""
    morph: str = ""

    @property
    def plain_definition(self) -> str:
        """The fullest definition available with HTML markup stripped."""
        raw = self.full_definition or self.definition
        if not raw:
            return ""
        text = BeautifulSoup(raw, "html.parser").get_text()
        return " ".join(text.split())

    @classmethod
    def from_dict(cls, data: dict) -> "LexiconEntry":
        return cls(
            word=data.get("word", ""),
            translit=data.get("translit", ""),
            pron=data.get("pron", ""),
            gloss=data.get("gloss") or "",
            definition=data.get("def", ""),
            full_definition=data.get("fullDef", ""),
            extended_definition=data.get("stepDef") or "",
            kjv=data.get("kjv", ""),
            morph=data.get("morph") or "",
        )

    def to_dict(self) -> dict:
        return asdict(self)

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)


@dataclass(frozen=True)
class VerseRef:
    """A denormalized verse reference."""

    book_code: str
    book_number: int
    chapter: int
    verse: int

    @property
    def sort_key(self) -> tuple[int, int, int]:
        return (self.book_number, self.chapter, self.verse)

    def __str__(self) -> str:
        return f"{self.book_code}.{self.chapter}.{self.verse}"


# Concordance hits are plain verse references
ConcordanceResult = VerseRef


@dataclass(frozen=True)
class WordPair:
    """One interlinear cell: original text, English text, Strong's number."""

    original: str
    english: str
    strongs: str


@dataclass
class EnrichedChapter:
    """A chapter together with its headings and per-verse index."""

    chapter: Chapter
    headings: list[Heading] = field(default_factory=list)
    index: dict[int, IndexEntry] = field(default_factory=dict)
