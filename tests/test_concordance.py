"""Tests for concordance search."""

import json

from bsb_reader.concordance import ConcordanceSearch, adjacent_occurrences, search, sort_results
from bsb_reader.models import ConcordanceResult


def refs(results):
    return [str(r) for r in results]


def test_results_sorted_canonically(store):
    results = search(store, "H7225")
    assert refs(results) == ["GEN.1.1", "GEN.10.10", "PRO.8.22", "JER.26.1"]
    keys = [r.sort_key for r in results]
    assert keys == sorted(keys)


def test_normalizes_case(store):
    assert refs(search(store, "h7225")) == refs(search(store, "H7225"))


def test_alias_codes_and_bad_refs(store):
    assert refs(search(store, "G3056")) == ["MAT.5.37", "JHN.1.1", "JHN.1.14"]


def test_result_fields(store):
    first = search(store, "G3056")[0]
    assert first == ConcordanceResult(book_code="MAT", book_number=40, chapter=5, verse=37)


def test_unknown_number_is_empty(store):
    assert search(store, "H9999") == []
    assert search(store, "") == []


def test_testament_filter(store):
    assert all(r.book_number <= 39 for r in search(store, "H7225"))
    assert refs(search(store, "G0001")) == ["REV.1.8"]


def test_testament_filter_off(store):
    assert refs(search(store, "H7225", testament_filter=False))[-1] == "MAT.1.1"
    assert refs(search(store, "G0001", testament_filter=False)) == ["GEN.1.1", "REV.1.8"]


def test_concordance_unavailable(data_dir, store):
    (data_dir / "concordance.json").unlink()
    assert search(store, "H7225") == []


def test_search_by_index(store):
    searcher = ConcordanceSearch(store)
    assert refs(searcher.search_by_index("H776", books=[1])) == ["GEN.1.1", "GEN.1.2"]
    assert searcher.search_by_index("H776", books=[43]) == []
    assert searcher.search_by_index("", books=[1]) == []


def test_sort_results():
    unsorted = [
        ConcordanceResult("REV", 66, 1, 1),
        ConcordanceResult("GEN", 1, 2, 1),
        ConcordanceResult("GEN", 1, 1, 31),
        ConcordanceResult("GEN", 1, 1, 2),
    ]
    assert refs(sort_results(unsorted)) == ["GEN.1.2", "GEN.1.31", "GEN.2.1", "REV.1.1"]


class TestAdjacentOccurrences:
    def test_middle(self, store):
        results = search(store, "H7225")
        previous, following = adjacent_occurrences(results, results[1])
        assert str(previous) == "GEN.1.1"
        assert str(following) == "PRO.8.22"

    def test_ends(self, store):
        results = search(store, "H7225")
        assert adjacent_occurrences(results, results[0])[0] is None
        assert adjacent_occurrences(results, results[-1])[1] is None

    def test_current_not_in_results(self, store):
        results = search(store, "H7225")
        previous, following = adjacent_occurrences(results, ConcordanceResult("EXO", 2, 1, 1))
        assert str(previous) == "GEN.10.10"
        assert str(following) == "PRO.8.22"


def test_non_string_references_skipped(data_dir, store):
    (data_dir / "concordance.json").write_text(
        json.dumps({"H7225": [42, "GEN.1.1", None, ["GEN.2.1"], {"ref": "GEN.3.1"}, "EXO.1.1"]}),
        encoding="utf-8",
    )
    assert refs(search(store, "H7225")) == ["GEN.1.1", "EXO.1.1"]
