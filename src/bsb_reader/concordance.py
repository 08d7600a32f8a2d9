"""Concordance search: every verse in which a Strong's number occurs."""

import bisect
import logging
from typing import Iterable, Optional

from .books import BOOKS_BY_NUMBER, parse_reference, testament_books
from .lexicon import normalize_strongs
from .models import ConcordanceResult
from .store import BibleDataStore


logger = logging.getLogger(__name__)


def sort_results(results: Iterable[ConcordanceResult]) -> list[ConcordanceResult]:
    """Canonical order: book number, then chapter, then verse."""
    return sorted(results, key=lambda r: r.sort_key)


def adjacent_occurrences(
    results: list[ConcordanceResult], current: ConcordanceResult
) -> tuple[Optional[ConcordanceResult], Optional[ConcordanceResult]]:
    """The occurrences just before and just after `current` in sorted results."""
    keys = [r.sort_key for r in results]
    left = bisect.bisect_left(keys, current.sort_key)
    right = bisect.bisect_right(keys, current.sort_key)
    previous = results[left - 1] if left > 0 else None
    following = results[right] if right < len(results) else None
    return previous, following


class ConcordanceSearch:
    """
    Searches the precomputed concordance held by a BibleDataStore.

    With `testament_filter` on, hits outside the testament implied by the
    number's prefix (H -> OT, G -> NT) are dropped. Well-formed data never
    has such hits, so the filter only guards against bad data.
    """

    def __init__(self, store: BibleDataStore, testament_filter: bool = True):
        self.store = store
        self.testament_filter = testament_filter

    def _allowed(self, book_number: int, allowed: range) -> bool:
        return not self.testament_filter or book_number in allowed

    def search(self, strongs_number: str) -> list[ConcordanceResult]:
        if not strongs_number or not strongs_number.strip():
            return []

        normalized = normalize_strongs(strongs_number)
        references = self.store.load_concordance().get(normalized, [])
        allowed = testament_books(normalized)

        results = []
        for reference in references:
            result = parse_reference(reference)
            if result is None:
                logger.debug("Skipping malformed reference %r for %s", reference, normalized)
                continue
            if self._allowed(result.book_number, allowed):
                results.append(result)

        return sort_results(results)

    def search_by_index(
        self, strongs_number: str, books: Optional[Iterable[int]] = None
    ) -> list[ConcordanceResult]:
        """
        Slow path: scan every chapter index for the number.

        Args:
            strongs_number: e.g. "H7225"
            books: Book numbers to scan (default: the number's testament)
        """
        if not strongs_number or not strongs_number.strip():
            return []

        normalized = normalize_strongs(strongs_number)
        allowed = testament_books(normalized)
        book_numbers = list(books) if books is not None else list(allowed)

        results = []
        for book_number in book_numbers:
            book = BOOKS_BY_NUMBER.get(book_number)
            if not book or not self._allowed(book.number, allowed):
                continue
            for chapter in range(1, book.chapters + 1):
                index = self.store.load_index(book.code, chapter) or {}
                for verse, entry in index.items():
                    if entry.strongs and normalized in entry.strongs:
                        results.append(ConcordanceResult(
                            book_code=book.code,
                            book_number=book.number,
                            chapter=chapter,
                            verse=verse,
                        ))

        return sort_results(results)


def search(
    store: BibleDataStore, strongs_number: str, testament_filter: bool = True
) -> list[ConcordanceResult]:
    """Concordance hits for a Strong's number, sorted canonically."""
    return ConcordanceSearch(store, testament_filter=testament_filter).search(strongs_number)
