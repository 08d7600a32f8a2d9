"""Bible data store: chapters, headings, per-chapter index and concordance."""

import json
import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Optional, Union

from .books import get_book_code
from .config import (
    CONCORDANCE_PATH,
    DEFAULT_WORKERS,
    HEADINGS_PATH,
    chapter_path,
    index_path,
)
from .fetch import ResourceFetcher
from .models import Chapter, EnrichedChapter, Heading, IndexEntry


logger = logging.getLogger(__name__)

BookId = Union[int, str]


def filter_for_chapter(headings: list[Heading], book_code: str, chapter: int) -> list[Heading]:
    """Headings belonging to one book and chapter, in their original order."""
    return [h for h in headings if h.book == book_code and h.chapter == chapter]


def parse_index(text: str, source: str = "") -> dict[int, IndexEntry]:
    """
    Parse a per-chapter index resource.

    One JSON record per line; the verse number is the 1-based line
    position. Blank, null or unparseable lines leave that verse without
    an entry.
    """
    index = {}
    for position, line in enumerate(text.strip("\n").split("\n"), start=1):
        if not line.strip():
            continue
        try:
            record = json.loads(line)
        except ValueError as e:
            logger.warning("Skipping bad index line %s:%d: %s", source, position, e)
            continue
        if isinstance(record, dict):
            index[position] = IndexEntry.from_dict(position, record)
    return index


class BibleDataStore:
    """
    Keyed, process-lifetime caches over the static BSB resources.

    Only successful loads are cached, so a failed load is retried on the
    next call. Overlapping loads of the same key are not deduplicated;
    the last one to finish wins, which is harmless since the content for
    a key never changes.
    """

    def __init__(
        self,
        fetcher: Optional[ResourceFetcher] = None,
        max_workers: int = DEFAULT_WORKERS,
    ):
        self.fetcher = fetcher or ResourceFetcher()
        self.max_workers = max_workers
        self.lock = threading.Lock()
        self.chapters: dict[tuple[str, int], Chapter] = {}
        self.indexes: dict[tuple[str, int], dict[int, IndexEntry]] = {}
        self.headings: Optional[list[Heading]] = None
        self.concordance: Optional[dict[str, list[str]]] = None

    # -------------------------------------------------------------------------
    # Chapters
    # -------------------------------------------------------------------------

    def load_chapter(self, book: BookId, chapter: int) -> Optional[Chapter]:
        """
        Load the parallel-word display data for one chapter.

        Args:
            book: Book number (1-66) or USFM code, aliases accepted
            chapter: Chapter number

        Returns:
            The Chapter, or None if the book is unknown, the resource is
            missing or unreadable, or it holds no verses
        """
        book_code = get_book_code(book)
        if not book_code:
            logger.warning("Unknown book: %r", book)
            return None

        key = (book_code, chapter)
        with self.lock:
            cached = self.chapters.get(key)
        if cached is not None:
            return cached

        data = self.fetcher.fetch_json(chapter_path(book_code, chapter))
        if not isinstance(data, dict):
            return None

        loaded = Chapter.from_dict(book_code, chapter, data)
        if not loaded.verses:
            logger.debug("No verses in %s %d", book_code, chapter)
            return None

        with self.lock:
            self.chapters[key] = loaded
        return loaded

    # -------------------------------------------------------------------------
    # Headings
    # -------------------------------------------------------------------------

    def load_headings(self) -> list[Heading]:
        """All section headings; fetched once, [] while unavailable."""
        with self.lock:
            cached = self.headings
        if cached is not None:
            return cached

        records = self.fetcher.fetch_jsonl(HEADINGS_PATH)
        if records is None:
            return []

        headings = [Heading.from_dict(r) for r in records if isinstance(r, dict)]
        with self.lock:
            self.headings = headings
        return headings

    def headings_for_chapter(self, book: BookId, chapter: int) -> list[Heading]:
        book_code = get_book_code(book)
        if not book_code:
            return []
        return filter_for_chapter(self.load_headings(), book_code, chapter)

    # -------------------------------------------------------------------------
    # Index
    # -------------------------------------------------------------------------

    def load_index(self, book: BookId, chapter: int) -> Optional[dict[int, IndexEntry]]:
        """
        Per-verse enrichment for one chapter, keyed by verse number.

        None means unavailable (unknown book, missing or unreadable
        resource), as opposed to {} for a chapter loaded without entries.
        """
        book_code = get_book_code(book)
        if not book_code:
            return None

        key = (book_code, chapter)
        with self.lock:
            cached = self.indexes.get(key)
        if cached is not None:
            return cached

        path = index_path(book_code, chapter)
        text = self.fetcher.fetch_text(path)
        if text is None:
            return None

        index = parse_index(text, source=path)
        with self.lock:
            self.indexes[key] = index
        return index

    # -------------------------------------------------------------------------
    # Concordance
    # -------------------------------------------------------------------------

    def load_concordance(self) -> dict[str, list[str]]:
        """Strong's number -> verse reference ids. {} while unavailable."""
        with self.lock:
            cached = self.concordance
        if cached is not None:
            return cached

        data = self.fetcher.fetch_json(CONCORDANCE_PATH)
        if not isinstance(data, dict):
            logger.warning("Error loading concordance")
            return {}

        concordance = {
            key.upper(): list(refs)
            for key, refs in data.items()
            if isinstance(refs, list)
        }
        with self.lock:
            self.concordance = concordance
        return concordance

    # -------------------------------------------------------------------------
    # Composition
    # -------------------------------------------------------------------------

    def load_enriched_chapter(self, book: BookId, chapter: int) -> Optional[EnrichedChapter]:
        """
        Load a chapter with its headings and index in parallel.

        Returns None only when the chapter itself cannot be loaded; missing
        headings or index degrade to empty collections.
        """
        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            chapter_future = executor.submit(self.load_chapter, book, chapter)
            headings_future = executor.submit(self.load_headings)
            index_future = executor.submit(self.load_index, book, chapter)

            loaded = chapter_future.result()
            all_headings = headings_future.result()
            index = index_future.result()

        if loaded is None:
            return None

        if index is None:
            logger.debug("Index unavailable for %s %d", loaded.book, chapter)
            index = {}

        return EnrichedChapter(
            chapter=loaded,
            headings=filter_for_chapter(all_headings, loaded.book, chapter),
            index=index,
        )

    def clear_all(self):
        """Reset every cache to its unloaded state."""
        with self.lock:
            self.chapters = {}
            self.indexes = {}
            self.headings = None
            self.concordance = None
