"""Strong's lexicon store: lazily loaded Hebrew and Greek dictionaries."""

import logging
import threading
from typing import Iterable, Optional

from .config import HEBREW_LEXICON_PATH, GREEK_LEXICON_PATH
from .fetch import ResourceFetcher
from .models import LexiconEntry


logger = logging.getLogger(__name__)

HEBREW = "hebrew"
GREEK = "greek"

LEXICON_PATHS = {
    HEBREW: HEBREW_LEXICON_PATH,
    GREEK: GREEK_LEXICON_PATH,
}


def normalize_strongs(strongs_number: str) -> str:
    return strongs_number.strip().upper()


def get_language(strongs_number: Optional[str]) -> str:
    """HEBREW for H-prefixed numbers; anything else falls back to GREEK."""
    if strongs_number and normalize_strongs(strongs_number).startswith("H"):
        return HEBREW
    return GREEK


class LexiconStore:
    """
    Per-language lexicon cache.

    Each language is fetched at most once per successful load. A failed
    load returns an empty dictionary and leaves the language unloaded so
    the next call retries.
    """

    def __init__(self, fetcher: Optional[ResourceFetcher] = None):
        self.fetcher = fetcher or ResourceFetcher()
        self.lock = threading.Lock()
        self.cache: dict[str, Optional[dict[str, LexiconEntry]]] = {
            HEBREW: None,
            GREEK: None,
        }

    def is_loaded(self, language: str) -> bool:
        with self.lock:
            return self.cache.get(language) is not None

    def load(self, language: str) -> dict[str, LexiconEntry]:
        """Load (or return the cached) lexicon for HEBREW or GREEK."""
        if language not in LEXICON_PATHS:
            raise ValueError(f"Unknown lexicon language: {language}")

        with self.lock:
            cached = self.cache[language]
        if cached is not None:
            return cached

        data = self.fetcher.fetch_json(LEXICON_PATHS[language])
        if not isinstance(data, dict):
            logger.warning("Error loading %s lexicon", language)
            return {}

        lexicon = {
            normalize_strongs(key): LexiconEntry.from_dict(value)
            for key, value in data.items()
            if isinstance(value, dict)
        }
        with self.lock:
            self.cache[language] = lexicon
        logger.debug("Loaded %s lexicon (%d entries)", language, len(lexicon))
        return lexicon

    def get_entry(self, strongs_number: Optional[str]) -> Optional[LexiconEntry]:
        """Look up one Strong's number. None for empty or unknown numbers."""
        if not strongs_number or not strongs_number.strip():
            return None
        normalized = normalize_strongs(strongs_number)
        return self.load(get_language(normalized)).get(normalized)

    def get_entries(self, strongs_numbers: Iterable[Optional[str]]) -> dict[str, LexiconEntry]:
        """Look up many numbers at once, keyed by normalized number."""
        lexicons = {HEBREW: self.load(HEBREW), GREEK: self.load(GREEK)}
        results = {}
        for number in strongs_numbers:
            if not number or not number.strip():
                continue
            normalized = normalize_strongs(number)
            entry = lexicons[get_language(normalized)].get(normalized)
            if entry:
                results[normalized] = entry
        return results

    def clear_cache(self):
        """Forget both lexicons; the next access fetches again."""
        with self.lock:
            self.cache = {HEBREW: None, GREEK: None}
