"""
BSB Reader - Berean Standard Bible data access with Strong's tagging, interlinear alignment and concordance.
"""

from .models import (
    Word,
    Verse,
    Chapter,
    Heading,
    MorphEntry,
    IndexEntry,
    LexiconEntry,
    VerseRef,
    ConcordanceResult,
    WordPair,
    EnrichedChapter,
)
from .text import is_punctuation, should_skip_word, clean_text
from .alignment import WordOrder, align_verse
from .books import BOOKS, get_book_code, get_book_number, parse_reference
from .fetch import ResourceFetcher
from .lexicon import LexiconStore, HEBREW, GREEK, get_language
from .store import BibleDataStore, filter_for_chapter
from .concordance import ConcordanceSearch, search

__all__ = [
    "Word",
    "Verse",
    "Chapter",
    "Heading",
    "MorphEntry",
    "IndexEntry",
    "LexiconEntry",
    "VerseRef",
    "ConcordanceResult",
    "WordPair",
    "EnrichedChapter",
    "is_punctuation",
    "should_skip_word",
    "clean_text",
    "WordOrder",
    "align_verse",
    "BOOKS",
    "get_book_code",
    "get_book_number",
    "parse_reference",
    "ResourceFetcher",
    "LexiconStore",
    "HEBREW",
    "GREEK",
    "get_language",
    "BibleDataStore",
    "filter_for_chapter",
    "ConcordanceSearch",
    "search",
]

__version__ = "0.1.0"
