"""Runtime configuration for the BSB data stores."""

import os


# =============================================================================
# Configuration
# =============================================================================

DATA_BASE = os.environ.get("BSB_DATA_BASE", "bsb-data")
REQUEST_TIMEOUT = float(os.environ.get("BSB_REQUEST_TIMEOUT", "10"))
DEFAULT_WORKERS = 3

USER_AGENT = "bsb-reader/0.1"


# =============================================================================
# Resource Paths (relative to DATA_BASE)
# =============================================================================

HEADINGS_PATH = "headings.jsonl"
CONCORDANCE_PATH = "concordance.json"
HEBREW_LEXICON_PATH = "lexicon/hebrew.json"
GREEK_LEXICON_PATH = "lexicon/greek.json"


def chapter_path(book_code: str, chapter: int) -> str:
    return f"display/{book_code}/{chapter}.json"


def index_path(book_code: str, chapter: int) -> str:
    return f"index/{book_code}/{chapter}.jsonl"
