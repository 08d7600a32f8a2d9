"""Canon table: USFM book codes, numbers, names and chapter counts."""

import re
from dataclasses import dataclass
from typing import Optional, Union

from .models import VerseRef


@dataclass(frozen=True)
class Book:
    """One of the 66 canonical books."""

    number: int  # 1-66, canonical order
    code: str  # USFM code, e.g. "GEN"
    name: str  # English name
    chapters: int


# =============================================================================
# Constants
# =============================================================================

BOOKS = (
    # Old Testament
    Book(1, "GEN", "Genesis", 50),
    Book(2, "EXO", "Exodus", 40),
    Book(3, "LEV", "Leviticus", 27),
    Book(4, "NUM", "Numbers", 36),
    Book(5, "DEU", "Deuteronomy", 34),
    Book(6, "JOS", "Joshua", 24),
    Book(7, "JDG", "Judges", 21),
    Book(8, "RUT", "Ruth", 4),
    Book(9, "1SA", "1 Samuel", 31),
    Book(10, "2SA", "2 Samuel", 24),
    Book(11, "1KI", "1 Kings", 22),
    Book(12, "2KI", "2 Kings", 25),
    Book(13, "1CH", "1 Chronicles", 29),
    Book(14, "2CH", "2 Chronicles", 36),
    Book(15, "EZR", "Ezra", 10),
    Book(16, "NEH", "Nehemiah", 13),
    Book(17, "EST", "Esther", 10),
    Book(18, "JOB", "Job", 42),
    Book(19, "PSA", "Psalms", 150),
    Book(20, "PRO", "Proverbs", 31),
    Book(21, "ECC", "Ecclesiastes", 12),
    Book(22, "SNG", "Song of Songs", 8),
    Book(23, "ISA", "Isaiah", 66),
    Book(24, "JER", "Jeremiah", 52),
    Book(25, "LAM", "Lamentations", 5),
    Book(26, "EZK", "Ezekiel", 48),
    Book(27, "DAN", "Daniel", 12),
    Book(28, "HOS", "Hosea", 14),
    Book(29, "JOL", "Joel", 3),
    Book(30, "AMO", "Amos", 9),
    Book(31, "OBA", "Obadiah", 1),
    Book(32, "JON", "Jonah", 4),
    Book(33, "MIC", "Micah", 7),
    Book(34, "NAM", "Nahum", 3),
    Book(35, "HAB", "Habakkuk", 3),
    Book(36, "ZEP", "Zephaniah", 3),
    Book(37, "HAG", "Haggai", 2),
    Book(38, "ZEC", "Zechariah", 14),
    Book(39, "MAL", "Malachi", 4),
    # New Testament
    Book(40, "MAT", "Matthew", 28),
    Book(41, "MRK", "Mark", 16),
    Book(42, "LUK", "Luke", 24),
    Book(43, "JHN", "John", 21),
    Book(44, "ACT", "Acts", 28),
    Book(45, "ROM", "Romans", 16),
    Book(46, "1CO", "1 Corinthians", 16),
    Book(47, "2CO", "2 Corinthians", 13),
    Book(48, "GAL", "Galatians", 6),
    Book(49, "EPH", "Ephesians", 6),
    Book(50, "PHP", "Philippians", 4),
    Book(51, "COL", "Colossians", 4),
    Book(52, "1TH", "1 Thessalonians", 5),
    Book(53, "2TH", "2 Thessalonians", 3),
    Book(54, "1TI", "1 Timothy", 6),
    Book(55, "2TI", "2 Timothy", 4),
    Book(56, "TIT", "Titus", 3),
    Book(57, "PHM", "Philemon", 1),
    Book(58, "HEB", "Hebrews", 13),
    Book(59, "JAS", "James", 5),
    Book(60, "1PE", "1 Peter", 5),
    Book(61, "2PE", "2 Peter", 3),
    Book(62, "1JN", "1 John", 5),
    Book(63, "2JN", "2 John", 1),
    Book(64, "3JN", "3 John", 1),
    Book(65, "JUD", "Jude", 1),
    Book(66, "REV", "Revelation", 22),
)

# Alternate codes seen in source data, folded to the canonical code.
BOOK_CODE_ALIASES = {
    "EZE": "EZK",
    "JOH": "JHN",
    "JOE": "JOL",
    "NAH": "NAM",
    "MAR": "MRK",
    "SOS": "SNG",
    "SOL": "SNG",
    "JAM": "JAS",
    "JDE": "JUD",
    "1JO": "1JN",
    "2JO": "2JN",
    "3JO": "3JN",
}

OLD_TESTAMENT = range(1, 40)
NEW_TESTAMENT = range(40, 67)

BOOKS_BY_NUMBER = {book.number: book for book in BOOKS}
BOOKS_BY_CODE = {book.code: book for book in BOOKS}

REFERENCE_RE = re.compile(r"^([A-Z0-9]{3})\.(\d+)\.(\d+)$")


# =============================================================================
# Lookups
# =============================================================================

def normalize_book_code(code: str) -> Optional[str]:
    """Fold an alias to its canonical code. None if the code is unknown."""
    if not code:
        return None
    code = code.strip().upper()
    code = BOOK_CODE_ALIASES.get(code, code)
    return code if code in BOOKS_BY_CODE else None


def get_book_code(book: Union[int, str]) -> Optional[str]:
    """Resolve a book number or (alias) code to its canonical code."""
    if isinstance(book, int):
        found = BOOKS_BY_NUMBER.get(book)
        return found.code if found else None
    if book.strip().isdigit():
        return get_book_code(int(book))
    return normalize_book_code(book)


def get_book_number(code: str) -> int:
    """Canonical number for a code; 0 when the code cannot be resolved."""
    canonical = normalize_book_code(code)
    return BOOKS_BY_CODE[canonical].number if canonical else 0


def get_book(book: Union[int, str]) -> Optional[Book]:
    code = get_book_code(book)
    return BOOKS_BY_CODE[code] if code else None


def is_old_testament(book_number: int) -> bool:
    return book_number in OLD_TESTAMENT


def is_new_testament(book_number: int) -> bool:
    return book_number in NEW_TESTAMENT


def testament_books(strongs_number: str) -> range:
    """Book numbers a Strong's number may occur in (H -> OT, otherwise NT)."""
    if strongs_number and strongs_number.upper().startswith("H"):
        return OLD_TESTAMENT
    return NEW_TESTAMENT


# =============================================================================
# Navigation
# =============================================================================

def next_chapter(book_number: int, chapter: int) -> Optional[tuple[int, int]]:
    """The chapter after (book, chapter), crossing into the next book."""
    book = BOOKS_BY_NUMBER.get(book_number)
    if not book:
        return None
    if chapter < book.chapters:
        return (book_number, chapter + 1)
    if book_number < len(BOOKS):
        return (book_number + 1, 1)
    return None


def previous_chapter(book_number: int, chapter: int) -> Optional[tuple[int, int]]:
    """The chapter before (book, chapter), crossing into the previous book."""
    if book_number not in BOOKS_BY_NUMBER:
        return None
    if chapter > 1:
        return (book_number, chapter - 1)
    previous = BOOKS_BY_NUMBER.get(book_number - 1)
    if previous:
        return (previous.number, previous.chapters)
    return None


# =============================================================================
# Reference Parsing
# =============================================================================

def parse_reference(reference) -> Optional[VerseRef]:
    """
    Parse a "BOOKCODE.CHAPTER.VERSE" id (e.g. "GEN.1.1").

    Returns None for malformed or non-string references and unknown book
    codes.
    """
    if not isinstance(reference, str):
        return None
    match = REFERENCE_RE.match(reference.strip().upper())
    if not match:
        return None

    code = normalize_book_code(match.group(1))
    if not code:
        return None

    return VerseRef(
        book_code=code,
        book_number=BOOKS_BY_CODE[code].number,
        chapter=int(match.group(2)),
        verse=int(match.group(3)),
    )


def parse_references(references: Optional[list]) -> list[VerseRef]:
    """Parse a list of reference ids, dropping malformed ones."""
    parsed = []
    for reference in references or []:
        ref = parse_reference(reference)
        if ref:
            parsed.append(ref)
    return parsed
