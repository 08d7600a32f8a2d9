"""Plain-text rendering of chapters in the four display modes."""

import re
from enum import Enum
from typing import Optional

from .alignment import WordOrder, align_verse
from .books import BOOKS_BY_CODE, parse_references
from .models import EnrichedChapter, Heading, IndexEntry, Verse, VerseRef
from .text import clean_text, is_punctuation, should_skip_word


class DisplayMode(str, Enum):
    TEXT = "text"
    STRONGS = "strongs"
    INTERLINEAR_COMPACT = "interlinear-compact"
    INTERLINEAR_FULL = "interlinear-full"

    @property
    def is_interlinear(self) -> bool:
        return self in (DisplayMode.INTERLINEAR_COMPACT, DisplayMode.INTERLINEAR_FULL)


MAX_CROSS_REFS = 3

SPACE_BEFORE_PUNCT_RE = re.compile(r"\s+([.,;:!?])")


def format_reference(ref: VerseRef) -> str:
    """Human-readable reference, e.g. "Genesis 1:1"."""
    book = BOOKS_BY_CODE.get(ref.book_code)
    name = book.name if book else ref.book_code
    return f"{name} {ref.chapter}:{ref.verse}"


def _join_tokens(tokens: list[str]) -> str:
    text = " ".join(t.strip() for t in tokens if t.strip())
    return SPACE_BEFORE_PUNCT_RE.sub(r"\1", text)


def render_text(verse: Verse) -> str:
    tokens = []
    for word in verse.words:
        if should_skip_word(word.text, word.strongs):
            continue
        if not word.strongs or is_punctuation(word.text):
            tokens.append(word.text)
        else:
            tokens.append(clean_text(word.text))
    return _join_tokens(tokens)


def render_strongs(verse: Verse) -> str:
    tokens = []
    for word in verse.words:
        if not word.strongs or is_punctuation(word.text):
            tokens.append(word.text)
        else:
            tokens.append(f"{word.text}{{{word.strongs}}}")
    return _join_tokens(tokens)


def render_interlinear(verse: Verse, full: bool = False, order: WordOrder = WordOrder.ENGLISH) -> list[str]:
    """One line per verse in compact mode, one line per word in full mode."""
    pairs = align_verse(verse, order)
    if not full:
        cells = [
            f"{p.original} ({p.english})" if p.original and p.english else p.original or p.english
            for p in pairs
        ]
        return ["  ".join(cells)]
    return [f"{p.strongs:<7} {p.original:<16} {p.english}".rstrip() for p in pairs]


def render_cross_refs(entry: Optional[IndexEntry]) -> Optional[str]:
    refs = parse_references(entry.cross_refs) if entry else []
    if not refs:
        return None
    text = "; ".join(format_reference(r) for r in refs[:MAX_CROSS_REFS])
    if len(refs) > MAX_CROSS_REFS:
        text += f" +{len(refs) - MAX_CROSS_REFS}"
    return text


def render_heading(heading: Heading) -> str:
    if heading.is_reference:
        return f"({heading.text})"
    if heading.level == "s2":
        return f"  {heading.text}"
    return heading.text


def render_verse(
    verse: Verse,
    mode: DisplayMode = DisplayMode.TEXT,
    order: Optional[WordOrder] = None,
    entry: Optional[IndexEntry] = None,
) -> str:
    """
    Render one verse as text.

    Args:
        verse: The verse to render
        mode: Display mode
        order: Interlinear word order (default: English order)
        entry: Index entry for the verse; cross-references show in full mode

    Returns:
        The rendered verse, possibly spanning several lines
    """
    mode = DisplayMode(mode)

    if mode == DisplayMode.TEXT:
        return f"{verse.number} {render_text(verse)}"
    if mode == DisplayMode.STRONGS:
        return f"{verse.number} {render_strongs(verse)}"

    full = mode == DisplayMode.INTERLINEAR_FULL
    lines = render_interlinear(verse, full=full, order=order or WordOrder.ENGLISH)
    if full:
        lines = [f"{verse.number}"] + [f"    {line}" for line in lines]
        cross_refs = render_cross_refs(entry)
        if cross_refs:
            lines.append(f"    ↳ {cross_refs}")
        return "\n".join(lines)
    return f"{verse.number} {lines[0]}"


def render_chapter(
    enriched: EnrichedChapter,
    mode: DisplayMode = DisplayMode.TEXT,
    order: Optional[WordOrder] = None,
) -> str:
    """Render a whole chapter, placing each heading before its verse."""
    chapter = enriched.chapter
    book = BOOKS_BY_CODE.get(chapter.book)
    lines = [f"{book.name if book else chapter.book} {chapter.chapter}", ""]

    headings_by_verse: dict[int, list[Heading]] = {}
    for heading in enriched.headings:
        headings_by_verse.setdefault(heading.before_verse, []).append(heading)

    for verse in chapter.verses:
        for heading in headings_by_verse.get(verse.number, []):
            lines.append(render_heading(heading))
        lines.append(render_verse(verse, mode, order, enriched.index.get(verse.number)))

    return "\n".join(lines)
