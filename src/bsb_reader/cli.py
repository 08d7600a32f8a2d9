#!/usr/bin/env python3
"""
CLI for BSB Reader - reads BSB chapters with Strong's tagging, lexicon and concordance.

Usage:
    python -m bsb_reader read GEN 1                         # Plain text
    python -m bsb_reader read JHN 1 --mode interlinear-full # Greek interlinear
    python -m bsb_reader lexicon H7225                      # Lexicon entry
    python -m bsb_reader concordance G3056 --limit 20       # Occurrences
"""

import argparse
import logging
from typing import Optional

from .alignment import WordOrder
from .books import BOOKS, get_book_code
from .concordance import ConcordanceSearch
from .config import DATA_BASE
from .fetch import ResourceFetcher
from .lexicon import LexiconStore, get_language, normalize_strongs
from .render import DisplayMode, format_reference, render_chapter
from .store import BibleDataStore


# =============================================================================
# Configuration
# =============================================================================

DEFAULT_LIMIT = 50


# =============================================================================
# Commands
# =============================================================================

def cmd_read(args, store: BibleDataStore) -> int:
    book_code = get_book_code(args.book)
    if not book_code:
        print(f"❌ Unknown book: {args.book}")
        print(f"   Valid books: {', '.join(b.code for b in BOOKS[:5])}...")
        return 1

    enriched = store.load_enriched_chapter(book_code, args.chapter)
    if enriched is None:
        print(f"❌ Chapter not available: {book_code} {args.chapter}")
        return 1

    order = WordOrder(args.order) if args.order else None
    print(render_chapter(enriched, DisplayMode(args.mode), order))
    return 0


def cmd_lexicon(args, lexicon: LexiconStore) -> int:
    entry = lexicon.get_entry(args.strongs)
    if entry is None:
        print(f"❌ No lexicon entry for {args.strongs}")
        return 1

    print(f"📖 {normalize_strongs(args.strongs)} ({get_language(args.strongs).title()})")
    print("=" * 60)
    print(f"{entry.word}  {entry.translit}  {entry.pron}".rstrip())
    if entry.gloss:
        print(f"Gloss: {entry.gloss}")
    if entry.morph:
        print(f"Morphology: {entry.morph}")
    if entry.plain_definition:
        print(f"Definition: {entry.plain_definition}")
    if entry.kjv:
        print(f"KJV: {entry.kjv}")
    return 0


def cmd_concordance(args, store: BibleDataStore) -> int:
    searcher = ConcordanceSearch(store, testament_filter=not args.no_filter)
    results = searcher.search(args.strongs)
    if not results:
        print(f"❌ No occurrences of {args.strongs}")
        return 1

    print(f"📖 {normalize_strongs(args.strongs)}: {len(results):,} occurrences")
    print("=" * 60)
    for result in results[:args.limit]:
        print(f"   {format_reference(result)}")
    if len(results) > args.limit:
        print(f"   ... and {len(results) - args.limit:,} more")
    return 0


# =============================================================================
# CLI Entry Point
# =============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Read the Berean Standard Bible with Strong's numbers, lexicon and concordance."
    )
    parser.add_argument(
        "--data", "-d",
        type=str,
        default=DATA_BASE,
        help=f"Data directory or URL (default: {DATA_BASE})"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Show debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    read = subparsers.add_parser("read", help="Display a chapter")
    read.add_argument("book", help="Book code or number (e.g. 'GEN', 'JHN', '43')")
    read.add_argument("chapter", type=int, help="Chapter number")
    read.add_argument(
        "--mode", "-m",
        choices=[m.value for m in DisplayMode],
        default=DisplayMode.TEXT.value,
        help="Display mode (default: text)"
    )
    read.add_argument(
        "--order",
        choices=[o.value for o in WordOrder],
        help="Interlinear word order (default: english)"
    )

    lexicon = subparsers.add_parser("lexicon", help="Look up a Strong's number")
    lexicon.add_argument("strongs", help="Strong's number (e.g. 'H7225', 'G3056')")

    concordance = subparsers.add_parser("concordance", help="List occurrences of a Strong's number")
    concordance.add_argument("strongs", help="Strong's number (e.g. 'H7225', 'G3056')")
    concordance.add_argument(
        "--limit", "-l",
        type=int,
        default=DEFAULT_LIMIT,
        help=f"Maximum results to print (default: {DEFAULT_LIMIT})"
    )
    concordance.add_argument(
        "--no-filter",
        action="store_true",
        help="Keep hits outside the number's testament"
    )

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    fetcher = ResourceFetcher(args.data)

    if args.command == "read":
        return cmd_read(args, BibleDataStore(fetcher))
    if args.command == "lexicon":
        return cmd_lexicon(args, LexiconStore(fetcher))
    if args.command == "concordance":
        return cmd_concordance(args, BibleDataStore(fetcher))
    return 1


if __name__ == "__main__":
    exit(main())
