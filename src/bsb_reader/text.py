"""Token classification helpers for BSB word arrays."""

import re
from typing import Optional


# Whitespace, ASCII punctuation, Hebrew sof pasuq / paseq, em and en dashes,
# and bracket characters.
PUNCTUATION_RE = re.compile(r"^[\s.,;:!?'\"()\[\]\-—–׃׀]+$")

# Placeholders tagged for alignment only: dash runs ("---", "- - -"),
# spaced ellipses (". . .") and the filler token "vvv".
SKIP_MARKERS_RE = re.compile(
    r"^[-–—](?:\s*[-–—])*$"
    r"|^\.+\s*\.+\s*\.+$"
    r"|^vvv$"
)

# Square brackets and braces mark textual-critical annotations.
BRACKETS_RE = re.compile(r"[\[\]{}]")


def is_punctuation(text: str) -> bool:
    """True if the token is made up only of whitespace and punctuation."""
    return bool(PUNCTUATION_RE.match(text))


def should_skip_word(text: str, strongs_number: Optional[str]) -> bool:
    """
    True for placeholder words that carry a Strong's tag but no content.

    Untagged tokens are never skipped by this rule.
    """
    if not strongs_number:
        return False
    return bool(SKIP_MARKERS_RE.match(text.strip()))


def clean_text(text: str) -> str:
    return BRACKETS_RE.sub("", text)
