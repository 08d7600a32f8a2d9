"""
Interlinear word alignment.

Words in both languages already carry Strong's numbers, so alignment is a
matter of matching tags and choosing an output order:

- English order: one pair per tagged English word. The original text is
  looked up in a map holding the first original word seen for each
  Strong's number, so several English words may share one original word.
- Original order: one pair per tagged original word. Each one takes the
  first English word with the same number that no earlier original word
  has taken, so repeated numbers pair up left to right.
"""

from enum import Enum
from typing import Sequence

from .models import Verse, Word, WordPair
from .text import clean_text, is_punctuation, should_skip_word


class WordOrder(str, Enum):
    ENGLISH = "english"
    ORIGINAL = "original"


def build_original_map(original: Sequence[Word]) -> dict[str, str]:
    """Strong's number -> text of its first occurrence in the original words."""
    first_text: dict[str, str] = {}
    for word in original:
        if word.strongs and word.strongs not in first_text:
            first_text[word.strongs] = word.text
    return first_text


def align_english_order(english: Sequence[Word], original: Sequence[Word]) -> list[WordPair]:
    original_map = build_original_map(original)
    return [
        WordPair(
            original=original_map.get(word.strongs, ""),
            english=clean_text(word.text),
            strongs=word.strongs,
        )
        for word in english
        if word.strongs
        and not is_punctuation(word.text)
        and not should_skip_word(word.text, word.strongs)
    ]


def align_original_order(english: Sequence[Word], original: Sequence[Word]) -> list[WordPair]:
    used_english: set[int] = set()
    pairs = []

    for word in original:
        if not word.strongs or is_punctuation(word.text):
            continue

        english_text = ""
        for i, candidate in enumerate(english):
            if i in used_english or candidate.strongs != word.strongs:
                continue
            english_text = clean_text(candidate.text)
            used_english.add(i)
            break

        pairs.append(WordPair(original=word.text, english=english_text, strongs=word.strongs))

    return pairs


def align_verse(verse: Verse, order: WordOrder = WordOrder.ENGLISH) -> list[WordPair]:
    """
    Build interlinear pairs for a verse.

    Verses without original-language words always come back in English
    order, whatever order was asked for.
    """
    original = verse.original_words
    if order == WordOrder.ORIGINAL and original:
        return align_original_order(verse.words, original)
    return align_english_order(verse.words, original)
