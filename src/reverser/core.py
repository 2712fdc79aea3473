# core.py

import logging
from typing import Optional

from reverser.textutils.text_utils import is_ascii_letter, split_words, join_words, letters_of

logger = logging.getLogger(__name__)


def reverse_word(word: str) -> str:
    """
    Reverse the letters of a single word, leaving every other character in place.

    Example:
        "a1b2c3" -> "c1b2a3"
    """
    reversed_letters = letters_of(word)[::-1]
    if not reversed_letters:
        return word

    out = []
    cursor = 0
    for ch in word:
        if is_ascii_letter(ch):
            out.append(reversed_letters[cursor])
            cursor += 1
        else:
            out.append(ch)
    return "".join(out)


def reverse(text: Optional[str]) -> str:
    """
    Reverse the letters inside each space-separated word of `text`.

    Only the ASCII space splits words, so tabs and newlines stay inside
    the word they belong to. Empty or None input returns "".

    Returns:
        str: text of the same length with letters reversed per word
    """
    if not text:
        return ""

    words = split_words(text)
    result = join_words(reverse_word(w) for w in words)
    logger.debug("Reversed %d words (%d chars)", len(words), len(text))
    return result
