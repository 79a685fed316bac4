"""Plain-text search primitives used for highlighting."""

from __future__ import annotations
from typing import Optional


def index_of_word_prefix(text: Optional[str], prefix: Optional[str]) -> Optional[int]:
    """
    Offset of the first word in ``text`` that starts with ``prefix``, ignoring case.

    A word is a maximal run of letters and digits, so ``"sm"`` is found at
    offset 5 in ``"John Smith"`` but not inside ``"Prism"``.
    """
    if not text or not prefix:
        return None
    text_length = len(text)
    prefix_length = len(prefix)
    if text_length < prefix_length:
        return None

    folded_prefix = [char.upper() for char in prefix]
    i = 0
    while i < text_length:
        while i < text_length and not text[i].isalnum():
            i += 1
        if i + prefix_length > text_length:
            return None
        if all(text[i + k].upper() == folded_prefix[k] for k in range(prefix_length)):
            return i
        while i < text_length and text[i].isalnum():
            i += 1
    return None


def index_of_word(text: Optional[str], word: Optional[str]) -> Optional[int]:
    """Offset of the first literal occurrence of ``word`` in ``text``."""
    if not text or not word:
        return None
    index = text.find(word)
    return index if index != -1 else None
