"""
Dial-pad matching over lookup keys.

Both passes take an immutable key sequence, the digit filter and the length of
the name, and return the ``(start, end)`` character range to highlight or None.

- ``find_contiguous_match`` reads the filter through the full digits of
  consecutive keys: ``"54534"`` matches all of 李 (54) and 雷 (534), while
  ``"5345"`` matches nothing because no key continues after 雷.
- ``find_initials_match`` reads one filter digit per key, from the first digit
  of each key: ``"55"`` matches 李雷 by its initials L and L.

Separator keys are stepped over by both passes and never match a digit.
"""

from __future__ import annotations
from typing import Optional, Sequence, Tuple

from namedial.lookup_keys import LookupKey
from namedial.transliteration import TokenType

Span = Tuple[int, int]


def _seek(keys: Sequence[LookupKey], start: int, first_digit: str) -> int:
    """Index of the first key at or after ``start`` whose digits begin with ``first_digit``."""
    i = start
    while i < len(keys) and keys[i].digits[0] != first_digit:
        i += 1
    return i


def _key_end(keys: Sequence[LookupKey], index: int, name_length: int) -> int:
    """Offset where the key after ``index`` starts, or the end of the name."""
    following = index + 1
    return keys[following].position if following < len(keys) else name_length


def find_contiguous_match(keys: Sequence[LookupKey], filter_digits: str, name_length: int) -> Optional[Span]:
    """
    Match ``filter_digits`` against the concatenated digits of consecutive keys.

    A match that ends inside a literal key ends at the last matched character.
    A match that ends inside a phonetic key is widened to the whole key, so a
    syllable is never cut in half.
    """
    if not keys or not filter_digits:
        return None

    key_count = len(keys)
    filter_length = len(filter_digits)
    i = 0
    while i < key_count:
        i = _seek(keys, i, filter_digits[0])
        if i >= key_count:
            return None

        candidate = i
        consumed = 0
        restart = False
        while i < key_count:
            key = keys[i]
            if not key.is_separator:
                digits = key.digits
                k = 0
                while k < len(digits) and consumed < filter_length and digits[k] == filter_digits[consumed]:
                    consumed += 1
                    k += 1
                if consumed == filter_length:
                    start = keys[candidate].position
                    if key.type == TokenType.LITERAL:
                        return start, key.position + k
                    return start, _key_end(keys, i, name_length)
                if k != len(digits):
                    restart = True
                    break
            i += 1

        if not restart:
            # Ran out of keys with part of the filter left over
            return None
        i = candidate + 1
    return None


def find_initials_match(keys: Sequence[LookupKey], filter_digits: str, name_length: int) -> Optional[Span]:
    """Match one filter digit per key against the first digit of each key."""
    if not keys or not filter_digits:
        return None

    key_count = len(keys)
    filter_length = len(filter_digits)
    i = 0
    while i < key_count:
        i = _seek(keys, i, filter_digits[0])
        if i >= key_count:
            return None

        candidate = i
        consumed = 0
        while i < key_count and consumed < filter_length:
            initial = keys[i].digits[0]
            if initial == filter_digits[consumed]:
                consumed += 1
            elif initial != " ":
                break
            i += 1

        if consumed == filter_length:
            end = keys[i].position if i < key_count else name_length
            return keys[candidate].position, end
        i = candidate + 1
    return None


def find_digit_match(keys: Sequence[LookupKey], filter_digits: str, name_length: int) -> Optional[Span]:
    """Contiguous match first, initials second."""
    span = find_contiguous_match(keys, filter_digits, name_length)
    if span is None:
        span = find_initials_match(keys, filter_digits, name_length)
    return span
