"""
Script classification of display names.

A name is classified by the Unicode block of its letters. CJK ideographs are
shared by Chinese, Japanese and Korean, so an ideograph alone is not decisive:
the rest of the name is searched for kana or hangul before settling on Chinese.

```python
from namedial.name_style import NameStyle, classify, resolve_style

classify("John Smith")   # NameStyle.WESTERN
classify("李雷")          # NameStyle.CHINESE
classify("山田たろう")     # NameStyle.JAPANESE
classify("김민수")        # NameStyle.KOREAN

resolve_style(NameStyle.WESTERN, "zh")  # NameStyle.CHINESE
```
"""

from __future__ import annotations
import unicodedata
from bisect import bisect_right
from enum import IntEnum
from functools import lru_cache
from typing import Optional, Tuple

from namedial.locale_data import (
    CHINESE_LANGUAGE,
    CJK_BLOCKS,
    JAPANESE_LANGUAGE,
    JAPANESE_PHONETIC_BLOCKS,
    KOREAN_BLOCKS,
    KOREAN_LANGUAGE,
    LATIN_BLOCKS,
)


class NameStyle(IntEnum):
    """Naming convention a display name follows."""

    UNDEFINED = 0
    WESTERN = 1
    CJK = 2
    CHINESE = 3
    JAPANESE = 4
    KOREAN = 5


class BlockGroup(IntEnum):
    OTHER = 0
    LATIN = 1
    CJK = 2
    JAPANESE_PHONETIC = 3
    KOREAN = 4


def _build_block_index() -> Tuple[Tuple[int, ...], Tuple[Tuple[int, BlockGroup], ...]]:
    ranges = sorted(
        (lo, hi, group)
        for group, blocks in (
            (BlockGroup.LATIN, LATIN_BLOCKS),
            (BlockGroup.CJK, CJK_BLOCKS),
            (BlockGroup.JAPANESE_PHONETIC, JAPANESE_PHONETIC_BLOCKS),
            (BlockGroup.KOREAN, KOREAN_BLOCKS),
        )
        for lo, hi in blocks
    )
    starts = tuple(lo for lo, _, _ in ranges)
    bounds = tuple((hi, group) for _, hi, group in ranges)
    return starts, bounds


_BLOCK_STARTS, _BLOCK_BOUNDS = _build_block_index()


@lru_cache(maxsize=4096)
def block_group(char: str) -> BlockGroup:
    """Block group of a single character."""
    code_point = ord(char)
    idx = bisect_right(_BLOCK_STARTS, code_point) - 1
    if idx < 0:
        return BlockGroup.OTHER
    hi, group = _BLOCK_BOUNDS[idx]
    return group if code_point <= hi else BlockGroup.OTHER


def _is_letter(char: str) -> bool:
    return unicodedata.category(char).startswith("L")


def classify(name: Optional[str]) -> NameStyle:
    """Guess the naming convention of ``name`` from the scripts of its letters."""
    if not name:
        return NameStyle.UNDEFINED

    style = NameStyle.UNDEFINED
    for offset, char in enumerate(name):
        if not _is_letter(char):
            continue
        group = block_group(char)
        if group == BlockGroup.CJK:
            return _classify_cjk(name, offset + 1)
        if group == BlockGroup.JAPANESE_PHONETIC:
            return NameStyle.JAPANESE
        if group == BlockGroup.KOREAN:
            return NameStyle.KOREAN
        style = NameStyle.WESTERN
    return style


def _classify_cjk(name: str, offset: int) -> NameStyle:
    """Look past an ideograph for kana or hangul; ideographs alone read as Chinese."""
    for char in name[offset:]:
        if not _is_letter(char):
            continue
        group = block_group(char)
        if group == BlockGroup.JAPANESE_PHONETIC:
            return NameStyle.JAPANESE
        if group == BlockGroup.KOREAN:
            return NameStyle.KOREAN
    return NameStyle.CHINESE


def resolve_style(style: NameStyle, language: Optional[str]) -> NameStyle:
    """
    Pick the style whose key generator should index a name under ``language``.

    Generic CJK names are read as Chinese unless the user reads Japanese or
    Korean. Western names are read as Chinese for Chinese users, who type
    pinyin for transliterated names as well.
    """
    adjusted = style
    if style == NameStyle.CJK and language not in (JAPANESE_LANGUAGE, KOREAN_LANGUAGE):
        adjusted = NameStyle.CHINESE
    if style == NameStyle.WESTERN and language == CHINESE_LANGUAGE:
        adjusted = NameStyle.CHINESE
    return adjusted


def translate_name_style(style: int) -> str:
    """Readable name of a style value; unknown values read as UNDEFINED."""
    try:
        return NameStyle(style).name
    except ValueError:
        return NameStyle.UNDEFINED.name
