"""Immutable configuration for name lookup and highlighting."""

from __future__ import annotations
import locale
import os
import re
from dataclasses import dataclass, replace
from typing import Optional

from namedial.locale_data import FALLBACK_LANGUAGE, LETTER_DIGIT_TABLE


def normalize_language(language: Optional[str]) -> Optional[str]:
    """Reduce a locale tag such as ``zh_CN.UTF-8`` or ``zh-Hant-TW`` to its language code."""
    if not language:
        return None
    code = re.split(r"[_\-.@]", language.strip(), maxsplit=1)[0].lower()
    if not code or code in ("c", "posix"):
        return None
    return code


def system_language() -> str:
    """Language code of the process locale, falling back to English."""
    try:
        current = locale.getlocale()[0]
    except ValueError:
        current = None
    candidates = [current] + [os.environ.get(var) for var in ("LC_ALL", "LC_MESSAGES", "LANG")]
    for candidate in candidates:
        code = normalize_language(candidate)
        if code:
            return code
    return FALLBACK_LANGUAGE


@dataclass(frozen=True)
class NameDialConfig:
    """Immutable configuration - defaults come from the process locale."""

    # Interpretation language used when a context is created or reset
    default_language: str

    # Style name attached to highlight spans
    highlight_style: str

    # Dial-pad table, digit followed by the letters printed beside it
    letter_digit_table: str

    # Precompiled patterns used by the transliterator
    han_pattern: re.Pattern[str]
    whitespace_pattern: re.Pattern[str]
    latin_pattern: re.Pattern[str]

    @classmethod
    def create_default(cls) -> "NameDialConfig":
        """Factory method for the default configuration."""
        return cls(
            default_language=system_language(),
            highlight_style="bold",
            letter_digit_table=LETTER_DIGIT_TABLE,
            han_pattern=re.compile(
                r"[\u3400-\u4dbf\u4e00-\u9fff\uf900-\ufaff\U00020000-\U0002a6df\U0002f800-\U0002fa1f]"
            ),
            whitespace_pattern=re.compile(r"\s"),
            latin_pattern=re.compile(r"[\u0021-\u00ff]"),
        )

    def with_language(self, language: str) -> "NameDialConfig":
        """Immutable update of the default interpretation language."""
        return replace(self, default_language=normalize_language(language) or FALLBACK_LANGUAGE)

    def with_highlight_style(self, style: str) -> "NameDialConfig":
        """Immutable update of the style attached to highlight spans."""
        return replace(self, highlight_style=style)
