"""
Dial-pad name search and match highlighting.

Contacts can be found by typing a name as text or as digits on a phone keypad
(T9 style). This package classifies the script of a display name, builds
digit-encoded lookup keys for it (pinyin for Han characters, letters for Latin
words), and computes which part of the name a query matched.

```python
import namedial

namedial.set_active_language("zh")
namedial.classify("李雷")                          # NameStyle.CHINESE
namedial.highlight_digits("李雷", "54").highlighted  # "李"
namedial.highlight_prefix("John Smith", "sm").render()  # "John <b>Sm</b>ith"
```

The module-level functions share one lazily created ``TextHighlighter`` and its
``NameLookupContext``. Applications that need isolated caches or different
languages at once create their own contexts.
"""

from __future__ import annotations
import threading
from typing import Optional, Tuple

from namedial.config import NameDialConfig
from namedial.lookup_keys import CacheInfo, LookupKey, NameLookupContext, convert_to_digits
from namedial.name_style import NameStyle, classify, resolve_style, translate_name_style
from namedial.text_highlighter import HighlightedText, TextHighlighter
from namedial.transliteration import PinyinTransliterator, Token, TokenType

__version__ = "0.1.0"


# ════════════════════════════════════════════════════════════════════════════════
# MODULE-LEVEL CONVENIENCE FUNCTIONS
# ════════════════════════════════════════════════════════════════════════════════

# Global highlighter instance for module-level functions
_global_highlighter: Optional[TextHighlighter] = None
_global_lock = threading.Lock()


def _get_global_highlighter() -> TextHighlighter:
    """Get or create the global highlighter instance."""
    global _global_highlighter
    with _global_lock:
        if _global_highlighter is None:
            _global_highlighter = TextHighlighter()
        return _global_highlighter


def generate_keys(name: Optional[str], style: Optional[NameStyle] = None) -> Optional[Tuple[LookupKey, ...]]:
    return _get_global_highlighter().context.generate_keys(name, style)


def highlight_prefix(text: Optional[str], prefix: Optional[str]) -> HighlightedText:
    return _get_global_highlighter().apply_prefix_highlight(text, prefix)


def highlight_digits(name: Optional[str], filter_digits: Optional[str]) -> HighlightedText:
    return _get_global_highlighter().apply_digit_filter(name, filter_digits)


def highlight_number(number: Optional[str], filter_digits: Optional[str]) -> HighlightedText:
    return _get_global_highlighter().apply_number_filter(number, filter_digits)


def set_active_language(language: Optional[str]) -> None:
    """Set the interpretation language; None restores the system default. Cached keys are kept."""
    _get_global_highlighter().context.set_active_language(language)


def get_active_language() -> str:
    return _get_global_highlighter().context.active_language


def clear_cache() -> None:
    """Drop every cached lookup key sequence."""
    _get_global_highlighter().context.clear_cache()


def get_cache_info() -> CacheInfo:
    return _get_global_highlighter().context.get_cache_info()


__all__ = [
    # Data classes
    "CacheInfo",
    "HighlightedText",
    "LookupKey",
    "NameStyle",
    "Token",
    "TokenType",
    # Services
    "NameDialConfig",
    "NameLookupContext",
    "PinyinTransliterator",
    "TextHighlighter",
    # Functions
    "classify",
    "clear_cache",
    "convert_to_digits",
    "generate_keys",
    "get_active_language",
    "get_cache_info",
    "highlight_digits",
    "highlight_number",
    "highlight_prefix",
    "resolve_style",
    "set_active_language",
    "translate_name_style",
    "__version__",
]
