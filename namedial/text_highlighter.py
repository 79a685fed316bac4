"""
Highlighting of matched name fragments.

``TextHighlighter`` answers three kinds of queries and always returns a
``HighlightedText``: either the input with one span applied, or the input
unchanged (``HighlightedText.plain``) when nothing matched.

```python
highlighter = TextHighlighter()

highlighter.apply_prefix_highlight("John Smith", "sm").highlighted  # "Sm"
highlighter.apply_digit_filter("李雷", "54534").highlighted         # "李雷"
highlighter.apply_number_filter("555-0123", "0123").render()        # "555-<b>0123</b>"
```
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from namedial.format_utils import index_of_word, index_of_word_prefix
from namedial.lookup_keys import NameLookupContext
from namedial.matcher import find_digit_match


@dataclass(frozen=True)
class HighlightedText:
    """Text with at most one emphasized ``[start, end)`` span."""

    text: str
    start: Optional[int] = None
    end: Optional[int] = None
    style: Optional[str] = None

    @classmethod
    def plain(cls, text: Optional[str]) -> "HighlightedText":
        """Unhighlighted text; a missing name is shown as empty text."""
        return cls(text=text if text is not None else "")

    @classmethod
    def with_span(cls, text: str, start: int, end: int, style: str) -> "HighlightedText":
        if not 0 <= start <= end <= len(text):
            raise ValueError(f"Span [{start}, {end}) out of range for text of length {len(text)}")
        return cls(text=text, start=start, end=end, style=style)

    @property
    def is_highlighted(self) -> bool:
        return self.start is not None

    @property
    def highlighted(self) -> str:
        """The emphasized substring, empty when there is no span."""
        if self.start is None or self.end is None:
            return ""
        return self.text[self.start : self.end]

    def render(self, open_tag: str = "<b>", close_tag: str = "</b>") -> str:
        """The text with the span wrapped in ``open_tag``/``close_tag``."""
        if self.start is None or self.end is None:
            return self.text
        return self.text[: self.start] + open_tag + self.text[self.start : self.end] + close_tag + self.text[self.end :]

    def __str__(self) -> str:
        return self.text


class TextHighlighter:
    """Highlights the part of a name or number that matches a query."""

    def __init__(self, text_style: Optional[str] = None, context: Optional[NameLookupContext] = None):
        self._context = context or NameLookupContext()
        self._text_style = text_style or self._context.config.highlight_style

    @property
    def context(self) -> NameLookupContext:
        return self._context

    def apply_masking_highlight(self, text: str, start: int, end: int) -> HighlightedText:
        """Apply the highlight style to an already computed range."""
        return HighlightedText.with_span(text, start, end, self._text_style)

    def apply_prefix_highlight(self, text: Optional[str], prefix: Optional[str]) -> HighlightedText:
        """Highlight the first word of ``text`` that starts with ``prefix``."""
        if text is None or prefix is None:
            return HighlightedText.plain(text)

        # Leading punctuation in the query never matches a word start
        prefix_start = 0
        while prefix_start < len(prefix) and not prefix[prefix_start].isalnum():
            prefix_start += 1
        trimmed_prefix = prefix[prefix_start:]
        if not trimmed_prefix:
            return HighlightedText.plain(text)

        index = index_of_word_prefix(text, trimmed_prefix)
        if index is None:
            return HighlightedText.plain(text)
        return self.apply_masking_highlight(text, index, index + len(trimmed_prefix))

    def apply_digit_filter(self, name: Optional[str], filter_digits: Optional[str]) -> HighlightedText:
        """Highlight the part of ``name`` typed as ``filter_digits`` on a dial pad."""
        if not name or not filter_digits:
            return HighlightedText.plain(name)

        keys = self._context.generate_keys(name)
        if not keys:
            return HighlightedText.plain(name)

        span = find_digit_match(keys, filter_digits, len(name))
        if span is None:
            return HighlightedText.plain(name)
        return self.apply_masking_highlight(name, *span)

    def apply_number_filter(self, number: Optional[str], filter_digits: Optional[str]) -> HighlightedText:
        """Highlight the first occurrence of ``filter_digits`` inside a phone number."""
        index = index_of_word(number, filter_digits)
        if number is None or filter_digits is None or index is None:
            return HighlightedText.plain(number)
        return self.apply_masking_highlight(number, index, index + len(filter_digits))
