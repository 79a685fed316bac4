import sys
from pathlib import Path

import pytest

# Add the parent directory to path to import namedial
sys.path.insert(0, str(Path(__file__).parent.parent))

from namedial.config import NameDialConfig
from namedial.lookup_keys import NameLookupContext
from namedial.text_highlighter import HighlightedText, TextHighlighter


@pytest.fixture
def highlighter():
    config = NameDialConfig.create_default().with_language("zh")
    return TextHighlighter(context=NameLookupContext(config))


# ════════════════════════════════════════════════════════════════════════════════
# PREFIX HIGHLIGHT
# ════════════════════════════════════════════════════════════════════════════════

PREFIX_TEST_CASES = [
    ("John Smith", "sm", (5, 7), "Sm"),
    ("John Smith", "SMI", (5, 8), "Smi"),
    ("John Smith", "jo", (0, 2), "Jo"),
    # Leading punctuation in the query is ignored
    ("John Smith", "  .sm", (5, 7), "Sm"),
    ("John Smith", "@john", (0, 4), "John"),
    ("Mary-Jane Watson", "ja", (5, 7), "Ja"),
]


@pytest.mark.parametrize("text,prefix,span,fragment", PREFIX_TEST_CASES)
def test_prefix_highlight(highlighter, text, prefix, span, fragment):
    result = highlighter.apply_prefix_highlight(text, prefix)
    assert result.is_highlighted
    assert (result.start, result.end) == span
    assert result.highlighted == fragment
    assert result.text == text
    assert result.style == "bold"


@pytest.mark.parametrize("prefix", [None, "", "...", "xy", "ohn"])
def test_prefix_without_match_returns_text(highlighter, prefix):
    result = highlighter.apply_prefix_highlight("John Smith", prefix)
    assert not result.is_highlighted
    assert result.text == "John Smith"
    assert str(result) == "John Smith"


def test_prefix_highlight_on_missing_text(highlighter):
    assert highlighter.apply_prefix_highlight(None, "a") == HighlightedText.plain("")


# ════════════════════════════════════════════════════════════════════════════════
# DIGIT FILTER
# ════════════════════════════════════════════════════════════════════════════════

DIGIT_FILTER_TEST_CASES = [
    # Contiguous matches
    ("李雷", "54", "李"),
    ("李雷", "5", "李"),
    ("李雷", "545", "李雷"),
    ("李雷", "54534", "李雷"),
    ("李雷", "534", "雷"),
    ("John Smith", "5646", "John"),
    ("John Smith", "76", "Sm"),
    ("John Smith", "564676", "John Sm"),
    ("王 Xiaoming", "9264", "王"),
    ("王 Xiaoming", "926494", "王 Xi"),
    ("韩梅梅", "634", "梅"),
    # Initials
    ("李雷", "55", "李雷"),
    ("John Smith", "57", "John Smith"),
    ("韩梅梅", "466", "韩梅梅"),
]


@pytest.mark.parametrize("name,digits,fragment", DIGIT_FILTER_TEST_CASES)
def test_digit_filter(highlighter, name, digits, fragment):
    result = highlighter.apply_digit_filter(name, digits)
    assert result.is_highlighted, f"{digits!r} should match {name!r}"
    assert result.highlighted == fragment
    assert result.text == name


@pytest.mark.parametrize(
    "name,digits",
    [
        ("李雷", ""),
        ("李雷", None),
        ("", "54"),
        (None, "54"),
        ("李雷", "9"),
        ("李雷", "5345"),  # 54|534 never reads 5345 contiguously, and the initials are 55
        ("John Smith", "999"),
        ("Li.Lei", "54"),  # name has no keys
        ("たなか", "8"),  # no generator for Japanese names
    ],
)
def test_digit_filter_without_match_returns_name(highlighter, name, digits):
    result = highlighter.apply_digit_filter(name, digits)
    assert not result.is_highlighted
    assert result.text == (name or "")


def test_western_names_need_chinese_language():
    config = NameDialConfig.create_default().with_language("en")
    highlighter = TextHighlighter(context=NameLookupContext(config))
    assert not highlighter.apply_digit_filter("John Smith", "5646").is_highlighted
    assert highlighter.apply_digit_filter("李雷", "54").highlighted == "李"

    highlighter.context.set_active_language("zh")
    assert highlighter.apply_digit_filter("John Smith", "5646").highlighted == "John"


# ════════════════════════════════════════════════════════════════════════════════
# NUMBER FILTER AND RENDERING
# ════════════════════════════════════════════════════════════════════════════════


def test_number_filter(highlighter):
    result = highlighter.apply_number_filter("555-0123", "0123")
    assert (result.start, result.end) == (4, 8)
    assert highlighter.apply_number_filter("555-0123", "99") == HighlightedText.plain("555-0123")
    assert highlighter.apply_number_filter("555-0123", "") == HighlightedText.plain("555-0123")
    assert highlighter.apply_number_filter(None, "1") == HighlightedText.plain(None)


def test_render(highlighter):
    assert highlighter.apply_prefix_highlight("John Smith", "sm").render() == "John <b>Sm</b>ith"
    assert highlighter.apply_digit_filter("李雷", "534").render("[", "]") == "李[雷]"
    assert HighlightedText.plain("李雷").render() == "李雷"


def test_custom_text_style():
    highlighter = TextHighlighter(text_style="italic")
    assert highlighter.apply_prefix_highlight("John Smith", "j").style == "italic"


def test_span_must_lie_inside_text(highlighter):
    with pytest.raises(ValueError):
        highlighter.apply_masking_highlight("abc", 2, 5)
    with pytest.raises(ValueError):
        HighlightedText.with_span("abc", 2, 1, "bold")


def test_highlight_style_from_config():
    config = NameDialConfig.create_default().with_language("zh").with_highlight_style("underline")
    highlighter = TextHighlighter(context=NameLookupContext(config))
    assert highlighter.apply_digit_filter("李雷", "54").style == "underline"
    assert TextHighlighter(text_style="italic", context=NameLookupContext(config)).apply_prefix_highlight(
        "John Smith", "j"
    ).style == "italic"


def test_missing_text_becomes_empty_text():
    assert HighlightedText.plain(None).text == ""
    assert TextHighlighter().apply_digit_filter(None, "54").text == ""
    assert TextHighlighter().apply_prefix_highlight("", "j").text == ""
