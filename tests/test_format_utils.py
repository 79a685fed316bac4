import sys
from pathlib import Path

import pytest

# Add the parent directory to path to import namedial
sys.path.insert(0, str(Path(__file__).parent.parent))

from namedial.format_utils import index_of_word, index_of_word_prefix


WORD_PREFIX_TEST_CASES = [
    ("John Smith", "sm", 5),
    ("John Smith", "jo", 0),
    ("John Smith", "JOHN", 0),
    ("SMITH, John", "sm", 0),
    ("Mary-Jane Watson", "ja", 5),
    ("  Al Green", "al", 2),
    ("(Work) Alice", "ali", 7),
    ("李雷 Lei", "le", 3),
    ("李雷", "李", 0),
    ("李雷", "雷", None),  # one word, no break between ideographs
    # Compared one character at a time, so ß never stands in for "ss"
    ("ßs", "sß", None),
    ("Straße", "STRA", 0),
    ("Straße", "straß", 0),
    # Not at a word start
    ("John Smith", "ohn", None),
    ("Prism", "sm", None),
    # Nothing to find
    ("John Smith", "xy", None),
    ("Jo", "John", None),
    ("", "a", None),
    ("abc", "", None),
    (None, "a", None),
    ("abc", None, None),
]


@pytest.mark.parametrize("text,prefix,expected", WORD_PREFIX_TEST_CASES)
def test_index_of_word_prefix(text, prefix, expected):
    assert index_of_word_prefix(text, prefix) == expected


WORD_TEST_CASES = [
    ("555-0123", "0123", 4),
    ("555-0123", "555", 0),
    ("+1 555 0123", "55", 3),
    ("555-0123", "9", None),
    ("555-0123", "", None),
    (None, "1", None),
]


@pytest.mark.parametrize("text,word,expected", WORD_TEST_CASES)
def test_index_of_word(text, word, expected):
    assert index_of_word(text, word) == expected
