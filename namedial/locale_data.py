# ═════════════════════════════════════════════════════════════════════════════════
# DIAL-PAD LETTER TABLE
# ═════════════════════════════════════════════════════════════════════════════════
#
# Each digit is followed by the characters printed beside it on a 12-key pad.
# A character maps to the last digit that precedes it in the table, so '0' and
# '1' map to themselves and 'a'/'A' map to '2'.
# ═════════════════════════════════════════════════════════════════════════════════

from types import MappingProxyType

LETTER_DIGIT_TABLE = "012abcABC3defDEF4ghiGHI5jklJKL6mnoMNO7pqrsPQRS8tuvTUV9wxyzWXYZ"


def build_letter_digit_map(table: str) -> MappingProxyType:
    """Expand a dial-pad table string into a read-only char → digit mapping."""
    mapping = {}
    key = None
    for char in table:
        if "0" <= char <= "9":
            key = char
        if key is None:
            raise ValueError(f"Dial-pad table must start with a digit, got {table[:1]!r}")
        mapping[char] = key
    return MappingProxyType(mapping)


LETTER_DIGIT_MAP = build_letter_digit_map(LETTER_DIGIT_TABLE)


# ═════════════════════════════════════════════════════════════════════════════════
# UNICODE BLOCKS
# ═════════════════════════════════════════════════════════════════════════════════
#
# Inclusive code point ranges of the blocks the script classifier cares about.
# The standard library exposes general categories but not block membership.
# ═════════════════════════════════════════════════════════════════════════════════

LATIN_BLOCKS = (
    (0x0000, 0x007F),  # Basic Latin
    (0x0080, 0x00FF),  # Latin-1 Supplement
    (0x0100, 0x017F),  # Latin Extended-A
    (0x0180, 0x024F),  # Latin Extended-B
    (0x1E00, 0x1EFF),  # Latin Extended Additional
)

CJK_BLOCKS = (
    (0x4E00, 0x9FFF),  # CJK Unified Ideographs
    (0x3400, 0x4DBF),  # CJK Unified Ideographs Extension A
    (0x20000, 0x2A6DF),  # CJK Unified Ideographs Extension B
    (0x3000, 0x303F),  # CJK Symbols and Punctuation
    (0x2E80, 0x2EFF),  # CJK Radicals Supplement
    (0x3300, 0x33FF),  # CJK Compatibility
    (0xFE30, 0xFE4F),  # CJK Compatibility Forms
    (0xF900, 0xFAFF),  # CJK Compatibility Ideographs
    (0x2F800, 0x2FA1F),  # CJK Compatibility Ideographs Supplement
)

KOREAN_BLOCKS = (
    (0xAC00, 0xD7AF),  # Hangul Syllables
    (0x1100, 0x11FF),  # Hangul Jamo
    (0x3130, 0x318F),  # Hangul Compatibility Jamo
)

JAPANESE_PHONETIC_BLOCKS = (
    (0x30A0, 0x30FF),  # Katakana
    (0x31F0, 0x31FF),  # Katakana Phonetic Extensions
    (0xFF00, 0xFFEF),  # Halfwidth and Fullwidth Forms
    (0x3040, 0x309F),  # Hiragana
)


# ═════════════════════════════════════════════════════════════════════════════════
# INTERPRETATION LANGUAGES
# ═════════════════════════════════════════════════════════════════════════════════

CHINESE_LANGUAGE = "zh"
JAPANESE_LANGUAGE = "ja"
KOREAN_LANGUAGE = "ko"
FALLBACK_LANGUAGE = "en"


def _assert_no_block_overlap(*groups):
    """Validate that no two block groups claim the same code point."""
    ranges = sorted((lo, hi, name) for name, group in groups for lo, hi in group)
    for (lo_a, hi_a, name_a), (lo_b, hi_b, name_b) in zip(ranges, ranges[1:]):
        if lo_b <= hi_a:
            raise ValueError(f"Overlapping blocks: {name_a} {lo_a:#x}-{hi_a:#x} and {name_b} {lo_b:#x}-{hi_b:#x}")


_assert_no_block_overlap(
    ("LATIN", LATIN_BLOCKS),
    ("CJK", CJK_BLOCKS),
    ("KOREAN", KOREAN_BLOCKS),
    ("JAPANESE", JAPANESE_PHONETIC_BLOCKS),
)
