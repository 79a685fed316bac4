"""
Name lookup keys for dial-pad search.

A lookup key is a digit-encoded fragment of a name together with the offset of
that fragment in the name. For Chinese names every Han character yields one
key holding its pinyin on the dial pad, and every Latin word yields one key
holding its letters on the dial pad:

```python
from namedial.lookup_keys import NameLookupContext

context = NameLookupContext()
context.generate_keys("李雷")
# (LookupKey(type=PHONETIC, source='李', digits='54', position=0),
#  LookupKey(type=PHONETIC, source='雷', digits='534', position=1))
```

Keys are produced by a generator picked from the name's style, resolved against
the context's active interpretation language. Only the Chinese style has a
generator; every other style produces no keys.

## Cache

Successful key sequences are cached per name for the life of the context.
Changing the active language does not touch the cache: a name that still
resolves to the Chinese generator keeps its old keys until ``clear_cache()``.

## Thread Safety

Generator selection and cache access are each guarded by a lock. Generation
itself runs unlocked, so two threads may compute the same name at once; the
results are identical and the last insert wins.
"""

from __future__ import annotations
import logging
import threading
from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional, Tuple, Union

from namedial.config import NameDialConfig, normalize_language
from namedial.locale_data import FALLBACK_LANGUAGE, LETTER_DIGIT_MAP, build_letter_digit_map
from namedial.name_style import NameStyle, classify, resolve_style, translate_name_style
from namedial.transliteration import PinyinTransliterator, TokenType


@dataclass(frozen=True)
class LookupKey:
    """Digit-encoded, position-tagged fragment of a name."""

    type: TokenType
    source: str
    digits: str
    position: int

    @property
    def is_separator(self) -> bool:
        return self.digits[:1] == " "


@dataclass(frozen=True)
class CacheInfo:
    """Immutable cache information structure."""

    cache_size: int
    active_language: str


def convert_to_digits(text: Optional[str], letter_digit_map: Mapping[str, str] = LETTER_DIGIT_MAP) -> Optional[str]:
    """Dial-pad digits for ``text``, or None if any character has no key."""
    if text is None:
        return None
    digits = []
    for char in text:
        digit = letter_digit_map.get(char)
        if digit is None:
            return None
        digits.append(digit)
    return "".join(digits)


# ════════════════════════════════════════════════════════════════════════════════
# CACHE
# ════════════════════════════════════════════════════════════════════════════════


class LookupKeyCache:
    """Name → lookup keys, populated on first successful generation."""

    def __init__(self):
        self._entries: Dict[str, Tuple[LookupKey, ...]] = {}
        self._lock = threading.Lock()

    def get(self, name: str) -> Optional[Tuple[LookupKey, ...]]:
        with self._lock:
            return self._entries.get(name)

    def put(self, name: str, keys: Tuple[LookupKey, ...]) -> None:
        with self._lock:
            self._entries[name] = keys

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


# ════════════════════════════════════════════════════════════════════════════════
# KEY GENERATORS
# ════════════════════════════════════════════════════════════════════════════════


class DefaultKeyGenerator:
    """Generator for styles without dial-pad support."""

    def generate_keys(self, name: Optional[str]) -> Optional[Tuple[LookupKey, ...]]:
        return None


class ChineseKeyGenerator:
    """
    Keys from pinyin for Han characters and from the letters of Latin words.

    Either every token of the name is encoded or the name gets no keys at all.
    """

    def __init__(self, transliterator, cache: LookupKeyCache, letter_digit_map: Mapping[str, str]):
        self._transliterator = transliterator
        self._cache = cache
        self._letter_digit_map = letter_digit_map

    def generate_keys(self, name: Optional[str]) -> Optional[Tuple[LookupKey, ...]]:
        if name:
            cached = self._cache.get(name)
            if cached is not None:
                logging.debug(f"Lookup key cache hit for {name!r}")
                return cached

        tokens = self._transliterator.tokenize(name)
        if not tokens:
            return None

        keys: List[LookupKey] = []
        position = 0
        for token in tokens:
            if token.type == TokenType.PHONETIC:
                digits = convert_to_digits(token.target, self._letter_digit_map)
            elif token.type == TokenType.LITERAL:
                digits = convert_to_digits(token.source, self._letter_digit_map)
            elif token.type == TokenType.SEPARATOR:
                digits = " "
            else:
                digits = None

            if digits is None:
                logging.debug(f"No dial-pad encoding for {token.source!r}; {name!r} gets no lookup keys")
                return None
            if digits:
                keys.append(LookupKey(token.type, token.source, digits, position))
                position += len(token.source)

        if not keys:
            return None
        result = tuple(keys)
        if name:
            self._cache.put(name, result)
        return result


# ════════════════════════════════════════════════════════════════════════════════
# LOOKUP CONTEXT
# ════════════════════════════════════════════════════════════════════════════════


class NameLookupContext:
    """Owns the active interpretation language, the key cache and the generator table."""

    def __init__(self, config: Optional[NameDialConfig] = None, transliterator=None):
        self._config = config or NameDialConfig.create_default()
        self._transliterator = transliterator or PinyinTransliterator(self._config)
        self._letter_digit_map = build_letter_digit_map(self._config.letter_digit_table)
        self._cache = LookupKeyCache()
        self._default_generator = DefaultKeyGenerator()
        self._generators: Dict[NameStyle, ChineseKeyGenerator] = {}
        self._generators_lock = threading.Lock()
        self._language = self._config.default_language

    @property
    def config(self) -> NameDialConfig:
        return self._config

    @property
    def active_language(self) -> str:
        return self._language

    @property
    def letter_digit_map(self) -> Mapping[str, str]:
        return self._letter_digit_map

    def set_active_language(self, language: Optional[str]) -> None:
        """Switch the interpretation language; None restores the configured default."""
        code = normalize_language(language) or self._config.default_language or FALLBACK_LANGUAGE
        if code != self._language:
            logging.debug(f"Interpretation language changed from {self._language!r} to {code!r}")
        self._language = code

    def clear_cache(self) -> None:
        logging.debug(f"Clearing {len(self._cache)} cached lookup key sequences")
        self._cache.clear()

    def get_cache_info(self) -> CacheInfo:
        return CacheInfo(cache_size=len(self._cache), active_language=self._language)

    def generate_keys(self, name: Optional[str], style: Optional[NameStyle] = None) -> Optional[Tuple[LookupKey, ...]]:
        """
        Lookup keys for ``name``, or None when the name cannot be indexed.

        Args:
            name: Display name
            style: Naming convention; classified from the name when omitted
        """
        if style is None:
            style = classify(name)
        return self._generator_for(style).generate_keys(name)

    def _generator_for(self, style: NameStyle) -> Union[ChineseKeyGenerator, DefaultKeyGenerator]:
        resolved = resolve_style(style, self._language)
        with self._generators_lock:
            generator = self._generators.get(resolved)
            if generator is None and resolved == NameStyle.CHINESE:
                generator = ChineseKeyGenerator(self._transliterator, self._cache, self._letter_digit_map)
                self._generators[resolved] = generator
        if generator is None:
            logging.debug(f"No key generator for {translate_name_style(resolved)} names")
            return self._default_generator
        return generator
