"""
Segmentation of names into script-tagged tokens.

``PinyinTransliterator`` is the default transliterator used by the Chinese key
generator. It splits a name into:

- PHONETIC tokens, one per Han character, carrying its toneless pinyin,
- LITERAL tokens for runs of Latin-1 characters, and for any other character,
- SEPARATOR tokens, one per whitespace character.

Concatenating the ``source`` of every token gives back the input name.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

import pypinyin

from namedial.config import NameDialConfig


class TokenType(Enum):
    PHONETIC = "phonetic"
    LITERAL = "literal"
    SEPARATOR = "separator"


@dataclass(frozen=True)
class Token:
    """Script-tagged fragment of a name."""

    type: TokenType
    source: str
    target: str = ""


class PinyinTransliterator:
    """Han → pinyin tokenizer built on pypinyin."""

    def __init__(self, config: Optional[NameDialConfig] = None):
        self._config = config or NameDialConfig.create_default()

    def tokenize(self, name: Optional[str]) -> List[Token]:
        tokens: List[Token] = []
        if not name:
            return tokens

        latin_run: List[str] = []
        han_run: List[str] = []
        for char in name:
            if self._config.han_pattern.match(char):
                self._flush_latin(latin_run, tokens)
                han_run.append(char)
                continue

            self._flush_han(han_run, tokens)
            if self._config.whitespace_pattern.match(char):
                self._flush_latin(latin_run, tokens)
                tokens.append(Token(TokenType.SEPARATOR, char))
            elif self._config.latin_pattern.match(char):
                latin_run.append(char)
            else:
                self._flush_latin(latin_run, tokens)
                tokens.append(Token(TokenType.LITERAL, char))

        self._flush_latin(latin_run, tokens)
        self._flush_han(han_run, tokens)
        return tokens

    def _flush_latin(self, run: List[str], tokens: List[Token]) -> None:
        if run:
            tokens.append(Token(TokenType.LITERAL, "".join(run)))
            run.clear()

    def _flush_han(self, run: List[str], tokens: List[Token]) -> None:
        if not run:
            return
        for char, syllable in zip(run, self.han_to_pinyin("".join(run))):
            if syllable:
                tokens.append(Token(TokenType.PHONETIC, char, syllable))
            else:
                tokens.append(Token(TokenType.LITERAL, char))
        run.clear()

    def han_to_pinyin(self, han_str: str) -> List[Optional[str]]:
        """
        Toneless pinyin for each character of ``han_str``.

        The whole run is converted at once so pypinyin can use phrase context
        for heteronyms; characters pypinyin has no reading for come back as None.
        """
        syllables = self._lazy_pinyin(han_str)
        if syllables is not None and len(syllables) == len(han_str):
            return list(syllables)

        result: List[Optional[str]] = []
        for char in han_str:
            single = self._lazy_pinyin(char)
            result.append(single[0] if single else None)
        return result

    def _lazy_pinyin(self, han_str: str) -> Optional[List[str]]:
        try:
            return pypinyin.lazy_pinyin(han_str, style=pypinyin.Style.NORMAL, errors="ignore")
        except (AttributeError, ValueError, TypeError) as e:
            logging.warning(f"Pypinyin failed for '{han_str}': {e}")
            return None
