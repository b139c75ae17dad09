"""
Closed word-list spell checker.

A word is real iff it appears in the given list (case-insensitive). Useful
offline and in tests where results must not depend on corpus data.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional

from wordscramble.datasets.io import read_words
from wordscramble.game.errors import SpellCheckerUnavailableError
from .base import BaseSpellChecker, register


@register
class WordlistSpellChecker(BaseSpellChecker):
    id = "wordlist"
    name = "Closed word list"

    def __init__(self, words: Optional[Iterable[str]] = None, path: Path | str | None = None,
                 language: str = "en"):
        if words is None and path is None:
            raise ValueError("WordlistSpellChecker needs `words` or `path`")
        if words is None:
            try:
                words = read_words(path)
            except (OSError, UnicodeDecodeError) as e:
                raise SpellCheckerUnavailableError(f"could not load word list from {path}") from e
        self.language = language
        self._words = {w.strip().lower() for w in words if w.strip()}

    def is_real_word(self, word: str, language: str) -> bool:
        if language != self.language:
            raise SpellCheckerUnavailableError(
                f"word list is for {self.language!r}, not {language!r}")
        return word.strip().lower() in self._words
