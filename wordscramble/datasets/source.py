"""
Dictionary source: the pool of root words a round can draw from.

The pool is a static, newline-separated list (one root word per line),
loaded once on first use and cached for the lifetime of the source.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional, Tuple

from wordscramble.game.errors import DictionaryUnavailableError
from .io import read_words

DATA_DIR = Path(__file__).parent / "data"
DEFAULT_START_WORDS = DATA_DIR / "start.txt"


class DictionarySource:
    """
    Either file-backed (path) or in-memory (words). With neither given, the
    bundled start list is used.
    """

    def __init__(self, path: Path | str | None = None, words: Optional[Iterable[str]] = None):
        self.path = None if words is not None else Path(path or DEFAULT_START_WORDS)
        self._words: Optional[Tuple[str, ...]] = None
        if words is not None:
            self._words = tuple(w.strip().lower() for w in words if w.strip())

    def word_pool(self) -> Tuple[str, ...]:
        """
        Return the (non-empty) root words as a tuple, so callers can't edit the pool.
        Raises DictionaryUnavailableError if the file is missing or has no words.
        """
        if self._words is None:
            try:
                self._words = tuple(read_words(self.path))
            except (OSError, UnicodeDecodeError) as e:
                raise DictionaryUnavailableError(f"could not load start words from {self.path}") from e

        if not self._words:
            where = self.path if self.path is not None else "<in-memory list>"
            raise DictionaryUnavailableError(f"start word list is empty: {where}")
        return self._words
