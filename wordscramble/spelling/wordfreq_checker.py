"""
wordfreq-backed spell checker.

Idea:
  - wordfreq ships frequency tables built from large corpora. A token that
    never shows up has a Zipf frequency of 0, so "is it a real word?"
    becomes "is its Zipf frequency at least a threshold?".
  - Corpora are full of initialisms and typos ("wmr", "lsi", "oms"), so the
    default floor is DEFAULT_MIN_ZIPF (about once per million words); lower
    it to admit rarer words, raise it (3.5-4.0) for a stricter game.
"""

from __future__ import annotations

from typing import List

from wordfreq import available_languages, top_n_list, zipf_frequency

from wordscramble.game.errors import SpellCheckerUnavailableError
from .base import BaseSpellChecker, register

# Below this, tokens are mostly abbreviations, names and corpus noise.
DEFAULT_MIN_ZIPF = 3.0


def top_words(language: str = "en", n_top: int = 50000, min_length: int = 3) -> List[str]:
    """
    The n_top most frequent words in `language`, kept only if they are plain
    lowercase a-z tokens of at least `min_length` letters. Used as the
    vocabulary for hints and autoplay.
    """
    out: List[str] = []
    for w in top_n_list(language, n_top):
        if len(w) >= min_length and w.isascii() and w.isalpha():
            out.append(w.lower())
    return out


@register
class WordfreqSpellChecker(BaseSpellChecker):
    id = "wordfreq"
    name = "wordfreq (Zipf frequency)"

    def __init__(self, min_zipf: float = DEFAULT_MIN_ZIPF, wordlist: str = "best"):
        self.min_zipf = float(min_zipf)
        self.wordlist = wordlist
        self._languages = set(available_languages(wordlist))

    def is_real_word(self, word: str, language: str) -> bool:
        if language not in self._languages:
            raise SpellCheckerUnavailableError(
                f"wordfreq has no '{self.wordlist}' list for language {language!r}")
        zipf = zipf_frequency(word, language, wordlist=self.wordlist)
        return zipf > 0 and zipf >= self.min_zipf
