"""
Letter-multiset helpers for "can this word be spelled from the root?".

Conventions:
  - A root word is a bag of letters; every occurrence can be used once.
  - A candidate is spellable iff, for every letter, the candidate uses it no
    more times than the root contains it ("ssilk" is NOT spellable from
    "silkworm": only one 's' is available).

Two flavours live here:
  - can_spell: scalar check for a single candidate (used by validation).
  - possible_words: vectorized check over a whole vocabulary using a
    (words x 26) count matrix; used for hints and the autoplay harness.
"""

from __future__ import annotations

from typing import Iterable, List, Tuple

import numpy as np

ALPHABET = "abcdefghijklmnopqrstuvwxyz"
_INDEX = {ch: i for i, ch in enumerate(ALPHABET)}


def can_spell(word: str, root: str) -> bool:
    """
    Return True if `word` can be built from the letters of `root`.

    Walk the candidate left to right and consume one matching letter from a
    mutable copy of the root each time; fail at the first letter that has
    run out.

    Examples:
      can_spell("wis", "silkworm")   -> True
      can_spell("ssilk", "silkworm") -> False
    """
    remaining = list(root)
    for ch in word:
        try:
            remaining.remove(ch)  # consume one occurrence
        except ValueError:
            return False
    return True


def letter_counts(word: str) -> np.ndarray:
    """
    Count a-z letters of `word` into a length-26 int vector.
    Raises ValueError for characters outside a-z.
    """
    v = np.zeros(len(ALPHABET), dtype=np.int16)
    for ch in word:
        i = _INDEX.get(ch)
        if i is None:
            raise ValueError(f"not a lowercase a-z letter: {ch!r} in {word!r}")
        v[i] += 1
    return v


def count_matrix(words: Iterable[str]) -> Tuple[List[str], np.ndarray]:
    """
    Build a (len(kept), 26) letter-count matrix.

    Words are normalized (strip + lower); anything that is not a clean a-z
    token is skipped, so the returned word list may be shorter than the input.
    Order of the kept words is preserved.
    """
    kept: List[str] = []
    rows: List[np.ndarray] = []
    for w in words:
        w = w.strip().lower()
        if not w or not all(ch in _INDEX for ch in w):
            continue
        kept.append(w)
        rows.append(letter_counts(w))

    if not rows:
        return kept, np.zeros((0, len(ALPHABET)), dtype=np.int16)
    return kept, np.vstack(rows)


def spellable_mask(matrix: np.ndarray, root: str) -> np.ndarray:
    """
    Boolean mask over the rows of `matrix`: True where the row's letter
    counts fit inside the root's counts.

    Characters of the root outside a-z ("café-bar", "don't-care") are
    skipped: matrix rows only ever hold a-z letters, so they can't be used.
    """
    root_vec = letter_counts("".join(ch for ch in root.strip().lower() if ch in _INDEX))
    return (matrix <= root_vec).all(axis=1)


def possible_words(
        root: str,
        vocabulary: Iterable[str],
        *,
        exclude: Iterable[str] = (),
        min_length: int = 1,
) -> List[str]:
    """
    List vocabulary words spellable from `root`.

    Args:
      root       : the root word (lowercase a-z)
      vocabulary : candidate words (any case; unclean tokens are ignored)
      exclude    : words to leave out (e.g., already accepted words)
      min_length : drop words shorter than this

    Returns:
      Unique words in vocabulary order.
    """
    words, M = count_matrix(vocabulary)
    if not words:
        return []

    mask = spellable_mask(M, root)
    lengths = M.sum(axis=1)
    mask &= lengths >= min_length

    skip = {e.strip().lower() for e in exclude}
    out: List[str] = []
    seen = set()
    for i in np.flatnonzero(mask):
        w = words[i]
        if w in skip or w in seen:
            continue
        seen.add(w)
        out.append(w)
    return out
