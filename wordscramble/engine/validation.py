"""
Word validation pipeline.

This module answers the question: "May this candidate be accepted right now?"
A candidate is normalized (lower-case, surrounding whitespace stripped) and
then checked in a fixed order, stopping at the first failure:

  1. BlankInput        - nothing left after normalization
  2. TooShort          - fewer than MIN_WORD_LENGTH characters
  3. AlreadyUsed       - already in the accepted list (exact match)
  4. NotConstructible  - not spellable from the root word's letters
  5. NotARealWord      - rejected by the spell checker

Nothing here mutates game state; the controller applies the outcome.
Note there is no special case for resubmitting the root word itself: it is
spellable from itself, so only the spell checker can turn it away.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Iterable, Tuple, Union

from .letters import can_spell

MIN_WORD_LENGTH = 3


class RejectCode(str, Enum):
    BLANK_INPUT = "BlankInput"
    TOO_SHORT = "TooShort"
    ALREADY_USED = "AlreadyUsed"
    NOT_CONSTRUCTIBLE = "NotConstructible"
    NOT_A_REAL_WORD = "NotARealWord"


# (title, message template); "{root}" is filled with the current root word.
REJECTIONS: Dict[RejectCode, Tuple[str, str]] = {
    RejectCode.BLANK_INPUT: ("Warning", "The field is blank"),
    RejectCode.TOO_SHORT: ("word with minimum size",
                           "The word must contain at least 3 characters"),
    RejectCode.ALREADY_USED: ("Word used already", "Be more original"),
    RejectCode.NOT_CONSTRUCTIBLE: ("Word not possible",
                                   "You can't spell that word from '{root}'!"),
    RejectCode.NOT_A_REAL_WORD: ("Word not recognized",
                                 "You can't just make them up, you know!"),
}


@dataclass(frozen=True)
class Accepted:
    word: str
    accepted = True


@dataclass(frozen=True)
class Rejected:
    code: RejectCode
    title: str
    message: str
    accepted = False


Outcome = Union[Accepted, Rejected]


def normalize(text: str) -> str:
    """Lower-case and trim surrounding whitespace (including newlines)."""
    return text.lower().strip()


def title_for(code: RejectCode) -> str:
    return REJECTIONS[code][0]


def reject(code: RejectCode, root_word: str = "") -> Rejected:
    """Build the Rejected outcome for `code` from the fixed message table."""
    title, template = REJECTIONS[code]
    return Rejected(code=code, title=title, message=template.format(root=root_word))


def is_original(word: str, accepted_words: Iterable[str]) -> bool:
    return word not in accepted_words


def validate_word(
        candidate: str,
        root_word: str,
        accepted_words: Iterable[str],
        is_real_word: Callable[[str], bool],
) -> Outcome:
    """
    Run the pipeline on `candidate`.

    Args:
      candidate      : raw player input
      root_word      : letters available this round
      accepted_words : words accepted so far (already normalized)
      is_real_word   : spell-check callback, word -> bool; only called when
                       every earlier check passed

    Returns:
      Accepted(normalized_word) or Rejected(code, title, message).
    """
    word = normalize(candidate)

    if len(word) == 0:
        return reject(RejectCode.BLANK_INPUT, root_word)

    if len(word) < MIN_WORD_LENGTH:
        return reject(RejectCode.TOO_SHORT, root_word)

    if not is_original(word, accepted_words):
        return reject(RejectCode.ALREADY_USED, root_word)

    if not can_spell(word, root_word):
        return reject(RejectCode.NOT_CONSTRUCTIBLE, root_word)

    if not is_real_word(word):
        return reject(RejectCode.NOT_A_REAL_WORD, root_word)

    return Accepted(word)
