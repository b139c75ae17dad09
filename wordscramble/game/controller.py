"""
Game controller: the only writer of GameState.

Responsibilities:
  - start_round: draw a random root word from the dictionary source.
  - submit:      run the validation pipeline and apply the outcome.
  - new_game:    reset everything, then start a round.
  - clear_error: drop the last rejection (the player started typing again).

Collaborators are duck-typed:
  - source  : object with word_pool() -> sequence of root words
  - checker : object with is_real_word(word, language) -> bool

Everything runs synchronously; there is no intermediate "pending" state.
"""

from __future__ import annotations

import random
from typing import Iterable, List, Optional

from wordscramble.engine.letters import possible_words
from wordscramble.engine.validation import (
    MIN_WORD_LENGTH,
    Accepted,
    Outcome,
    Rejected,
    validate_word,
)
from .errors import DictionaryUnavailableError
from .state import ErrorState, GameSnapshot, GameState

LANGUAGE = "en"


class GameController:
    """
    Orchestrates rounds over a GameState.

    By default the root word stays put after a successful submission, so the
    player can keep finding words from it. Pass redraw_on_accept=True to draw
    a fresh root after every accepted word instead.
    Accepted words survive start_round() and are only cleared by reset() or
    new_game().
    """

    def __init__(self, source, checker, *, language: str = LANGUAGE,
                 redraw_on_accept: bool = False, seed: int | None = None):
        self.source = source
        self.checker = checker
        self.language = language
        self.redraw_on_accept = bool(redraw_on_accept)
        self.rng = random.Random(seed)
        self._state = GameState()

    def snapshot(self) -> GameSnapshot:
        """Read-only copy of the current state; the only view given to renderers."""
        return self._state.snapshot()

    # ---- rounds ----

    def start_round(self) -> str:
        """
        Draw a new root word uniformly from the source's pool.

        Raises DictionaryUnavailableError if the pool is missing or empty.
        """
        pool = list(self.source.word_pool())
        if not pool:
            raise DictionaryUnavailableError("start word pool is empty")

        self._state.root_word = self.rng.choice(pool)
        self._state.pending_input = ""
        return self._state.root_word

    def reset(self) -> None:
        self._state.reset()

    def new_game(self) -> str:
        self.reset()
        return self.start_round()

    # ---- input ----

    def update_input(self, text: str) -> None:
        """Player is composing a new attempt: store it and drop any old error."""
        self._state.pending_input = text
        self.clear_error()

    def clear_error(self) -> None:
        self._state.error = None

    def submit(self, candidate: Optional[str] = None) -> Outcome:
        """
        Validate `candidate` (defaults to the pending input) and apply it.

        Rejected: error set, pending input cleared, nothing else changes.
        Accepted: word prepended, tally bumped, pending input and error
                  cleared; a new root is drawn only when redraw_on_accept.
        """
        st = self._state
        raw = st.pending_input if candidate is None else candidate

        outcome = validate_word(raw, st.root_word, st.accepted_words, self._is_real)
        st.pending_input = ""

        if isinstance(outcome, Rejected):
            st.error = ErrorState(outcome.title, outcome.message)
            return outcome

        self._record(outcome)
        st.error = None
        if self.redraw_on_accept:
            self.start_round()
        return outcome

    def hints(self, vocabulary: Iterable[str], limit: int | None = None) -> List[str]:
        """
        Unused vocabulary words spellable from the current root.
        Does not consult the spell checker and does not touch state.
        """
        st = self._state
        if not st.root_word:
            return []
        words = possible_words(st.root_word, vocabulary,
                               exclude=st.accepted_words, min_length=MIN_WORD_LENGTH)
        return words if limit is None else words[:limit]

    # ---- internals ----

    def _is_real(self, word: str) -> bool:
        return self.checker.is_real_word(word, self.language)

    def _record(self, outcome: Accepted) -> None:
        st = self._state
        st.accepted_words.insert(0, outcome.word)
        st.word_count += 1
        st.letter_count += len(outcome.word)
