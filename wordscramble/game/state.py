"""
Game state: the single snapshot the presentation layer renders.

Only GameController writes to a GameState. Readers should use snapshot(),
which returns an immutable copy.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Dict, List, Optional, Tuple


@dataclass(frozen=True)
class ErrorState:
    title: str
    message: str


@dataclass(frozen=True)
class GameSnapshot:
    root_word: str
    accepted_words: Tuple[str, ...]
    word_count: int
    letter_count: int
    pending_input: str
    error: Optional[ErrorState]

    def as_dict(self) -> Dict:
        """Plain JSON-serializable dict (accepted_words as a list)."""
        d = asdict(self)
        d["accepted_words"] = list(self.accepted_words)
        return d


@dataclass
class GameState:
    root_word: str = ""
    accepted_words: List[str] = field(default_factory=list)  # most recent first
    word_count: int = 0
    letter_count: int = 0
    pending_input: str = ""
    error: Optional[ErrorState] = None

    def reset(self) -> None:
        """Clear every field back to its empty/zero default."""
        self.root_word = ""
        self.accepted_words = []
        self.word_count = 0
        self.letter_count = 0
        self.pending_input = ""
        self.error = None

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            root_word=self.root_word,
            accepted_words=tuple(self.accepted_words),
            word_count=self.word_count,
            letter_count=self.letter_count,
            pending_input=self.pending_input,
            error=self.error,
        )
