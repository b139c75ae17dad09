from .letters import can_spell, possible_words
from .validation import (
    Accepted,
    Rejected,
    RejectCode,
    normalize,
    validate_word,
)

__all__ = [
    "can_spell",
    "possible_words",
    "Accepted",
    "Rejected",
    "RejectCode",
    "normalize",
    "validate_word",
]
