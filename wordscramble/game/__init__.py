from .controller import GameController
from .errors import DictionaryUnavailableError, GameConfigError, SpellCheckerUnavailableError
from .state import ErrorState, GameSnapshot, GameState

__all__ = [
    "GameController",
    "GameState",
    "GameSnapshot",
    "ErrorState",
    "GameConfigError",
    "DictionaryUnavailableError",
    "SpellCheckerUnavailableError",
]
