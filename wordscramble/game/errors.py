"""
Fatal configuration errors.

These are NOT gameplay failures (those are RejectCode values returned by the
validation pipeline). They mean the game has nothing to run with; library
code raises them and the app decides whether to exit or retry with another
resource.
"""


class GameConfigError(RuntimeError):
    """Base class for deployment/configuration failures."""


class DictionaryUnavailableError(GameConfigError):
    """The start word list is missing, unreadable, or empty."""


class SpellCheckerUnavailableError(GameConfigError):
    """The spell checker cannot answer for the requested language."""
