from .validator import validate_start_words, pretty_summary
from .io import read_lines, read_words, write_words
from .source import DEFAULT_START_WORDS, DictionarySource

__all__ = [
    "validate_start_words",
    "pretty_summary",
    "read_lines",
    "read_words",
    "write_words",
    "DictionarySource",
    "DEFAULT_START_WORDS",
]
