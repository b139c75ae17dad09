from __future__ import annotations
from pathlib import Path
from typing import Iterable, List


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of raw lines (no CR/LF).
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return p.read_text(encoding="utf-8").splitlines()


def read_words(p: Path | str) -> List[str]:
    """
    Read a one-word-per-line list: strip, lowercase, drop blank lines.
    Order and duplicates are kept as in the file.
    """
    return [ln.strip().lower() for ln in read_lines(p) if ln.strip()]


def write_words(words: Iterable[str], p: Path | str) -> str:
    """
    Write one word per line (UTF-8, trailing newline), creating parent dirs.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(words) + "\n", encoding="utf-8")
    return str(p)
