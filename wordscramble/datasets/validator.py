"""
Start-word list validator.

What this module does:
- Check a root-word list (one word per line) before a game or batch uses it.
- Enforce formatting rules (lowercase, a-z only, at least `min_length` long).
- Detect duplicates and invalid lines; compute SHA-256 of the raw file.
- Return a machine-readable dict (for manifests) and a one-line summary.

Typical use:
    from wordscramble.datasets import validate_start_words, pretty_summary
    rep = validate_start_words("wordscramble/datasets/data/start.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib

# Root words shorter than this leave too few letters to play with.
DEFAULT_MIN_LENGTH = 6


@dataclass
class StartWordsReport:
    path: str
    exists: bool
    count: int           # valid words after cleaning
    unique_count: int
    invalid_lines: int
    sha256: str          # raw file bytes; empty if missing
    min_length: int
    passed: bool
    issues: List[str]


def _sha256_file(path: Path) -> str:
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path, min_length: int) -> Tuple[List[str], int]:
    """
    Returns (valid_words, invalid_count). Blank lines count as invalid.
    """
    valid: List[str] = []
    invalid = 0
    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if w and w == w.lower() and w.isascii() and w.isalpha() and len(w) >= min_length:
                valid.append(w)
            else:
                invalid += 1
    return valid, invalid


def validate_start_words(path: str, min_length: int = DEFAULT_MIN_LENGTH) -> Dict:
    """
    Validate a start-word list.

    `passed` is strict: file exists, non-empty, no invalid lines, no duplicates.
    """
    p = Path(path)
    issues: List[str] = []

    if not p.exists():
        issues.append(f"start words file not found: {path}")
        rep = StartWordsReport(str(p), False, 0, 0, 0, "", min_length, False, issues)
        return asdict(rep)

    words, invalid = _load_and_check(p, min_length)
    unique = len(set(words))

    if not words:
        issues.append("start words file contains 0 valid words")
    if invalid:
        issues.append(f"start words has {invalid} invalid line(s)")
    if unique != len(words):
        issues.append("start words contains duplicate lines")

    rep = StartWordsReport(
        path=str(p),
        exists=True,
        count=len(words),
        unique_count=unique,
        invalid_lines=invalid,
        sha256=_sha256_file(p),
        min_length=min_length,
        passed=not issues,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Example:
        start=120 (uniq=120, sha=abc123def456) | min_len=6 | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"start={report['count']} (uniq={report['unique_count']}, sha={sha}) "
        f"| min_len={report['min_length']} | {status}"
    )
