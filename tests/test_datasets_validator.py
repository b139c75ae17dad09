from pathlib import Path
import pytest
from wordscramble.datasets import (
    DEFAULT_START_WORDS,
    DictionarySource,
    pretty_summary,
    read_words,
    validate_start_words,
    write_words,
)
from wordscramble.game import DictionaryUnavailableError


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_validate_start_words_happy_path(tmp_path: Path):
    p = tmp_path / "start.txt"
    _write(p, ["silkworm", "catalyst", "lyricist"])

    rep = validate_start_words(str(p))
    assert rep["passed"] is True
    assert rep["count"] == 3 and rep["unique_count"] == 3
    assert len(rep["sha256"]) == 64
    s = pretty_summary(rep)
    assert "start=3" in s and s.endswith("OK")


def test_validate_start_words_flags_errors(tmp_path: Path):
    p = tmp_path / "start.txt"
    # uppercase, too short, non-alpha, blank line, duplicate
    p.write_text("silkworm\nCATALYST\ncat\nsilk-worm\n\nsilkworm\n", encoding="utf-8")

    rep = validate_start_words(str(p))
    assert rep["passed"] is False
    assert rep["invalid_lines"] == 4
    assert any("invalid" in msg for msg in rep["issues"])
    assert any("duplicate" in msg for msg in rep["issues"])
    assert pretty_summary(rep).endswith("FAIL")


def test_validate_start_words_missing(tmp_path: Path):
    rep = validate_start_words(str(tmp_path / "missing.txt"))
    assert rep["exists"] is False and rep["passed"] is False
    assert any("not found" in msg for msg in rep["issues"])


def test_bundled_start_words_are_valid():
    rep = validate_start_words(str(DEFAULT_START_WORDS), min_length=8)
    assert rep["passed"] is True, rep["issues"]
    assert "silkworm" in DictionarySource().word_pool()


def test_source_reads_once_and_normalizes(tmp_path: Path):
    p = tmp_path / "start.txt"
    _write(p, ["  Silkworm ", "", "catalyst"])
    src = DictionarySource(p)
    assert src.word_pool() == ("silkworm", "catalyst")

    p.unlink()  # cached: no second read
    assert src.word_pool() == ("silkworm", "catalyst")


def test_source_in_memory():
    assert DictionarySource(words=["A", " b "]).word_pool() == ("a", "b")


@pytest.mark.parametrize("lines", [[], ["", "   "]])
def test_source_empty_is_unavailable(tmp_path: Path, lines):
    p = tmp_path / "start.txt"
    p.write_text("\n".join(lines), encoding="utf-8")
    with pytest.raises(DictionaryUnavailableError):
        DictionarySource(p).word_pool()


def test_source_missing_is_unavailable(tmp_path: Path):
    with pytest.raises(DictionaryUnavailableError):
        DictionarySource(tmp_path / "nope.txt").word_pool()
    with pytest.raises(DictionaryUnavailableError):
        DictionarySource(words=[]).word_pool()


def test_read_write_words(tmp_path: Path):
    out = write_words(["silk", "worm"], tmp_path / "sub" / "w.txt")
    assert read_words(out) == ["silk", "worm"]
