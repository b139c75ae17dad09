import numpy as np
import pytest
from wordscramble.engine import can_spell, possible_words, validate_word, normalize, RejectCode
from wordscramble.engine.letters import count_matrix, letter_counts
from wordscramble.engine.validation import Accepted, Rejected

REAL = {"silk", "worm", "milk", "work", "slow", "wis", "silkworm", "abc"}


def _is_real(word):
    return word in REAL


# --- multiset spelling ---
@pytest.mark.parametrize("word,root,expected", [
    ("wis", "silkworm", True),
    ("ssilk", "silkworm", False),     # only one 's' in the root
    ("silkworm", "silkworm", True),
    ("worms", "silkworm", True),
    ("mommy", "silkworm", False),
    ("", "silkworm", True),
    ("letter", "letters", True),
    ("tttt", "letters", False),
])
def test_can_spell(word, root, expected):
    assert can_spell(word, root) is expected


def test_letter_counts_and_matrix():
    v = letter_counts("silkworm")
    assert v.sum() == 8 and v[ord("s") - ord("a")] == 1
    words, M = count_matrix(["Silk", "can't", "", "worm", "éclair"])
    assert words == ["silk", "worm"]
    assert M.shape == (2, 26)
    with pytest.raises(ValueError):
        letter_counts("can't")


def test_count_matrix_empty():
    words, M = count_matrix([])
    assert words == [] and M.shape == (0, 26)


def test_possible_words_agrees_with_can_spell():
    vocab = ["wis", "ssilk", "Milk", "milk", "x1", "worm", "mommy", "sir"]
    got = possible_words("silkworm", vocab)
    assert got == ["wis", "milk", "worm", "sir"]
    for w in got:
        assert can_spell(w, "silkworm")


def test_possible_words_exclude_and_min_length():
    vocab = ["is", "wis", "silk", "worm"]
    assert possible_words("silkworm", vocab, exclude=["silk"], min_length=3) == ["wis", "worm"]
    assert possible_words("silkworm", []) == []


# --- pipeline ---
def test_normalize():
    assert normalize("  CAT \n") == "cat"


@pytest.mark.parametrize("candidate,used,code", [
    ("", [], RejectCode.BLANK_INPUT),
    ("   \n", [], RejectCode.BLANK_INPUT),
    ("ab", [], RejectCode.TOO_SHORT),
    ("zz", [], RejectCode.TOO_SHORT),           # length before spelling
    ("silk", ["silk"], RejectCode.ALREADY_USED),
    ("  SILK ", ["silk"], RejectCode.ALREADY_USED),
    ("ssilk", [], RejectCode.NOT_CONSTRUCTIBLE),
    ("zebra", [], RejectCode.NOT_CONSTRUCTIBLE),
    ("mows", [], RejectCode.NOT_A_REAL_WORD),
])
def test_validate_word_rejections(candidate, used, code):
    out = validate_word(candidate, "silkworm", used, _is_real)
    assert isinstance(out, Rejected)
    assert out.code == code
    assert out.accepted is False


def test_validate_word_accepts_normalized():
    out = validate_word("  WIS ", "silkworm", [], _is_real)
    assert out == Accepted("wis")
    assert out.accepted is True


def test_min_length_boundary_passes_at_three():
    # "abc" clears the length rule and fails later on spelling
    out = validate_word("abc", "silkworm", [], _is_real)
    assert out.code == RejectCode.NOT_CONSTRUCTIBLE
    assert validate_word("abc", "cabbage", [], _is_real) == Accepted("abc")


def test_root_word_itself_is_not_special_cased():
    assert validate_word("silkworm", "silkworm", [], _is_real) == Accepted("silkworm")


def test_pipeline_short_circuits_before_spell_check():
    calls = []

    def spy(word):
        calls.append(word)
        return True

    for bad in ["", "ab", "zebra"]:
        validate_word(bad, "silkworm", [], spy)
    validate_word("silk", "silkworm", ["silk"], spy)
    assert calls == []

    validate_word("silk", "silkworm", [], spy)
    assert calls == ["silk"]


def test_rejection_messages_table():
    def msg(candidate, used=()):
        out = validate_word(candidate, "silkworm", list(used), _is_real)
        return out.title, out.message

    assert msg("") == ("Warning", "The field is blank")
    assert msg("ab") == ("word with minimum size", "The word must contain at least 3 characters")
    assert msg("silk", ["silk"]) == ("Word used already", "Be more original")
    assert msg("zebra") == ("Word not possible", "You can't spell that word from 'silkworm'!")
    assert msg("mows") == ("Word not recognized", "You can't just make them up, you know!")


def test_reject_code_values():
    assert [c.value for c in RejectCode] == [
        "BlankInput", "TooShort", "AlreadyUsed", "NotConstructible", "NotARealWord",
    ]
    assert isinstance(letter_counts("abc"), np.ndarray)


def test_possible_words_ignores_non_letters_in_root():
    # 'é' and '-' can't be spent, but the plain letters still can
    assert possible_words("café-bar", ["bar", "car", "cafe", "fab"]) == ["bar", "car", "fab"]
    assert possible_words("don't-care", ["care", "trade", "dont"]) == ["care", "trade", "dont"]
