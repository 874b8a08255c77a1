"""
Testing guess normalization and validation.
"""

import pytest

from game.errors import GuessError, InvalidSymbolError, LengthError
from game.guess import Guess, normalize, validate

ALPHABET = "ABCDEF"


def test_validate_normalizes_case_and_whitespace():
    assert validate("  abcd \n", ALPHABET, 4) == "ABCD"


def test_validate_is_idempotent():
    once = validate("fade", ALPHABET, 4)

    assert validate(once, ALPHABET, 4) == once


def test_validate_rejects_short_guess():
    with pytest.raises(LengthError) as exc:
        validate("ABC", ALPHABET, 4)

    assert exc.value.expected == 4
    assert exc.value.actual == 3
    assert "exactly 4 symbols" in str(exc.value)


def test_validate_rejects_long_guess():
    with pytest.raises(LengthError):
        validate("ABCDE", ALPHABET, 4)


def test_validate_rejects_unknown_symbol():
    with pytest.raises(InvalidSymbolError) as exc:
        validate("ABZD", ALPHABET, 4)

    assert exc.value.symbol == "Z"
    assert "'Z'" in str(exc.value)
    assert "ABCDEF" in str(exc.value)


def test_length_is_checked_before_symbols():
    with pytest.raises(LengthError):
        validate("ZZ", ALPHABET, 4)


def test_inner_whitespace_is_not_stripped():
    with pytest.raises(InvalidSymbolError) as exc:
        validate("A BC", ALPHABET, 4)

    assert exc.value.symbol == " "


def test_errors_are_value_errors():
    assert issubclass(LengthError, GuessError)
    assert issubclass(InvalidSymbolError, GuessError)
    assert issubclass(GuessError, ValueError)


def test_normalize():
    assert normalize(" \tbead ") == "BEAD"


def test_guess_object():
    guess = Guess("cafe")

    assert guess.get_guess() == ["C", "A", "F", "E"]
    assert guess.as_string() == "CAFE"
    assert str(guess) == "CAFE"
