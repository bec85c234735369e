"""Unit tests for the error hierarchy."""

from __future__ import annotations

import pytest

from seqprob.errors import (
    AlphabetMismatchError,
    ColumnCountMismatchError,
    FrozenTableError,
    LengthMismatchError,
    ProbabilityParseError,
    RangeError,
    SeqProbError,
    UnrecognizedResidueError,
)
from seqprob.types import ALPHA_DNA


@pytest.mark.parametrize(
    "error",
    [
        LengthMismatchError(3, 4),
        AlphabetMismatchError(ALPHA_DNA, "ACGU"),
        ColumnCountMismatchError(2),
        UnrecognizedResidueError("U", ALPHA_DNA),
        RangeError("bad slice", expected="0 <= start < end <= 2", actual=(1, 1)),
        ProbabilityParseError("abc"),
        FrozenTableError("A"),
    ],
)
def test_errors_are_value_errors(error):
    """Every error is a SeqProbError and so a ValueError."""
    assert isinstance(error, SeqProbError)
    assert isinstance(error, ValueError)


def test_message_includes_expected_and_actual():
    error = LengthMismatchError(3, 4)
    assert str(error) == (
        "Profile has length 3 but sequence has length 4 (expected: 3, actual: 4)"
    )


def test_message_without_context():
    assert str(SeqProbError("plain")) == "plain"


def test_alphabet_mismatch_keeps_text_forms():
    error = AlphabetMismatchError(ALPHA_DNA, "ACGU", context="null alphabet")
    assert error.expected == "ACGTN-"
    assert error.actual == "ACGU"
    assert str(error).startswith("null alphabet 'ACGU' is not equal to 'ACGTN-'")


def test_unrecognized_residue_str_is_not_key_error_repr():
    """KeyError would quote the message; the formatted text is kept."""
    error = UnrecognizedResidueError("U", ALPHA_DNA)
    assert str(error).startswith("Unrecognized residue 'U' for alphabet 'ACGTN-'")
    assert isinstance(error, KeyError)


def test_parse_error_reason():
    error = ProbabilityParseError("x", "could not convert")
    assert "could not convert" in str(error)
    assert error.text == "x"
