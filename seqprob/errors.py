"""Exceptions raised by seqprob.

Every error derives from ``SeqProbError`` which is itself a ``ValueError``:
all of them signal a violated data contract, never a transient condition.
The expected and actual values are kept as attributes so callers can report
them without parsing the message.
"""

from __future__ import annotations

from typing import Any, Optional


class SeqProbError(ValueError):
    """Base exception for all seqprob errors.

    Args:
        message: What went wrong
        expected: Value the operation required
        actual: Value the operation received
    """

    def __init__(
        self,
        message: str,
        expected: Optional[Any] = None,
        actual: Optional[Any] = None,
    ):
        self.message = message
        self.expected = expected
        self.actual = actual
        super().__init__(self.formatted())

    def formatted(self) -> str:
        """Return the message with expected/actual context appended."""
        msg = self.message
        if self.expected is not None or self.actual is not None:
            msg += f" (expected: {self.expected!r}, actual: {self.actual!r})"
        return msg

    def __str__(self) -> str:
        return self.formatted()


class LengthMismatchError(SeqProbError):
    """Sequence length differs from the number of profile columns."""

    def __init__(self, expected: int, actual: int):
        super().__init__(
            f"Profile has length {expected} but sequence has length {actual}",
            expected=expected,
            actual=actual,
        )


class AlphabetMismatchError(SeqProbError):
    """Two models were combined while using different alphabets."""

    def __init__(self, expected: Any, actual: Any, context: str = "alphabet"):
        super().__init__(
            f"{context} '{actual}' is not equal to '{expected}'",
            expected=str(expected),
            actual=str(actual),
        )


class ColumnCountMismatchError(SeqProbError):
    """A null (background) model does not have exactly one column."""

    def __init__(self, actual: int, expected: int = 1):
        super().__init__(
            f"null model has {actual} columns; should have {expected}",
            expected=expected,
            actual=actual,
        )


class UnrecognizedResidueError(SeqProbError, KeyError):
    """A residue is not part of the alphabet and no wildcard can stand in."""

    def __init__(self, residue: Any, alphabet: Any):
        self.residue = residue
        self.alphabet = alphabet
        super().__init__(
            f"Unrecognized residue {residue!r} for alphabet '{alphabet}'",
            expected=str(alphabet),
            actual=residue,
        )


class RangeError(SeqProbError, IndexError):
    """Slice or node bounds fall outside the model."""


class ProbabilityParseError(SeqProbError):
    """Text cannot be read as a log probability."""

    def __init__(self, text: Any, reason: str = ""):
        self.text = text
        message = f"Could not convert {text!r} to a log probability"
        if reason:
            message += f": {reason}"
        super().__init__(message, expected="decimal float or '*'", actual=text)


class FrozenTableError(SeqProbError):
    """An emission table was written to after it had been frozen."""

    def __init__(self, residue: Any):
        super().__init__(
            f"cannot set emission for {residue!r}: table is frozen",
            actual=residue,
        )


__all__ = [
    "SeqProbError",
    "LengthMismatchError",
    "AlphabetMismatchError",
    "ColumnCountMismatchError",
    "UnrecognizedResidueError",
    "RangeError",
    "ProbabilityParseError",
    "FrozenTableError",
]
