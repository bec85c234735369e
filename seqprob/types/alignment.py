"""Alignment types."""

from dataclasses import dataclass
from typing import Optional, Tuple

from seqprob.types.sequence import Sequence


@dataclass(frozen=True)
class Alignment:
    """Global pairwise alignment of two sequences."""

    a: Sequence
    b: Sequence
    name: Optional[str] = None

    def __post_init__(self):
        if not (self.a.aligned and self.b.aligned):
            raise ValueError("Both sequences of an alignment must have aligned=True.")

        if len(self.a) != len(self.b):
            raise ValueError(
                f"Aligned sequences must have the same length "
                f"({len(self.a)} != {len(self.b)})."
            )

    @property
    def columns(self) -> int:
        """Number of columns in the alignment."""
        return len(self.a)

    def as_strings(self) -> Tuple[str, str]:
        return str(self.a), str(self.b)

    def __str__(self) -> str:
        return f"{self.a}\n{self.b}"


@dataclass(frozen=True)
class AlignmentResult:
    """Result of a pairwise alignment algorithm.

    Attributes:
        alignment: The pairwise alignment of two sequences
        score: Value of the final dynamic-programming cell
    """

    alignment: Alignment
    score: float


__all__ = ["Alignment", "AlignmentResult"]
