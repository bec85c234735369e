"""Sequence types."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Union

from seqprob.constants import GAP


@dataclass(frozen=True)
class Sequence:
    """Biological sequence with an identifier and optional description.

    Residues are single-character symbols. Nothing is uppercased or
    translated: the alphabet a sequence is scored against decides what is
    valid.
    """

    identifier: str
    residues: List[str]
    description: Optional[str] = None
    aligned: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "residues", list(self.residues))
        self._validate()

    @classmethod
    def from_string(
        cls,
        text: str,
        identifier: str = "",
        description: Optional[str] = None,
        aligned: bool = False,
    ) -> "Sequence":
        return cls(
            identifier=identifier,
            residues=list(text),
            description=description,
            aligned=aligned,
        )

    def __len__(self) -> int:
        return len(self.residues)

    def __str__(self) -> str:
        return "".join(self.residues)

    def gap_count(self) -> int:
        """Number of gap symbols in the sequence."""
        return sum(1 for r in self.residues if r == GAP)

    def ungapped(self) -> "Sequence":
        """Return the sequence with gap symbols removed."""
        return Sequence(
            identifier=self.identifier,
            residues=[r for r in self.residues if r != GAP],
            description=self.description,
            aligned=False,
        )

    def _validate(self) -> None:
        invalid = [r for r in self.residues if not isinstance(r, str) or len(r) != 1]
        if invalid:
            raise ValueError(
                f"Residues must be single characters; invalid: {invalid[:5]}"
            )


SequenceLike = Union[Sequence, str, Iterable[str]]


def as_sequence(value: SequenceLike, identifier: str = "") -> Sequence:
    """Coerce a string or residue iterable into a Sequence."""
    if isinstance(value, Sequence):
        return value
    if isinstance(value, str):
        return Sequence.from_string(value, identifier=identifier)
    return Sequence(identifier=identifier, residues=list(value))


__all__ = ["Sequence", "SequenceLike", "as_sequence"]
