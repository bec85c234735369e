"""
Emission and transition tables for profiles and Plan7 HMMs.

Emission tables map every residue of an alphabet to a ``Probability``; they
are backed by a float array laid out in alphabet order so lookups are an index
into a precomputed position. Transition tables hold the seven Plan7
transitions of a node (there is no insertion<->deletion transition).
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum
from typing import Dict, Iterator, Mapping, Tuple

import numpy as np

from seqprob.errors import FrozenTableError
from seqprob.types.alphabet import Alphabet, Residue
from seqprob.types.probability import MIN_PROB, MIN_PROB_VALUE, Probability


class HMMState(Enum):
    """States of the Plan7 architecture."""

    MATCH = 0
    DELETION = 1
    INSERTION = 2
    BEGIN = 3
    END = 4


class EmissionTable:
    """Emission probabilities (log-odds) keyed by residue."""

    __slots__ = ("alphabet", "_values")

    def __init__(self, alphabet: Alphabet):
        self.alphabet = alphabet
        self._values = np.full(len(alphabet), MIN_PROB_VALUE, dtype=np.float64)

    @classmethod
    def from_values(cls, alphabet: Alphabet, values: np.ndarray) -> "EmissionTable":
        """Build a table from raw scores given in alphabet order."""
        values = np.asarray(values, dtype=np.float64)
        if values.shape != (len(alphabet),):
            raise ValueError(
                f"expected {len(alphabet)} emission values, got shape {values.shape}"
            )
        table = cls(alphabet)
        table._values[:] = values
        return table

    @classmethod
    def from_dict(
        cls, alphabet: Alphabet, mapping: Mapping[Residue, object]
    ) -> "EmissionTable":
        """Build a table from residue -> Probability (or its text form).

        Residues of the alphabet absent from ``mapping`` keep the minimum
        probability.
        """
        table = cls(alphabet)
        for residue, prob in mapping.items():
            if not isinstance(prob, Probability):
                prob = Probability.parse(str(prob))
            table[residue] = prob
        return table

    def emit_prob(self, residue: Residue) -> Probability:
        """Return the emission probability for ``residue``."""
        return self[residue]

    def values(self) -> np.ndarray:
        """Read-only view of the raw scores in alphabet order."""
        view = self._values.view()
        view.flags.writeable = False
        return view

    def items(self) -> Iterator[Tuple[Residue, Probability]]:
        for residue, value in zip(self.alphabet, self._values):
            yield residue, Probability(value)

    def copy(self) -> "EmissionTable":
        """Return an independent, writable copy."""
        return EmissionTable.from_values(self.alphabet, self._values.copy())

    def freeze(self) -> None:
        """Make the table read-only."""
        self._values.flags.writeable = False

    @property
    def frozen(self) -> bool:
        return not self._values.flags.writeable

    def to_dict(self) -> Dict[str, str]:
        """Residue -> textual probability ("*" for the minimum)."""
        return {residue: str(prob) for residue, prob in self.items()}

    def __getitem__(self, residue: Residue) -> Probability:
        return Probability(self._values[self.alphabet.index(residue)])

    def __setitem__(self, residue: Residue, prob: Probability) -> None:
        position = self.alphabet.index(residue)
        if self.frozen:
            raise FrozenTableError(residue)
        self._values[position] = float(prob)

    def __contains__(self, residue: object) -> bool:
        return residue in self.alphabet

    def __iter__(self) -> Iterator[Residue]:
        return iter(self.alphabet)

    def __len__(self) -> int:
        return len(self.alphabet)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EmissionTable):
            return NotImplemented
        return self.alphabet == other.alphabet and np.array_equal(
            self._values, other._values
        )

    __hash__ = None

    def __repr__(self) -> str:
        return f"EmissionTable({self.to_dict()})"


@dataclass(frozen=True)
class TransitionTable:
    """Plan7 transition probabilities from one node to the next.

    ID and DI are omitted.
    """

    mm: Probability = MIN_PROB
    mi: Probability = MIN_PROB
    md: Probability = MIN_PROB
    im: Probability = MIN_PROB
    ii: Probability = MIN_PROB
    dm: Probability = MIN_PROB
    dd: Probability = MIN_PROB

    @classmethod
    def terminal(cls) -> "TransitionTable":
        """Transitions that only allow leaving through the match state."""
        certain = Probability(0.0)
        return cls(
            mm=certain,
            mi=MIN_PROB,
            md=MIN_PROB,
            im=certain,
            ii=MIN_PROB,
            dm=certain,
            dd=MIN_PROB,
        )

    @classmethod
    def from_dict(cls, mapping: Mapping[str, object]) -> "TransitionTable":
        """Build from keys MM, MI, MD, IM, II, DM, DD (any case)."""
        names = {f.name for f in fields(cls)}
        values = {}
        for key, prob in mapping.items():
            name = key.lower()
            if name not in names:
                raise ValueError(f"unknown transition '{key}'")
            if not isinstance(prob, Probability):
                prob = Probability.parse(str(prob))
            values[name] = prob
        return cls(**values)

    def as_tuple(self) -> Tuple[Probability, ...]:
        """Values in (MM, MI, MD, IM, II, DM, DD) order."""
        return tuple(getattr(self, f.name) for f in fields(self))

    def to_dict(self) -> Dict[str, str]:
        return {f.name.upper(): str(getattr(self, f.name)) for f in fields(self)}


__all__ = ["HMMState", "EmissionTable", "TransitionTable"]
