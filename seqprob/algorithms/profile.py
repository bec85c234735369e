"""
Sequence profiles: raw residue frequencies and their log-odds conversion.

A ``FrequencyProfile`` tallies, column by column, the residues of equal-length
(aligned) sequences. It is an intermediate representation: once counting is
done, ``FrequencyProfile.to_profile`` turns it into a ``Profile`` of log-odds
emission scores against a null model, which is itself a frequency profile with
a single column (background composition):

    score(column, r) = -ln( (count(column, r) / total(column))
                            / (null(r) / total(null)) )

Residues never observed in the column, or absent from the null model, get the
minimum probability instead of a logarithm of zero. Neither alphabet is
restricted: gap characters may appear in it and are counted like any other
residue.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Sequence as TypingSequence

import numpy as np

from seqprob.constants import PROFILE_DECIMALS, TABLE_MIN_WIDTH, TABLE_PADDING
from seqprob.errors import (
    AlphabetMismatchError,
    ColumnCountMismatchError,
    LengthMismatchError,
    UnrecognizedResidueError,
)
from seqprob.logging_config import get_logger
from seqprob.types.alphabet import ALPHA_BLOSUM62, Alphabet, Residue
from seqprob.types.probability import MIN_PROB_VALUE
from seqprob.types.sequence import Sequence, SequenceLike
from seqprob.types.tables import EmissionTable

logger = get_logger(__name__)


def _render_rows(rows: List[List[str]]) -> str:
    """Lay out cells in aligned columns; the last cell of a row is unpadded."""
    widths: List[int] = []
    for row in rows:
        for i, cell in enumerate(row[:-1]):
            width = max(len(cell) + TABLE_PADDING, TABLE_MIN_WIDTH)
            if i == len(widths):
                widths.append(width)
            else:
                widths[i] = max(widths[i], width)

    lines = []
    for row in rows:
        padded = "".join(cell.ljust(widths[i]) for i, cell in enumerate(row[:-1]))
        lines.append(padded + (row[-1] if row else ""))
    return "".join(line + "\n" for line in lines)


class Profile:
    """A sequence profile in terms of log-odds scores.

    One emission table per column; the alphabet gives the rows.
    """

    def __init__(self, columns: int, alphabet: Alphabet = ALPHA_BLOSUM62):
        if columns < 0:
            raise ValueError(f"columns must be non-negative, got {columns}")
        self.alphabet = alphabet
        self.emissions: List[EmissionTable] = [
            EmissionTable(alphabet) for _ in range(columns)
        ]

    @classmethod
    def from_scores(cls, alphabet: Alphabet, scores: np.ndarray) -> "Profile":
        """Build a frozen profile from a (columns x alphabet) score array."""
        scores = np.asarray(scores, dtype=np.float64)
        if scores.ndim != 2 or scores.shape[1] != len(alphabet):
            raise ValueError(
                f"expected a (columns, {len(alphabet)}) array, got {scores.shape}"
            )
        profile = cls(0, alphabet)
        for row in scores:
            table = EmissionTable.from_values(alphabet, row)
            table.freeze()
            profile.emissions.append(table)
        return profile

    def __len__(self) -> int:
        return len(self.emissions)

    def __getitem__(self, column: int) -> EmissionTable:
        return self.emissions[column]

    def scores(self) -> np.ndarray:
        """Raw scores as a (columns x alphabet) array."""
        if not self.emissions:
            return np.empty((0, len(self.alphabet)), dtype=np.float64)
        return np.vstack([table.values() for table in self.emissions])

    def __str__(self) -> str:
        rows = []
        for residue in self.alphabet:
            row = [residue]
            for table in self.emissions:
                prob = table[residue]
                row.append(
                    str(prob) if prob.is_min() else f"{prob.value:.{PROFILE_DECIMALS}f}"
                )
            rows.append(row)
        return _render_rows(rows)


class FrequencyProfile:
    """A sequence profile in terms of raw residue counts."""

    def __init__(self, columns: int, alphabet: Alphabet = ALPHA_BLOSUM62):
        if columns < 0:
            raise ValueError(f"columns must be non-negative, got {columns}")
        self.alphabet = alphabet
        self._counts = np.zeros((columns, len(alphabet)), dtype=np.int64)

    @classmethod
    def null_profile(cls, alphabet: Alphabet = ALPHA_BLOSUM62) -> "FrequencyProfile":
        """A single-column profile for tabulating a null model."""
        return cls(1, alphabet)

    def __len__(self) -> int:
        return self._counts.shape[0]

    def column(self, column: int) -> Dict[Residue, int]:
        """Residue -> count mapping for one column."""
        return {r: int(c) for r, c in zip(self.alphabet, self._counts[column])}

    def total(self, column: int) -> int:
        """Sum of all counts in one column."""
        return int(self._counts[column].sum())

    def counts(self) -> np.ndarray:
        """Copy of the (columns x alphabet) count matrix."""
        return self._counts.copy()

    def _position(self, residue: Residue) -> int:
        if residue in self.alphabet:
            return self.alphabet.index(residue)
        wildcard = self.alphabet.wildcard
        if wildcard is not None:
            return self.alphabet.index(wildcard)
        raise UnrecognizedResidueError(residue, self.alphabet)

    def add(self, sequence: SequenceLike) -> None:
        """Count the residues of one sequence, column by column.

        The sequence must be as long as the profile. Residues outside the
        alphabet count as the wildcard when the alphabet has one. Nothing is
        counted unless every position is valid.
        """
        residues = (
            sequence.residues if isinstance(sequence, Sequence) else list(sequence)
        )
        if len(residues) != len(self):
            raise LengthMismatchError(len(self), len(residues))

        positions = np.array([self._position(r) for r in residues], dtype=np.intp)
        self._counts[np.arange(len(positions)), positions] += 1

    def add_all(self, sequences: Iterable[SequenceLike]) -> int:
        """Add every sequence; return how many were added."""
        added = 0
        for sequence in sequences:
            self.add(sequence)
            added += 1
        return added

    def to_profile(self, null: "FrequencyProfile") -> Profile:
        """Convert to log-odds scores using ``null`` as the background model."""
        if len(null) != 1:
            raise ColumnCountMismatchError(len(null))
        if self.alphabet != null.alphabet:
            raise AlphabetMismatchError(
                self.alphabet, null.alphabet, context="null profile alphabet"
            )

        null_counts = null._counts[0]
        null_total = int(null_counts.sum())
        totals = self._counts.sum(axis=1)

        scores = np.full(self._counts.shape, MIN_PROB_VALUE, dtype=np.float64)
        observed = (self._counts > 0) & (null_counts > 0)[np.newaxis, :]
        rows, cols = np.nonzero(observed)
        if rows.size:
            freqs = self._counts[rows, cols] / totals[rows]
            background = null_counts[cols] / null_total
            scores[rows, cols] = -np.log(freqs / background)

        logger.debug(
            "Converted frequency profile (%d columns, %d observed cells) "
            "against null total %d",
            len(self),
            rows.size,
            null_total,
        )
        return Profile.from_scores(self.alphabet, scores)

    def __str__(self) -> str:
        rows = []
        for position, residue in enumerate(self.alphabet):
            rows.append([residue] + [str(int(c)) for c in self._counts[:, position]])
        return _render_rows(rows)


def build_frequency_profile(
    sequences: TypingSequence[SequenceLike],
    alphabet: Alphabet = ALPHA_BLOSUM62,
) -> FrequencyProfile:
    """Tabulate equal-length sequences into a new frequency profile."""
    if not sequences:
        raise ValueError("At least one sequence is required.")
    profile = FrequencyProfile(len(sequences[0]), alphabet)
    profile.add_all(sequences)
    return profile


__all__ = ["FrequencyProfile", "Profile", "build_frequency_profile"]
