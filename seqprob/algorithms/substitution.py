"""Substitution matrices for pairwise alignment."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import List, Union

import numpy as np

from seqprob.constants import BLOSUM62_PATH, GAP, NCBI_GAP_LABEL
from seqprob.logging_config import get_logger
from seqprob.types.alphabet import Alphabet, Residue

logger = get_logger(__name__)


class SubstitutionMatrix:
    """Square score table over an alphabet."""

    def __init__(self, alphabet: Alphabet, scores: np.ndarray, name: str = ""):
        scores = np.asarray(scores, dtype=np.int64)
        size = len(alphabet)
        if scores.shape != (size, size):
            raise ValueError(
                f"Scoring matrix must be {size}x{size} for alphabet '{alphabet}', "
                f"got {scores.shape}"
            )
        self.alphabet = alphabet
        self.scores = scores
        self.name = name

    def lookup(self, a: Residue, b: Residue) -> int:
        """Score for substituting residue ``a`` with ``b``."""
        return int(self.scores[self.alphabet.index(a), self.alphabet.index(b)])

    def encode(self, residues) -> List[int]:
        """Map residues to matrix rows."""
        return [self.alphabet.index(r) for r in residues]

    def rows(self) -> List[List[int]]:
        """Scores as nested Python lists, for tight DP loops."""
        return self.scores.tolist()

    def __repr__(self) -> str:
        return f"SubstitutionMatrix(name={self.name!r}, alphabet='{self.alphabet}')"


def read_ncbi_matrix(path: Union[str, Path], name: str = "") -> SubstitutionMatrix:
    """Read a matrix in NCBI text format.

    Lines starting with '#' are comments; the first remaining line is the
    column header. The '*' row/column is exposed as the gap residue.
    """
    path = Path(path)
    with path.open("r", encoding="utf-8") as handle:
        lines = [
            line.strip()
            for line in handle
            if line.strip() and not line.lstrip().startswith("#")
        ]

    header = [GAP if c == NCBI_GAP_LABEL else c for c in lines[0].split()]
    alphabet = Alphabet(header)
    scores = np.zeros((len(header), len(header)), dtype=np.int64)
    for row in lines[1:]:
        parts = row.split()
        residue = GAP if parts[0] == NCBI_GAP_LABEL else parts[0]
        values = [int(v) for v in parts[1:]]
        if len(values) != len(header):
            raise ValueError(
                f"{path}: row '{parts[0]}' has {len(values)} scores, "
                f"expected {len(header)}"
            )
        scores[alphabet.index(residue)] = values

    logger.debug(
        "Loaded %s matrix from %s (%d residues)", name or path.stem, path, len(header)
    )
    return SubstitutionMatrix(alphabet, scores, name=name or path.stem)


@lru_cache(maxsize=1)
def blosum62() -> SubstitutionMatrix:
    """The packaged NCBI BLOSUM62 matrix."""
    return read_ncbi_matrix(BLOSUM62_PATH, name="BLOSUM62")


__all__ = ["SubstitutionMatrix", "read_ncbi_matrix", "blosum62"]
