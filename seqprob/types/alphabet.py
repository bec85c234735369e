"""Residue alphabets."""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, Optional, Tuple

from seqprob.constants import GAP, WILDCARD
from seqprob.errors import UnrecognizedResidueError

Residue = str


class Alphabet:
    """An ordered, duplicate-free set of single-character residues.

    The order only fixes table layout; equality requires the same residues in
    the same order.
    """

    __slots__ = ("_residues", "_index")

    def __init__(self, residues: Iterable[Residue]):
        symbols: Tuple[Residue, ...] = tuple(residues)
        bad = [r for r in symbols if not isinstance(r, str) or len(r) != 1]
        if bad:
            raise ValueError(f"Residues must be single characters, got {bad}")
        duplicates = sorted({r for r in symbols if symbols.count(r) > 1})
        if duplicates:
            raise ValueError(f"Alphabet has duplicate residues: {duplicates}")

        self._residues = symbols
        self._index: Dict[Residue, int] = {r: i for i, r in enumerate(symbols)}

    @property
    def residues(self) -> Tuple[Residue, ...]:
        return self._residues

    @property
    def wildcard(self) -> Optional[Residue]:
        """The wildcard residue, if this alphabet defines one."""
        return WILDCARD if WILDCARD in self._index else None

    def index(self, residue: Residue) -> int:
        """Return the row of ``residue`` in tables built on this alphabet."""
        try:
            return self._index[residue]
        except KeyError:
            raise UnrecognizedResidueError(residue, self) from None

    def __contains__(self, residue: object) -> bool:
        return residue in self._index

    def __len__(self) -> int:
        return len(self._residues)

    def __iter__(self) -> Iterator[Residue]:
        return iter(self._residues)

    def __getitem__(self, position: int) -> Residue:
        return self._residues[position]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Alphabet):
            return NotImplemented
        return self._residues == other._residues

    def __hash__(self) -> int:
        return hash(self._residues)

    def __str__(self) -> str:
        return "".join(self._residues)

    def __repr__(self) -> str:
        return f"Alphabet('{self}')"


# Row order of the packaged BLOSUM62 matrix, with '-' in place of NCBI's '*'.
ALPHA_BLOSUM62 = Alphabet("ARNDCQEGHILKMFPSTWYVBZX" + GAP)
ALPHA_AMINO = Alphabet("ACDEFGHIKLMNPQRSTVWY")
ALPHA_DNA = Alphabet("ACGTN" + GAP)
ALPHA_RNA = Alphabet("ACGUN" + GAP)


__all__ = [
    "Residue",
    "Alphabet",
    "ALPHA_BLOSUM62",
    "ALPHA_AMINO",
    "ALPHA_DNA",
    "ALPHA_RNA",
]
