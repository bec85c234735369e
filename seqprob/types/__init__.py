"""Types for the project."""

from .alphabet import (
    Residue,
    Alphabet,
    ALPHA_BLOSUM62,
    ALPHA_AMINO,
    ALPHA_DNA,
    ALPHA_RNA,
)
from .probability import Probability, MIN_PROB
from .tables import HMMState, EmissionTable, TransitionTable
from .sequence import Sequence, as_sequence
from .alignment import Alignment, AlignmentResult


__all__ = [
    "Residue",
    "Alphabet",
    "ALPHA_BLOSUM62",
    "ALPHA_AMINO",
    "ALPHA_DNA",
    "ALPHA_RNA",
    "Probability",
    "MIN_PROB",
    "HMMState",
    "EmissionTable",
    "TransitionTable",
    "Sequence",
    "as_sequence",
    "Alignment",
    "AlignmentResult",
]
