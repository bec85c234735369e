"""Scoring models and alignment algorithms."""

from .substitution import SubstitutionMatrix, read_ncbi_matrix, blosum62
from .profile import FrequencyProfile, Profile, build_frequency_profile
from .hmm import HMM, HMMNode
from .base import PairwiseAligner
from .needleman_wunsch import NeedlemanWunschAligner, needleman_wunsch


__all__ = [
    "SubstitutionMatrix",
    "read_ncbi_matrix",
    "blosum62",
    "FrequencyProfile",
    "Profile",
    "build_frequency_profile",
    "HMM",
    "HMMNode",
    "PairwiseAligner",
    "NeedlemanWunschAligner",
    "needleman_wunsch",
]
