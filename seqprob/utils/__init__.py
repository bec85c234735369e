"""Input/output helpers."""

from .fasta import read_fasta, frequency_profile_from_fasta
from .serialization import (
    hmm_to_dict,
    hmm_from_dict,
    save_hmm,
    load_hmm,
    profile_to_dict,
    profile_from_dict,
)


__all__ = [
    "read_fasta",
    "frequency_profile_from_fasta",
    "hmm_to_dict",
    "hmm_from_dict",
    "save_hmm",
    "load_hmm",
    "profile_to_dict",
    "profile_from_dict",
]
