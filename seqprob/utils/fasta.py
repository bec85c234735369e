"""Functions for working with FASTA files."""

from typing import Iterable, List, Optional

import skbio.io
from skbio import Sequence as SkbioSequence

from seqprob.algorithms.profile import FrequencyProfile, build_frequency_profile
from seqprob.constants import GAP
from seqprob.logging_config import get_logger
from seqprob.types import ALPHA_BLOSUM62, Alphabet, Sequence

logger = get_logger(__name__)


def sequence_from_skbio(record: SkbioSequence, aligned: bool) -> Sequence:
    """Convert a scikit-bio record to a Sequence.

    '.' gap symbols (Stockholm-derived FASTA) become '-'.
    """
    metadata = getattr(record, "metadata", {}) or {}
    identifier = metadata.get("id") or ""
    description = metadata.get("description") or None
    seq_str = b"".join(record.values).decode().replace(".", GAP)

    return Sequence(
        identifier=identifier,
        residues=list(seq_str),
        description=description,
        aligned=aligned,
    )


def read_fasta(
    file_path: str,
    ids: Optional[Iterable[str]] = None,
    aligned: bool = False,
) -> List[Sequence]:
    """Read a FASTA file into a list of Sequence.

    Args:
        file_path: Path to the FASTA file
        ids: If given, only records with these identifiers are kept
        aligned: Mark the sequences as rows of an alignment
    """
    wanted = set(ids) if ids else None
    sequences: List[Sequence] = []
    records = skbio.io.read(str(file_path), format="fasta", constructor=SkbioSequence)
    for record in records:
        if wanted is not None and record.metadata["id"] not in wanted:
            continue
        sequences.append(sequence_from_skbio(record, aligned=aligned))

    logger.debug("Read %d sequences from %s", len(sequences), file_path)
    return sequences


def frequency_profile_from_fasta(
    file_path: str, alphabet: Alphabet = ALPHA_BLOSUM62
) -> FrequencyProfile:
    """Tabulate the aligned sequences of a FASTA file into a frequency profile."""
    sequences = read_fasta(file_path, aligned=True)
    if not sequences:
        raise ValueError(f"No sequences found in {file_path}")
    return build_frequency_profile(sequences, alphabet)


__all__ = ["read_fasta", "frequency_profile_from_fasta", "sequence_from_skbio"]
