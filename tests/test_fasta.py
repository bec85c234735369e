"""Unit tests for FASTA input."""

from __future__ import annotations

import pytest

from seqprob.errors import LengthMismatchError
from seqprob.types import ALPHA_DNA
from seqprob.utils.fasta import frequency_profile_from_fasta, read_fasta

FASTA = """>seq1 first record
AC-GT
>seq2
AC.GA
>seq3 third
ACNGT
"""


@pytest.fixture
def fasta_path(tmp_path):
    path = tmp_path / "toy.fasta"
    path.write_text(FASTA)
    return path


def test_read_fasta_records(fasta_path):
    sequences = read_fasta(str(fasta_path))

    assert [seq.identifier for seq in sequences] == ["seq1", "seq2", "seq3"]
    assert sequences[0].description == "first record"
    assert sequences[1].description is None
    assert str(sequences[0]) == "AC-GT"
    assert not sequences[0].aligned


def test_read_fasta_converts_dots_to_gaps(fasta_path):
    sequences = read_fasta(str(fasta_path))
    assert str(sequences[1]) == "AC-GA"
    assert sequences[1].gap_count() == 1


def test_read_fasta_filters_ids(fasta_path):
    sequences = read_fasta(str(fasta_path), ids=["seq3", "missing"], aligned=True)
    assert [seq.identifier for seq in sequences] == ["seq3"]
    assert sequences[0].aligned


def test_frequency_profile_from_fasta(fasta_path):
    profile = frequency_profile_from_fasta(str(fasta_path), ALPHA_DNA)

    assert len(profile) == 5
    assert profile.column(0)["A"] == 3
    assert profile.column(2) == {"A": 0, "C": 0, "G": 0, "T": 0, "N": 1, "-": 2}
    assert profile.column(4)["T"] == 2
    assert profile.total(4) == 3


def test_frequency_profile_from_fasta_rejects_ragged_input(tmp_path):
    path = tmp_path / "ragged.fasta"
    path.write_text(">a\nACGT\n>b\nACG\n")
    with pytest.raises(LengthMismatchError):
        frequency_profile_from_fasta(str(path), ALPHA_DNA)
