"""Unit tests for substitution matrices."""

from __future__ import annotations

import numpy as np
import pytest

from seqprob.algorithms.substitution import (
    SubstitutionMatrix,
    blosum62,
    read_ncbi_matrix,
)
from seqprob.errors import UnrecognizedResidueError
from seqprob.types import ALPHA_BLOSUM62, Alphabet


def test_blosum62_alphabet_matches_default_profile_alphabet():
    """NCBI's '*' column is exposed as the gap residue."""
    assert blosum62().alphabet == ALPHA_BLOSUM62
    assert blosum62().name == "BLOSUM62"


@pytest.mark.parametrize(
    "a, b, score",
    [
        ("A", "A", 4),
        ("W", "W", 11),
        ("C", "C", 9),
        ("X", "X", -1),
        ("A", "W", -3),
        ("B", "D", 4),
        ("-", "-", 1),
        ("A", "-", -4),
    ],
)
def test_blosum62_known_scores(a, b, score):
    assert blosum62().lookup(a, b) == score


def test_blosum62_is_symmetric():
    scores = blosum62().scores
    assert np.array_equal(scores, scores.T)


def test_blosum62_is_cached():
    assert blosum62() is blosum62()


def test_encode_rejects_unknown_residue():
    with pytest.raises(UnrecognizedResidueError):
        blosum62().encode("AJ")
    assert blosum62().encode("AR") == [0, 1]


def test_matrix_must_be_square_over_alphabet():
    with pytest.raises(ValueError):
        SubstitutionMatrix(Alphabet("AC"), np.zeros((2, 3)))


def test_read_ncbi_matrix(tmp_path):
    path = tmp_path / "toy.txt"
    path.write_text("# toy matrix\n   A  C  *\nA  2 -1 -3\nC -1  2 -3\n* -3 -3  1\n")

    matrix = read_ncbi_matrix(path)

    assert matrix.name == "toy"
    assert str(matrix.alphabet) == "AC-"
    assert matrix.lookup("C", "A") == -1
    assert matrix.lookup("-", "-") == 1
    assert matrix.rows() == [[2, -1, -3], [-1, 2, -3], [-3, -3, 1]]


def test_read_ncbi_matrix_rejects_short_rows(tmp_path):
    path = tmp_path / "bad.txt"
    path.write_text("   A  C\nA  2\nC -1  2\n")
    with pytest.raises(ValueError):
        read_ncbi_matrix(path)
