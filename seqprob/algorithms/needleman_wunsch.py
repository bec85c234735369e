"""Global pairwise alignment with the Needleman-Wunsch algorithm."""

from __future__ import annotations

from typing import List, Optional, Tuple

from seqprob.algorithms.base import PairwiseAligner
from seqprob.algorithms.substitution import SubstitutionMatrix, blosum62
from seqprob.constants import DEFAULT_GAP_SCORE, GAP
from seqprob.logging_config import get_logger
from seqprob.types import Alignment, AlignmentResult, Sequence, as_sequence
from seqprob.types.sequence import SequenceLike

logger = get_logger(__name__)

# M: residue against residue, X: residue of A against a gap,
# Y: gap against residue of B. Order is the tie-breaking priority.
TRACEBACK_STATES = ("M", "X", "Y")


class NeedlemanWunschAligner(PairwiseAligner):
    """Global alignment over a substitution matrix with a linear gap score.

    Leading end gaps (the first row and column of the score matrix) are not
    penalized unless ``penalize_leading_gaps`` is set; every other gap adds
    ``gap_score``. When predecessors tie, the traceback prefers the diagonal,
    then a gap in B, then a gap in A.
    """

    def __init__(
        self,
        matrix: Optional[SubstitutionMatrix] = None,
        gap_score: int = DEFAULT_GAP_SCORE,
        penalize_leading_gaps: bool = False,
    ) -> None:
        self.matrix = matrix if matrix is not None else blosum62()
        self.gap_score = gap_score
        self.penalize_leading_gaps = penalize_leading_gaps

    def _initialize_dp_matrices(
        self, n: int, m: int
    ) -> Tuple[List[List[int]], List[List[Optional[str]]]]:
        """Allocate the score table and its backpointer grid."""
        F = [[0] * (m + 1) for _ in range(n + 1)]
        Psi: List[List[Optional[str]]] = [[None] * (m + 1) for _ in range(n + 1)]
        return F, Psi

    def _fill_boundaries(
        self,
        F: List[List[int]],
        Psi: List[List[Optional[str]]],
        n: int,
        m: int,
    ) -> None:
        """Seed the first column and first row with pure gap runs."""
        step = self.gap_score if self.penalize_leading_gaps else 0
        for i in range(1, n + 1):
            F[i][0] = F[i - 1][0] + step
            Psi[i][0] = "X"
        for j in range(1, m + 1):
            F[0][j] = F[0][j - 1] + step
            Psi[0][j] = "Y"

    def _fill_interior(
        self,
        F: List[List[int]],
        Psi: List[List[Optional[str]]],
        a_codes: List[int],
        b_codes: List[int],
    ) -> None:
        """Run the recurrence through the interior of the grid."""
        gap = self.gap_score
        scores = self.matrix.rows()
        for i in range(1, len(a_codes) + 1):
            substitution = scores[a_codes[i - 1]]
            above, row, pointers = F[i - 1], F[i], Psi[i]
            for j in range(1, len(b_codes) + 1):
                candidates = (
                    above[j - 1] + substitution[b_codes[j - 1]],
                    above[j] + gap,
                    row[j - 1] + gap,
                )
                best = max(candidates)
                row[j] = best
                pointers[j] = TRACEBACK_STATES[candidates.index(best)]

    def _traceback(
        self,
        Psi: List[List[Optional[str]]],
        a_seq: Sequence,
        b_seq: Sequence,
    ) -> Alignment:
        """Follow backpointers from the last cell to the origin."""
        i, j = len(a_seq), len(b_seq)
        aligned_a: List[str] = []
        aligned_b: List[str] = []

        while i > 0 or j > 0:
            state = Psi[i][j]
            if state == "M":
                aligned_a.append(a_seq.residues[i - 1])
                aligned_b.append(b_seq.residues[j - 1])
                i -= 1
                j -= 1
            elif state == "X":
                aligned_a.append(a_seq.residues[i - 1])
                aligned_b.append(GAP)
                i -= 1
            else:  # state == "Y"
                aligned_a.append(GAP)
                aligned_b.append(b_seq.residues[j - 1])
                j -= 1

        aligned_a.reverse()
        aligned_b.reverse()

        return Alignment(
            a=Sequence(
                identifier=a_seq.identifier,
                residues=aligned_a,
                description=a_seq.description,
                aligned=True,
            ),
            b=Sequence(
                identifier=b_seq.identifier,
                residues=aligned_b,
                description=b_seq.description,
                aligned=True,
            ),
            name=f"NW_{a_seq.identifier}_vs_{b_seq.identifier}",
        )

    def align(self, a_seq: SequenceLike, b_seq: SequenceLike) -> AlignmentResult:
        """Compute the global alignment of ``a_seq`` against ``b_seq``."""
        a_seq = as_sequence(a_seq, identifier="a")
        b_seq = as_sequence(b_seq, identifier="b")

        a_codes = self.matrix.encode(a_seq.residues)
        b_codes = self.matrix.encode(b_seq.residues)
        n, m = len(a_codes), len(b_codes)
        logger.debug("Aligning %d x %d residues with %s", n, m, self.matrix.name)

        F, Psi = self._initialize_dp_matrices(n, m)
        self._fill_boundaries(F, Psi, n, m)
        self._fill_interior(F, Psi, a_codes, b_codes)
        alignment = self._traceback(Psi, a_seq, b_seq)

        return AlignmentResult(alignment=alignment, score=F[n][m])


def needleman_wunsch(a: SequenceLike, b: SequenceLike) -> Tuple[str, str]:
    """Align two sequences with BLOSUM62 and return the gapped strings."""
    return NeedlemanWunschAligner().align(a, b).alignment.as_strings()


__all__ = ["NeedlemanWunschAligner", "needleman_wunsch", "TRACEBACK_STATES"]
