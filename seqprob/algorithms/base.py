"""Shared interfaces for pairwise alignment algorithms."""

from __future__ import annotations

from abc import ABC, abstractmethod

from seqprob.types import AlignmentResult
from seqprob.types.sequence import SequenceLike


class PairwiseAligner(ABC):
    """Abstract base class for pairwise alignment algorithms."""

    @abstractmethod
    def align(self, a_seq: SequenceLike, b_seq: SequenceLike) -> AlignmentResult:
        """Align two sequences."""
        raise NotImplementedError


__all__ = ["PairwiseAligner"]
