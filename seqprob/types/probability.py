"""Log-odds probabilities.

Scores live in negative log space: a larger raw value is a *less* probable
event. ``Probability`` wraps the raw float so the inverted ordering is only
reachable through ``less`` and never through ``<``/``>``.
"""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass

from seqprob.constants import MIN_PROB_MARKER
from seqprob.errors import ProbabilityParseError


@dataclass(frozen=True)
class Probability:
    """A transition or emission probability as a log-odds score."""

    value: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", float(self.value))

    @classmethod
    def parse(cls, text: str) -> "Probability":
        """Read a probability from hmm/hhm style text.

        ``"*"`` is the minimum probability; anything else must be a float.
        """
        if text == MIN_PROB_MARKER:
            return MIN_PROB
        try:
            return cls(float(text))
        except (TypeError, ValueError) as exc:
            raise ProbabilityParseError(text, str(exc)) from exc

    def less(self, other: "Probability") -> bool:
        """True if ``self`` represents a smaller probability than ``other``."""
        return self.value > other.value

    def is_min(self) -> bool:
        """True if this is the minimum probability."""
        return self.value == MIN_PROB_VALUE

    def ratio(self) -> float:
        """Return the probability as a ratio in [0, 1]."""
        if self.is_min():
            return 0.0
        return math.exp(-self.value)

    def distance(self, other: "Probability") -> float:
        """Absolute difference between the raw scores."""
        return abs(self.value - other.value)

    def __float__(self) -> float:
        return self.value

    def __str__(self) -> str:
        if self.is_min():
            return MIN_PROB_MARKER
        return repr(self.value)


# Max in negative log space is minimum probability.
MIN_PROB_VALUE = sys.float_info.max
MIN_PROB = Probability(MIN_PROB_VALUE)


__all__ = ["Probability", "MIN_PROB", "MIN_PROB_VALUE"]
