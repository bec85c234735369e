"""Plan7 profile hidden Markov models."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from seqprob.errors import AlphabetMismatchError, RangeError
from seqprob.logging_config import get_logger
from seqprob.types.alphabet import Alphabet
from seqprob.types.tables import EmissionTable, TransitionTable

logger = get_logger(__name__)


@dataclass
class HMMNode:
    """One column of a Plan7 HMM (its match, insertion and deletion states).

    ``node_num`` is the 1-based position of the node in its HMM; use
    ``HMM.node`` to get from a number back to the node.
    """

    node_num: int
    residue: str
    match_emissions: EmissionTable
    insertion_emissions: EmissionTable
    transitions: TransitionTable = field(default_factory=TransitionTable)
    neff_m: float = 0.0
    neff_i: float = 0.0
    neff_d: float = 0.0


def _check_alphabet(table: Optional[EmissionTable], alphabet: Alphabet, context: str):
    if table is not None and table.alphabet != alphabet:
        raise AlphabetMismatchError(alphabet, table.alphabet, context=context)


class HMM:
    """An ordered list of Plan7 nodes sharing an alphabet and a null model.

    The null model holds background emissions. HMMER files do not carry one;
    HHsuite files do, and then it is used for insertion emissions in every
    node.
    """

    def __init__(
        self,
        nodes: List[HMMNode],
        alphabet: Alphabet,
        null: Optional[EmissionTable] = None,
    ) -> None:
        for node in nodes:
            _check_alphabet(
                node.match_emissions, alphabet, f"node {node.node_num} match emissions"
            )
            _check_alphabet(
                node.insertion_emissions,
                alphabet,
                f"node {node.node_num} insertion emissions",
            )
        _check_alphabet(null, alphabet, "null emissions")

        self.nodes = list(nodes)
        self.alphabet = alphabet
        self.null = null

    def __len__(self) -> int:
        return len(self.nodes)

    def __iter__(self) -> Iterator[HMMNode]:
        return iter(self.nodes)

    def node(self, node_num: int) -> HMMNode:
        """Return the node at 1-based position ``node_num``."""
        if not 1 <= node_num <= len(self.nodes):
            raise RangeError(
                f"node number {node_num} outside 1..{len(self.nodes)}",
                expected=(1, len(self.nodes)),
                actual=node_num,
            )
        return self.nodes[node_num - 1]

    def insertion_emissions(self, node: HMMNode) -> EmissionTable:
        """Insertion emissions for ``node``: the null model if there is one."""
        if self.null is not None:
            return self.null
        return node.insertion_emissions

    def slice(self, start: int, end: int) -> "HMM":
        """Return the sub-model of nodes ``[start, end)``.

        Nodes are deep copies. The last node's transitions are set to
        M->M = 0, M->I = *, M->D = *, I->M = 0, I->I = *, D->M = 0, D->D = *,
        so the sub-model can only end through a match state. No other
        modifications are made.
        """
        if start < 0 or end > len(self.nodes) or start >= end:
            raise RangeError(
                f"invalid slice [{start}, {end}) of HMM with {len(self.nodes)} nodes",
                expected=f"0 <= start < end <= {len(self.nodes)}",
                actual=(start, end),
            )

        nodes = copy.deepcopy(self.nodes[start:end])
        nodes[-1].transitions = TransitionTable.terminal()
        null = self.null.copy() if self.null is not None else None

        logger.debug(
            "Sliced HMM nodes [%d, %d) -> %d nodes", start, end, len(nodes)
        )
        return HMM(nodes=nodes, alphabet=self.alphabet, null=null)


__all__ = ["HMM", "HMMNode"]
