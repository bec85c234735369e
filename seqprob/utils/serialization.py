"""Serialization utilities for HMMs and profiles (load and save).

Probabilities are written in their text form, so the minimum probability
survives a round trip as ``*`` and every other score as an exact float repr.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Union

import numpy as np
import yaml

from seqprob.algorithms.hmm import HMM, HMMNode
from seqprob.algorithms.profile import Profile
from seqprob.constants import PRECISION
from seqprob.logging_config import get_logger
from seqprob.types import Alphabet, EmissionTable, TransitionTable

logger = get_logger(__name__)


def _convert_values(value: Any, precision: int | None) -> Any:
    """
    Recursively convert dicts/lists and optionally round floats.
    """
    if isinstance(value, dict):
        return {key: _convert_values(val, precision) for key, val in value.items()}
    if isinstance(value, (list, tuple)):
        return [_convert_values(item, precision) for item in value]
    if isinstance(value, float) and precision is not None:
        return round(value, precision)
    return value


def _node_to_dict(node: HMMNode) -> Dict[str, Any]:
    return {
        "node_num": node.node_num,
        "residue": node.residue,
        "match_emissions": node.match_emissions.to_dict(),
        "insertion_emissions": node.insertion_emissions.to_dict(),
        "transitions": node.transitions.to_dict(),
        "neff_m": float(node.neff_m),
        "neff_i": float(node.neff_i),
        "neff_d": float(node.neff_d),
    }


def _node_from_dict(payload: Dict[str, Any], alphabet: Alphabet) -> HMMNode:
    return HMMNode(
        node_num=int(payload["node_num"]),
        residue=payload["residue"],
        match_emissions=EmissionTable.from_dict(alphabet, payload["match_emissions"]),
        insertion_emissions=EmissionTable.from_dict(
            alphabet, payload["insertion_emissions"]
        ),
        transitions=TransitionTable.from_dict(payload.get("transitions", {})),
        neff_m=float(payload.get("neff_m", 0.0)),
        neff_i=float(payload.get("neff_i", 0.0)),
        neff_d=float(payload.get("neff_d", 0.0)),
    )


def hmm_to_dict(hmm: HMM, float_precision: int | None = PRECISION) -> Dict[str, Any]:
    """
    Convert an HMM into a plain dictionary suitable for YAML.

    Only the neff values are rounded; probabilities are kept as text.
    """
    payload = {
        "alphabet": str(hmm.alphabet),
        "null": hmm.null.to_dict() if hmm.null is not None else None,
        "nodes": [_node_to_dict(node) for node in hmm.nodes],
    }
    return _convert_values(payload, float_precision)


def hmm_from_dict(payload: Dict[str, Any]) -> HMM:
    """Rebuild an HMM from the output of ``hmm_to_dict``."""
    alphabet = Alphabet(payload["alphabet"])
    null_payload = payload.get("null")
    null = (
        EmissionTable.from_dict(alphabet, null_payload)
        if null_payload is not None
        else None
    )
    nodes = [_node_from_dict(item, alphabet) for item in payload.get("nodes") or []]
    return HMM(nodes=nodes, alphabet=alphabet, null=null)


def save_hmm(hmm: HMM, yaml_path: Union[str, Path]) -> Path:
    """Write an HMM to a YAML file."""
    yaml_path = Path(yaml_path)
    yaml_path.parent.mkdir(parents=True, exist_ok=True)
    with yaml_path.open("w", encoding="utf-8") as handle:
        yaml.safe_dump({"hmm": hmm_to_dict(hmm)}, handle, sort_keys=False)
    logger.debug("Saved HMM with %d nodes to %s", len(hmm), yaml_path)
    return yaml_path


def load_hmm(yaml_path: Union[str, Path]) -> HMM:
    """Load an HMM from a YAML file."""
    yaml_path = Path(yaml_path)
    with yaml_path.open("r", encoding="utf-8") as handle:
        payload = yaml.safe_load(handle)

    hmm = hmm_from_dict(payload.get("hmm", payload))
    logger.debug("Loaded HMM with %d nodes from %s", len(hmm), yaml_path)
    return hmm


def profile_to_dict(profile: Profile) -> Dict[str, Any]:
    """Convert a Profile into a plain dictionary suitable for YAML."""
    return {
        "alphabet": str(profile.alphabet),
        "columns": [table.to_dict() for table in profile.emissions],
    }


def profile_from_dict(payload: Dict[str, Any]) -> Profile:
    """Rebuild a (frozen) Profile from the output of ``profile_to_dict``."""
    alphabet = Alphabet(payload["alphabet"])
    columns = payload.get("columns") or []
    scores = np.array(
        [EmissionTable.from_dict(alphabet, column).values() for column in columns],
        dtype=np.float64,
    ).reshape(len(columns), len(alphabet))
    return Profile.from_scores(alphabet, scores)


__all__ = [
    "hmm_to_dict",
    "hmm_from_dict",
    "save_hmm",
    "load_hmm",
    "profile_to_dict",
    "profile_from_dict",
]
