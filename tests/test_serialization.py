"""Unit tests for YAML/dict serialization of HMMs and profiles."""

from __future__ import annotations

import yaml

from seqprob.algorithms.hmm import HMM, HMMNode
from seqprob.algorithms.profile import FrequencyProfile, build_frequency_profile
from seqprob.types import (
    ALPHA_DNA,
    EmissionTable,
    Probability,
    TransitionTable,
)
from seqprob.utils.serialization import (
    hmm_from_dict,
    hmm_to_dict,
    load_hmm,
    profile_from_dict,
    profile_to_dict,
    save_hmm,
)


def _toy_hmm(with_null: bool = True) -> HMM:
    match = EmissionTable(ALPHA_DNA)
    match["A"] = Probability(0.287682072451781)
    match["C"] = Probability(1.6094379124341003)
    insertion = EmissionTable(ALPHA_DNA)
    insertion["G"] = Probability(1.386)
    node = HMMNode(
        node_num=1,
        residue="A",
        match_emissions=match,
        insertion_emissions=insertion,
        transitions=TransitionTable.terminal(),
        neff_m=1.23456789,
    )
    null = None
    if with_null:
        null = EmissionTable(ALPHA_DNA)
        for residue in "ACGT":
            null[residue] = Probability(1.3862943611198906)
    return HMM(nodes=[node, node], alphabet=ALPHA_DNA, null=null)


def test_hmm_to_dict_uses_text_probabilities():
    payload = hmm_to_dict(_toy_hmm())

    assert payload["alphabet"] == "ACGTN-"
    node = payload["nodes"][0]
    assert node["match_emissions"]["A"] == "0.287682072451781"
    assert node["match_emissions"]["T"] == "*"
    assert node["transitions"]["MI"] == "*"
    assert node["neff_m"] == 1.234568
    assert payload["null"]["N"] == "*"


def test_hmm_dict_round_trip():
    hmm = _toy_hmm()
    restored = hmm_from_dict(hmm_to_dict(hmm))

    assert restored.alphabet == hmm.alphabet
    assert len(restored) == 2
    assert restored.null == hmm.null
    for original, copy in zip(hmm, restored):
        assert copy.node_num == original.node_num
        assert copy.match_emissions == original.match_emissions
        assert copy.insertion_emissions == original.insertion_emissions
        assert copy.transitions == original.transitions


def test_hmm_without_null_round_trips():
    restored = hmm_from_dict(hmm_to_dict(_toy_hmm(with_null=False)))
    assert restored.null is None


def test_save_and_load_hmm(tmp_path):
    """YAML files written by save_hmm load back into an equal model."""
    hmm = _toy_hmm()
    path = save_hmm(hmm, tmp_path / "models" / "toy.yaml")

    assert path.exists()
    with path.open("r", encoding="utf-8") as handle:
        raw = yaml.safe_load(handle)
    assert raw["hmm"]["nodes"][0]["transitions"]["MM"] == "0.0"

    loaded = load_hmm(path)
    assert len(loaded) == len(hmm)
    assert loaded.node(1).match_emissions == hmm.node(1).match_emissions
    assert loaded.insertion_emissions(loaded.node(2)) == hmm.null


def test_profile_round_trip():
    null = FrequencyProfile.null_profile(ALPHA_DNA)
    null.add_all(["A", "C", "G", "T"])
    profile = build_frequency_profile(["AC", "AG", "TG"], ALPHA_DNA).to_profile(null)

    payload = profile_to_dict(profile)
    restored = profile_from_dict(payload)

    assert payload["columns"][0]["C"] == "*"
    assert len(restored) == 2
    assert all(restored[i] == profile[i] for i in range(2))
    assert restored[0].frozen


def test_empty_profile_round_trip():
    profile = build_frequency_profile(["AC"], ALPHA_DNA).to_profile(
        FrequencyProfile.null_profile(ALPHA_DNA)
    )
    restored = profile_from_dict({"alphabet": "ACGTN-", "columns": []})
    assert len(restored) == 0
    assert len(profile_from_dict(profile_to_dict(profile))) == 2
