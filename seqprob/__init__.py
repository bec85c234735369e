"""Probability scoring for biological sequences: profiles, Plan7 HMMs and
global pairwise alignment."""

__version__ = "0.1.0"
