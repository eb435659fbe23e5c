"""Utility functions for the card combat rules."""

from tetramaster.utils.rng import ScriptedRandom, generate_seed, seeded_rng

__all__ = [
    "ScriptedRandom",
    "generate_seed",
    "seeded_rng",
]
