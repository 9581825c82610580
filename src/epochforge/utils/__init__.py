"""Utility functions for the Epoch Forge engine."""

from epochforge.utils.rng import (
    SeededRandom,
    derive_seed,
    player_seed,
    reroll_seed,
    resolution_seed,
)

__all__ = [
    "SeededRandom",
    "derive_seed",
    "player_seed",
    "reroll_seed",
    "resolution_seed",
]
