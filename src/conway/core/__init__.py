"""Core simulation engine."""

from .grid import Grid
from .random_source import RandomSource, InvalidRangeError, default_random_source, seed_default_random_source
from .factory import make_grid
from .neighbors import NEIGHBOR_OFFSETS, count_neighbors, count_all_neighbors
from .stepper import next_state, step, step_vectorized
from .game import GameOfLife
from .patterns import Pattern, PatternLibrary

__all__ = [
    "Grid",
    "RandomSource",
    "InvalidRangeError",
    "default_random_source",
    "seed_default_random_source",
    "make_grid",
    "NEIGHBOR_OFFSETS",
    "count_neighbors",
    "count_all_neighbors",
    "next_state",
    "step",
    "step_vectorized",
    "GameOfLife",
    "Pattern",
    "PatternLibrary",
]
