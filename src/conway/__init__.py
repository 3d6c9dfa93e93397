"""Conway's Game of Life on bounded grids."""

__version__ = "0.1.0"

from .core.grid import Grid
from .core.factory import make_grid
from .core.neighbors import count_neighbors
from .core.stepper import step
from .core.game import GameOfLife
from .core.patterns import Pattern, PatternLibrary

__all__ = ["Grid", "make_grid", "count_neighbors", "step", "GameOfLife", "Pattern", "PatternLibrary"]
