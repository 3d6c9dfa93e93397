"""Conway's Game of Life simulation."""

from typing import Callable

from .grid import Grid
from .stepper import step, step_vectorized


class GameOfLife:
    """Conway's Game of Life simulation engine.

    Tracks the current generation of an immutable grid. Each step replaces
    the current grid with a newly computed one; previous grids are not kept.
    """

    def __init__(self, grid: Grid, vectorized: bool = False) -> None:
        """Initialize the game with a grid.

        Args:
            grid: Generation 0
            vectorized: Use the convolution-based stepper
        """
        self._grid = grid
        self._generation = 0
        self._step_fn: Callable[[Grid], Grid] = step_vectorized if vectorized else step

    @property
    def grid(self) -> Grid:
        """Current grid."""
        return self._grid

    @property
    def generation(self) -> int:
        """Current generation number."""
        return self._generation

    @property
    def population(self) -> int:
        """Current number of living cells."""
        return self._grid.population

    @property
    def is_extinct(self) -> bool:
        """Whether every cell is dead."""
        return self.population == 0

    def step(self) -> Grid:
        """Advance the simulation by one generation.

        Returns:
            The new current grid
        """
        self._grid = self._step_fn(self._grid)
        self._generation += 1
        return self._grid

    def run(self, generations: int) -> Grid:
        """Advance the simulation by several generations.

        Args:
            generations: Number of steps to take

        Returns:
            The grid after the last step
        """
        for _ in range(generations):
            self.step()
        return self._grid

    def is_stable(self) -> bool:
        """Check if the current grid is a still life."""
        return self._step_fn(self._grid) == self._grid
