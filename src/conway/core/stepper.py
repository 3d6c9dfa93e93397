"""Generation stepping with Conway's B3/S23 rule.

The rule is a single decision table indexed by ``[alive][neighbors]``:

- Live cell with fewer than 2 neighbors dies (underpopulation)
- Live cell with 2 or 3 neighbors survives
- Live cell with more than 3 neighbors dies (overpopulation)
- Dead cell with exactly 3 neighbors becomes alive (reproduction)
- Every other dead cell stays dead
"""

import numpy as np

from .grid import Grid
from .neighbors import count_neighbors, count_all_neighbors

BIRTH_COUNTS = frozenset({3})
SURVIVAL_COUNTS = frozenset({2, 3})

RULE_TABLE = np.array(
    [
        [n in BIRTH_COUNTS for n in range(9)],
        [n in SURVIVAL_COUNTS for n in range(9)],
    ],
    dtype=bool,
)
RULE_TABLE.setflags(write=False)


def next_state(alive: bool, neighbors: int) -> bool:
    """Look up the next state of a single cell.

    Args:
        alive: Current state of the cell
        neighbors: Number of living neighbors

    Returns:
        True if the cell is alive in the next generation

    Raises:
        ValueError: If neighbors is outside 0-8
    """
    if not 0 <= neighbors <= 8:
        raise ValueError(f"Neighbor count must be between 0 and 8, got {neighbors}")
    return bool(RULE_TABLE[int(bool(alive)), neighbors])


def step(grid: Grid) -> Grid:
    """Compute the next generation of a grid.

    Every cell is derived from the input snapshot only; results go into a
    fresh buffer, so the input grid stays valid for the caller.

    Args:
        grid: Current generation

    Returns:
        New grid with the same dimensions holding the next generation
    """
    cells = grid.cells
    buffer = np.zeros(grid.size, dtype=bool)

    for row in range(grid.rows):
        for col in range(grid.cols):
            buffer[row * grid.cols + col] = next_state(cells[row, col], count_neighbors(grid, row, col))

    return Grid(grid.rows, grid.cols, buffer)


def step_vectorized(grid: Grid) -> Grid:
    """Compute the next generation of a grid for all cells at once.

    Produces exactly the same grid as step(), using a convolution for the
    neighbor counts and the rule table as a lookup array.
    """
    if grid.size == 0:
        return Grid(grid.rows, grid.cols)

    neighbor_counts = count_all_neighbors(grid)
    next_cells = RULE_TABLE[grid.cells.astype(np.intp), neighbor_counts.astype(np.intp)]

    return Grid(grid.rows, grid.cols, next_cells)
