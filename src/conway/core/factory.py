"""Random initial grids."""

from typing import Optional

from .grid import Grid, check_dimensions
from .random_source import RandomSource, default_random_source


def make_grid(rows: int, cols: int, random_source: Optional[RandomSource] = None) -> Grid:
    """Create a grid where each cell has a 50% chance of being alive.

    A zero row or column count gives an empty grid rather than an error.

    Args:
        rows: Number of rows
        cols: Number of columns
        random_source: Source to draw from (defaults to the process-wide one)

    Returns:
        New randomly populated Grid

    Raises:
        ValueError: If a dimension is negative or not an integer
    """
    check_dimensions(rows, cols)

    source = random_source if random_source is not None else default_random_source()
    cells = [source.uniform_int(0, 1) == 1 for _ in range(rows * cols)]

    return Grid(rows, cols, cells)
