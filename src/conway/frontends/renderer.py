"""Plain-text rendering of grids."""

import sys
from typing import Optional, TextIO

from ..core.grid import Grid


def render_grid(grid: Grid) -> str:
    """Render a grid as text.

    Rows are written top to bottom, one line each, with '#' for living
    cells and '.' for dead ones. Every row ends with a single newline.
    """
    return str(grid)


def draw_grid(grid: Grid, out: Optional[TextIO] = None) -> None:
    """Write a grid to a text stream (standard output by default)."""
    stream = out if out is not None else sys.stdout
    stream.write(render_grid(grid))
