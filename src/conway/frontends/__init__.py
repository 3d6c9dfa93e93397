"""Frontend interfaces for the Game of Life."""

from .renderer import render_grid, draw_grid
from .cli import ConsoleGameOfLife

__all__ = ["render_grid", "draw_grid", "ConsoleGameOfLife"]
