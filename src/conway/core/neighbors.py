"""Live-neighbor counting on bounded grids."""

from typing import Tuple
import numpy as np
import torch
import torch.nn.functional as F

from .grid import Grid

# Moore neighborhood, excluding the cell itself
NEIGHBOR_OFFSETS: Tuple[Tuple[int, int], ...] = tuple(
    (dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if not (dr == 0 and dc == 0)
)

_KERNEL = torch.tensor([[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=torch.float32).unsqueeze(0).unsqueeze(0)


def count_neighbors(grid: Grid, row: int, col: int) -> int:
    """Count living neighbors of a cell.

    Neighbors that would fall outside the grid are skipped, so edge cells
    have fewer than eight candidates. Nothing wraps around.

    Args:
        grid: Grid to inspect
        row: Row coordinate
        col: Column coordinate

    Returns:
        Number of living neighbors (0-8)

    Raises:
        IndexError: If (row, col) is not a cell of the grid
    """
    if not grid.contains(row, col):
        raise IndexError(f"Coordinates ({row}, {col}) out of bounds for {grid.rows}x{grid.cols} grid")

    cells = grid.cells
    count = 0
    for dr, dc in NEIGHBOR_OFFSETS:
        nr, nc = row + dr, col + dc
        if grid.contains(nr, nc) and cells[nr, nc]:
            count += 1

    return count


def count_all_neighbors(grid: Grid) -> np.ndarray:
    """Count neighbors for all cells using a zero-padded convolution.

    Zero padding treats everything beyond the edges as dead, which gives
    the same clipped counts as count_neighbors.

    Args:
        grid: Grid to inspect

    Returns:
        (rows, cols) integer array with the neighbor count of each cell
    """
    if grid.size == 0:
        return np.zeros(grid.shape, dtype=np.int8)

    torch.set_num_threads(1)
    cells = torch.from_numpy(grid.cells.astype(np.float32)).unsqueeze(0).unsqueeze(0)
    neighbors = F.conv2d(cells, _KERNEL, padding=1)

    return neighbors[0, 0].round().numpy().astype(np.int8)
