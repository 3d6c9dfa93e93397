"""Immutable grid data structure for the Game of Life."""

from numbers import Integral
from typing import Iterable, List, Optional, Sequence, Tuple
import numpy as np

ALIVE_CHAR = "#"
DEAD_CHAR = "."


def check_dimensions(rows: int, cols: int) -> None:
    """Check that grid dimensions are non-negative integers.

    Raises:
        ValueError: If either dimension is not an integer or is negative
    """
    for name, value in (("rows", rows), ("cols", cols)):
        if isinstance(value, bool) or not isinstance(value, Integral):
            raise ValueError(f"Grid {name} must be an integer, got {value!r}")

    if rows < 0 or cols < 0:
        raise ValueError(f"Grid dimensions must be non-negative, got {rows}x{cols}")


class Grid:
    """Represents one generation of a bounded 2D Game of Life board.

    Cells live in a single contiguous row-major numpy buffer of booleans
    (``index = row * cols + col``). The buffer is read-only once the grid
    is constructed, so a grid can be handed to a renderer while the next
    generation is computed from it. Edges never wrap.

    A grid with zero rows or zero columns is valid and simply has no cells.
    """

    def __init__(self, rows: int, cols: int, cells: Optional[Iterable] = None) -> None:
        """Initialize a new grid.

        Args:
            rows: Number of rows
            cols: Number of columns
            cells: Optional initial states, either flat (rows * cols values)
                or shaped (rows, cols). All cells are dead when omitted.

        Raises:
            ValueError: If a dimension is negative or not an integer, or
                cells does not match the grid shape
        """
        check_dimensions(rows, cols)

        self._rows = int(rows)
        self._cols = int(cols)

        if cells is None:
            buffer = np.zeros(self._rows * self._cols, dtype=bool)
        else:
            # Always copy so no caller-held array aliases the buffer
            data = np.array(cells, dtype=bool)
            if data.ndim == 2 and data.shape != (self._rows, self._cols):
                raise ValueError(f"Cell data is shaped {data.shape} but grid is {self._rows}x{self._cols}")
            if data.ndim not in (1, 2):
                raise ValueError(f"Cell data must be flat or 2D, got {data.ndim} dimensions")

            buffer = data.reshape(-1)
            if buffer.size != self._rows * self._cols:
                raise ValueError(
                    f"Cell data has {buffer.size} values but grid is {self._rows}x{self._cols}"
                )

        buffer.setflags(write=False)
        self._cells = buffer

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence]) -> "Grid":
        """Create a grid from a list of rows.

        Args:
            rows: Nested sequence of truthy/falsy cell states

        Returns:
            New Grid instance

        Raises:
            ValueError: If rows have different lengths
        """
        height = len(rows)
        width = len(rows[0]) if height else 0
        for index, row in enumerate(rows):
            if len(row) != width:
                raise ValueError(f"Row {index} has {len(row)} cells, expected {width}")

        flat = [bool(cell) for row in rows for cell in row]
        return cls(height, width, flat)

    @classmethod
    def from_strings(cls, lines: Sequence[str]) -> "Grid":
        """Create a grid from text rows using '#' for alive and '.' for dead.

        Args:
            lines: One string per row

        Returns:
            New Grid instance

        Raises:
            ValueError: If a line contains any other character
        """
        rows = []
        for line in lines:
            row = []
            for char in line:
                if char == ALIVE_CHAR:
                    row.append(True)
                elif char == DEAD_CHAR:
                    row.append(False)
                else:
                    raise ValueError(f"Unexpected cell character {char!r} in {line!r}")
            rows.append(row)
        return cls.from_rows(rows)

    @property
    def rows(self) -> int:
        """Number of rows."""
        return self._rows

    @property
    def cols(self) -> int:
        """Number of columns."""
        return self._cols

    @property
    def shape(self) -> Tuple[int, int]:
        """Get grid dimensions as (rows, cols)."""
        return (self._rows, self._cols)

    @property
    def size(self) -> int:
        """Total number of cells."""
        return self._cells.size

    @property
    def cells(self) -> np.ndarray:
        """Get a read-only (rows, cols) view of the cells."""
        return self._cells.reshape(self._rows, self._cols)

    @property
    def population(self) -> int:
        """Get the number of living cells."""
        return int(np.count_nonzero(self._cells))

    def contains(self, row: int, col: int) -> bool:
        """Check whether (row, col) lies inside the grid."""
        return 0 <= row < self._rows and 0 <= col < self._cols

    def _index(self, row: int, col: int) -> int:
        if not self.contains(row, col):
            raise IndexError(f"Coordinates ({row}, {col}) out of bounds for {self._rows}x{self._cols} grid")
        return row * self._cols + col

    def get_cell(self, row: int, col: int) -> bool:
        """Get the state of a cell.

        Args:
            row: Row coordinate
            col: Column coordinate

        Returns:
            True if cell is alive, False if dead

        Raises:
            IndexError: If coordinates are out of bounds
        """
        return bool(self._cells[self._index(row, col)])

    def with_cell(self, row: int, col: int, alive: bool) -> "Grid":
        """Return a copy of this grid with one cell changed.

        Raises:
            IndexError: If coordinates are out of bounds
        """
        index = self._index(row, col)
        buffer = self._cells.copy()
        buffer[index] = alive
        return Grid(self._rows, self._cols, buffer)

    def to_list(self) -> List[List[bool]]:
        """Convert grid to nested list of booleans, one list per row."""
        return self.cells.tolist()

    def __eq__(self, other: object) -> bool:
        """Check if two grids are equal."""
        if not isinstance(other, Grid):
            return NotImplemented
        return self.shape == other.shape and np.array_equal(self._cells, other._cells)

    def __hash__(self) -> int:
        return hash((self.shape, self._cells.tobytes()))

    def __repr__(self) -> str:
        return f"Grid(rows={self._rows}, cols={self._cols}, population={self.population})"

    def __str__(self) -> str:
        """Text rendering: '#' for living cells, '.' for dead, one line per row."""
        result = []
        for row in self.cells:
            result.append("".join(ALIVE_CHAR if alive else DEAD_CHAR for alive in row) + "\n")
        return "".join(result)
