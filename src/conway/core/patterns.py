"""Common Conway's Game of Life patterns."""

from typing import Dict, List, Tuple, Optional, Sequence

from .grid import Grid, ALIVE_CHAR


class Pattern:
    """Represents a Game of Life pattern as a set of live (row, col) cells."""

    def __init__(self, name: str, cells: List[Tuple[int, int]], description: str = "") -> None:
        """Initialize a pattern.

        Args:
            name: Pattern name
            cells: List of (row, col) coordinates for living cells
            description: Optional description
        """
        self.name = name
        self.cells = cells
        self.description = description

    @classmethod
    def from_strings(cls, name: str, lines: Sequence[str], description: str = "") -> "Pattern":
        """Create a pattern from text rows using '#' for living cells."""
        cells = [
            (row, col)
            for row, line in enumerate(lines)
            for col, char in enumerate(line)
            if char == ALIVE_CHAR
        ]
        return cls(name, cells, description)

    @classmethod
    def from_grid(cls, grid: Grid, name: str, description: str = "") -> "Pattern":
        """Create a pattern from the living cells of a grid."""
        cells = []
        for row in range(grid.rows):
            for col in range(grid.cols):
                if grid.get_cell(row, col):
                    cells.append((row, col))

        return cls(name, cells, description)

    def get_bounding_box(self) -> Tuple[int, int, int, int]:
        """Get bounding box of the pattern.

        Returns:
            Tuple of (min_row, min_col, max_row, max_col)
        """
        if not self.cells:
            return (0, 0, 0, 0)

        rows, cols = zip(*self.cells)
        return (min(rows), min(cols), max(rows), max(cols))

    def get_size(self) -> Tuple[int, int]:
        """Get pattern size as (rows, cols)."""
        if not self.cells:
            return (0, 0)

        min_row, min_col, max_row, max_col = self.get_bounding_box()
        return (max_row - min_row + 1, max_col - min_col + 1)

    @property
    def population(self) -> int:
        """Number of living cells in the pattern."""
        return len(self.cells)

    def to_grid(self, rows: int, cols: int, offset_row: int = 0, offset_col: int = 0) -> Grid:
        """Place this pattern on an otherwise dead grid.

        Cells that land outside the grid are dropped.

        Args:
            rows: Grid rows
            cols: Grid columns
            offset_row: Vertical offset
            offset_col: Horizontal offset

        Returns:
            New Grid holding the pattern
        """
        grid_rows = [[False] * cols for _ in range(rows)]
        for row, col in self.cells:
            r, c = row + offset_row, col + offset_col
            if 0 <= r < rows and 0 <= c < cols:
                grid_rows[r][c] = True

        return Grid(rows, cols, grid_rows)

    def __repr__(self) -> str:
        return f"Pattern({self.name!r}, population={self.population})"


class PatternLibrary:
    """Manages a collection of named patterns."""

    CATEGORIES: Dict[str, List[str]] = {
        "Still Life": ["Block", "Beehive", "Loaf", "Boat"],
        "Oscillators": ["Blinker", "Toad", "Beacon"],
        "Spaceships": ["Glider"],
        "Methuselahs": ["R-pentomino"],
    }

    def __init__(self) -> None:
        self._patterns: Dict[str, Pattern] = {}
        self._load_builtin_patterns()

    def _load_builtin_patterns(self) -> None:
        """Load built-in common patterns."""
        # Still life patterns
        self.add_pattern(Pattern("Block", [(0, 0), (0, 1), (1, 0), (1, 1)], "2x2 still life block"))

        self.add_pattern(
            Pattern(
                "Beehive",
                [(0, 1), (0, 2), (1, 0), (1, 3), (2, 1), (2, 2)],
                "Beehive still life",
            )
        )

        self.add_pattern(
            Pattern(
                "Loaf",
                [(0, 1), (0, 2), (1, 0), (1, 3), (2, 1), (2, 3), (3, 2)],
                "Loaf still life",
            )
        )

        self.add_pattern(Pattern("Boat", [(0, 0), (0, 1), (1, 0), (1, 2), (2, 1)], "Boat still life"))

        # Oscillators
        self.add_pattern(Pattern("Blinker", [(0, 0), (0, 1), (0, 2)], "Period-2 oscillator"))

        self.add_pattern(
            Pattern(
                "Toad",
                [(0, 1), (0, 2), (0, 3), (1, 0), (1, 1), (1, 2)],
                "Period-2 oscillator",
            )
        )

        self.add_pattern(
            Pattern(
                "Beacon",
                [(0, 0), (0, 1), (1, 0), (2, 3), (3, 2), (3, 3)],
                "Period-2 oscillator",
            )
        )

        # Spaceships
        self.add_pattern(
            Pattern(
                "Glider",
                [(0, 1), (1, 2), (2, 0), (2, 1), (2, 2)],
                "Smallest spaceship, period-4",
            )
        )

        # Methuselahs
        self.add_pattern(
            Pattern(
                "R-pentomino",
                [(0, 1), (0, 2), (1, 0), (1, 1), (2, 1)],
                "Famous methuselah that stabilizes after 1103 generations",
            )
        )

    def add_pattern(self, pattern: Pattern) -> None:
        """Add a pattern to the library, replacing any with the same name."""
        self._patterns[pattern.name] = pattern

    def get_pattern(self, name: str) -> Optional[Pattern]:
        """Get a pattern by name.

        Args:
            name: Pattern name

        Returns:
            Pattern instance or None if not found
        """
        return self._patterns.get(name)

    def list_patterns(self) -> List[str]:
        """Get list of all pattern names."""
        return list(self._patterns.keys())

    def get_patterns_by_category(self) -> Dict[str, List[str]]:
        """Get patterns organized by category.

        Returns:
            Dictionary mapping categories to pattern name lists
        """
        categories = {category: list(names) for category, names in self.CATEGORIES.items()}
        categories["Custom"] = []

        all_builtin = set()
        for cat_patterns in self.CATEGORIES.values():
            all_builtin.update(cat_patterns)

        for name in self._patterns:
            if name not in all_builtin:
                categories["Custom"].append(name)

        # Remove empty categories
        return {cat: patterns for cat, patterns in categories.items() if patterns}
