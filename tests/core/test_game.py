"""Tests for the GameOfLife class."""

from conway.core.grid import Grid
from conway.core.game import GameOfLife
from conway.core.factory import make_grid
from conway.core.random_source import RandomSource


class TestGameOfLife:
    """Test cases for the GameOfLife class."""

    def test_initialization(self):
        """Test game initialization."""
        grid = Grid(10, 10)
        game = GameOfLife(grid)

        assert game.grid is grid
        assert game.generation == 0
        assert game.population == 0
        assert game.is_extinct

    def test_still_life_block(self):
        """Test that a block pattern is stable (still life)."""
        grid = Grid(10, 10)
        for row, col in [(4, 4), (4, 5), (5, 4), (5, 5)]:
            grid = grid.with_cell(row, col, True)
        game = GameOfLife(grid)

        assert game.is_stable()

        game.run(5)

        assert game.grid == grid
        assert game.population == 4
        assert game.generation == 5

    def test_oscillator_blinker(self):
        """Test blinker oscillator (period 2)."""
        vertical = Grid.from_strings([".....", "..#..", "..#..", "..#..", "....."])
        horizontal = Grid.from_strings([".....", ".....", ".###.", ".....", "....."])
        game = GameOfLife(vertical)

        assert not game.is_stable()

        assert game.step() == horizontal
        assert game.population == 3

        assert game.step() == vertical
        assert game.generation == 2

    def test_step_keeps_previous_grid(self):
        """Test a grid held by the caller survives the next step."""
        grid = Grid.from_strings([".....", "..#..", "..#..", "..#..", "....."])
        game = GameOfLife(grid)

        previous = game.grid
        game.step()

        assert previous == grid
        assert game.grid != previous

    def test_extinction(self):
        """Test a lone cell dies out."""
        game = GameOfLife(Grid(5, 5).with_cell(2, 2, True))
        assert not game.is_extinct

        game.step()

        assert game.is_extinct
        assert game.generation == 1

    def test_run_zero_generations(self):
        """Test running zero generations leaves the game untouched."""
        grid = make_grid(6, 6, RandomSource(seed=2))
        game = GameOfLife(grid)

        assert game.run(0) is grid
        assert game.generation == 0

    def test_vectorized_matches(self):
        """Test both steppers evolve a random grid identically."""
        grid = make_grid(16, 16, RandomSource(seed=21))
        reference = GameOfLife(grid)
        vectorized = GameOfLife(grid, vectorized=True)

        for _ in range(10):
            assert reference.step() == vectorized.step()

    def test_glider_moves(self):
        """Test a glider shifts one cell diagonally every four generations."""
        glider = Grid.from_strings([".#....", "..#...", "###...", "......", "......", "......"])
        shifted = Grid.from_strings(["......", "..#...", "...#..", ".###..", "......", "......"])
        game = GameOfLife(glider)

        assert game.run(4) == shifted
