"""Tests for the Grid class."""

import numpy as np
import pytest
from conway.core.grid import Grid


class TestGrid:
    """Test cases for the Grid class."""

    def test_initialization(self):
        """Test grid initialization."""
        grid = Grid(10, 20)
        assert grid.rows == 10
        assert grid.cols == 20
        assert grid.shape == (10, 20)
        assert grid.size == 200
        assert grid.population == 0

    def test_initialization_with_flat_cells(self):
        """Test grid initialization from a flat row-major buffer."""
        grid = Grid(2, 3, [True, False, False, False, False, True])
        assert grid.get_cell(0, 0)
        assert grid.get_cell(1, 2)
        assert not grid.get_cell(0, 2)
        assert grid.population == 2

    def test_initialization_with_shaped_cells(self):
        """Test grid initialization from a (rows, cols) array."""
        data = np.zeros((3, 4), dtype=np.int8)
        data[2, 3] = 1
        grid = Grid(3, 4, data)
        assert grid.get_cell(2, 3)
        assert grid.population == 1

    def test_initialization_wrong_size(self):
        """Test that mismatched cell data is rejected."""
        with pytest.raises(ValueError):
            Grid(2, 2, [True, False, True])

    def test_initialization_transposed_cells(self):
        """Test that 2D data with the right size but wrong shape is rejected."""
        data = np.zeros((3, 2), dtype=bool)
        data[2, 0] = True

        with pytest.raises(ValueError):
            Grid(2, 3, data)

    def test_initialization_too_many_dimensions(self):
        """Test that 3D cell data is rejected."""
        with pytest.raises(ValueError):
            Grid(2, 2, np.zeros((1, 2, 2), dtype=bool))

    def test_non_integer_dimensions(self):
        """Test that fractional or non-numeric dimensions are rejected."""
        with pytest.raises(ValueError):
            Grid(2.7, 3)

        with pytest.raises(ValueError):
            Grid(2, 3.0)

        with pytest.raises(ValueError):
            Grid("2", 3)

    def test_numpy_integer_dimensions(self):
        """Test that numpy integers are accepted as dimensions."""
        grid = Grid(np.int64(2), np.int32(3))
        assert grid.shape == (2, 3)

    def test_negative_dimensions(self):
        """Test that negative dimensions are rejected."""
        with pytest.raises(ValueError):
            Grid(-1, 5)

        with pytest.raises(ValueError):
            Grid(5, -1)

    def test_empty_grid(self):
        """Test zero-sized grids are valid and empty."""
        grid = Grid(0, 5)
        assert grid.shape == (0, 5)
        assert grid.size == 0
        assert grid.population == 0
        assert str(grid) == ""

    def test_from_rows(self):
        """Test creation from nested lists."""
        grid = Grid.from_rows([[1, 0, 0], [0, 1, 1]])
        assert grid.shape == (2, 3)
        assert grid.to_list() == [[True, False, False], [False, True, True]]

    def test_from_rows_ragged(self):
        """Test that ragged rows are rejected."""
        with pytest.raises(ValueError):
            Grid.from_rows([[1, 0], [1]])

    def test_from_strings(self):
        """Test creation from '#'/'.' text rows."""
        grid = Grid.from_strings(["#.", ".#", "##"])
        assert grid.shape == (3, 2)
        assert grid.get_cell(0, 0)
        assert not grid.get_cell(0, 1)
        assert grid.get_cell(2, 1)
        assert grid.population == 4

    def test_from_strings_invalid_char(self):
        """Test that unknown characters are rejected."""
        with pytest.raises(ValueError):
            Grid.from_strings(["#x"])

    def test_out_of_bounds(self):
        """Test that out-of-range coordinates raise IndexError."""
        grid = Grid(3, 3)

        with pytest.raises(IndexError):
            grid.get_cell(-1, 0)

        with pytest.raises(IndexError):
            grid.get_cell(0, -1)

        with pytest.raises(IndexError):
            grid.get_cell(3, 0)

        with pytest.raises(IndexError):
            grid.get_cell(0, 3)

        with pytest.raises(IndexError):
            grid.with_cell(3, 3, True)

    def test_contains(self):
        """Test coordinate bounds checking."""
        grid = Grid(2, 4)
        assert grid.contains(0, 0)
        assert grid.contains(1, 3)
        assert not grid.contains(2, 0)
        assert not grid.contains(0, 4)
        assert not grid.contains(-1, 0)

    def test_immutable_buffer(self):
        """Test that the cell buffer cannot be written through."""
        grid = Grid(3, 3)

        with pytest.raises(ValueError):
            grid.cells[1, 1] = True

        assert grid.population == 0

    def test_input_is_copied(self):
        """Test that later changes to the source data do not leak in."""
        data = np.zeros((2, 2), dtype=bool)
        grid = Grid(2, 2, data)
        data[0, 0] = True
        assert not grid.get_cell(0, 0)

    def test_with_cell(self):
        """Test that with_cell returns a new grid and leaves the original alone."""
        grid = Grid(3, 3)
        updated = grid.with_cell(1, 2, True)

        assert updated is not grid
        assert updated.get_cell(1, 2)
        assert not grid.get_cell(1, 2)

    def test_row_major_layout(self):
        """Test that rows and columns are not transposed."""
        grid = Grid(2, 5).with_cell(1, 4, True)
        assert grid.cells.shape == (2, 5)
        assert grid.cells[1, 4]
        assert grid.to_list()[1][4] is True

    def test_equality(self):
        """Test grid equality and hashing."""
        grid1 = Grid.from_strings(["#.", ".#"])
        grid2 = Grid.from_strings(["#.", ".#"])
        grid3 = Grid.from_strings(["##", ".#"])

        assert grid1 == grid2
        assert hash(grid1) == hash(grid2)
        assert grid1 != grid3
        assert Grid(2, 3) != Grid(3, 2)
        assert grid1 != "not a grid"

    def test_string_representation(self):
        """Test string representation of grid."""
        grid = Grid.from_strings(["#.", ".#"])
        assert str(grid) == "#.\n.#\n"

    def test_repr(self):
        """Test repr shows dimensions and population."""
        grid = Grid.from_strings(["#.", ".#"])
        assert repr(grid) == "Grid(rows=2, cols=2, population=2)"
