"""Tests for the Grid class."""

import numpy as np
import pytest

from gameoflife.core.errors import EmptyGridError, GameOfLifeError, InvalidGridError
from gameoflife.core.grid import Grid


class TestGrid:
    """Test cases for the Grid class."""

    def test_initialization(self):
        """Test grid initialization from nested lists."""
        grid = Grid([[False, True, False], [True, True, True]])
        assert grid.width == 3
        assert grid.height == 2
        assert grid.shape == (3, 2)
        assert grid.population == 4

    def test_initialization_from_array(self):
        """Test grid initialization from a numpy array."""
        grid = Grid(np.array([[0, 2], [0, 0]]))
        assert grid.get_cell(0, 1) is True
        assert grid.population == 1
        assert grid.cells.dtype == np.int8

    def test_empty_factory(self):
        """Test creating an all-dead grid."""
        grid = Grid.empty(3, 2)
        assert grid.shape == (3, 2)
        assert grid.population == 0
        assert grid.to_list() == [[False, False, False], [False, False, False]]

    def test_empty_factory_invalid_dimensions(self):
        """Test all-dead grid with non-positive dimensions."""
        with pytest.raises(EmptyGridError):
            Grid.empty(0, 5)

        with pytest.raises(EmptyGridError):
            Grid.empty(5, -1)

    def test_no_rows(self):
        """Test that a grid without rows is rejected."""
        with pytest.raises(EmptyGridError):
            Grid([])

    def test_zero_width_row(self):
        """Test that a zero-width first row is rejected."""
        with pytest.raises(EmptyGridError):
            Grid([[], []])

        with pytest.raises(EmptyGridError):
            Grid(np.zeros((0, 3)))

    def test_ragged_rows(self):
        """Test that rows of differing lengths are rejected."""
        with pytest.raises(InvalidGridError):
            Grid([[True, False], [True]])

    def test_not_two_dimensional(self):
        """Test that flat or 3D data is rejected."""
        with pytest.raises(InvalidGridError):
            Grid([True, False])

        with pytest.raises(InvalidGridError):
            Grid(np.zeros(4))

        with pytest.raises(InvalidGridError):
            Grid(np.zeros((2, 2, 2)))

    def test_errors_are_value_errors(self):
        """Test the error hierarchy."""
        with pytest.raises(ValueError):
            Grid([])

        with pytest.raises(GameOfLifeError):
            Grid([[1], [1, 1]])

    def test_get_cell_out_of_bounds(self):
        """Test that coordinates outside the grid raise IndexError."""
        grid = Grid.empty(3, 3)

        with pytest.raises(IndexError):
            grid.get_cell(-1, 0)

        with pytest.raises(IndexError):
            grid.get_cell(0, 3)

        with pytest.raises(IndexError):
            grid.with_cell(3, 0, True)

    def test_with_cell_returns_new_grid(self):
        """Test that setting a cell leaves the original grid untouched."""
        grid = Grid.empty(3, 3)
        updated = grid.with_cell(1, 2, True)

        assert updated.get_cell(1, 2)
        assert not grid.get_cell(1, 2)
        assert grid.population == 0
        assert updated.population == 1

    def test_cells_are_read_only(self):
        """Test that the cell array cannot be modified in place."""
        grid = Grid([[1, 0], [0, 1]])

        with pytest.raises(ValueError):
            grid.cells[0, 0] = 0

        assert grid.get_cell(0, 0)

    def test_copy_constructor_shares_value(self):
        """Test building a grid from another grid."""
        grid = Grid([[1, 0], [0, 1]])
        copy = Grid(grid)
        assert copy == grid
        assert copy.to_list() == [[True, False], [False, True]]

    def test_bounding_box(self):
        """Test bounding box of living cells."""
        assert Grid.empty(4, 4).get_bounding_box() is None

        grid = Grid([[0, 0, 0, 0], [0, 1, 0, 0], [0, 0, 0, 1], [0, 0, 0, 0]])
        assert grid.get_bounding_box() == (1, 1, 2, 3)

    def test_equality_and_hash(self):
        """Test value semantics."""
        a = Grid([[True, False], [False, True]])
        b = Grid([[1, 0], [0, 1]])
        c = Grid([[1, 0], [0, 0]])

        assert a == b
        assert hash(a) == hash(b)
        assert a != c
        assert a != "not a grid"
        assert len({a, b, c}) == 2

    def test_equality_requires_same_dimensions(self):
        """Test that all-dead grids of different sizes differ."""
        assert Grid.empty(2, 3) != Grid.empty(3, 2)

    def test_string_representation(self):
        """Test text rendering."""
        grid = Grid([[False, True, False], [True, False, True]])
        assert str(grid) == ".O.\nO.O"
        assert "width=3" in repr(grid)
