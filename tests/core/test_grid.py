"""Tests for the Grid class."""

import numpy as np
import pytest
from lifegrid.core.grid import DEFAULT_SIZE, GLIDER_OFFSETS, Grid


GLIDER_CELLS = {(11, 12), (12, 13), (13, 11), (13, 12), (13, 13)}


def live_cells(grid):
    """Return the set of (row, col) coordinates of living cells."""
    rows, cols = np.nonzero(grid.cells)
    return {(int(r), int(c)) for r, c in zip(rows, cols)}


class TestGrid:
    """Test cases for the Grid class."""

    def test_initialization(self):
        """Test grid initialization."""
        grid = Grid(10)
        assert grid.size == 10
        assert grid.shape == (10, 10)
        assert grid.cells.shape == (10, 10)
        assert grid.population == 0

    def test_default_size(self):
        """Test the default grid is 25x25."""
        grid = Grid()
        assert DEFAULT_SIZE == 25
        assert grid.shape == (25, 25)
        assert grid.center == (12, 12)

    def test_invalid_size(self):
        """Test that non-positive sizes are rejected."""
        with pytest.raises(ValueError):
            Grid(0)

        with pytest.raises(ValueError):
            Grid(-3)

    def test_cell_operations(self):
        """Test basic cell get/set operations."""
        grid = Grid(5)

        assert grid.get_cell(0, 0) is False

        grid.set_cell(1, 3, True)
        assert grid.get_cell(1, 3) is True
        assert grid.get_cell(3, 1) is False

        grid.set_cell(1, 3, False)
        assert grid.get_cell(1, 3) is False

    def test_out_of_bounds(self):
        """Test that cell access outside the grid raises instead of wrapping."""
        grid = Grid(3)

        with pytest.raises(IndexError):
            grid.set_cell(-1, 0, True)

        with pytest.raises(IndexError):
            grid.set_cell(0, 3, True)

        with pytest.raises(IndexError):
            grid.get_cell(3, 0)

        with pytest.raises(IndexError):
            grid.get_cell(0, -1)

    def test_clear(self):
        """Test grid clearing."""
        grid = Grid(5)
        grid.set_cell(1, 1, True)
        grid.set_cell(2, 2, True)
        assert grid.population == 2

        grid.clear()
        assert grid.population == 0


class TestSeedGlider:
    """Test cases for glider seeding."""

    def test_glider_positions(self):
        """Test the glider lands on the expected cells of a 25x25 grid."""
        grid = Grid(25)
        grid.seed_glider()

        assert grid.population == 5
        assert live_cells(grid) == GLIDER_CELLS

    def test_glider_offsets_match_center(self):
        """Test seeding follows the offsets from the center on other sizes."""
        grid = Grid(8)
        grid.seed_glider()

        expected = {(4 + dr, 4 + dc) for dr, dc in GLIDER_OFFSETS}
        assert live_cells(grid) == expected

    def test_smallest_grid(self):
        """Test a 3x3 grid is large enough for the glider."""
        grid = Grid(3)
        grid.seed_glider()
        assert grid.population == 5
        assert str(grid) == ".X.\n..X\nXXX"

    def test_too_small_grid(self):
        """Test grids too small for the glider are rejected."""
        grid = Grid(2)
        with pytest.raises(ValueError):
            grid.seed_glider()
        assert grid.population == 0


class TestNeighbors:
    """Test cases for neighbor counting."""

    def test_count_live_neighbors(self):
        """Test neighbor counting around a block."""
        grid = Grid(6)
        for row, col in [(2, 2), (2, 3), (3, 2), (3, 3)]:
            grid.set_cell(row, col, True)

        assert grid.count_live_neighbors(2, 2) == 3
        assert grid.count_live_neighbors(1, 1) == 1
        assert grid.count_live_neighbors(1, 2) == 2
        assert grid.count_live_neighbors(0, 0) == 0

    def test_cell_does_not_count_itself(self):
        """Test a lone living cell has no neighbors."""
        grid = Grid(5)
        grid.set_cell(2, 2, True)
        assert grid.count_live_neighbors(2, 2) == 0

    def test_full_grid_bounds(self):
        """Test neighbor counts stay within 0-8 and edges see fewer neighbors."""
        grid = Grid(5)
        grid.cells.fill(True)

        for row in range(5):
            for col in range(5):
                assert 0 <= grid.count_live_neighbors(row, col) <= 8

        assert grid.count_live_neighbors(0, 0) == 3
        assert grid.count_live_neighbors(0, 2) == 5
        assert grid.count_live_neighbors(2, 2) == 8

    def test_corner_cell_does_not_wrap(self):
        """Test a corner cell only reaches its three in-bounds neighbors."""
        grid = Grid(5)
        grid.set_cell(0, 0, True)

        counted = {
            (row, col)
            for row in range(5)
            for col in range(5)
            if grid.count_live_neighbors(row, col) > 0
        }
        assert counted == {(0, 1), (1, 0), (1, 1)}
        assert grid.count_live_neighbors(4, 4) == 0
        assert grid.count_live_neighbors(0, 4) == 0
        assert grid.count_live_neighbors(4, 0) == 0

    def test_neighbor_map_matches_count(self):
        """Test the convolution map agrees with per-cell counting."""
        grid = Grid(10)
        grid.seed_glider()
        grid.set_cell(0, 0, True)
        grid.set_cell(9, 9, True)
        grid.set_cell(0, 9, True)

        neighbors = grid.neighbor_map()
        assert neighbors.shape == (10, 10)
        for row in range(10):
            for col in range(10):
                assert neighbors[row, col] == grid.count_live_neighbors(row, col)

    def test_neighbor_map_corner(self):
        """Test the convolution map uses bounded edges."""
        grid = Grid(5)
        grid.set_cell(0, 0, True)

        neighbors = grid.neighbor_map()
        assert int(neighbors.sum()) == 3
        assert neighbors[4, 4] == 0


class TestNextState:
    """Test cases for computing the next generation."""

    def test_does_not_mutate(self):
        """Test next_state leaves the current grid untouched."""
        grid = Grid(25)
        grid.seed_glider()
        before = grid.cells.copy()

        next_cells = grid.next_state()

        assert np.array_equal(grid.cells, before)
        assert next_cells is not grid.cells
        assert next_cells.shape == (25, 25)

    def test_deterministic(self):
        """Test identical grids produce identical next states."""
        grid = Grid(12)
        grid.seed_glider()
        grid.set_cell(0, 0, True)
        grid.set_cell(0, 1, True)
        grid.set_cell(1, 0, True)
        clone = grid.copy()

        assert np.array_equal(grid.next_state(), clone.next_state())

    def test_birth_and_survival(self):
        """Test the Conway rule on a blinker."""
        grid = Grid(5)
        for col in (1, 2, 3):
            grid.set_cell(2, col, True)

        next_cells = grid.next_state()

        assert next_cells[1, 2] and next_cells[2, 2] and next_cells[3, 2]
        assert not next_cells[2, 1]
        assert not next_cells[2, 3]
        assert int(next_cells.sum()) == 3

    def test_overpopulation(self):
        """Test a cell with four neighbors dies."""
        grid = Grid(5)
        for row, col in [(2, 2), (1, 2), (3, 2), (2, 1), (2, 3)]:
            grid.set_cell(row, col, True)

        assert grid.count_live_neighbors(2, 2) == 4
        assert not grid.next_state()[2, 2]

    def test_replace_cells_shape_mismatch(self):
        """Test replacing cells with a wrong-sized matrix fails."""
        grid = Grid(5)
        with pytest.raises(ValueError):
            grid.replace_cells(np.zeros((4, 5), dtype=bool))


class TestGridHelpers:
    """Test cases for copying, comparison and rendering."""

    def test_copy_is_independent(self):
        """Test copies don't share cell storage."""
        grid = Grid(5)
        grid.set_cell(1, 1, True)
        clone = grid.copy()

        assert clone == grid
        clone.set_cell(2, 2, True)
        assert clone != grid
        assert grid.get_cell(2, 2) is False

    def test_bounding_box(self):
        """Test bounding box of living cells."""
        grid = Grid(25)
        assert grid.get_bounding_box() is None

        grid.seed_glider()
        assert grid.get_bounding_box() == (11, 11, 13, 13)

    def test_to_list(self):
        """Test list conversion is row-major."""
        grid = Grid(2)
        grid.set_cell(0, 1, True)
        assert grid.to_list() == [[False, True], [False, False]]

    def test_str(self):
        """Test rendering uses X for alive and . for dead."""
        grid = Grid(3)
        grid.set_cell(0, 2, True)
        grid.set_cell(2, 0, True)
        assert str(grid) == "..X\n...\nX.."

    def test_str_dimensions(self):
        """Test rendering has one line per row and one character per cell."""
        grid = Grid(25)
        grid.seed_glider()
        lines = str(grid).split("\n")

        assert len(lines) == 25
        assert all(len(line) == 25 for line in lines)
        assert lines[11] == "." * 12 + "X" + "." * 12
        assert lines[12] == "." * 13 + "X" + "." * 11
        assert lines[13] == "." * 11 + "XXX" + "." * 11
