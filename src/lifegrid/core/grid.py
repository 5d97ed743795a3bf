"""Grid data structure for the Game of Life."""

from typing import List, Optional, Tuple
import numpy as np
import torch
import torch.nn.functional as F


DEFAULT_SIZE = 25

# Smallest grid that holds the glider around its center
MIN_GLIDER_SIZE = 3

# (row, col) offsets from the grid center
GLIDER_OFFSETS: List[Tuple[int, int]] = [(-1, 0), (0, 1), (1, -1), (1, 0), (1, 1)]


class Grid:
    """Square grid of boolean cells with bounded edges.

    Cells are addressed as (row, col). Neighbors that fall outside the
    grid are not counted; nothing wraps around.
    """

    def __init__(self, size: int = DEFAULT_SIZE) -> None:
        """Initialize an all-dead grid.

        Args:
            size: Number of rows and columns

        Raises:
            ValueError: If size is smaller than 1
        """
        if size < 1:
            raise ValueError(f"Grid size must be at least 1, got {size}")

        self._size = size
        self._cells = np.zeros((size, size), dtype=bool)

        torch.set_num_threads(1)
        self._torch_input = torch.zeros(1, 1, size, size, dtype=torch.float32)
        self._torch_kernel = (
            torch.tensor([[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=torch.float32).unsqueeze(0).unsqueeze(0)
        )

    @property
    def size(self) -> int:
        """Number of rows (and columns)."""
        return self._size

    @property
    def shape(self) -> Tuple[int, int]:
        """Get grid dimensions as (rows, cols)."""
        return (self._size, self._size)

    @property
    def center(self) -> Tuple[int, int]:
        """Center cell as (row, col)."""
        return (self._size // 2, self._size // 2)

    @property
    def cells(self) -> np.ndarray:
        """Get the current cell matrix."""
        return self._cells

    @property
    def population(self) -> int:
        """Get the number of living cells."""
        return int(np.count_nonzero(self._cells))

    def _check_bounds(self, row: int, col: int) -> None:
        if not (0 <= row < self._size and 0 <= col < self._size):
            raise IndexError(f"Coordinates ({row}, {col}) out of bounds")

    def get_cell(self, row: int, col: int) -> bool:
        """Get the state of a cell.

        Raises:
            IndexError: If coordinates are out of bounds
        """
        self._check_bounds(row, col)
        return bool(self._cells[row, col])

    def set_cell(self, row: int, col: int, alive: bool) -> None:
        """Set the state of a cell.

        Raises:
            IndexError: If coordinates are out of bounds
        """
        self._check_bounds(row, col)
        self._cells[row, col] = alive

    def clear(self) -> None:
        """Clear all cells (set all to dead)."""
        self._cells.fill(False)

    def seed_glider(self) -> None:
        """Place a glider around the center of the grid.

        Other cells are left untouched.

        Raises:
            ValueError: If the grid is too small to hold the glider
        """
        if self._size < MIN_GLIDER_SIZE:
            raise ValueError(
                f"Grid size {self._size} is too small for a glider (minimum {MIN_GLIDER_SIZE})"
            )

        center_row, center_col = self.center
        for d_row, d_col in GLIDER_OFFSETS:
            self.set_cell(center_row + d_row, center_col + d_col, True)

    def count_live_neighbors(self, row: int, col: int) -> int:
        """Count living neighbors of a cell.

        Args:
            row: Row coordinate
            col: Column coordinate

        Returns:
            Number of living neighbors (0-8)
        """
        count = 0
        for d_row in [-1, 0, 1]:
            for d_col in [-1, 0, 1]:
                if d_row == 0 and d_col == 0:
                    continue

                n_row, n_col = row + d_row, col + d_col

                if 0 <= n_row < self._size and 0 <= n_col < self._size and self._cells[n_row, n_col]:
                    count += 1

        return count

    def next_state(self) -> np.ndarray:
        """Compute the next generation without modifying the grid.

        Every cell is evaluated against the current matrix, so the result
        does not depend on traversal order.

        Returns:
            New cell matrix for the next generation
        """
        next_cells = np.zeros((self._size, self._size), dtype=bool)

        for row in range(self._size):
            for col in range(self._size):
                live_neighbors = self.count_live_neighbors(row, col)

                if self._cells[row, col]:
                    next_cells[row, col] = live_neighbors == 2 or live_neighbors == 3
                else:
                    next_cells[row, col] = live_neighbors == 3

        return next_cells

    def replace_cells(self, cells: np.ndarray) -> None:
        """Swap in a fully computed cell matrix.

        Args:
            cells: New cell matrix

        Raises:
            ValueError: If the matrix shape doesn't match the grid
        """
        if cells.shape != self.shape:
            raise ValueError(f"Cell matrix shape {cells.shape} doesn't match grid {self.shape}")

        self._cells = cells.astype(bool, copy=False)

    def neighbor_map(self) -> np.ndarray:
        """Count neighbors for all cells with a zero-padded convolution.

        Returns:
            2D array with the neighbor count of each cell
        """
        self._torch_input[0, 0] = torch.from_numpy(self._cells.astype(np.float32))
        neighbors = F.conv2d(self._torch_input, self._torch_kernel, padding=1)
        return neighbors[0, 0].numpy().astype(np.int8)

    def copy(self) -> "Grid":
        """Return an independent grid with the same cells."""
        clone = Grid(self._size)
        clone.replace_cells(self._cells.copy())
        return clone

    def get_bounding_box(self) -> Optional[Tuple[int, int, int, int]]:
        """Get bounding box of living cells.

        Returns:
            Tuple of (min_row, min_col, max_row, max_col) or None if no living cells
        """
        rows, cols = np.nonzero(self._cells)
        if len(rows) == 0:
            return None

        return (int(rows.min()), int(cols.min()), int(rows.max()), int(cols.max()))

    def to_list(self) -> list:
        """Convert grid to a nested list of booleans, row-major."""
        return self._cells.tolist()

    def __eq__(self, other: object) -> bool:
        """Check if two grids are equal."""
        if not isinstance(other, Grid):
            return False
        return self.shape == other.shape and np.array_equal(self._cells, other._cells)

    def __str__(self) -> str:
        """String representation showing living cells as 'X' and dead as '.'."""
        result = []
        for row in self._cells:
            result.append("".join("X" if cell else "." for cell in row))
        return "\n".join(result)
