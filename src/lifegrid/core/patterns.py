"""Seed patterns placed around the grid center."""

from typing import Dict, List, Optional, Tuple

from .grid import GLIDER_OFFSETS, Grid


class Pattern:
    """Represents a Game of Life pattern."""

    def __init__(self, name: str, cells: List[Tuple[int, int]], description: str = "") -> None:
        """Initialize a pattern.

        Args:
            name: Pattern name
            cells: List of (row, col) offsets from the grid center
            description: Optional description
        """
        self.name = name
        self.cells = cells
        self.description = description

    def apply_to_grid(self, grid: Grid, clear: bool = True) -> None:
        """Apply this pattern around the center of a grid.

        Args:
            grid: Target grid
            clear: Whether to clear the grid first

        Raises:
            IndexError: If a cell falls outside the grid
        """
        if clear:
            grid.clear()

        center_row, center_col = grid.center
        for d_row, d_col in self.cells:
            grid.set_cell(center_row + d_row, center_col + d_col, True)

    def get_bounding_box(self) -> Tuple[int, int, int, int]:
        """Get bounding box of the pattern offsets.

        Returns:
            Tuple of (min_row, min_col, max_row, max_col)
        """
        if not self.cells:
            return (0, 0, 0, 0)

        rows, cols = zip(*self.cells)
        return (min(rows), min(cols), max(rows), max(cols))

    def get_size(self) -> Tuple[int, int]:
        """Get pattern size as (height, width)."""
        min_row, min_col, max_row, max_col = self.get_bounding_box()
        return (max_row - min_row + 1, max_col - min_col + 1)


GLIDER = Pattern("Glider", list(GLIDER_OFFSETS), "Smallest spaceship, period-4")


class PatternLibrary:
    """Manages a collection of patterns."""

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
                [(-1, 0), (-1, 1), (0, -1), (0, 2), (1, 0), (1, 1)],
                "Beehive still life",
            )
        )

        # Oscillators
        self.add_pattern(Pattern("Blinker", [(0, -1), (0, 0), (0, 1)], "Period-2 oscillator"))

        self.add_pattern(
            Pattern(
                "Toad",
                [(0, 0), (0, 1), (0, 2), (1, -1), (1, 0), (1, 1)],
                "Period-2 oscillator",
            )
        )

        # Spaceships
        self.add_pattern(GLIDER)

    def add_pattern(self, pattern: Pattern) -> None:
        """Add a pattern to the library."""
        self._patterns[pattern.name] = pattern

    def get_pattern(self, name: str) -> Optional[Pattern]:
        """Get a pattern by name.

        Returns:
            Pattern instance or None if not found
        """
        return self._patterns.get(name)

    def list_patterns(self) -> List[str]:
        """Get list of available pattern names."""
        return list(self._patterns.keys())
