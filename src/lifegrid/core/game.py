"""Conway's Game of Life engine."""

from typing import Deque, Dict, Optional, TextIO
from collections import deque
import numpy as np

from .grid import DEFAULT_SIZE, Grid


class GameOfLife:
    """Conway's Game of Life simulation engine.

    Implements the classic rules:
    - Live cell with 2-3 neighbors survives
    - Dead cell with exactly 3 neighbors becomes alive
    - All other cells die or stay dead
    """

    def __init__(self, grid: Optional[Grid] = None) -> None:
        """Initialize the game.

        Args:
            grid: Grid to simulate. Defaults to a 25x25 grid seeded with a glider.
        """
        if grid is None:
            grid = Grid(DEFAULT_SIZE)
            grid.seed_glider()

        self.grid = grid
        self._generation = 0
        self._population_history: Deque[int] = deque(maxlen=100)

        self._update_population_history()

    @property
    def generation(self) -> int:
        """Current generation number."""
        return self._generation

    @property
    def population(self) -> int:
        """Current number of living cells."""
        return self.grid.population

    @property
    def population_history(self) -> list:
        """History of population counts."""
        return list(self._population_history)

    def next_generation(self) -> np.ndarray:
        """Advance the simulation by one generation.

        Returns:
            The grid's new cell matrix
        """
        self.grid.replace_cells(self.grid.next_state())

        self._generation += 1
        self._update_population_history()

        return self.grid.cells

    def step(self) -> None:
        """Advance the simulation by one generation."""
        self.next_generation()

    def print_grid(self, stream: Optional[TextIO] = None) -> None:
        """Print the current grid, one line per row."""
        print(self.grid, file=stream)

    def run_simulation(self, number_of_generations: int, stream: Optional[TextIO] = None) -> None:
        """Print and advance the grid for a number of generations.

        Each generation is printed under a 1-based "Generation N:" header
        before it is advanced, followed by a blank line. Zero or negative
        counts print nothing.

        Args:
            number_of_generations: Number of generations to print
            stream: Output stream (defaults to stdout)
        """
        for i in range(number_of_generations):
            print(f"Generation {i + 1}:", file=stream)
            self.print_grid(stream)
            self.next_generation()
            print(file=stream)

    def _update_population_history(self) -> None:
        """Update the population history."""
        self._population_history.append(self.population)

    def reset(self, clear_grid: bool = True) -> None:
        """Reset the simulation.

        Args:
            clear_grid: Whether to clear the grid as well
        """
        if clear_grid:
            self.grid.clear()

        self._generation = 0
        self._population_history.clear()
        self._update_population_history()

    def get_statistics(self) -> Dict:
        """Get simulation statistics.

        Returns:
            Dictionary with various statistics
        """
        bbox = self.grid.get_bounding_box()
        neighbors = self.grid.neighbor_map()

        stats = {
            "generation": self._generation,
            "population": self.population,
            "population_history": list(self._population_history),
            "grid_size": self.grid.shape,
            "population_density": self.population / (self.grid.size * self.grid.size),
            "max_neighbors": int(neighbors.max()),
        }

        if bbox:
            stats["bounding_box"] = bbox
            box_height = bbox[2] - bbox[0] + 1
            box_width = bbox[3] - bbox[1] + 1
            stats["bounding_box_size"] = (box_height, box_width)
        else:
            stats["bounding_box"] = None
            stats["bounding_box_size"] = (0, 0)

        return stats
