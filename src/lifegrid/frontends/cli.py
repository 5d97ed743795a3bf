"""Command-line interface for the Game of Life."""

import argparse
import sys
from typing import List, Optional

from ..core.grid import DEFAULT_SIZE, Grid
from ..core.game import GameOfLife
from ..core.patterns import PatternLibrary


class CLIGameOfLife:
    """Command-line interface for running Game of Life simulations."""

    def __init__(self):
        """Initialize CLI interface."""
        self.pattern_library = PatternLibrary()

    def create_game(self, pattern: str = "Glider", verbose: bool = False) -> GameOfLife:
        """Build a default-size game seeded with a library pattern.

        Args:
            pattern: Pattern name
            verbose: Print setup information

        Returns:
            Seeded GameOfLife instance

        Raises:
            ValueError: If the pattern is not in the library
        """
        loaded_pattern = self.pattern_library.get_pattern(pattern)
        if loaded_pattern is None:
            raise ValueError(f"Pattern '{pattern}' not found")

        if verbose:
            print(f"Initializing {DEFAULT_SIZE}x{DEFAULT_SIZE} grid")
            print(f"Loading pattern '{pattern}'")

        grid = Grid(DEFAULT_SIZE)
        loaded_pattern.apply_to_grid(grid)
        return GameOfLife(grid)

    def run_simulation(self, generations: int, pattern: str = "Glider", verbose: bool = False) -> GameOfLife:
        """Run a simulation, printing every generation.

        Args:
            generations: Number of generations to print
            pattern: Pattern name
            verbose: Print setup information

        Returns:
            The game after the run
        """
        game = self.create_game(pattern, verbose)

        if verbose:
            print(f"Initial population: {game.population} cells")
            print(f"Running {max(generations, 0)} generations\n")

        game.run_simulation(generations)
        return game

    def list_patterns(self) -> None:
        """List available patterns."""
        print("Available patterns:")
        for pattern_name in self.pattern_library.list_patterns():
            pattern = self.pattern_library.get_pattern(pattern_name)
            size = pattern.get_size()
            print(f"  {pattern_name}: {size[1]}x{size[0]}, {len(pattern.cells)} cells")
            if pattern.description:
                print(f"    {pattern.description}")


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        description="Run Conway's Game of Life on a 25x25 grid",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Run the glider for 10 generations
  lifegrid-cli

  # Run a blinker for 4 generations with statistics
  lifegrid-cli -n 4 --pattern Blinker --stats

  # List available patterns
  lifegrid-cli --list-patterns
        """,
    )

    parser.add_argument(
        "-n",
        "--generations",
        type=int,
        default=10,
        help="Number of generations to print (default: 10)",
    )

    parser.add_argument(
        "--pattern",
        type=str,
        default="Glider",
        help="Seed pattern placed at the grid center (default: Glider)",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print setup information before the simulation",
    )

    parser.add_argument(
        "--stats",
        action="store_true",
        help="Print statistics after the simulation",
    )

    parser.add_argument(
        "--list-patterns",
        action="store_true",
        help="List all available patterns and exit",
    )

    return parser


def print_statistics(stats: dict) -> None:
    """Print simulation statistics.

    Args:
        stats: Statistics dictionary from GameOfLife.get_statistics
    """
    print("Statistics:")
    print(f"  Grid size: {stats['grid_size'][0]}x{stats['grid_size'][1]}")
    print(f"  Generation: {stats['generation']}")
    print(f"  Population: {stats['population']}")
    print(f"  Population density: {stats['population_density']:.2%}")
    print(f"  Max neighbors: {stats['max_neighbors']}")

    if stats["bounding_box"]:
        bbox = stats["bounding_box"]
        bbox_size = stats["bounding_box_size"]
        print(f"  Bounding box: ({bbox[0]}, {bbox[1]}) to ({bbox[2]}, {bbox[3]}) [{bbox_size[0]}x{bbox_size[1]}]")


def validate_args(args: argparse.Namespace, library: PatternLibrary) -> bool:
    """Validate command-line arguments.

    Zero or negative generation counts are accepted and print nothing.

    Args:
        args: Parsed arguments
        library: Library the pattern name is looked up in

    Returns:
        True if arguments are valid
    """
    errors = []

    if library.get_pattern(args.pattern) is None:
        errors.append(f"Pattern '{args.pattern}' not found")

    if errors:
        print("Error: Invalid arguments:")
        for error in errors:
            print(f"  - {error}")
        print(f"Available patterns: {', '.join(library.list_patterns())}")
        return False

    return True


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI interface.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    cli = CLIGameOfLife()

    if args.list_patterns:
        cli.list_patterns()
        return 0

    if not validate_args(args, cli.pattern_library):
        return 1

    try:
        game = cli.run_simulation(args.generations, pattern=args.pattern, verbose=args.verbose)
    except KeyboardInterrupt:
        print("\nSimulation interrupted by user")
        return 1
    except (ValueError, IndexError) as e:
        print(f"Error: {e}")
        return 1

    if args.stats:
        print_statistics(game.get_statistics())

    return 0


if __name__ == "__main__":
    sys.exit(main())
