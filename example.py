#!/usr/bin/env python3
"""
Example usage of the lifegrid package.
"""

from lifegrid import GameOfLife


def main():
    """Print the first eight generations of the default glider."""
    game = GameOfLife()
    game.run_simulation(8)

    stats = game.get_statistics()
    print("Final statistics:")
    for key, value in stats.items():
        print(f"  {key}: {value}")


if __name__ == "__main__":
    main()
