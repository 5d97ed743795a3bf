"""Core Game of Life logic."""

from .grid import Grid
from .game import GameOfLife
from .patterns import Pattern, PatternLibrary

__all__ = ["Grid", "GameOfLife", "Pattern", "PatternLibrary"]
