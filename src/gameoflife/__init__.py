"""Conway's Game of Life on a bounded grid, driven from pattern text."""

__version__ = "0.1.0"

from .core.errors import (
    EmptyGridError,
    GameOfLifeError,
    InvalidGridError,
    InvalidPatternError,
    NegativeGenerationsError,
)
from .core.grid import Grid
from .core.game import count_live_neighbors, next_generation, simulate
from .core.census import count_live_cells
from .core.patterns import Pattern, PatternLibrary, grid_to_text, parse_pattern

__all__ = [
    "Grid",
    "Pattern",
    "PatternLibrary",
    "parse_pattern",
    "grid_to_text",
    "count_live_neighbors",
    "next_generation",
    "simulate",
    "count_live_cells",
    "GameOfLifeError",
    "InvalidPatternError",
    "EmptyGridError",
    "InvalidGridError",
    "NegativeGenerationsError",
]
