"""Core Game of Life logic."""

from .grid import Grid
from .game import count_all_neighbors, count_live_neighbors, iter_generations, next_generation, simulate
from .census import count_live_cells, get_statistics
from .patterns import Pattern, PatternLibrary, grid_to_text, parse_pattern

__all__ = [
    "Grid",
    "Pattern",
    "PatternLibrary",
    "parse_pattern",
    "grid_to_text",
    "count_live_neighbors",
    "count_all_neighbors",
    "next_generation",
    "simulate",
    "iter_generations",
    "count_live_cells",
    "get_statistics",
]
