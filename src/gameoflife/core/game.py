"""Conway's Game of Life rules on a bounded grid.

Implements the classic rules:
- Live cell with 2-3 neighbors survives
- Dead cell with exactly 3 neighbors becomes alive
- All other cells die or stay dead

Cells outside the grid count as dead; there is no wraparound.
"""

from typing import Iterator, Tuple
import numpy as np
import torch
import torch.nn.functional as F

from .errors import NegativeGenerationsError
from .grid import CellData, Grid

_NEIGHBOR_OFFSETS = [(dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dr, dc) != (0, 0)]

_NEIGHBOR_KERNEL = torch.tensor([[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=torch.float32).unsqueeze(0).unsqueeze(0)


def _as_grid(cells: CellData) -> Grid:
    return cells if isinstance(cells, Grid) else Grid(cells)


def count_live_neighbors(grid: CellData, row: int, col: int) -> int:
    """Count living neighbors of a cell.

    Args:
        grid: Grid containing the cell
        row: Row coordinate, must be in bounds
        col: Column coordinate, must be in bounds

    Returns:
        Number of living neighbors (0-8)
    """
    grid = _as_grid(grid)
    cells = grid.cells
    count = 0
    for dr, dc in _NEIGHBOR_OFFSETS:
        nr, nc = row + dr, col + dc
        if 0 <= nr < grid.height and 0 <= nc < grid.width:
            count += int(cells[nr, nc])

    return count


def count_all_neighbors(grid: CellData) -> np.ndarray:
    """Count neighbors for all cells using a PyTorch convolution.

    Zero padding keeps the count bounded: positions past the edge are dead.

    Returns:
        Array of shape (height, width) with the neighbor count of each cell
    """
    grid = _as_grid(grid)
    torch_input = torch.from_numpy(grid.cells.astype(np.float32)).unsqueeze(0).unsqueeze(0)
    neighbors = F.conv2d(torch_input, _NEIGHBOR_KERNEL, padding=1)
    return neighbors[0, 0].numpy().astype(np.int8)


def next_generation(grid: CellData) -> Grid:
    """Compute the next generation.

    Every neighbor count is taken from the input grid before any cell
    changes, and the result is a new grid of the same size.

    Args:
        grid: Current generation

    Returns:
        New Grid one step later

    Raises:
        EmptyGridError: If the grid has zero rows or a zero-width row
    """
    grid = _as_grid(grid)
    neighbor_counts = count_all_neighbors(grid)
    cells = grid.cells

    # Birth: dead cell with exactly 3 neighbors
    birth_mask = (cells == 0) & (neighbor_counts == 3)

    # Survival: live cell with 2 or 3 neighbors
    survive_mask = (cells > 0) & ((neighbor_counts == 2) | (neighbor_counts == 3))

    return Grid(birth_mask | survive_mask)


def _check_generations(generations: int) -> None:
    if generations < 0:
        raise NegativeGenerationsError(f"Number of generations must be non-negative, got {generations}")


def simulate(initial_grid: CellData, generations: int) -> Grid:
    """Run the simulation for a fixed number of generations.

    Args:
        initial_grid: Starting grid, left untouched
        generations: Number of transitions to apply

    Returns:
        Grid after the last transition; the initial grid (as a Grid) when
        generations is 0

    Raises:
        NegativeGenerationsError: If generations is negative
    """
    _check_generations(generations)

    grid = _as_grid(initial_grid)
    for _ in range(generations):
        grid = next_generation(grid)
    return grid


def iter_generations(initial_grid: CellData, generations: int) -> Iterator[Tuple[int, Grid]]:
    """Iterate over (generation, grid) pairs from generation 0 to generations.

    Raises:
        NegativeGenerationsError: If generations is negative, before iteration starts
    """
    _check_generations(generations)
    start = _as_grid(initial_grid)

    def _run() -> Iterator[Tuple[int, Grid]]:
        grid = start
        yield 0, grid
        for generation in range(1, generations + 1):
            grid = next_generation(grid)
            yield generation, grid

    return _run()
