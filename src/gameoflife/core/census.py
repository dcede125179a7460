"""Live-cell census for grids."""

from typing import Any, Dict

from .grid import CellData, Grid


def count_live_cells(grid: CellData) -> int:
    """Count the living cells across the whole grid."""
    if not isinstance(grid, Grid):
        grid = Grid(grid)
    return grid.population


def get_statistics(grid: CellData) -> Dict[str, Any]:
    """Get population and spatial statistics for a grid.

    Returns:
        Dictionary with grid_size, population, population_density and
        bounding box details (bounding_box is None for an all-dead grid)
    """
    if not isinstance(grid, Grid):
        grid = Grid(grid)

    population = grid.population
    bbox = grid.get_bounding_box()

    stats: Dict[str, Any] = {
        "grid_size": grid.shape,
        "population": population,
        "population_density": population / (grid.width * grid.height),
    }

    if bbox:
        stats["bounding_box"] = bbox
        box_height = bbox[2] - bbox[0] + 1
        box_width = bbox[3] - bbox[1] + 1
        stats["bounding_box_size"] = (box_width, box_height)
        stats["bounding_box_area"] = box_width * box_height
    else:
        stats["bounding_box"] = None
        stats["bounding_box_size"] = (0, 0)
        stats["bounding_box_area"] = 0

    return stats
