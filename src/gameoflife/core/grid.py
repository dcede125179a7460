"""Grid data structure for the Game of Life."""

from typing import Any, List, Optional, Sequence, Tuple, Union
import numpy as np

from .errors import EmptyGridError, InvalidGridError

LIVE_CHAR = "O"
DEAD_CHAR = "."

CellData = Union["Grid", np.ndarray, Sequence[Sequence[Any]]]


class Grid:
    """An immutable, rectangular 2D grid of cells.

    Cells are addressed by (row, col) with row 0 at the top and column 0 at
    the left. The cell array is a read-only numpy array of shape
    (height, width); operations that change cells return a new Grid.
    """

    def __init__(self, cells: CellData) -> None:
        """Build a grid from cell data.

        Args:
            cells: Another Grid, a 2D numpy array, or a sequence of rows
                where each cell is truthy for alive

        Raises:
            EmptyGridError: If there are no rows or the first row is empty
            InvalidGridError: If rows differ in length or data is not 2D
        """
        if isinstance(cells, Grid):
            self._cells = cells._cells
            return

        if isinstance(cells, np.ndarray):
            arr = cells
        else:
            rows = list(cells)
            if not rows:
                raise EmptyGridError("Grid cannot be empty")
            try:
                widths = [len(row) for row in rows]
            except TypeError as e:
                raise InvalidGridError("Each row must be a sequence of cells") from e
            if widths[0] == 0:
                raise EmptyGridError("Grid cannot be empty")
            if len(set(widths)) > 1:
                raise InvalidGridError(f"Rows must all have the same length, got lengths {sorted(set(widths))}")
            arr = np.array(rows, dtype=bool)

        if arr.ndim != 2:
            raise InvalidGridError(f"Cell data must be two-dimensional, got {arr.ndim} dimension(s)")
        if arr.shape[0] == 0 or arr.shape[1] == 0:
            raise EmptyGridError("Grid cannot be empty")

        self._cells = self._freeze(arr != 0)

    @staticmethod
    def _freeze(mask: np.ndarray) -> np.ndarray:
        cells = mask.astype(np.int8)
        cells.setflags(write=False)
        return cells

    @classmethod
    def _from_mask(cls, mask: np.ndarray) -> "Grid":
        """Wrap an already validated boolean mask without re-checking it."""
        grid = cls.__new__(cls)
        grid._cells = cls._freeze(mask)
        return grid

    @classmethod
    def empty(cls, width: int, height: int) -> "Grid":
        """Create an all-dead grid.

        Args:
            width: Number of columns
            height: Number of rows

        Raises:
            EmptyGridError: If either dimension is not positive
        """
        if width <= 0 or height <= 0:
            raise EmptyGridError(f"Grid dimensions must be positive, got {width}x{height}")
        return cls._from_mask(np.zeros((height, width), dtype=bool))

    @property
    def cells(self) -> np.ndarray:
        """Read-only cell array of shape (height, width)."""
        return self._cells

    @property
    def width(self) -> int:
        return int(self._cells.shape[1])

    @property
    def height(self) -> int:
        return int(self._cells.shape[0])

    @property
    def shape(self) -> Tuple[int, int]:
        """Get grid dimensions as (width, height)."""
        return (self.width, self.height)

    @property
    def population(self) -> int:
        """Get the number of living cells."""
        return int(np.count_nonzero(self._cells))

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.height and 0 <= col < self.width

    def get_cell(self, row: int, col: int) -> bool:
        """Get the state of a cell.

        Args:
            row: Row coordinate
            col: Column coordinate

        Returns:
            True if cell is alive, False if dead

        Raises:
            IndexError: If coordinates are out of bounds
        """
        if not self.in_bounds(row, col):
            raise IndexError(f"Coordinates ({row}, {col}) out of bounds")

        return bool(self._cells[row, col])

    def with_cell(self, row: int, col: int, alive: bool) -> "Grid":
        """Return a copy of this grid with one cell set.

        Raises:
            IndexError: If coordinates are out of bounds
        """
        if not self.in_bounds(row, col):
            raise IndexError(f"Coordinates ({row}, {col}) out of bounds")

        mask = self._cells != 0
        mask[row, col] = alive
        return Grid._from_mask(mask)

    def to_list(self) -> List[List[bool]]:
        """Convert grid to nested lists of booleans, one list per row."""
        return (self._cells != 0).tolist()

    def get_bounding_box(self) -> Optional[Tuple[int, int, int, int]]:
        """Get bounding box of living cells.

        Returns:
            Tuple of (min_row, min_col, max_row, max_col) or None if no living cells
        """
        rows, cols = np.nonzero(self._cells)
        if len(rows) == 0:
            return None

        return (int(rows.min()), int(cols.min()), int(rows.max()), int(cols.max()))

    def __eq__(self, other: object) -> bool:
        """Check if two grids are equal."""
        if not isinstance(other, Grid):
            return NotImplemented
        return self._cells.shape == other._cells.shape and np.array_equal(self._cells, other._cells)

    def __hash__(self) -> int:
        return hash((self._cells.shape, self._cells.tobytes()))

    def __repr__(self) -> str:
        return f"Grid(width={self.width}, height={self.height}, population={self.population})"

    def __str__(self) -> str:
        """Text rendering with live cells as 'O' and dead as '.'."""
        return "\n".join(
            "".join(LIVE_CHAR if cell else DEAD_CHAR for cell in row) for row in self._cells
        )
