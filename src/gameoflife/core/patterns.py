"""Pattern text format, common patterns and pattern management.

A pattern is written one row per line: 'O' is a live cell and any other
character is dead. For example, a glider:

    .O.
    ..O
    OOO
"""

from typing import Dict, List, Optional, Union
from pathlib import Path
import numpy as np

from .errors import InvalidPatternError
from .grid import DEAD_CHAR, LIVE_CHAR, CellData, Grid


def parse_pattern(text: str, name: str = "", description: str = "", source: Optional[str] = None) -> "Pattern":
    """Parse pattern text into a Pattern.

    Leading and trailing blank lines are dropped and every remaining line is
    stripped. Width is the longest line; shorter lines are padded with dead
    cells on the right.

    Args:
        text: Pattern text
        name: Pattern name
        description: Optional description
        source: Where the text came from, e.g. a file path

    Returns:
        New Pattern instance

    Raises:
        InvalidPatternError: If no rows remain after trimming
    """
    stripped = text.strip()
    if not stripped:
        raise InvalidPatternError("Pattern cannot be empty")

    lines = [line.strip() for line in stripped.split("\n")]
    width = max(len(line) for line in lines)

    rows = [[char == LIVE_CHAR for char in line.ljust(width, DEAD_CHAR)] for line in lines]
    return Pattern(name, Grid(rows), description, source)


def grid_to_text(grid: CellData) -> str:
    """Render a grid as pattern text, one line per row, without a trailing newline."""
    if not isinstance(grid, Grid):
        grid = Grid(grid)
    return str(grid)


class Pattern:
    """A named grid produced from pattern text."""

    def __init__(self, name: str, cells: Grid, description: str = "", source: Optional[str] = None) -> None:
        """Initialize a pattern.

        Args:
            name: Pattern name
            cells: Grid holding the pattern
            description: Optional description
            source: Optional origin of the pattern (file path)
        """
        self.name = name
        self.cells = cells
        self.description = description
        self.source = source

    @property
    def width(self) -> int:
        return self.cells.width

    @property
    def height(self) -> int:
        return self.cells.height

    @property
    def population(self) -> int:
        return self.cells.population

    def get_size(self) -> tuple:
        """Get pattern size as (width, height)."""
        return (self.width, self.height)

    def padded(self, margin: int) -> "Pattern":
        """Return a copy surrounded by a border of dead cells.

        Args:
            margin: Number of dead rows/columns to add on every side

        Raises:
            ValueError: If margin is negative
        """
        if margin < 0:
            raise ValueError(f"Padding must be non-negative, got {margin}")
        if margin == 0:
            return self

        mask = np.pad(self.cells.cells != 0, margin, mode="constant", constant_values=False)
        return Pattern(self.name, Grid(mask), self.description, self.source)

    def to_text(self) -> str:
        return grid_to_text(self.cells)

    def __repr__(self) -> str:
        return f"Pattern(name={self.name!r}, width={self.width}, height={self.height})"


_BUILTIN_PATTERNS = [
    # Still life patterns
    ("Block", "2x2 still life block", "OO\nOO"),
    ("Beehive", "Beehive still life", ".OO.\nO..O\n.OO."),
    ("Loaf", "Loaf still life", ".OO.\nO..O\n.O.O\n..O."),
    # Oscillators
    ("Blinker", "Period-2 oscillator", "...\nOOO\n..."),
    ("Toad", "Period-2 oscillator", ".OOO\nOOO."),
    ("Beacon", "Period-2 oscillator", "OO..\nO...\n...O\n..OO"),
    # Spaceships
    ("Glider", "Smallest spaceship, period-4", ".O.\n..O\nOOO"),
    ("Lightweight Spaceship", "LWSS - Period-4 spaceship", "O..O.\n....O\nO...O\n.OOOO"),
    # Methuselahs
    ("R-pentomino", "Famous methuselah that stabilizes after 1103 generations", ".OO\nOO.\n.O."),
]

_CATEGORIES = {
    "Still Life": ["Block", "Beehive", "Loaf"],
    "Oscillators": ["Blinker", "Toad", "Beacon"],
    "Spaceships": ["Glider", "Lightweight Spaceship"],
    "Methuselahs": ["R-pentomino"],
}


class PatternLibrary:
    """Manages a collection of patterns."""

    def __init__(self) -> None:
        self._patterns: Dict[str, Pattern] = {}
        self._load_builtin_patterns()

    def _load_builtin_patterns(self) -> None:
        for name, description, text in _BUILTIN_PATTERNS:
            self.add_pattern(parse_pattern(text, name, description))

    def add_pattern(self, pattern: Pattern) -> None:
        self._patterns[pattern.name] = pattern

    def get_pattern(self, name: str) -> Optional[Pattern]:
        """Get a pattern by name.

        Returns:
            Pattern instance or None if not found
        """
        return self._patterns.get(name)

    def list_patterns(self) -> List[str]:
        return list(self._patterns.keys())

    def get_patterns_by_category(self) -> Dict[str, List[str]]:
        """Get patterns organized by category.

        Patterns added at run time are listed under "Custom". Empty
        categories are left out.
        """
        categories = {category: list(names) for category, names in _CATEGORIES.items()}
        categories["Custom"] = []

        all_builtin = set()
        for cat_patterns in _CATEGORIES.values():
            all_builtin.update(cat_patterns)

        for name in self._patterns:
            if name not in all_builtin:
                categories["Custom"].append(name)

        return {cat: patterns for cat, patterns in categories.items() if patterns}

    def load_pattern_file(self, path: Union[str, Path], name: Optional[str] = None) -> Pattern:
        """Load a pattern from a UTF-8 text file and add it to the library.

        Args:
            path: Pattern file to read
            name: Name to register it under (defaults to the file stem)

        Returns:
            Loaded Pattern instance

        Raises:
            FileNotFoundError: If file doesn't exist
            InvalidPatternError: If the file holds no rows
        """
        filepath = Path(path)
        text = filepath.read_text(encoding="utf-8", errors="replace")

        pattern = parse_pattern(text, name or filepath.stem, source=str(filepath))
        self.add_pattern(pattern)
        return pattern

    def save_pattern(self, pattern: Pattern, path: Union[str, Path]) -> None:
        """Write a pattern to disk in the text format."""
        Path(path).write_text(pattern.to_text() + "\n", encoding="utf-8")
