"""Exceptions raised by the Game of Life engine."""


class GameOfLifeError(Exception):
    """Base class for all engine errors."""


class InvalidPatternError(GameOfLifeError, ValueError):
    """Raised when pattern text contains no rows after trimming."""


class EmptyGridError(GameOfLifeError, ValueError):
    """Raised when a grid has zero rows or a zero-width row."""


class InvalidGridError(GameOfLifeError, ValueError):
    """Raised when cell data is not a rectangular 2D block."""


class NegativeGenerationsError(GameOfLifeError, ValueError):
    """Raised when a negative number of generations is requested."""
