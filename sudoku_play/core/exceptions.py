"""Exception types raised by the puzzle engine.

Only precondition violations are raised. Unsatisfiable grids and exhausted
search budgets are reported through return values, and a wrong answer is
ordinary game state.
"""


class SudokuError(Exception):
    """Base class for all puzzle engine errors."""


class InvalidSizeError(SudokuError, ValueError):
    """Grid size is not supported or a grid has the wrong shape."""


class InvalidValueError(SudokuError, ValueError):
    """A cell value lies outside 0..N."""


class InvalidDifficultyError(SudokuError, ValueError):
    """Unknown difficulty name."""


class InvalidPuzzleError(SudokuError, ValueError):
    """Givens and solution do not form a consistent puzzle."""


class CellOutOfBoundsError(SudokuError, IndexError):
    """Row or column index outside the grid."""


class NoSelectionError(SudokuError, RuntimeError):
    """A session command needs a selected cell but none is selected."""
