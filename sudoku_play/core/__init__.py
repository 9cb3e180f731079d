"""Core module for Sudoku board representation and validation."""

from .board import SudokuBoard, BOX_SHAPES, box_shape
from .exceptions import (
    SudokuError,
    InvalidSizeError,
    InvalidValueError,
    InvalidDifficultyError,
    InvalidPuzzleError,
    CellOutOfBoundsError,
    NoSelectionError,
)
from .validator import (
    is_placement_valid,
    is_grid_complete,
    matches_solution,
    is_valid_board,
    find_conflicts,
    validate_solution,
)
from .puzzle import Puzzle

__all__ = [
    "SudokuBoard",
    "BOX_SHAPES",
    "box_shape",
    "Puzzle",
    "SudokuError",
    "InvalidSizeError",
    "InvalidValueError",
    "InvalidDifficultyError",
    "InvalidPuzzleError",
    "CellOutOfBoundsError",
    "NoSelectionError",
    "is_placement_valid",
    "is_grid_complete",
    "matches_solution",
    "is_valid_board",
    "find_conflicts",
    "validate_solution",
]
