"""Sudoku puzzle engine for casual play: generation, solving and game sessions."""

from .core import (
    SudokuBoard,
    Puzzle,
    SudokuError,
    InvalidSizeError,
    InvalidValueError,
    InvalidDifficultyError,
    InvalidPuzzleError,
    CellOutOfBoundsError,
    NoSelectionError,
)
from .generator import Difficulty, SudokuGenerator, GeneratorSettings, generate_puzzle
from .solvers import BacktrackingSolver, solve, count_solutions, has_unique_solution
from .game import GameSession, GameStatus, SessionView, create_session

__version__ = "1.0.0"

__all__ = [
    "SudokuBoard",
    "Puzzle",
    "Difficulty",
    "SudokuGenerator",
    "GeneratorSettings",
    "generate_puzzle",
    "BacktrackingSolver",
    "solve",
    "count_solutions",
    "has_unique_solution",
    "GameSession",
    "GameStatus",
    "SessionView",
    "create_session",
    "SudokuError",
    "InvalidSizeError",
    "InvalidValueError",
    "InvalidDifficultyError",
    "InvalidPuzzleError",
    "CellOutOfBoundsError",
    "NoSelectionError",
]
