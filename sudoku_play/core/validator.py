"""Constraint checks for Sudoku grids."""

from __future__ import annotations
from typing import Set, Tuple, TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from .board import SudokuBoard


def is_placement_valid(board: SudokuBoard, row: int, col: int, value: int) -> bool:
    """
    Check if value may sit at (row, col) without clashing with a peer.

    The cell itself is ignored, so this answers the same question whether
    it is asked before or after the value is written. A value of 0 means
    clearing the cell and is always valid.

    Args:
        board: The Sudoku board.
        row: Row index.
        col: Column index.
        value: Value to check (0 to board.size).

    Returns:
        True if no other cell in the row, column or box holds value.
    """
    if value == 0:
        return True
    if value < 0 or value > board.size:
        return False

    for r, c in board.get_peers(row, col):
        if board.grid[r, c] == value:
            return False
    return True


def is_grid_complete(board: SudokuBoard) -> bool:
    """True iff no cell is empty."""
    return board.is_complete()


def matches_solution(entries: SudokuBoard, solution: SudokuBoard) -> bool:
    """Elementwise equality of two boards of the same size."""
    if entries.size != solution.size:
        return False
    return bool(np.array_equal(entries.grid, solution.grid))


def is_valid_board(board: SudokuBoard) -> bool:
    """
    Check if the entire board state is valid (no conflicts).

    Args:
        board: The Sudoku board to validate.

    Returns:
        True if no constraints are violated.
    """
    return board.is_valid()


def find_conflicts(board: SudokuBoard) -> Set[Tuple[int, int]]:
    """Every filled cell whose value also appears in one of its peers."""
    conflicts = set()
    for row in range(board.size):
        for col in range(board.size):
            value = board.get(row, col)
            if value and not is_placement_valid(board, row, col, value):
                conflicts.add((row, col))
    return conflicts


def validate_solution(puzzle: SudokuBoard, solution: SudokuBoard) -> bool:
    """
    Validate that a solution correctly solves the puzzle.

    Args:
        puzzle: The original puzzle.
        solution: The proposed solution.

    Returns:
        True if solution is valid and matches puzzle clues.
    """
    if puzzle.size != solution.size:
        return False

    givens = puzzle.grid != 0
    if not np.array_equal(puzzle.grid[givens], solution.grid[givens]):
        return False

    return solution.is_solved()
