"""Shared fixtures and known grids."""

import pytest

from sudoku_play.core.board import SudokuBoard
from sudoku_play.core.puzzle import Puzzle


SOLUTION_4 = "1234341221434321"

SOLUTION_6 = (
    "123456"
    "456123"
    "231564"
    "564231"
    "312645"
    "645312"
)

# A known solvable puzzle (medium difficulty) and its solution
PUZZLE_9 = (
    "530070000"
    "600195000"
    "098000060"
    "800060003"
    "400803001"
    "700020006"
    "060000280"
    "000419005"
    "000080079"
)

SOLUTION_9 = (
    "534678912"
    "672195348"
    "198342567"
    "859761423"
    "426853791"
    "713924856"
    "961537284"
    "287419635"
    "345286179"
)

# Blanks carved out of SOLUTION_4, with the digit each one needs
BLANKS_4 = {
    (0, 1): 2,
    (0, 3): 4,
    (1, 2): 1,
    (2, 0): 2,
    (3, 1): 3,
    (3, 3): 1,
}


@pytest.fixture
def solution_4():
    return SudokuBoard.from_string(SOLUTION_4, size=4)


@pytest.fixture
def puzzle_4(solution_4):
    givens = solution_4.copy()
    for row, col in BLANKS_4:
        givens.clear(row, col)
    return Puzzle(givens=givens, solution=solution_4)
