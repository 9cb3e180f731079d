"""Sudoku puzzle generator with configurable difficulty levels."""

from __future__ import annotations
import logging
import math
import os
import random
import time
from dataclasses import dataclass, asdict
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from ..core.board import SudokuBoard, box_shape
from ..core.exceptions import InvalidDifficultyError
from ..core.puzzle import Puzzle
from ..solvers import BacktrackingSolver

logger = logging.getLogger(__name__)


class Difficulty(Enum):
    """Difficulty levels for Sudoku puzzles."""
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @property
    def empty_fraction(self) -> float:
        """Share of the N*N cells this difficulty tries to leave blank."""
        fractions = {
            Difficulty.EASY: 0.30,
            Difficulty.MEDIUM: 0.50,
            Difficulty.HARD: 0.70,
        }
        return fractions[self]

    @classmethod
    def coerce(cls, value: Union[Difficulty, str]) -> Difficulty:
        """Accept a Difficulty or its name, case-insensitively."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            names = ", ".join(d.value for d in cls)
            raise InvalidDifficultyError(
                f"Difficulty must be one of {names}, got {value!r}"
            ) from None


def target_empty_cells(size: int, difficulty: Union[Difficulty, str]) -> int:
    """Number of blanks a puzzle of this size and difficulty aims for."""
    box_shape(size)
    return math.floor(size * size * Difficulty.coerce(difficulty).empty_fraction)


@dataclass
class GeneratorSettings:
    """Tuning knobs for puzzle generation."""
    # Branching nodes allowed per uniqueness check before giving up on a cell
    node_budget: Optional[int] = 20000
    # Uniqueness checks allowed per puzzle, as a multiple of N*N
    attempt_factor: int = 5


@dataclass
class GenerationReport:
    """What happened while carving one puzzle out of a full grid."""
    size: int
    difficulty: str
    target_empty: int
    achieved_empty: int = 0
    uniqueness_checks: int = 0
    budget_exhaustions: int = 0
    time_seconds: float = 0.0

    @property
    def reached_target(self) -> bool:
        return self.achieved_empty >= self.target_empty

    def to_dict(self) -> Dict[str, Any]:
        return {**asdict(self), "reached_target": self.reached_target}


class SudokuGenerator:
    """
    Generator for uniquely solvable Sudoku puzzles.

    Algorithm:
    1. Fill an empty grid by backtracking with randomized candidate order
    2. Visit the cells in random order and clear each one tentatively
    3. Keep a clearing only if the puzzle still has exactly one solution
    4. Stop at the difficulty's blank target or when no cell can be cleared

    Small grids often run out of removable cells before the hard target;
    that is a valid, easier puzzle rather than a failure.
    """

    def __init__(
        self,
        size: int = 9,
        seed: Optional[int] = None,
        settings: Optional[GeneratorSettings] = None,
    ):
        """
        Initialize the generator.

        Args:
            size: Board size (4, 6 or 9).
            seed: Random seed for reproducibility.
            settings: Search budget and attempt limits.
        """
        box_shape(size)
        self.size = size
        self.seed = seed
        self.rng = random.Random(seed)
        self.settings = settings or GeneratorSettings()
        self.last_report: Optional[GenerationReport] = None

    def generate(self, difficulty: Union[Difficulty, str] = Difficulty.MEDIUM) -> SudokuBoard:
        """
        Generate a Sudoku puzzle with the specified difficulty.

        Returns:
            A SudokuBoard with the givens only.
        """
        return self.generate_with_solution(difficulty).givens.copy()

    def generate_batch(self, count: int, difficulty: Union[Difficulty, str] = Difficulty.MEDIUM) -> List[Puzzle]:
        """Generate multiple puzzles of the same difficulty."""
        return [self.generate_with_solution(difficulty) for _ in range(count)]

    def generate_with_solution(self, difficulty: Union[Difficulty, str] = Difficulty.MEDIUM) -> Puzzle:
        """
        Generate a puzzle along with its solution.

        Args:
            difficulty: Desired difficulty level.

        Returns:
            A Puzzle holding the givens and the unique solution.
        """
        difficulty = Difficulty.coerce(difficulty)
        start_time = time.perf_counter()

        report = GenerationReport(
            size=self.size,
            difficulty=difficulty.value,
            target_empty=target_empty_cells(self.size, difficulty),
        )
        solution = self._generate_complete_board()
        givens = self._remove_cells(solution, report)

        report.time_seconds = time.perf_counter() - start_time
        self.last_report = report
        logger.debug(
            "Generated %dx%d %s puzzle: %d/%d blanks after %d checks (%d over budget)",
            self.size, self.size, difficulty.value, report.achieved_empty,
            report.target_empty, report.uniqueness_checks, report.budget_exhaustions,
        )
        return Puzzle(givens=givens, solution=solution, check_unique=False)

    def _generate_complete_board(self) -> SudokuBoard:
        """Generate a complete valid board using randomized backtracking."""
        solution = BacktrackingSolver(rng=self.rng).fill(SudokuBoard(self.size))
        if solution is None:
            # Every supported size has completions, so an empty grid always fills
            raise RuntimeError(f"Could not fill an empty {self.size}x{self.size} grid")
        return solution

    def _remove_cells(self, solution: SudokuBoard, report: GenerationReport) -> SudokuBoard:
        """
        Remove cells from a complete solution to create a puzzle.

        Ensures the resulting puzzle has a unique solution.
        """
        puzzle = solution.copy()
        checker = BacktrackingSolver(node_budget=self.settings.node_budget)
        max_attempts = self.settings.attempt_factor * self.size * self.size

        cells = [(r, c) for r in range(self.size) for c in range(self.size)]
        self.rng.shuffle(cells)

        removed = 0
        for row, col in cells:
            if removed >= report.target_empty or report.uniqueness_checks >= max_attempts:
                break

            original_value = puzzle.get(row, col)
            puzzle.clear(row, col)

            report.uniqueness_checks += 1
            count = checker.count_solutions(puzzle, cap=2)
            if checker.stats.budget_exhausted:
                report.budget_exhaustions += 1

            if count == 1 and not checker.stats.budget_exhausted:
                removed += 1
            else:
                puzzle.set(row, col, original_value)

        report.achieved_empty = removed
        return puzzle

    @staticmethod
    def save_to_folder(puzzles: List[Puzzle], folder_path: str, prefix: str = "puzzle") -> None:
        """
        Save a list of puzzles to a folder as individual text files.

        Args:
            puzzles: List of Puzzle objects.
            folder_path: Directory to save the puzzles.
            prefix: Prefix for the filename (default: "puzzle").
        """
        os.makedirs(folder_path, exist_ok=True)

        for i, puzzle in enumerate(puzzles, 1):
            file_path = os.path.join(folder_path, f"{prefix}_{i}.txt")
            with open(file_path, "w") as f:
                f.write(puzzle.givens.to_string())
                f.write("\n\nPretty format:\n")
                f.write(str(puzzle.givens))
                f.write("\n\nSolution:\n")
                f.write(str(puzzle.solution))
                f.write("\n")


def generate_puzzle(
    size: int,
    difficulty: Union[Difficulty, str],
    seed: Optional[int] = None,
    settings: Optional[GeneratorSettings] = None,
) -> Puzzle:
    """Generate one uniquely solvable puzzle."""
    return SudokuGenerator(size=size, seed=seed, settings=settings).generate_with_solution(difficulty)
