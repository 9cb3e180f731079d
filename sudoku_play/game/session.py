"""Play state for a single game: selection, entries, errors, timer, completion."""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, List, Optional, Set, Tuple, Union

import numpy as np

from ..core.board import SudokuBoard, check_value
from ..core.exceptions import NoSelectionError
from ..core.puzzle import Puzzle
from ..core.validator import find_conflicts, is_grid_complete, matches_solution
from ..generator import Difficulty, generate_puzzle

Cell = Tuple[int, int]


class GameStatus(Enum):
    """Lifecycle of a session. COMPLETED is terminal."""
    PLAYING = "playing"
    COMPLETED = "completed"


def format_time(seconds: int) -> str:
    """Render elapsed seconds as MM:SS."""
    minutes, secs = divmod(int(seconds), 60)
    return f"{minutes:02d}:{secs:02d}"


@dataclass(frozen=True)
class SessionView:
    """Read-only snapshot of a session for rendering."""
    size: int
    entries: List[List[int]]
    givens_mask: List[List[bool]]
    selected: Optional[Cell]
    error_cells: FrozenSet[Cell]
    elapsed_seconds: int
    status: GameStatus

    @property
    def formatted_time(self) -> str:
        return format_time(self.elapsed_seconds)

    @property
    def is_completed(self) -> bool:
        return self.status is GameStatus.COMPLETED


class GameSession:
    """
    Mutable state of one play through a puzzle.

    A cell is marked as an error when it holds a digit that differs from the
    solution, not when it merely clashes with a peer; see conflict_cells()
    for the latter. Calls must be serialized by the caller.
    """

    def __init__(self, puzzle: Puzzle):
        self.puzzle = puzzle
        self.entries: SudokuBoard = puzzle.givens.copy()
        self.selected: Optional[Cell] = None
        self.error_cells: Set[Cell] = set()
        self.elapsed_seconds = 0
        self.status = GameStatus.PLAYING

    @property
    def size(self) -> int:
        return self.puzzle.size

    @property
    def is_playing(self) -> bool:
        return self.status is GameStatus.PLAYING

    def select_cell(self, row: int, col: int) -> bool:
        """
        Select an editable cell.

        Selecting a given is ignored and the previous selection stays.

        Returns:
            True if the selection now points at (row, col).
        """
        self.entries.check_bounds(row, col)
        if self.puzzle.is_given(row, col):
            return False
        self.selected = (row, col)
        return True

    def _require_selection(self) -> Cell:
        if self.selected is None:
            raise NoSelectionError("Select a cell first")
        return self.selected

    def enter_value(self, value: int) -> bool:
        """
        Write value into the selected cell; 0 clears it.

        Returns:
            False if the game is already completed and nothing changed.
        """
        row, col = self._require_selection()
        check_value(value, self.size)
        if not self.is_playing:
            return False

        self.entries.set(row, col, value)
        if value != 0 and value != self.puzzle.solution.get(row, col):
            self.error_cells.add((row, col))
        else:
            self.error_cells.discard((row, col))

        self.evaluate()
        return True

    def clear_cell(self) -> bool:
        """Empty the selected cell."""
        return self.enter_value(0)

    def apply_hint(self) -> bool:
        """
        Fill the selected cell with its solution value.

        Hints are unlimited and are not recorded against the player.
        """
        row, col = self._require_selection()
        if not self.is_playing:
            return False

        self.entries.set(row, col, self.puzzle.solution.get(row, col))
        self.error_cells.discard((row, col))
        self.evaluate()
        return True

    def tick(self) -> int:
        """Advance the clock by one second while the game is in progress."""
        if self.is_playing:
            self.elapsed_seconds += 1
        return self.elapsed_seconds

    def evaluate(self) -> GameStatus:
        """
        Move to COMPLETED once every cell holds its solution value.

        Error cells are recomputed from the entries first, so edits made
        directly on the entries grid are taken into account.
        """
        if self.is_playing:
            self.error_cells = self._wrong_cells()
        if (
            self.is_playing
            and is_grid_complete(self.entries)
            and not self.error_cells
            and matches_solution(self.entries, self.puzzle.solution)
        ):
            self.status = GameStatus.COMPLETED
        return self.status

    def _wrong_cells(self) -> Set[Cell]:
        grid = self.entries.grid
        wrong = (grid != 0) & (grid != self.puzzle.solution.grid)
        rows, cols = np.nonzero(wrong)
        return {(int(r), int(c)) for r, c in zip(rows, cols)}

    def conflict_cells(self) -> Set[Cell]:
        """Cells whose digit repeats in their row, column or box."""
        return find_conflicts(self.entries)

    def view(self) -> SessionView:
        return SessionView(
            size=self.size,
            entries=self.entries.to_list(),
            givens_mask=self.puzzle.givens_mask,
            selected=self.selected,
            error_cells=frozenset(self.error_cells),
            elapsed_seconds=self.elapsed_seconds,
            status=self.status,
        )

    def new_game(
        self,
        size: int,
        difficulty: Union[Difficulty, str],
        seed: Optional[int] = None,
    ) -> GameSession:
        """Start over on a freshly generated puzzle. This session is left as is."""
        return GameSession(generate_puzzle(size, difficulty, seed=seed))

    def __repr__(self) -> str:
        return (
            f"GameSession(size={self.size}, status={self.status.value}, "
            f"errors={len(self.error_cells)}, elapsed={format_time(self.elapsed_seconds)})"
        )


def create_session(puzzle: Puzzle) -> GameSession:
    """Open a new play session on a puzzle."""
    return GameSession(puzzle)
