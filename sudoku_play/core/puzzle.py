"""Immutable puzzle: the givens together with their unique solution."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .board import SudokuBoard
from .exceptions import InvalidPuzzleError
from .validator import validate_solution


def _frozen_copy(board: SudokuBoard) -> SudokuBoard:
    frozen = board.copy()
    frozen.grid.flags.writeable = False
    return frozen


@dataclass(frozen=True)
class Puzzle:
    """
    A generated puzzle.

    Both boards are private read-only copies, so a Puzzle never changes after
    construction. Play state lives in a GameSession, which works on its own
    copy of the givens.

    The givens must admit exactly one completion. check_unique=False skips
    that search for callers that already guarantee it, like the generator.
    """
    givens: SudokuBoard
    solution: SudokuBoard
    check_unique: bool = field(default=True, compare=False, repr=False)

    def __post_init__(self):
        if self.givens.size != self.solution.size:
            raise InvalidPuzzleError(
                f"Givens are {self.givens.size}x{self.givens.size} but the "
                f"solution is {self.solution.size}x{self.solution.size}"
            )
        if not validate_solution(self.givens, self.solution):
            raise InvalidPuzzleError("Solution is not a valid completion of the givens")
        if self.check_unique:
            from ..solvers import has_unique_solution
            if not has_unique_solution(self.givens):
                raise InvalidPuzzleError("Givens admit more than one solution")

        object.__setattr__(self, "givens", _frozen_copy(self.givens))
        object.__setattr__(self, "solution", _frozen_copy(self.solution))

    @property
    def size(self) -> int:
        return self.givens.size

    @property
    def empty_count(self) -> int:
        return self.givens.count_empty()

    @property
    def givens_mask(self) -> List[List[bool]]:
        """True where the cell is a given and may not be edited."""
        return (self.givens.grid != 0).tolist()

    def is_given(self, row: int, col: int) -> bool:
        return not self.givens.is_empty(row, col)

    def is_unique(self, node_budget: Optional[int] = None) -> bool:
        """Re-check that the givens admit exactly one completion."""
        from ..solvers import has_unique_solution
        return has_unique_solution(self.givens, node_budget=node_budget)

    def to_dict(self) -> Dict[str, Any]:
        """Plain structural form, suitable for JSON."""
        return {
            "size": self.size,
            "givens": self.givens.to_string(),
            "solution": self.solution.to_string(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Puzzle:
        size = int(data["size"])
        return cls(
            givens=SudokuBoard.from_string(data["givens"], size),
            solution=SudokuBoard.from_string(data["solution"], size),
        )
