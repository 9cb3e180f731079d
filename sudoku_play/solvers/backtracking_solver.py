"""Backtracking solver with MRV cell ordering and bitmask forward checking."""

from __future__ import annotations
import logging
import random
from typing import List, Optional, Tuple

import numpy as np

from .base_solver import BaseSolver, SolverStats
from ..core.board import SudokuBoard

logger = logging.getLogger(__name__)


class SearchBudgetExceeded(Exception):
    """Raised inside a search once its node budget is spent."""


class _Search:
    """
    One depth-first search over a grid.

    Row, column and box occupancy are kept as bitmasks (bit v set means the
    value v is used), so the candidates of a cell are a single mask
    expression. Counting stops as soon as `cap` solutions have been seen.
    """

    def __init__(
        self,
        board: SudokuBoard,
        stats: SolverStats,
        node_budget: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ):
        n = board.size
        self.size = n
        self.box_height = board.box_height
        self.box_width = board.box_width
        self.boxes_per_row = n // board.box_width
        self.full_mask = (1 << (n + 1)) - 2
        self.stats = stats
        self.node_budget = node_budget
        self.rng = rng

        self.grid: List[List[int]] = board.to_list()
        self.row_used = [0] * n
        self.col_used = [0] * n
        self.box_used = [0] * n
        self.empties: List[Tuple[int, int, int]] = []
        self.consistent = True

        for r in range(n):
            for c in range(n):
                b = self._box(r, c)
                v = self.grid[r][c]
                if v == 0:
                    self.empties.append((r, c, b))
                    continue
                bit = 1 << v
                if (self.row_used[r] | self.col_used[c] | self.box_used[b]) & bit:
                    self.consistent = False
                self.row_used[r] |= bit
                self.col_used[c] |= bit
                self.box_used[b] |= bit

        self.cap = 1
        self.count = 0
        self.nodes = 0
        self.first_solution: Optional[List[List[int]]] = None

    def _box(self, r: int, c: int) -> int:
        return (r // self.box_height) * self.boxes_per_row + c // self.box_width

    def run(self, cap: int) -> int:
        """Search until `cap` solutions are found or the space is exhausted."""
        self.cap = cap
        if not self.consistent or cap <= 0:
            return 0
        self._backtrack()
        return self.count

    def _select_cell(self) -> Tuple[Optional[Tuple[int, int, int]], int]:
        """
        Pick the empty cell with the fewest candidates.

        Returns (None, 0) when the grid is full and (cell, 0) when some cell
        has no candidate left.
        """
        best = None
        best_mask = 0
        best_count = self.size + 1
        grid = self.grid

        for cell in self.empties:
            r, c, b = cell
            if grid[r][c]:
                continue
            mask = self.full_mask & ~(self.row_used[r] | self.col_used[c] | self.box_used[b])
            count = bin(mask).count("1")
            if count == 0:
                return cell, 0
            if count < best_count:
                best, best_mask, best_count = cell, mask, count
                if count == 1:
                    break

        return best, best_mask

    def _backtrack(self) -> bool:
        """Returns True once the solution cap is reached."""
        self.stats.iterations += 1

        cell, mask = self._select_cell()
        if cell is None:
            self.count += 1
            if self.first_solution is None:
                self.first_solution = [row[:] for row in self.grid]
            return self.count >= self.cap

        if mask == 0:
            self.stats.backtracks += 1
            return False

        self.nodes += 1
        self.stats.nodes_explored += 1
        if self.node_budget is not None and self.nodes > self.node_budget:
            raise SearchBudgetExceeded(f"node budget of {self.node_budget} spent")

        values = [v for v in range(1, self.size + 1) if mask >> v & 1]
        if self.rng is not None:
            self.rng.shuffle(values)

        r, c, b = cell
        for v in values:
            bit = 1 << v
            self.grid[r][c] = v
            self.row_used[r] |= bit
            self.col_used[c] |= bit
            self.box_used[b] |= bit

            if self._backtrack():
                return True

            self.grid[r][c] = 0
            self.row_used[r] ^= bit
            self.col_used[c] ^= bit
            self.box_used[b] ^= bit

        self.stats.backtracks += 1
        return False


class BacktrackingSolver(BaseSolver):
    """
    Depth-first backtracking solver.

    Features:
    - Minimum Remaining Values (MRV) heuristic for cell selection
    - Forward checking: a cell with no candidate fails the branch at once
    - Ascending candidate order, or randomized when given an rng
    - Optional node budget so a search can never run away
    """

    name = "Backtracking+MRV"

    def __init__(self, node_budget: Optional[int] = None, rng: Optional[random.Random] = None):
        """
        Initialize the solver.

        Args:
            node_budget: Maximum number of branching nodes per search.
                None means unbounded.
            rng: Random source for candidate order. None gives ascending,
                deterministic order.
        """
        super().__init__()
        self.node_budget = node_budget
        self.rng = rng

    def _new_search(self, board: SudokuBoard) -> _Search:
        return _Search(board, self.stats, node_budget=self.node_budget, rng=self.rng)

    def _solve(self, board: SudokuBoard) -> Optional[SudokuBoard]:
        """Find one completion of the board."""
        search = self._new_search(board)
        try:
            search.run(cap=1)
        except SearchBudgetExceeded:
            self.stats.budget_exhausted = True
            logger.debug("Solve abandoned after %d nodes", search.nodes)
            return None

        if search.first_solution is None:
            return None
        return SudokuBoard(board.size, np.array(search.first_solution, dtype=np.int32))

    def fill(self, board: SudokuBoard) -> Optional[SudokuBoard]:
        """
        Complete a board without timing or memory tracking.

        With an rng this produces a random full grid from an empty board.
        """
        self.reset_stats()
        solution = self._solve(board)
        self.stats.solved = solution is not None
        return solution

    def count_solutions(self, board: SudokuBoard, cap: int = 2) -> int:
        """
        Count the solutions of a puzzle, stopping once cap is reached.

        If the node budget runs out the partial count is returned and
        stats.budget_exhausted is set.

        Args:
            board: The puzzle board. It is not modified.
            cap: Maximum solutions to count before stopping.

        Returns:
            Number of solutions found (up to cap).
        """
        self.reset_stats()
        search = self._new_search(board)
        try:
            count = search.run(cap)
        except SearchBudgetExceeded:
            self.stats.budget_exhausted = True
            logger.debug("Solution count abandoned after %d nodes", search.nodes)
            count = search.count
        self.stats.solved = count > 0
        return count


def solve(board: SudokuBoard) -> Optional[SudokuBoard]:
    """Return a completion of the board, or None if it has none."""
    solution, _ = BacktrackingSolver().solve(board)
    return solution


def count_solutions(board: SudokuBoard, cap: int = 2, node_budget: Optional[int] = None) -> int:
    """Count solutions of a puzzle up to cap."""
    return BacktrackingSolver(node_budget=node_budget).count_solutions(board, cap)


def has_unique_solution(board: SudokuBoard, node_budget: Optional[int] = None) -> bool:
    """
    Check if a puzzle has exactly one solution.

    A search that runs out of budget counts as not unique.
    """
    solver = BacktrackingSolver(node_budget=node_budget)
    count = solver.count_solutions(board, cap=2)
    return count == 1 and not solver.stats.budget_exhausted
