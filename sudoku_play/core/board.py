"""Sudoku board representation for 4x4, 6x6 and 9x9 grids."""

from __future__ import annotations
import numpy as np
from typing import Dict, List, Tuple, Optional, Set

from .exceptions import CellOutOfBoundsError, InvalidSizeError, InvalidValueError


# (box_height, box_width) per supported grid size
BOX_SHAPES: Dict[int, Tuple[int, int]] = {
    4: (2, 2),
    6: (2, 3),
    9: (3, 3),
}


def box_shape(size: int) -> Tuple[int, int]:
    """Return (box_height, box_width) for a grid size."""
    try:
        return BOX_SHAPES[size]
    except KeyError:
        supported = ", ".join(str(s) for s in sorted(BOX_SHAPES))
        raise InvalidSizeError(f"Size must be one of {supported}, got {size}") from None


def check_value(value, size: int) -> None:
    """Raise InvalidValueError unless value is an integer in 0..size."""
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise InvalidValueError(f"Value must be an integer, got {value!r}")
    if value < 0 or value > size:
        raise InvalidValueError(f"Value must be 0-{size}, got {value}")


class SudokuBoard:
    """
    Represents a Sudoku board of size 4, 6 or 9.

    Boxes are rectangles of box_height x box_width cells:
    2x2 for 4x4, 2x3 for 6x6 and 3x3 for 9x9.
    """

    def __init__(self, size: int = 9, grid: Optional[np.ndarray] = None):
        """
        Initialize a Sudoku board.

        Args:
            size: Board size (4, 6 or 9).
            grid: Optional initial grid. If None, creates empty board.
        """
        self.size = size
        self.box_height, self.box_width = box_shape(size)

        if grid is not None:
            grid = np.asarray(grid)
            if grid.shape != (size, size):
                raise InvalidSizeError(f"Grid shape must be ({size}, {size}), got {grid.shape}")
            if not np.issubdtype(grid.dtype, np.integer):
                raise InvalidValueError(f"Grid values must be integers, got {grid.dtype}")
            if grid.size and (grid.min() < 0 or grid.max() > size):
                raise InvalidValueError(f"Grid values must be 0-{size}")
            self.grid = grid.astype(np.int32)
        else:
            self.grid = np.zeros((size, size), dtype=np.int32)

    def copy(self) -> SudokuBoard:
        """Create a deep copy of the board."""
        new_board = SudokuBoard(self.size)
        new_board.grid = self.grid.copy()
        return new_board

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def check_bounds(self, row: int, col: int) -> None:
        """Raise CellOutOfBoundsError unless (row, col) lies on the board."""
        if not self.in_bounds(row, col):
            raise CellOutOfBoundsError(
                f"Cell ({row}, {col}) is outside a {self.size}x{self.size} grid"
            )

    def get(self, row: int, col: int) -> int:
        """Get value at position (row, col). 0 means empty."""
        return int(self.grid[row, col])

    def set(self, row: int, col: int, value: int) -> None:
        """Set value at position (row, col). Use 0 to clear."""
        check_value(value, self.size)
        self.grid[row, col] = value

    def clear(self, row: int, col: int) -> None:
        """Clear the cell at position (row, col)."""
        self.grid[row, col] = 0

    def is_empty(self, row: int, col: int) -> bool:
        """Check if cell is empty (value is 0)."""
        return self.grid[row, col] == 0

    def get_row(self, row: int) -> np.ndarray:
        """Get all values in a row."""
        return self.grid[row, :]

    def get_col(self, col: int) -> np.ndarray:
        """Get all values in a column."""
        return self.grid[:, col]

    def box_origin(self, row: int, col: int) -> Tuple[int, int]:
        """Top-left cell of the box containing (row, col)."""
        return (row // self.box_height) * self.box_height, (col // self.box_width) * self.box_width

    def get_box(self, row: int, col: int) -> np.ndarray:
        """Get all values in the box containing (row, col)."""
        box_row, box_col = self.box_origin(row, col)
        return self.grid[box_row:box_row + self.box_height,
                         box_col:box_col + self.box_width].flatten()

    def get_box_index(self, row: int, col: int) -> int:
        """Get the box index (0 to size-1) for a cell, numbered row-major."""
        boxes_per_row = self.size // self.box_width
        return (row // self.box_height) * boxes_per_row + (col // self.box_width)

    def box_cells(self, row: int, col: int) -> List[Tuple[int, int]]:
        """Positions of every cell in the box containing (row, col)."""
        box_row, box_col = self.box_origin(row, col)
        return [
            (box_row + i, box_col + j)
            for i in range(self.box_height)
            for j in range(self.box_width)
        ]

    def get_candidates(self, row: int, col: int) -> Set[int]:
        """
        Get all valid candidate values for an empty cell.

        Returns:
            Set of valid values (1 to size) that can be placed at (row, col).
            Returns empty set if cell is not empty.
        """
        if not self.is_empty(row, col):
            return set()

        used = set(self.get_row(row).tolist())
        used |= set(self.get_col(col).tolist())
        used |= set(self.get_box(row, col).tolist())

        return set(range(1, self.size + 1)) - used

    def get_peers(self, row: int, col: int) -> Set[Tuple[int, int]]:
        """
        Get all peer cell positions (those in same row, column, or box).

        Returns:
            Set of (r, c) tuples, excluding (row, col) itself.
        """
        peers = set()
        for i in range(self.size):
            peers.add((row, i))
            peers.add((i, col))
        peers.update(self.box_cells(row, col))
        peers.remove((row, col))
        return peers

    def get_empty_cells(self) -> List[Tuple[int, int]]:
        """Get list of all empty cell positions, row-major."""
        rows, cols = np.nonzero(self.grid == 0)
        return [(int(r), int(c)) for r, c in zip(rows, cols)]

    def count_empty(self) -> int:
        """Count the number of empty cells."""
        return int(np.sum(self.grid == 0))

    def count_filled(self) -> int:
        """Count the number of filled cells."""
        return int(np.sum(self.grid != 0))

    def is_complete(self) -> bool:
        """Check if all cells are filled."""
        return self.count_empty() == 0

    def _units(self) -> List[np.ndarray]:
        units = [self.get_row(i) for i in range(self.size)]
        units += [self.get_col(j) for j in range(self.size)]
        for box_row in range(0, self.size, self.box_height):
            for box_col in range(0, self.size, self.box_width):
                units.append(self.get_box(box_row, box_col))
        return units

    def is_valid(self) -> bool:
        """
        Check if the current board state is valid.
        Does not check if solution is complete, only if no conflicts exist.
        """
        for unit in self._units():
            non_zero = unit[unit != 0]
            if len(non_zero) != len(set(non_zero.tolist())):
                return False
        return True

    def is_solved(self) -> bool:
        """Check if the puzzle is completely and correctly solved."""
        return self.is_complete() and self.is_valid()

    def to_list(self) -> List[List[int]]:
        """Grid as nested Python lists."""
        return self.grid.tolist()

    def to_string(self) -> str:
        """Compact row-major string, 0 for empty cells."""
        return ''.join(str(v) for v in self.grid.flatten().tolist())

    @classmethod
    def from_string(cls, s: str, size: int = 9) -> SudokuBoard:
        """
        Create a board from a string representation.

        Args:
            s: String of length size*size. 0 or . for empty, digits for values.
            size: Board size.
        """
        box_shape(size)
        if len(s) != size * size:
            raise InvalidSizeError(f"String length must be {size * size}, got {len(s)}")

        values = []
        for c in s:
            if c in '0.':
                values.append(0)
            elif c in '123456789':
                values.append(int(c))
            else:
                raise InvalidValueError(f"Unexpected character {c!r} in puzzle string")

        return cls(size, np.array(values, dtype=np.int32).reshape(size, size))

    @classmethod
    def from_2d_list(cls, data: List[List[int]]) -> SudokuBoard:
        """Create a board from a 2D list."""
        arr = np.array(data)
        if arr.ndim != 2:
            raise InvalidSizeError("Grid must be a list of equal-length rows")
        return cls(arr.shape[0], arr)

    def __str__(self) -> str:
        """Pretty-print the board."""
        lines = []
        boxes_across = self.size // self.box_width
        horizontal_sep = '+' + (('-' * (self.box_width * 2 + 1)) + '+') * boxes_across

        for i in range(self.size):
            if i % self.box_height == 0:
                lines.append(horizontal_sep)

            row_str = '|'
            for j in range(self.size):
                val = self.grid[i, j]
                row_str += ' .' if val == 0 else f' {val}'
                if (j + 1) % self.box_width == 0:
                    row_str += ' |'

            lines.append(row_str)

        lines.append(horizontal_sep)
        return '\n'.join(lines)

    def __repr__(self) -> str:
        return f"SudokuBoard(size={self.size}, filled={self.count_filled()})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SudokuBoard):
            return False
        return self.size == other.size and np.array_equal(self.grid, other.grid)

    def __hash__(self) -> int:
        return hash(self.to_string())
