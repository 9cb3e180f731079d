"""Unit tests for Sudoku board and validation."""

import pytest
import numpy as np
from sudoku_play.core.board import SudokuBoard, box_shape
from sudoku_play.core.exceptions import (
    CellOutOfBoundsError,
    InvalidSizeError,
    InvalidValueError,
)
from sudoku_play.core.validator import (
    is_placement_valid,
    is_grid_complete,
    matches_solution,
    find_conflicts,
    validate_solution,
)

from conftest import SOLUTION_4, SOLUTION_6, PUZZLE_9, SOLUTION_9


class TestSudokuBoard:
    """Tests for SudokuBoard class."""

    def test_create_empty_board(self):
        """Test creating an empty 9x9 board."""
        board = SudokuBoard()
        assert board.size == 9
        assert (board.box_height, board.box_width) == (3, 3)
        assert board.count_empty() == 81
        assert board.count_filled() == 0

    @pytest.mark.parametrize("size,shape", [(4, (2, 2)), (6, (2, 3)), (9, (3, 3))])
    def test_box_shapes(self, size, shape):
        """Box shape is derived from the size and tiles the grid."""
        board = SudokuBoard(size=size)
        assert (board.box_height, board.box_width) == shape
        assert board.box_height * board.box_width == size

    @pytest.mark.parametrize("size", [0, 3, 5, 8, 16])
    def test_unsupported_size_rejected(self, size):
        """Only 4, 6 and 9 are playable sizes."""
        with pytest.raises(InvalidSizeError):
            SudokuBoard(size=size)
        with pytest.raises(ValueError):
            box_shape(size)

    def test_grid_shape_must_match(self):
        with pytest.raises(InvalidSizeError):
            SudokuBoard(size=4, grid=np.zeros((6, 6), dtype=np.int32))

    def test_grid_values_checked(self):
        with pytest.raises(InvalidValueError):
            SudokuBoard(size=4, grid=np.full((4, 4), 5))

    def test_float_grid_rejected(self):
        with pytest.raises(InvalidValueError):
            SudokuBoard(size=4, grid=np.full((4, 4), 1.5))
        with pytest.raises(InvalidValueError):
            SudokuBoard.from_2d_list([[1.0, 2, 3, 4]] * 4)

    def test_set_and_get(self):
        """Test setting and getting values."""
        board = SudokuBoard()
        board.set(0, 0, 5)
        assert board.get(0, 0) == 5
        assert not board.is_empty(0, 0)

        board.clear(0, 0)
        assert board.is_empty(0, 0)

    def test_set_rejects_out_of_range_value(self):
        board = SudokuBoard(size=4)
        with pytest.raises(InvalidValueError):
            board.set(0, 0, 5)

    def test_set_rejects_non_integer_value(self):
        board = SudokuBoard(size=4)
        for value in (2.5, 2.0, "2", None, False):
            with pytest.raises(InvalidValueError):
                board.set(0, 0, value)
        assert board.is_empty(0, 0)
        board.set(0, 0, np.int64(2))
        assert board.get(0, 0) == 2

    def test_bounds(self):
        board = SudokuBoard(size=6)
        assert board.in_bounds(5, 5)
        assert not board.in_bounds(6, 0)
        with pytest.raises(CellOutOfBoundsError):
            board.check_bounds(-1, 2)

    def test_get_candidates(self):
        """Test getting valid candidates for a cell."""
        board = SudokuBoard()
        board.set(0, 0, 5)
        board.set(0, 1, 3)

        candidates = board.get_candidates(0, 2)
        assert 5 not in candidates
        assert 3 not in candidates
        assert len(candidates) == 7

    def test_six_by_six_box(self):
        """A 6x6 box spans two rows and three columns."""
        board = SudokuBoard.from_string(SOLUTION_6, size=6)
        assert sorted(board.get_box(3, 4).tolist()) == [1, 2, 3, 4, 5, 6]
        assert board.box_cells(3, 4) == [(2, 3), (2, 4), (2, 5), (3, 3), (3, 4), (3, 5)]
        assert board.get_box_index(0, 0) == 0
        assert board.get_box_index(0, 3) == 1
        assert board.get_box_index(2, 0) == 2
        assert board.get_box_index(5, 5) == 5

    def test_peers(self):
        """A cell has 2*(N-1) line peers plus the rest of its box."""
        board = SudokuBoard(size=6)
        peers = board.get_peers(0, 0)
        assert (0, 0) not in peers
        # 5 row + 5 column + 2 box cells outside the first row and column
        assert len(peers) == 12

    def test_is_valid(self):
        """Test board validation."""
        board = SudokuBoard()
        assert board.is_valid()

        board.set(0, 0, 5)
        board.set(0, 1, 5)
        assert not board.is_valid()

    @pytest.mark.parametrize("text,size", [(SOLUTION_4, 4), (SOLUTION_6, 6), (SOLUTION_9, 9)])
    def test_known_solutions_are_solved(self, text, size):
        assert SudokuBoard.from_string(text, size=size).is_solved()

    def test_from_string(self):
        """Test creating board from string."""
        board = SudokuBoard.from_string("." * 15 + "4", size=4)
        assert board.get(3, 3) == 4
        assert board.count_empty() == 15

    def test_from_string_rejects_bad_input(self):
        with pytest.raises(InvalidSizeError):
            SudokuBoard.from_string("123", size=4)
        with pytest.raises(InvalidValueError):
            SudokuBoard.from_string("x" * 16, size=4)

    @pytest.mark.parametrize("char", ["²", "٣", "３"])
    def test_from_string_rejects_unicode_digits(self, char):
        """Only the ASCII digits 1-9 count as values."""
        with pytest.raises(InvalidValueError):
            SudokuBoard.from_string(char + "0" * 15, size=4)

    def test_to_string(self):
        """Test converting board to string."""
        board = SudokuBoard.from_string(PUZZLE_9)
        assert board.to_string() == PUZZLE_9

    def test_from_2d_list(self):
        board = SudokuBoard.from_2d_list([[1, 2, 3, 4], [3, 4, 1, 2], [2, 1, 4, 3], [4, 3, 2, 1]])
        assert board.size == 4
        assert board.to_string() == SOLUTION_4

    def test_copy(self):
        """Test board copy."""
        board = SudokuBoard()
        board.set(4, 4, 7)
        copy = board.copy()

        assert copy.get(4, 4) == 7

        copy.set(4, 4, 8)
        assert board.get(4, 4) == 7

    def test_pretty_print_six(self):
        """Printed 6x6 board has a separator every two rows."""
        text = str(SudokuBoard.from_string(SOLUTION_6, size=6))
        lines = text.splitlines()
        assert lines[0] == "+-------+-------+"
        assert lines[1] == "| 1 2 3 | 4 5 6 |"
        assert len(lines) == 6 + 4


class TestValidator:
    """Tests for validation utilities."""

    def test_is_placement_valid(self):
        """Test placement validation."""
        board = SudokuBoard()
        board.set(0, 0, 5)

        # Can't place 5 in same row
        assert not is_placement_valid(board, 0, 5, 5)

        # Can't place 5 in same column
        assert not is_placement_valid(board, 5, 0, 5)

        # Can't place 5 in same box
        assert not is_placement_valid(board, 1, 1, 5)

        # Can place different value
        assert is_placement_valid(board, 0, 5, 7)

    def test_placement_ignores_the_cell_itself(self):
        board = SudokuBoard.from_string(SOLUTION_4, size=4)
        assert is_placement_valid(board, 0, 0, 1)

    def test_zero_is_always_valid(self):
        board = SudokuBoard.from_string(SOLUTION_4, size=4)
        assert is_placement_valid(board, 2, 2, 0)

    def test_six_by_six_box_conflict(self):
        """Conflicts are found across the full width of a 2x3 box."""
        board = SudokuBoard(size=6)
        board.set(0, 0, 4)
        assert not is_placement_valid(board, 1, 2, 4)
        assert is_placement_valid(board, 2, 2, 4)

    def test_is_grid_complete(self):
        board = SudokuBoard.from_string(SOLUTION_4, size=4)
        assert is_grid_complete(board)
        board.clear(1, 1)
        assert not is_grid_complete(board)

    def test_matches_solution(self):
        solution = SudokuBoard.from_string(SOLUTION_4, size=4)
        entries = solution.copy()
        assert matches_solution(entries, solution)
        entries.set(0, 0, 2)
        assert not matches_solution(entries, solution)
        assert not matches_solution(SudokuBoard(size=6), solution)

    def test_find_conflicts(self):
        board = SudokuBoard(size=4)
        board.set(0, 0, 3)
        board.set(0, 3, 3)
        board.set(2, 2, 1)
        assert find_conflicts(board) == {(0, 0), (0, 3)}

    def test_validate_solution(self):
        puzzle = SudokuBoard.from_string(PUZZLE_9)
        solution = SudokuBoard.from_string(SOLUTION_9)
        assert validate_solution(puzzle, solution)

        other = SudokuBoard.from_string(SOLUTION_4, size=4)
        assert not validate_solution(puzzle, other)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
