"""Unit tests for puzzle generator."""

import os

import pytest
from sudoku_play.core.exceptions import InvalidDifficultyError, InvalidSizeError
from sudoku_play.core.validator import validate_solution
from sudoku_play.generator import (
    SudokuGenerator,
    Difficulty,
    GeneratorSettings,
    generate_puzzle,
    target_empty_cells,
)
from sudoku_play.solvers import count_solutions


class TestSudokuGenerator:
    """Tests for SudokuGenerator class."""

    @pytest.mark.parametrize("size,difficulty", [
        (4, Difficulty.EASY),
        (4, Difficulty.HARD),
        (6, Difficulty.MEDIUM),
        (6, Difficulty.HARD),
        (9, Difficulty.EASY),
        (9, Difficulty.MEDIUM),
    ])
    def test_generated_puzzle_is_unique(self, size, difficulty):
        """Solution is a full valid grid and the givens have exactly one completion."""
        puzzle = generate_puzzle(size, difficulty, seed=7)

        assert puzzle.size == size
        assert puzzle.solution.is_solved()
        assert validate_solution(puzzle.givens, puzzle.solution)
        assert count_solutions(puzzle.givens, cap=2) == 1

    def test_hard_nine_by_nine(self):
        """The largest target still yields a uniquely solvable puzzle."""
        generator = SudokuGenerator(size=9, seed=3)
        puzzle = generator.generate_with_solution(Difficulty.HARD)

        assert count_solutions(puzzle.givens, cap=2) == 1
        assert generator.last_report.achieved_empty == puzzle.empty_count
        assert puzzle.empty_count <= target_empty_cells(9, Difficulty.HARD)

    def test_same_seed_same_puzzle(self):
        """seed=42, 4x4, easy is reproducible."""
        first = generate_puzzle(4, "easy", seed=42)
        second = generate_puzzle(4, "easy", seed=42)

        assert first.givens == second.givens
        assert first.solution == second.solution

    def test_seed_42_easy_four_by_four(self):
        """The seeded output is stable across runs and releases."""
        puzzle = generate_puzzle(4, "easy", seed=42)

        assert puzzle.givens.to_string() == "3201413014032304"
        assert puzzle.solution.to_string() == "3241413214232314"
        assert puzzle.empty_count == 4

    def test_seeded_generator_does_not_touch_global_random(self):
        import random
        random.seed(0)
        expected = random.random()
        random.seed(0)
        generate_puzzle(4, "easy", seed=42)
        assert random.random() == expected

    def test_four_by_four_hard_bounds(self):
        """A hard 4x4 never clears more than its 16 cells and stays unique."""
        for seed in range(10):
            puzzle = generate_puzzle(4, Difficulty.HARD, seed=seed)
            assert 0 < puzzle.empty_count <= 16
            assert puzzle.empty_count <= target_empty_cells(4, Difficulty.HARD)
            assert count_solutions(puzzle.givens, cap=2) == 1

    def test_easy_reaches_target(self):
        """Easy targets are low enough to be hit exactly."""
        generator = SudokuGenerator(size=9, seed=11)
        puzzle = generator.generate_with_solution(Difficulty.EASY)

        assert puzzle.empty_count == target_empty_cells(9, Difficulty.EASY)
        assert generator.last_report.reached_target

    def test_difficulty_affects_blank_count(self):
        """Test that harder difficulties have fewer clues."""
        generator = SudokuGenerator(size=9, seed=42)

        easy = generator.generate(Difficulty.EASY)
        medium = generator.generate(Difficulty.MEDIUM)

        assert easy.count_filled() > medium.count_filled()

    def test_generate_batch(self):
        """Test batch generation."""
        generator = SudokuGenerator(size=6, seed=42)
        puzzles = generator.generate_batch(3, Difficulty.MEDIUM)

        assert len(puzzles) == 3
        for puzzle in puzzles:
            assert puzzle.givens.is_valid()

    def test_attempt_limit_stops_removal(self):
        """With no uniqueness checks allowed, nothing is cleared."""
        settings = GeneratorSettings(attempt_factor=0)
        puzzle = generate_puzzle(9, Difficulty.HARD, seed=1, settings=settings)
        assert puzzle.empty_count == 0

    def test_tiny_budget_plateaus_without_error(self):
        """Checks that run out of budget keep the cell; generation still succeeds."""
        generator = SudokuGenerator(size=9, seed=5, settings=GeneratorSettings(node_budget=1))
        puzzle = generator.generate_with_solution(Difficulty.HARD)

        report = generator.last_report
        assert report.budget_exhaustions > 0
        assert not report.reached_target
        assert puzzle.solution.is_solved()
        assert count_solutions(puzzle.givens, cap=2) == 1

    def test_report_to_dict(self):
        generator = SudokuGenerator(size=4, seed=2)
        generator.generate(Difficulty.MEDIUM)
        data = generator.last_report.to_dict()
        assert data["size"] == 4
        assert data["difficulty"] == "medium"
        assert data["target_empty"] == 8
        assert "reached_target" in data

    def test_invalid_size(self):
        with pytest.raises(InvalidSizeError):
            generate_puzzle(5, Difficulty.EASY)

    def test_invalid_difficulty(self):
        with pytest.raises(InvalidDifficultyError):
            generate_puzzle(4, "impossible")

    def test_save_to_folder(self, tmp_path):
        puzzles = SudokuGenerator(size=4, seed=9).generate_batch(2, Difficulty.EASY)
        SudokuGenerator.save_to_folder(puzzles, str(tmp_path), prefix="p")

        files = sorted(os.listdir(tmp_path))
        assert files == ["p_1.txt", "p_2.txt"]
        first_line = (tmp_path / "p_1.txt").read_text().splitlines()[0]
        assert first_line == puzzles[0].givens.to_string()


class TestDifficultyLevels:
    """Test difficulty blank targets."""

    def test_fractions(self):
        assert Difficulty.EASY.empty_fraction == 0.30
        assert Difficulty.MEDIUM.empty_fraction == 0.50
        assert Difficulty.HARD.empty_fraction == 0.70

    @pytest.mark.parametrize("size,difficulty,expected", [
        (4, "easy", 4),
        (4, "hard", 11),
        (6, "medium", 18),
        (9, "easy", 24),
        (9, "hard", 56),
    ])
    def test_target_empty_cells(self, size, difficulty, expected):
        assert target_empty_cells(size, difficulty) == expected

    def test_coerce(self):
        assert Difficulty.coerce("Hard") is Difficulty.HARD
        assert Difficulty.coerce(Difficulty.EASY) is Difficulty.EASY
        with pytest.raises(ValueError):
            Difficulty.coerce("expert")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
