"""Benchmarking framework for puzzle generation."""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Dict, Any, Optional
import json
import os

from tqdm import tqdm

from ..core.puzzle import Puzzle
from ..generator import SudokuGenerator, Difficulty, GeneratorSettings


@dataclass
class GenerationResult:
    """Results from generating a single puzzle."""
    puzzle_id: int
    size: int
    difficulty: str
    target_empty: int
    achieved_empty: int
    uniqueness_checks: int
    budget_exhaustions: int
    time_seconds: float
    unique: bool

    @property
    def achieved_fraction(self) -> float:
        return self.achieved_empty / (self.size * self.size)

    @property
    def target_fraction(self) -> float:
        return self.target_empty / (self.size * self.size)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "puzzle_id": self.puzzle_id,
            "size": self.size,
            "difficulty": self.difficulty,
            "target_empty": self.target_empty,
            "achieved_empty": self.achieved_empty,
            "achieved_fraction": self.achieved_fraction,
            "uniqueness_checks": self.uniqueness_checks,
            "budget_exhaustions": self.budget_exhaustions,
            "time_seconds": self.time_seconds,
            "unique": self.unique,
        }


class GenerationBenchmark:
    """
    Measures how the generator behaves across sizes and difficulties.

    For every (size, difficulty) pair it generates a number of puzzles and
    records how many blanks were reached against the target, how many
    uniqueness checks that took and how long it ran.
    """

    def __init__(
        self,
        sizes: Optional[List[int]] = None,
        difficulties: Optional[List[Difficulty]] = None,
        puzzles_per_config: int = 5,
        seed: Optional[int] = None,
        settings: Optional[GeneratorSettings] = None,
        verify: bool = True,
    ):
        """
        Initialize the benchmark.

        Args:
            sizes: Grid sizes to test (default: 4, 6 and 9).
            difficulties: Difficulties to test (default: all).
            puzzles_per_config: Puzzles generated per (size, difficulty).
            seed: Random seed for reproducibility.
            settings: Generator settings shared by every run.
            verify: Re-check each puzzle for a unique solution.
        """
        self.sizes = sizes or [4, 6, 9]
        self.difficulties = difficulties or list(Difficulty)
        self.puzzles_per_config = puzzles_per_config
        self.seed = seed
        self.settings = settings
        self.verify = verify

        self.results: List[GenerationResult] = []
        self.puzzles: Dict[str, List[Puzzle]] = {}

    @staticmethod
    def config_key(size: int, difficulty: Difficulty) -> str:
        return f"{size}x{size}_{difficulty.value}"

    def run(self, show_progress: bool = True) -> List[GenerationResult]:
        """
        Run the full benchmark suite.

        Returns:
            List of GenerationResult objects.
        """
        self.results = []
        self.puzzles = {}

        total = len(self.sizes) * len(self.difficulties) * self.puzzles_per_config
        pbar = tqdm(total=total, desc="Generating", disable=not show_progress)

        for size in self.sizes:
            # One generator per size keeps a seeded run reproducible
            generator = SudokuGenerator(size=size, seed=self.seed, settings=self.settings)
            for difficulty in self.difficulties:
                key = self.config_key(size, difficulty)
                self.puzzles[key] = []
                for puzzle_id in range(self.puzzles_per_config):
                    puzzle = generator.generate_with_solution(difficulty)
                    report = generator.last_report
                    self.puzzles[key].append(puzzle)
                    self.results.append(GenerationResult(
                        puzzle_id=puzzle_id,
                        size=size,
                        difficulty=difficulty.value,
                        target_empty=report.target_empty,
                        achieved_empty=report.achieved_empty,
                        uniqueness_checks=report.uniqueness_checks,
                        budget_exhaustions=report.budget_exhaustions,
                        time_seconds=report.time_seconds,
                        unique=puzzle.is_unique() if self.verify else True,
                    ))
                    pbar.update(1)

        pbar.close()
        return self.results

    def get_summary(self) -> Dict[str, Any]:
        """Get summary statistics from benchmark results."""
        summary = {
            "total_puzzles": len(self.results),
            "sizes": self.sizes,
            "difficulties": [d.value for d in self.difficulties],
            "results_by_config": {},
        }

        for size in self.sizes:
            for difficulty in self.difficulties:
                config_results = [
                    r for r in self.results
                    if r.size == size and r.difficulty == difficulty.value
                ]
                if not config_results:
                    continue

                times = [r.time_seconds for r in config_results]
                achieved = [r.achieved_empty for r in config_results]
                summary["results_by_config"][self.config_key(size, difficulty)] = {
                    "target_empty": config_results[0].target_empty,
                    "avg_achieved_empty": sum(achieved) / len(achieved),
                    "min_achieved_empty": min(achieved),
                    "max_achieved_empty": max(achieved),
                    "reached_target": sum(
                        1 for r in config_results if r.achieved_empty >= r.target_empty
                    ),
                    "avg_time_seconds": sum(times) / len(times),
                    "max_time_seconds": max(times),
                    "avg_uniqueness_checks": sum(
                        r.uniqueness_checks for r in config_results
                    ) / len(config_results),
                    "budget_exhaustions": sum(r.budget_exhaustions for r in config_results),
                    "all_unique": all(r.unique for r in config_results),
                    "tested": len(config_results),
                }

        return summary

    def save_results(self, output_dir: str) -> None:
        """Save benchmark results and generated puzzles to files."""
        os.makedirs(output_dir, exist_ok=True)

        results_file = os.path.join(output_dir, "generation_results.json")
        with open(results_file, "w") as f:
            json.dump([r.to_dict() for r in self.results], f, indent=2)

        summary_file = os.path.join(output_dir, "generation_summary.json")
        with open(summary_file, "w") as f:
            json.dump(self.get_summary(), f, indent=2)

        puzzles_dir = os.path.join(output_dir, "puzzles")
        for key, puzzles in self.puzzles.items():
            SudokuGenerator.save_to_folder(
                puzzles, os.path.join(puzzles_dir, key), prefix=f"puzzle_{key}"
            )

        print(f"Results and puzzles saved to {output_dir}")
