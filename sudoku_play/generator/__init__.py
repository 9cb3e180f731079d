"""Generator module for creating Sudoku puzzles."""

from .generator import (
    SudokuGenerator,
    Difficulty,
    GeneratorSettings,
    GenerationReport,
    generate_puzzle,
    target_empty_cells,
)

__all__ = [
    "SudokuGenerator",
    "Difficulty",
    "GeneratorSettings",
    "GenerationReport",
    "generate_puzzle",
    "target_empty_cells",
]
