"""Visualization utilities for generation benchmark results."""

from __future__ import annotations
import os
from typing import List

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import seaborn as sns
import numpy as np

from .benchmark import GenerationResult


class Visualizer:
    """
    Chart generator for puzzle generation benchmarks.

    Shows how close each size/difficulty gets to its blank target and what
    that costs in time and uniqueness checks.
    """

    COLORS = {
        "easy": "#2ecc71",    # Green
        "medium": "#f39c12",  # Orange
        "hard": "#e74c3c",    # Red
    }

    def __init__(self, results: List[GenerationResult], output_dir: str = "results"):
        """
        Initialize the visualizer.

        Args:
            results: List of generation results.
            output_dir: Directory to save generated charts.
        """
        self.results = results
        self.output_dir = output_dir
        os.makedirs(output_dir, exist_ok=True)

        sns.set_theme(style="whitegrid")

    def _sizes(self) -> List[int]:
        return sorted(set(r.size for r in self.results))

    def _difficulties(self) -> List[str]:
        order = list(self.COLORS)
        return sorted(set(r.difficulty for r in self.results), key=order.index)

    def _save(self, fig, name: str) -> str:
        fig.tight_layout()
        path = os.path.join(self.output_dir, name)
        fig.savefig(path, dpi=150, bbox_inches='tight')
        plt.close(fig)
        return path

    def generate_all(self) -> List[str]:
        """
        Generate all charts.

        Returns:
            List of paths to generated chart files.
        """
        return [
            self.plot_fill_rate(),
            self.plot_time_by_size(),
            self.plot_uniqueness_checks(),
        ]

    def plot_fill_rate(self) -> str:
        """Grouped bars of achieved blank fraction, with the target marked."""
        fig, ax = plt.subplots(figsize=(10, 6))

        sizes = self._sizes()
        difficulties = self._difficulties()
        x = np.arange(len(sizes))
        width = 0.8 / max(len(difficulties), 1)

        for i, diff in enumerate(difficulties):
            achieved = []
            targets = []
            for size in sizes:
                group = [r for r in self.results if r.size == size and r.difficulty == diff]
                achieved.append(np.mean([r.achieved_fraction for r in group]) if group else 0)
                targets.append(group[0].target_fraction if group else 0)

            offset = (i - len(difficulties) / 2 + 0.5) * width
            ax.bar(x + offset, achieved, width,
                   label=diff.capitalize(),
                   color=self.COLORS.get(diff, "#95a5a6"),
                   edgecolor='black', linewidth=0.5)
            ax.scatter(x + offset, targets, marker='_', s=400, color='black', zorder=3)

        ax.set_xlabel('Grid size', fontsize=12)
        ax.set_ylabel('Blank cells (fraction of grid)', fontsize=12)
        ax.set_title('Achieved vs Target Blanks', fontsize=14, fontweight='bold')
        ax.set_xticks(x)
        ax.set_xticklabels([f"{s}x{s}" for s in sizes])
        ax.set_ylim(0, 1)
        ax.legend(title='Difficulty')

        return self._save(fig, "fill_rate.png")

    def plot_time_by_size(self) -> str:
        """Box plot of generation time per size, split by difficulty."""
        fig, ax = plt.subplots(figsize=(10, 6))

        sns.boxplot(
            x=[f"{r.size}x{r.size}" for r in self.results],
            y=[r.time_seconds for r in self.results],
            hue=[r.difficulty for r in self.results],
            hue_order=self._difficulties(),
            palette=self.COLORS,
            ax=ax,
        )

        ax.set_xlabel('Grid size', fontsize=12)
        ax.set_ylabel('Generation time (seconds)', fontsize=12)
        ax.set_title('Generation Time by Grid Size', fontsize=14, fontweight='bold')
        ax.legend(title='Difficulty')

        return self._save(fig, "time_by_size.png")

    def plot_uniqueness_checks(self) -> str:
        """Scatter of uniqueness checks against blanks reached."""
        fig, ax = plt.subplots(figsize=(10, 6))

        sns.scatterplot(
            x=[r.achieved_empty for r in self.results],
            y=[r.uniqueness_checks for r in self.results],
            hue=[f"{r.size}x{r.size}" for r in self.results],
            style=[r.difficulty for r in self.results],
            s=60,
            ax=ax,
        )

        ax.set_xlabel('Blank cells reached', fontsize=12)
        ax.set_ylabel('Uniqueness checks', fontsize=12)
        ax.set_title('Search Effort per Puzzle', fontsize=14, fontweight='bold')

        return self._save(fig, "uniqueness_checks.png")
