"""Command-line interface for the Sudoku puzzle engine."""

import argparse
import json
import logging
import sys

from .core.board import SudokuBoard, BOX_SHAPES
from .core.exceptions import SudokuError
from .generator import SudokuGenerator, Difficulty, GeneratorSettings
from .solvers import BacktrackingSolver

DIFFICULTY_CHOICES = [d.value for d in Difficulty]
SIZE_CHOICES = sorted(BOX_SHAPES)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sudoku-play",
        description="Sudoku Puzzle Generator & Solver for 4x4, 6x6 and 9x9 grids",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Generate 3 easy 4x4 puzzles
  sudoku-play generate --size 4 --count 3 --difficulty easy

  # Solve a 4x4 puzzle
  sudoku-play solve --size 4 --puzzle "1000002000300004"

  # Measure generation across all sizes
  sudoku-play benchmark --puzzles 5 --output results/
        """
    )
    parser.add_argument(
        "--debug", action="store_true",
        help="Show debug logging from the generator and solver"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Generate command
    gen_parser = subparsers.add_parser("generate", help="Generate Sudoku puzzles")
    gen_parser.add_argument(
        "--size", type=int, choices=SIZE_CHOICES, default=9,
        help="Grid size (default: 9)"
    )
    gen_parser.add_argument(
        "--count", "-n", type=int, default=1,
        help="Number of puzzles to generate (default: 1)"
    )
    gen_parser.add_argument(
        "--difficulty", "-d",
        choices=DIFFICULTY_CHOICES + ["all"],
        default="medium",
        help="Difficulty level (default: medium)"
    )
    gen_parser.add_argument(
        "--output", "-o", type=str, default=None,
        help="Output file for puzzles (JSON format)"
    )
    gen_parser.add_argument(
        "--seed", "-s", type=int, default=None,
        help="Random seed for reproducibility"
    )
    gen_parser.add_argument(
        "--node-budget", type=int, default=GeneratorSettings.node_budget,
        help="Search nodes allowed per uniqueness check"
    )

    # Solve command
    solve_parser = subparsers.add_parser("solve", help="Solve a Sudoku puzzle")
    solve_parser.add_argument(
        "--puzzle", "-p", type=str, required=True,
        help="Puzzle string (size*size chars, 0 or . for empty cells)"
    )
    solve_parser.add_argument(
        "--size", type=int, choices=SIZE_CHOICES, default=9,
        help="Grid size (default: 9)"
    )
    solve_parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Show detailed solving statistics"
    )

    # Benchmark command
    bench_parser = subparsers.add_parser("benchmark", help="Measure puzzle generation")
    bench_parser.add_argument(
        "--sizes", type=int, nargs="+", choices=SIZE_CHOICES, default=SIZE_CHOICES,
        help="Grid sizes to benchmark (default: all)"
    )
    bench_parser.add_argument(
        "--difficulty", "-d",
        choices=DIFFICULTY_CHOICES + ["all"],
        default="all",
        help="Difficulty to benchmark (default: all)"
    )
    bench_parser.add_argument(
        "--puzzles", "-n", type=int, default=5,
        help="Puzzles per size and difficulty (default: 5)"
    )
    bench_parser.add_argument(
        "--output", "-o", type=str, default="results",
        help="Output directory for results (default: results)"
    )
    bench_parser.add_argument(
        "--seed", "-s", type=int, default=42,
        help="Random seed for reproducibility (default: 42)"
    )
    bench_parser.add_argument(
        "--no-charts", action="store_true",
        help="Skip chart generation"
    )

    return parser


def main(argv=None):
    """Main entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "generate":
        cmd_generate(args)
    elif args.command == "solve":
        cmd_solve(args)
    elif args.command == "benchmark":
        cmd_benchmark(args)


def _difficulties(choice):
    if choice == "all":
        return list(Difficulty)
    return [Difficulty(choice)]


def cmd_generate(args):
    """Handle the generate command."""
    settings = GeneratorSettings(node_budget=args.node_budget)
    generator = SudokuGenerator(size=args.size, seed=args.seed, settings=settings)

    all_puzzles = []

    for difficulty in _difficulties(args.difficulty):
        print(f"\nGenerating {args.count} {args.size}x{args.size} {difficulty.value} puzzles...")

        for i in range(1, args.count + 1):
            puzzle = generator.generate_with_solution(difficulty)
            report = generator.last_report
            all_puzzles.append({
                "difficulty": difficulty.value,
                "index": i,
                **puzzle.to_dict(),
                "clues": puzzle.givens.count_filled(),
                "reached_target": report.reached_target,
            })

            print(f"\n--- {difficulty.value.capitalize()} Puzzle {i} "
                  f"({puzzle.givens.count_filled()} clues, "
                  f"{report.achieved_empty}/{report.target_empty} blanks) ---")
            print(puzzle.givens)

    if args.output:
        with open(args.output, "w") as f:
            json.dump(all_puzzles, f, indent=2)
        print(f"\nAll puzzles saved to {args.output}")

    print(f"\nTotal puzzles generated: {len(all_puzzles)}")


def cmd_solve(args):
    """Handle the solve command."""
    try:
        board = SudokuBoard.from_string(args.puzzle, size=args.size)
    except SudokuError as e:
        print(f"Error parsing puzzle: {e}")
        sys.exit(1)

    print("Input puzzle:")
    print(board)
    print()

    solver = BacktrackingSolver()
    solution, stats = solver.solve(board)

    if stats.solved:
        print(f"✓ Solved in {stats.time_seconds:.4f}s")
        if args.verbose:
            print(f"  Iterations: {stats.iterations:,}")
            print(f"  Backtracks: {stats.backtracks:,}")
            print(f"  Memory: {stats.memory_bytes / 1024:.2f} KB")
            unique = solver.count_solutions(board, cap=2) == 1
            print(f"  Unique: {'yes' if unique else 'no'}")
        print(solution)
    else:
        print("✗ No solution")
        if args.verbose:
            print(f"  Time: {stats.time_seconds:.4f}s")
            print(f"  Iterations: {stats.iterations:,}")
        sys.exit(2)


def cmd_benchmark(args):
    """Handle the benchmark command."""
    from .benchmark import GenerationBenchmark, Visualizer

    difficulties = _difficulties(args.difficulty)

    print("=" * 60)
    print("SUDOKU GENERATION BENCHMARK")
    print("=" * 60)
    print(f"Sizes: {args.sizes}")
    print(f"Difficulties: {[d.value for d in difficulties]}")
    print(f"Puzzles per configuration: {args.puzzles}")
    print(f"Output directory: {args.output}")
    print("=" * 60)

    benchmark = GenerationBenchmark(
        sizes=args.sizes,
        difficulties=difficulties,
        puzzles_per_config=args.puzzles,
        seed=args.seed,
    )
    results = benchmark.run()
    summary = benchmark.get_summary()

    print("\n" + "=" * 60)
    print("RESULTS SUMMARY")
    print("=" * 60)
    for key, stats in summary["results_by_config"].items():
        print(f"\n{key}:")
        print(f"  Blanks: {stats['avg_achieved_empty']:.1f} avg / {stats['target_empty']} target "
              f"({stats['reached_target']}/{stats['tested']} reached)")
        print(f"  Avg Time: {stats['avg_time_seconds']:.4f}s")
        print(f"  Avg Checks: {stats['avg_uniqueness_checks']:.1f}")
        print(f"  All unique: {'yes' if stats['all_unique'] else 'NO'}")

    benchmark.save_results(args.output)

    if not args.no_charts:
        print("\nGenerating charts...")
        charts = Visualizer(results, args.output).generate_all()
        print(f"Charts saved to {args.output}/")
        for chart in charts:
            print(f"  - {chart.split('/')[-1]}")

    print("\n" + "=" * 60)
    print("Benchmark complete!")


if __name__ == "__main__":
    main()
