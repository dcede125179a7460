"""Command-line interface for Conway's Game of Life."""

import argparse
import sys
import time
from typing import Any, Dict, List, Optional, Tuple

from ..core.census import count_live_cells, get_statistics
from ..core.errors import GameOfLifeError
from ..core.game import iter_generations, simulate
from ..core.grid import Grid
from ..core.patterns import Pattern, PatternLibrary, grid_to_text


class CLIGameOfLife:
    """Command-line interface for running Game of Life simulations."""

    def __init__(self):
        """Initialize CLI interface."""
        self.pattern_library = PatternLibrary()

    def load_pattern(
        self,
        pattern_file: Optional[str] = None,
        pattern_name: Optional[str] = None,
        verbose: bool = False,
    ) -> Optional[Pattern]:
        """Load the initial pattern from a file or the built-in library.

        Args:
            pattern_file: Path to a pattern text file
            pattern_name: Name of a library pattern, used when no file is given
            verbose: Print progress updates

        Returns:
            Pattern instance, or None if the named pattern is unknown

        Raises:
            FileNotFoundError: If the pattern file doesn't exist
            InvalidPatternError: If the pattern text holds no rows
        """
        if pattern_file:
            if verbose:
                print(f"Loading pattern file '{pattern_file}'")
            return self.pattern_library.load_pattern_file(pattern_file)

        if verbose:
            print(f"Loading pattern '{pattern_name}'")
        return self.pattern_library.get_pattern(pattern_name)

    def run_simulation(
        self,
        pattern: Pattern,
        generations: int,
        verbose: bool = False,
        show_steps: bool = False,
    ) -> Tuple[Grid, Dict[str, Any]]:
        """Run a pattern for a number of generations and print the outcome.

        Args:
            pattern: Initial pattern
            generations: Number of generations to simulate
            verbose: Print progress updates
            show_steps: Print every intermediate generation

        Returns:
            Tuple of (final_grid, statistics)

        Raises:
            NegativeGenerationsError: If generations is negative
        """
        initial_grid = pattern.cells
        initial_population = count_live_cells(initial_grid)

        if verbose:
            print(f"Grid: {pattern.width}x{pattern.height} (bounded edges)")

        print("Initial pattern:")
        print(self._format_grid(initial_grid))
        print(f"Live cells: {initial_population}")
        print(f"\nSimulating {generations} generation(s)...\n")

        start_time = time.time()

        if show_steps:
            final_grid = initial_grid
            for generation, grid in iter_generations(initial_grid, generations):
                if generation == 0:
                    continue
                if generation < generations:
                    print(f"Generation {generation}:")
                    print(self._format_grid(grid))
                    print(f"Live cells: {count_live_cells(grid)}\n")
                final_grid = grid
        else:
            final_grid = simulate(initial_grid, generations)

        duration = time.time() - start_time

        print(f"Final pattern (generation {generations}):")
        print(self._format_grid(final_grid))
        print(f"Live cells: {count_live_cells(final_grid)}")

        stats = get_statistics(final_grid)
        stats["generation"] = generations
        stats["initial_population"] = initial_population
        stats["duration_seconds"] = duration
        stats["generations_per_second"] = generations / duration if duration > 0 else 0

        return final_grid, stats

    def _format_grid(self, grid: Grid, max_size: int = 200) -> str:
        """Format grid for display, truncating if too large.

        Args:
            grid: Grid to format
            max_size: Maximum dimension to display

        Returns:
            Formatted grid string
        """
        if grid.width > max_size or grid.height > max_size:
            return f"Grid too large to display ({grid.width}x{grid.height})"

        return grid_to_text(grid)

    def list_patterns(self) -> None:
        """List available patterns by category."""
        categories = self.pattern_library.get_patterns_by_category()

        print("Available patterns:")
        for category, patterns in categories.items():
            print(f"\n{category}:")
            for pattern_name in patterns:
                pattern = self.pattern_library.get_pattern(pattern_name)
                if pattern:
                    size = pattern.get_size()
                    print(f"  {pattern_name}: {size[0]}x{size[1]}, {pattern.population} cells")
                    if pattern.description:
                        print(f"    {pattern.description}")


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        prog="game-of-life",
        description="Run Conway's Game of Life on a pattern for a number of generations",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Pattern format:
  Use '.' for dead cells and 'O' for live cells, one row per line:
    .O.
    ..O
    OOO

Examples:
  # Run a pattern file for 10 generations
  game-of-life patterns/glider.txt 10

  # Show every generation of a blinker
  game-of-life patterns/blinker.txt 4 --show-steps

  # Run a built-in glider with room to move
  game-of-life --pattern Glider 8 --padding 4

  # List available patterns
  game-of-life --list-patterns
        """,
    )

    parser.add_argument("pattern_file", nargs="?", help="Path to file containing the initial pattern")

    parser.add_argument(
        "generations",
        nargs="?",
        type=int,
        help="Number of generations to simulate",
    )

    parser.add_argument(
        "--pattern",
        type=str,
        help="Use a built-in pattern instead of a pattern file",
    )

    parser.add_argument(
        "--padding",
        type=int,
        default=0,
        help="Surround the pattern with this many dead rows/columns (default: 0)",
    )

    parser.add_argument(
        "-s",
        "--show-steps",
        action="store_true",
        help="Display every intermediate generation",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print detailed progress information",
    )

    parser.add_argument(
        "--list-patterns",
        action="store_true",
        help="List all available patterns and exit",
    )

    return parser


def resolve_generations(args: argparse.Namespace) -> None:
    """Move a lone positional number given with --pattern over to generations.

    With --pattern the only positional lands in pattern_file even when it is
    the generation count.
    """
    if args.pattern and args.pattern_file and args.generations is None:
        if args.pattern_file.lstrip("-").isdigit():
            args.generations = int(args.pattern_file)
            args.pattern_file = None


def validate_args(args: argparse.Namespace) -> bool:
    """Validate command-line arguments.

    Args:
        args: Parsed arguments

    Returns:
        True if arguments are valid
    """
    errors = []

    if args.generations is None:
        errors.append("A generation count is required")
    elif args.generations < 0:
        errors.append("Generations must be a non-negative number")

    if args.padding < 0:
        errors.append("Padding must be non-negative")

    if not args.pattern_file and not args.pattern:
        errors.append("A pattern file or --pattern is required")

    if args.pattern_file and args.pattern:
        errors.append("Give either a pattern file or --pattern, not both")

    if errors:
        print("Error: Invalid arguments:")
        for error in errors:
            print(f"  - {error}")
        return False

    return True


def print_results(stats: dict, verbose: bool) -> None:
    """Print simulation results.

    Args:
        stats: Statistics dictionary from run_simulation
        verbose: Whether to show detailed statistics
    """
    if verbose:
        print("\nDetailed Statistics:")
        print(f"  Grid size: {stats['grid_size'][0]}x{stats['grid_size'][1]}")
        print(f"  Initial population: {stats['initial_population']}")
        print(f"  Final population: {stats['population']}")
        print(f"  Population density: {stats['population_density']:.2%}")
        print(f"  Duration: {stats['duration_seconds']:.3f} seconds")
        print(f"  Speed: {stats['generations_per_second']:.0f} generations/second")

        if stats["bounding_box"]:
            bbox = stats["bounding_box"]
            bbox_size = stats["bounding_box_size"]
            print(
                f"  Bounding box: ({bbox[0]}, {bbox[1]}) to ({bbox[2]}, {bbox[3]}) " f"[{bbox_size[0]}x{bbox_size[1]}]"
            )
        else:
            print("  Bounding box: none (all cells dead)")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI interface.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    if argv is None:
        argv = sys.argv[1:]

    parser = create_parser()

    if not argv:
        parser.print_help()
        return 0

    args = parser.parse_args(argv)
    resolve_generations(args)

    cli = CLIGameOfLife()

    # Handle special commands
    if args.list_patterns:
        cli.list_patterns()
        return 0

    if not validate_args(args):
        return 1

    try:
        pattern = cli.load_pattern(args.pattern_file, args.pattern, verbose=args.verbose)
    except FileNotFoundError:
        print(f"Error: Pattern file '{args.pattern_file}' not found")
        return 1
    except OSError as e:
        print(f"Error: Cannot read pattern file '{args.pattern_file}': {e}")
        return 1
    except GameOfLifeError as e:
        print(f"Error: {e}")
        return 1

    if pattern is None:
        available = cli.pattern_library.list_patterns()
        print(f"Error: Pattern '{args.pattern}' not found")
        print(f"Available patterns: {', '.join(available)}")
        print("Use --list-patterns to see detailed information")
        return 1

    if args.padding:
        if args.verbose:
            print(f"Adding a {args.padding}-cell dead border")
        pattern = pattern.padded(args.padding)

    try:
        _, stats = cli.run_simulation(
            pattern,
            args.generations,
            verbose=args.verbose,
            show_steps=args.show_steps,
        )
        print_results(stats, args.verbose)
        return 0

    except GameOfLifeError as e:
        print(f"Error: {e}")
        return 1
    except KeyboardInterrupt:
        print("\nSimulation interrupted by user")
        return 1
    except Exception as e:
        print(f"Error: {e}")
        if args.verbose:
            import traceback

            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
