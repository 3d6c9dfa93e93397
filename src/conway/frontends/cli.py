"""Command-line interface for Conway's Game of Life."""

import argparse
import sys
import time
from typing import Callable, Optional

from ..core.factory import make_grid
from ..core.game import GameOfLife
from ..core.grid import Grid
from ..core.patterns import PatternLibrary
from ..core.random_source import RandomSource, default_random_source
from .renderer import draw_grid

DEFAULT_ROWS = 20
DEFAULT_COLS = 50
DEFAULT_DELAY = 0.15

CLEAR_SCREEN = "\x1b[2J\x1b[H"


class ConsoleGameOfLife:
    """Runs a Game of Life simulation in the terminal."""

    def __init__(
        self,
        seed: Optional[int] = None,
        sleep: Optional[Callable[[float], None]] = None,
        input_fn: Optional[Callable[[], str]] = None,
    ) -> None:
        """Initialize the console interface.

        Args:
            seed: Optional random seed for reproducible initial grids
            sleep: Function used to pause between generations (default: time.sleep)
            input_fn: Function used to wait for the user to press ENTER (default: input)
        """
        self.pattern_library = PatternLibrary()
        self.random_source = RandomSource(seed) if seed is not None else default_random_source()
        self._sleep = sleep if sleep is not None else time.sleep
        self._input = input_fn if input_fn is not None else input

    def wait_for_start(self) -> None:
        """Print the welcome message and wait for ENTER."""
        print("Welcome Conway's Game of Life!")
        print("Press ENTER to start the simulation.", end="", flush=True)
        self._input()

    def create_grid(
        self,
        rows: int,
        cols: int,
        pattern: Optional[str] = None,
        pattern_row: int = 0,
        pattern_col: int = 0,
        verbose: bool = False,
    ) -> Grid:
        """Create the initial grid, either random or from a named pattern.

        Args:
            rows: Grid rows
            cols: Grid columns
            pattern: Optional pattern name to load
            pattern_row: Row offset for pattern placement
            pattern_col: Column offset for pattern placement
            verbose: Print progress updates

        Returns:
            Generation 0 grid

        Raises:
            ValueError: If the pattern name is unknown
        """
        if pattern:
            loaded_pattern = self.pattern_library.get_pattern(pattern)
            if loaded_pattern is None:
                raise ValueError(f"Pattern '{pattern}' not found")

            if verbose:
                print(f"Loading pattern '{pattern}' at ({pattern_row}, {pattern_col})")
            return loaded_pattern.to_grid(rows, cols, pattern_row, pattern_col)

        if verbose:
            print(f"Generating random {rows}x{cols} grid")
        return make_grid(rows, cols, self.random_source)

    def run(
        self,
        grid: Grid,
        generations: int = 0,
        delay: float = DEFAULT_DELAY,
        clear: bool = True,
        vectorized: bool = False,
        verbose: bool = False,
    ) -> GameOfLife:
        """Repeatedly draw the grid and advance it.

        With a generation limit, generations 0 through the limit are all
        drawn, so the last grid shown is the one returned.

        Args:
            grid: Generation 0
            generations: Number of generations to run (0 runs until interrupted)
            delay: Seconds to wait between generations
            clear: Clear the terminal before drawing each generation
            vectorized: Use the convolution-based stepper
            verbose: Print generation and population under each grid

        Returns:
            The game in its final state
        """
        game = GameOfLife(grid, vectorized=vectorized)

        while True:
            if clear:
                sys.stdout.write(CLEAR_SCREEN)
            draw_grid(game.grid)
            if verbose:
                print(f"Generation {game.generation}, population {game.population}")
            sys.stdout.flush()

            if 0 < generations <= game.generation:
                break

            game.step()

            if delay > 0:
                self._sleep(delay)

        return game

    def list_patterns(self) -> None:
        """List available patterns by category."""
        print("Available patterns:")

        for category, pattern_names in self.pattern_library.get_patterns_by_category().items():
            print(f"\n{category}:")
            for pattern_name in pattern_names:
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
        description="Run Conway's Game of Life in the terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Run a random 20x50 grid until interrupted
  conway-cli

  # Run 100 generations of a seeded 30x30 grid without the start prompt
  conway-cli -r 30 -c 30 -n 100 --seed 42 --no-wait

  # Watch a glider cross the board
  conway-cli --pattern Glider --pattern-row 1 --pattern-col 1

  # List available patterns
  conway-cli --list-patterns
        """,
    )

    # Grid configuration
    parser.add_argument(
        "-r", "--rows", type=int, default=DEFAULT_ROWS, help=f"Grid rows (default: {DEFAULT_ROWS})"
    )

    parser.add_argument(
        "-c", "--cols", type=int, default=DEFAULT_COLS, help=f"Grid columns (default: {DEFAULT_COLS})"
    )

    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed for a reproducible initial grid",
    )

    # Pattern configuration
    parser.add_argument(
        "--pattern",
        type=str,
        help="Load a specific pattern instead of random population",
    )

    parser.add_argument(
        "--pattern-row",
        type=int,
        default=0,
        help="Row offset for pattern placement (default: 0)",
    )

    parser.add_argument(
        "--pattern-col",
        type=int,
        default=0,
        help="Column offset for pattern placement (default: 0)",
    )

    # Simulation configuration
    parser.add_argument(
        "-n",
        "--generations",
        type=int,
        default=0,
        help="Number of generations to run, 0 runs until interrupted (default: 0)",
    )

    parser.add_argument(
        "-d",
        "--delay",
        type=float,
        default=DEFAULT_DELAY,
        help=f"Seconds between generations (default: {DEFAULT_DELAY})",
    )

    parser.add_argument(
        "--vectorized",
        action="store_true",
        help="Compute generations with the convolution-based stepper",
    )

    # Output configuration
    parser.add_argument(
        "--no-wait",
        action="store_true",
        help="Start immediately instead of waiting for ENTER",
    )

    parser.add_argument(
        "--no-clear",
        action="store_true",
        help="Do not clear the terminal between generations",
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


def validate_args(args: argparse.Namespace) -> bool:
    """Validate command-line arguments.

    Args:
        args: Parsed arguments

    Returns:
        True if arguments are valid
    """
    errors = []

    if args.rows <= 0:
        errors.append("Rows must be positive")

    if args.cols <= 0:
        errors.append("Columns must be positive")

    if args.delay < 0:
        errors.append("Delay must be non-negative")

    if args.generations < 0:
        errors.append("Generations must be non-negative")

    if args.pattern_row < 0:
        errors.append("Pattern row offset must be non-negative")

    if args.pattern_col < 0:
        errors.append("Pattern column offset must be non-negative")

    if errors:
        print("Error: Invalid arguments:")
        for error in errors:
            print(f"  - {error}")
        return False

    return True


def main() -> int:
    """Main entry point for CLI interface.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args()

    cli = ConsoleGameOfLife(seed=args.seed)

    # Handle special commands
    if args.list_patterns:
        cli.list_patterns()
        return 0

    if not validate_args(args):
        return 1

    if args.pattern and cli.pattern_library.get_pattern(args.pattern) is None:
        available = cli.pattern_library.list_patterns()
        print(f"Error: Pattern '{args.pattern}' not found")
        print(f"Available patterns: {', '.join(available)}")
        print("Use --list-patterns to see detailed information")
        return 1

    try:
        if not args.no_wait:
            cli.wait_for_start()

        grid = cli.create_grid(
            rows=args.rows,
            cols=args.cols,
            pattern=args.pattern,
            pattern_row=args.pattern_row,
            pattern_col=args.pattern_col,
            verbose=args.verbose,
        )

        game = cli.run(
            grid,
            generations=args.generations,
            delay=args.delay,
            clear=not args.no_clear,
            vectorized=args.vectorized,
            verbose=args.verbose,
        )

        print(f"\nSimulation completed after {game.generation} generations")
        print(f"Final population: {game.population}")
        return 0

    except KeyboardInterrupt:
        # The only way to stop an unlimited run
        print("\nSimulation interrupted by user")
        return 0
    except Exception as e:
        print(f"Error: {e}")
        if args.verbose:
            import traceback

            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
