"""
Find the islands of a grid from the command line.

Usage:
    python main.py --grid islands.json
    python main.py --random 20x40 --seed 3 --mode async --delay 0.02 --animate
    python main.py --random 50x50 --mode async --delay 0.01 --timeout 2
"""

import asyncio
import logging
import sys

from rich.console import Console
from rich.live import Live

from constants import DEFAULT_DELAY, DEFAULT_DENSITY, REFRESH_PERIOD
from islands import IslandFinder, InvalidGridError, TraversalCancelled
from localtypes import Grid
from utils.display import grid_to_rich_text, islands_table, render_finder
from utils.generator import parse_proportions, random_grid
from utils.loader import list_grids, path_to_grid

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(levelname)s | %(message)s",
)
logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID_GRID = 1
EXIT_CANCELLED = 2


async def find_delayed(
    finder: IslandFinder,
    timeout: float | None = None,
    console: Console | None = None,
) -> None:
    """
    Run the delayed traversal, stopping it after timeout seconds if given.

    With a console, the grid is redrawn every REFRESH_PERIOD while the
    traversal progresses.
    """
    if timeout is not None:
        asyncio.get_running_loop().call_later(timeout, finder.stop)

    if console is None:
        await finder.run_async()
        return

    task = asyncio.create_task(finder.run_async())
    with Live(render_finder(finder), console=console, auto_refresh=False) as live:
        while not task.done():
            await asyncio.wait({task}, timeout=REFRESH_PERIOD)
            live.update(render_finder(finder), refresh=True)
    await task


def solve_grid(
    grid: Grid,
    mode: str = "sync",
    delay: float = DEFAULT_DELAY,
    timeout: float | None = None,
    animate: bool = False,
    console: Console | None = None,
) -> int:
    """Find the islands of grid, print them and return the exit code."""
    console = console or Console()
    finder = IslandFinder(grid, delay)

    try:
        if mode == "sync":
            finder.run_sync()
        else:
            asyncio.run(
                find_delayed(finder, timeout, console if animate else None)
            )
    except InvalidGridError as error:
        logger.error(f"Invalid grid: {error}")
        return EXIT_INVALID_GRID
    except TraversalCancelled:
        console.print(islands_table(finder.islands))
        return EXIT_CANCELLED

    if not animate:
        console.print(grid_to_rich_text(grid, finder.islands))
    console.print(islands_table(finder.islands))
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    import argparse

    parser = argparse.ArgumentParser(description="Find islands of land in a binary grid")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--grid", help="JSON file holding the grid")
    source.add_argument("--random", metavar="HxW", help="Generate a random grid")
    source.add_argument(
        "--list", action="store_true", help="List the grids of the data directory"
    )
    parser.add_argument(
        "--density",
        type=float,
        default=DEFAULT_DENSITY,
        help="Share of land cells in a random grid",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random grid seed")
    parser.add_argument(
        "--mode",
        choices=["sync", "async"],
        default="sync",
        help="Immediate or delayed traversal",
    )
    parser.add_argument(
        "--delay",
        type=float,
        default=DEFAULT_DELAY,
        help="Seconds per node in async mode",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Stop the async traversal after this many seconds",
    )
    parser.add_argument(
        "--animate", action="store_true", help="Redraw the grid while searching"
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    args = parser.parse_args(argv)

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    if args.list:
        for name in list_grids():
            print(name)
        return EXIT_OK

    if args.animate and args.mode == "sync":
        parser.error("--animate requires --mode async")

    try:
        if args.grid is not None:
            grid = path_to_grid(args.grid)
        else:
            height, width = parse_proportions(args.random)
            grid = random_grid(height, width, args.density, args.seed)
    except InvalidGridError as error:
        logger.error(f"Invalid grid: {error}")
        return EXIT_INVALID_GRID
    except (OSError, ValueError) as error:
        parser.error(str(error))

    return solve_grid(grid, args.mode, args.delay, args.timeout, args.animate)


if __name__ == "__main__":
    sys.exit(main())
