"""
IslandFinder: entry point of the islands package.

Example:
    >>> finder = IslandFinder([[1, 1, 0, 1]])
    >>> finder.run_sync()
    >>> finder.islands
    [[Coord(row=0, col=0), Coord(row=0, col=1)], [Coord(row=0, col=3)]]

The delayed traversal is a coroutine and can be stopped from elsewhere:
    >>> finder = IslandFinder(grid, delay=0.1)
    >>> task = asyncio.create_task(finder.run_async())
    >>> finder.stop()  # task raises TraversalCancelled at the next node
"""

import logging

from constants import DEFAULT_DELAY
from islands.errors import TraversalCancelled
from islands.steppers import AsyncStepper, CancellationToken, SyncStepper
from islands.tracker import ComponentTracker
from islands.traversal import Traversal
from islands.validation import validate_grid
from localtypes import Coord, Grid, Island

logger = logging.getLogger(__name__)


class IslandFinder:
    """
    Finds islands of a grid, immediately or one delayed node at a time.

    Islands, visited coords and the current position accumulate over every run
    of the same finder. Running two traversals of one finder at the same time
    is not supported.
    """

    def __init__(self, grid: Grid, delay: float = DEFAULT_DELAY) -> None:
        self.grid = grid
        self.delay = delay
        self.tracker = ComponentTracker()
        self.token = CancellationToken()

    # Observable state

    @property
    def islands(self) -> list[Island]:
        return self.tracker.islands

    @property
    def visited(self) -> frozenset[Coord]:
        return self.tracker.visited

    @property
    def current_position(self) -> Coord | None:
        return self.tracker.current_position

    @property
    def stopped(self) -> bool:
        return self.token.cancelled

    # Runs

    def run_sync(self) -> None:
        """
        Find every island without ever waiting.

        Raises:
            InvalidGridError: the grid is malformed, nothing was touched.
        """
        validate_grid(self.grid)
        logger.info(f"Finding islands of a {len(self.grid)}x{len(self.grid[0])} grid")

        steps = SyncStepper().run(Traversal(self.grid, self.tracker).sweep())

        logger.info(f"Found {len(self.tracker.islands)} island(s) in {steps} steps")

    async def run_async(self, token: CancellationToken | None = None) -> None:
        """
        Find every island, waiting self.delay seconds before each processed node.

        Args:
            token: Stop signal checked whenever a node is entered. Defaults to
                the finder's own token, the one stop() cancels.

        Raises:
            InvalidGridError: the grid is malformed, nothing was scheduled.
            TraversalCancelled: the token was cancelled. Islands found so far
                remain readable.
        """
        validate_grid(self.grid)
        token = self.token if token is None else token
        logger.info(
            f"Finding islands of a {len(self.grid)}x{len(self.grid[0])} grid, {self.delay}s per node"
        )

        stepper = AsyncStepper(self.delay, token)
        try:
            steps = await stepper.run(Traversal(self.grid, self.tracker).sweep())
        except TraversalCancelled:
            logger.warning(
                f"Traversal stopped at {self.current_position} with {len(self.tracker.islands)} island(s) found"
            )
            raise

        logger.info(f"Found {len(self.tracker.islands)} island(s) in {steps} steps")

    def stop(self) -> None:
        """Request the running, or next, delayed traversal to stop."""
        if not self.token.cancelled:
            logger.debug("Stop requested")
        self.token.cancel()
