"""
Steppers drive a traversal and decide what happens at each of its steps.

- SyncStepper runs every step immediately and never waits.
- AsyncStepper checks a cancellation token whenever a node is entered and
  waits for a fixed delay before a node is processed.

Both consume the same Step events, so they produce the same islands in the
same order; only the pacing differs.
"""

import asyncio
import logging
import threading

from islands.errors import TraversalCancelled
from islands.traversal import Steps
from localtypes import StepKind

logger = logging.getLogger(__name__)


class CancellationToken:
    """
    Cooperative stop signal.

    Once cancelled a token stays cancelled. It may be cancelled from another
    task or another thread.
    """

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def raise_if_cancelled(self) -> None:
        if self._event.is_set():
            raise TraversalCancelled()


class SyncStepper:
    def run(self, steps: Steps) -> int:
        """Exhaust steps. Returns the number of steps taken."""
        count = 0
        for _ in steps:
            count += 1
        return count


class AsyncStepper:
    def __init__(self, delay: float, token: CancellationToken) -> None:
        self.delay = delay
        self.token = token

    async def run(self, steps: Steps) -> int:
        """
        Exhaust steps, pausing delay seconds before each processed node.

        Raises:
            TraversalCancelled: the token was cancelled when a node was entered.
                The traversal is abandoned, nodes still being expanded are
                marked visited while it unwinds.
        """
        count = 0
        try:
            for step in steps:
                count += 1
                if step.kind is StepKind.ENTER:
                    self.token.raise_if_cancelled()
                else:
                    await asyncio.sleep(self.delay)
        finally:
            steps.close()
        return count
