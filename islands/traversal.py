"""
Island traversal rule.

The traversal is a depth-first expansion written with an explicit stack of
frames, so its depth is bounded by memory rather than by the interpreter's
recursion limit. It is a generator of Step events: a stepper consumes them and
decides what happens at each one (nothing, waiting, checking for a stop).
Visitation order and island membership are independent of the stepper.

Neighbors of a land cell are expanded in this fixed order:
    1\ right: always
    2\ left: only when the cell was reached from an island (propagated)
    3\ down: always
    4\ up: only when propagated and the cell's column differs from the column
       of the first cell of its island

Left and up depend on how the cell was reached, not only on adjacency. This
differs from a textbook 4-connectivity flood fill and can split a group of
adjacent land cells over several islands.
"""

from collections.abc import Generator, Iterator
from dataclasses import dataclass
from typing import TypeAlias

from constants import LAND
from islands.tracker import ComponentTracker
from islands.validation import grid_proportions
from localtypes import Coord, Grid, IslandId, Step, StepKind

Steps: TypeAlias = Generator[Step, None, None]


@dataclass
class _Frame:
    """A land cell whose neighbors are being expanded."""

    coord: Coord
    island_id: IslandId
    pending: Iterator[Coord]


class Traversal:
    """Expansion rule over a validated grid, writing into a tracker."""

    def __init__(self, grid: Grid, tracker: ComponentTracker) -> None:
        self.grid = grid
        self.tracker = tracker
        self.width, self.height = grid_proportions(grid)

    def sweep(self) -> Steps:
        """Visit every coord in row-major order, as fresh top-level entries."""
        for row in range(self.height):
            for col in range(self.width):
                yield from self.visit(Coord(row, col))

    def visit(self, start: Coord, island_id: IslandId | None = None) -> Steps:
        """
        Visit start and everything its expansion reaches.

        When island_id is given, start is treated as propagated from that island.
        """
        stack: list[_Frame] = []
        try:
            frame = yield from self._enter(start, island_id)
            if frame is not None:
                stack.append(frame)

            while stack:
                frame = stack[-1]
                neighbor = next(frame.pending, None)
                if neighbor is None:
                    # Every neighbor returned
                    self.tracker.mark_visited(frame.coord)
                    stack.pop()
                    continue
                child = yield from self._enter(neighbor, frame.island_id)
                if child is not None:
                    stack.append(child)
        finally:
            # Abandoned expansions still count as visited, innermost first
            while stack:
                self.tracker.mark_visited(stack.pop().coord)

    def _enter(
        self, coord: Coord, island_id: IslandId | None
    ) -> Generator[Step, None, _Frame | None]:
        """
        Process coord up to its neighbor expansion.

        Returns the frame to expand, or None when coord is done with.
        """
        yield Step(StepKind.ENTER, coord)

        if self.tracker.is_visited(coord):
            return None

        self.tracker.set_current_position(coord)

        if self.tracker.is_assigned(coord):
            return None

        yield Step(StepKind.PAUSE, coord)

        if self.grid[coord.row][coord.col] != LAND:
            self.tracker.mark_visited(coord)
            return None

        if island_id is None:
            active = self.tracker.create_island(coord)
        else:
            self.tracker.append_to_island(island_id, coord)
            active = island_id

        return _Frame(coord, active, self._expansions(coord, island_id))

    def _expansions(
        self, coord: Coord, island_id: IslandId | None
    ) -> Iterator[Coord]:
        row, col = coord
        propagated = island_id is not None

        if col < self.width - 1:
            yield Coord(row, col + 1)
        if propagated and col > 0:
            yield Coord(row, col - 1)
        if row < self.height - 1:
            yield Coord(row + 1, col)
        if (
            row > 0
            and propagated
            and self.tracker.first_cell(island_id).col != col
        ):
            yield Coord(row - 1, col)
