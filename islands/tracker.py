"""
Bookkeeping shared by every traversal of a finder.

The tracker owns three pieces of state:
- islands: ordered lists of land coords, indexed by island id
- visited: coords (land or water) whose processing has completed
- current_position: the last coord entered by a traversal

Assignment and visitation are distinct: a land cell is assigned as soon as it
joins an island, but only becomes visited once its neighbors are expanded.
Nothing is ever removed, so a second run continues from the leftover state.
"""

import logging

from localtypes import Coord, Island, IslandId

logger = logging.getLogger(__name__)


class ComponentTracker:
    def __init__(self) -> None:
        self._islands: list[Island] = []
        # Cells of _islands, answers the same as a scan of every island
        self._assigned: set[Coord] = set()
        self._visited: set[Coord] = set()
        self.current_position: Coord | None = None

    # Islands

    @property
    def islands(self) -> list[Island]:
        """Copy of the islands found so far, in discovery order."""
        return [list(island) for island in self._islands]

    def is_assigned(self, coord: Coord) -> bool:
        return coord in self._assigned

    def create_island(self, coord: Coord) -> IslandId:
        island_id = len(self._islands)
        self._islands.append([coord])
        self._assigned.add(coord)
        logger.debug(f"Island {island_id} created at {tuple(coord)}")
        return island_id

    def append_to_island(self, island_id: IslandId, coord: Coord) -> None:
        self._islands[island_id].append(coord)
        self._assigned.add(coord)

    def first_cell(self, island_id: IslandId) -> Coord:
        return self._islands[island_id][0]

    # Visitation

    @property
    def visited(self) -> frozenset[Coord]:
        return frozenset(self._visited)

    def is_visited(self, coord: Coord) -> bool:
        return coord in self._visited

    def mark_visited(self, coord: Coord) -> None:
        self._visited.add(coord)

    def set_current_position(self, coord: Coord) -> None:
        self.current_position = coord
        logger.debug(f"Current position: {coord.row} {coord.col}")
