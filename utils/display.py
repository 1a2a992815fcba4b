"""
Terminal rendering of a grid and of the islands found on it.
"""

from collections.abc import Sequence

from rich.console import Group
from rich.table import Table
from rich.text import Text

from constants import (
    CURRENT_COLOR,
    ISLAND_COLORS,
    LAND,
    UNASSIGNED_LAND_COLOR,
    WATER_COLOR,
)
from islands import IslandFinder
from localtypes import Coord, Grid, Island


def island_color(island_id: int) -> tuple[int, int, int]:
    return ISLAND_COLORS[island_id % len(ISLAND_COLORS)]


def grid_to_rich_text(
    grid: Grid,
    islands: Sequence[Island] = (),
    current: Coord | None = None,
    cell_width: int = 2,
) -> Text:
    """Convert a grid to a Rich Text object, one colored block per cell."""
    owner = {coord: i for i, island in enumerate(islands) for coord in island}

    text = Text()
    for row, cells in enumerate(grid):
        for col, cell in enumerate(cells):
            coord = Coord(row, col)
            if coord == current:
                r, g, b = CURRENT_COLOR
            elif coord in owner:
                r, g, b = island_color(owner[coord])
            elif cell == LAND:
                r, g, b = UNASSIGNED_LAND_COLOR
            else:
                r, g, b = WATER_COLOR
            text.append(" " * cell_width, style=f"on rgb({r},{g},{b})")
        text.append("\n")
    return text


def islands_table(islands: Sequence[Island]) -> Table:
    """One row per island: id, size and first cell."""
    table = Table(title=f"{len(islands)} island(s)")
    table.add_column("Island", justify="right")
    table.add_column("Size", justify="right")
    table.add_column("First cell")

    for i, island in enumerate(islands):
        r, g, b = island_color(i)
        table.add_row(
            Text(str(i), style=f"rgb({r},{g},{b})"),
            str(len(island)),
            f"({island[0].row}, {island[0].col})",
        )
    return table


def render_finder(finder: IslandFinder) -> Group:
    """Snapshot of a finder's progress, suitable for rich.live.Live."""
    islands = finder.islands
    current = finder.current_position
    position = "-" if current is None else f"({current.row}, {current.col})"
    status = Text(
        f"Current position: {position}  "
        f"Visited: {len(finder.visited)}  Islands: {len(islands)}"
    )
    return Group(grid_to_rich_text(finder.grid, islands, current), status)
