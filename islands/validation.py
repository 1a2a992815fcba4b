"""
Grid well-formedness checks.

The checks run in a fixed order and the first failing one determines the
reported error:
    1\ the grid is a non-empty sequence
    2\ every row is a sequence
    3\ no row is empty
    4\ every row has the length of the first one
    5\ every cell is exactly 0 or 1
"""

from collections.abc import Sequence

from constants import LAND, WATER
from islands.errors import (
    EmptyRow,
    InvalidCellValue,
    MissingOrMalformedGrid,
    NonRectangularGrid,
)
from localtypes import Grid, Proportions


def _is_sequence(value: object) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


def _is_cell(value: object) -> bool:
    # bool is an int subclass, True would pass as land otherwise.
    # Integral floats are kept: JSON grids may hold 1.0
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return value in (WATER, LAND)


def validate_grid(grid: Grid | None) -> None:
    """
    Check that grid is a non-empty rectangular array of 0 and 1.

    Raises:
        MissingOrMalformedGrid: grid absent, not a sequence of sequences, or without rows.
        EmptyRow: a row has no cell.
        NonRectangularGrid: a row length differs from the first row's.
        InvalidCellValue: a cell is neither 0 nor 1 (first one in row-major order).
    """
    if grid is None or not _is_sequence(grid) or len(grid) == 0:
        raise MissingOrMalformedGrid("Grid is not set")

    if not all(_is_sequence(row) for row in grid):
        raise MissingOrMalformedGrid("Grid must be a two-dimensional array")

    for index, row in enumerate(grid):
        if len(row) == 0:
            raise EmptyRow(index)

    width = len(grid[0])
    for index, row in enumerate(grid):
        if len(row) != width:
            raise NonRectangularGrid(index, width, len(row))

    for row_index, row in enumerate(grid):
        for col_index, value in enumerate(row):
            if not _is_cell(value):
                raise InvalidCellValue(row_index, col_index, value)


def grid_proportions(grid: Grid) -> Proportions:
    """Width and height of an already validated grid."""
    return Proportions(len(grid[0]), len(grid))
