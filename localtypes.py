"""
Type definitions for island finding.

This module contains the custom types shared by the traversal core and its
outer collaborators (loader, generator, renderer).
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum
from typing import NamedTuple, TypeAlias

# Cell-related types
Cell: TypeAlias = int  # 0 water, 1 land

# Grid representations
Grid: TypeAlias = Sequence[Sequence[Cell]]  # Functional: grid[row][col] -> cell
CellGrid: TypeAlias = list[list[Cell]]


# Coordinate systems
class Coord(NamedTuple):
    row: int
    col: int


class Proportions(NamedTuple):
    width: int
    height: int


# Islands
IslandId: TypeAlias = int  # Index in the islands list
Island: TypeAlias = list[Coord]  # Coords in discovery order


# Traversal events
class StepKind(Enum):
    """Points of a traversal where a stepper may intervene."""

    ENTER = "enter"  # A node is entered, before any check
    PAUSE = "pause"  # A node is about to be processed


class Step(NamedTuple):
    kind: StepKind
    coord: Coord
