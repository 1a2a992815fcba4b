"""
Island finding on binary grids.

This package finds groups of connected land cells ("islands") in a grid of
0 (water) and 1 (land):

**Validation** (validation.py)
    Shape and value checks run before any traversal.
    - validate_grid(grid)

**Tracking** (tracker.py)
    Islands, visited coords and current position of a finder.
    - ComponentTracker

**Traversal** (traversal.py)
    The directional expansion rule, as a generator of steps.
    - Traversal

**Steppers** (steppers.py)
    Immediate or delayed and cancellable consumption of the steps.
    - SyncStepper, AsyncStepper, CancellationToken

**Finder** (finder.py)
    - IslandFinder(grid, delay).run_sync() / run_async() / stop()
"""

from .errors import (
    EmptyRow,
    InvalidCellValue,
    InvalidGridError,
    IslandError,
    MissingOrMalformedGrid,
    NonRectangularGrid,
    TraversalCancelled,
)
from .finder import IslandFinder
from .steppers import AsyncStepper, CancellationToken, SyncStepper
from .tracker import ComponentTracker
from .traversal import Traversal
from .validation import grid_proportions, validate_grid

__all__ = [
    # Finder
    "IslandFinder",
    # Core
    "ComponentTracker",
    "Traversal",
    "SyncStepper",
    "AsyncStepper",
    "CancellationToken",
    "validate_grid",
    "grid_proportions",
    # Errors
    "IslandError",
    "InvalidGridError",
    "MissingOrMalformedGrid",
    "EmptyRow",
    "NonRectangularGrid",
    "InvalidCellValue",
    "TraversalCancelled",
]
