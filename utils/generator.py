"""
Random grid generation, for demos and large-grid checks.
"""

import numpy as np

from constants import DEFAULT_DENSITY, LAND, WATER
from localtypes import CellGrid


def random_grid(
    height: int, width: int, density: float = DEFAULT_DENSITY, seed: int | None = None
) -> CellGrid:
    """
    Draw a height x width grid where each cell is land with probability density.

    Returns plain Python ints so the grid passes validate_grid.
    """
    if height <= 0 or width <= 0:
        raise ValueError(f"Grid proportions must be positive, got {height}x{width}")
    if not 0.0 <= density <= 1.0:
        raise ValueError(f"Density must be within [0, 1], got {density}")

    rng = np.random.default_rng(seed)
    cells = np.where(rng.random((height, width)) < density, LAND, WATER)
    return cells.tolist()


def parse_proportions(text: str) -> tuple[int, int]:
    """Parse 'HxW' (e.g. '20x40') into (height, width)."""
    try:
        height, width = (int(part) for part in text.lower().split("x"))
    except ValueError:
        raise ValueError(f"Expected HEIGHTxWIDTH, got {text!r}") from None
    return height, width
