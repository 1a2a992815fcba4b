"""
Module used to import grids from JSON files

A file holds either a bare two-dimensional array or an object with a "grid" key:
    [[1, 0], [0, 1]]
    {"grid": [[1, 0], [0, 1]]}
"""

import json
import os

from constants import DATA
from islands.errors import MissingOrMalformedGrid
from localtypes import CellGrid


def path_to_grid(path: str) -> CellGrid:
    """
    Read a grid from path, or from the DATA directory when path does not exist.

    Only the JSON structure is checked here, cell values are left to validate_grid.
    """
    if not os.path.exists(path):
        path = os.path.join(DATA, path)

    with open(path, "r") as file:
        data = json.load(file)

    if isinstance(data, dict):
        if "grid" not in data:
            raise MissingOrMalformedGrid(f"No 'grid' key in {path}")
        data = data["grid"]

    return data


def list_grids(directory: str | None = None) -> list[str]:
    """Names of the JSON grids available in directory, DATA by default."""
    directory = DATA if directory is None else directory
    if not os.path.isdir(directory):
        return []
    return sorted(name for name in os.listdir(directory) if name.endswith(".json"))
