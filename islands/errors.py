"""
Exceptions raised by the island finder.

Validation errors all derive from InvalidGridError (itself a ValueError) and
are raised before any traversal state is touched. TraversalCancelled is the
only error that can surface after partial progress.
"""


class IslandError(Exception):
    """Base class of every error raised by the islands package."""


class InvalidGridError(IslandError, ValueError):
    """The grid is not a non-empty rectangular array of 0 and 1."""


class MissingOrMalformedGrid(InvalidGridError):
    def __init__(self, reason: str = "grid is missing or not two-dimensional"):
        super().__init__(reason)


class EmptyRow(InvalidGridError):
    def __init__(self, row: int):
        self.row = row
        super().__init__(f"Row {row} must contain at least one cell")


class NonRectangularGrid(InvalidGridError):
    def __init__(self, row: int, expected: int, actual: int):
        self.row = row
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"All rows must have the same length: row {row} has {actual} cells, expected {expected}"
        )


class InvalidCellValue(InvalidGridError):
    def __init__(self, row: int, col: int, value: object):
        self.row = row
        self.col = col
        self.value = value
        super().__init__(f"Cell ({row}, {col}) must be 0 or 1, got {value!r}")


class TraversalCancelled(IslandError):
    """The delayed traversal was stopped before completion."""

    def __init__(self, message: str = "traversal stopped"):
        super().__init__(message)
