"""
errors.py - Exception hierarchy for the Connect Four engine

Construction and cell-query failures are raised as the exceptions below.
Rejected drops are not exceptions: they come back as a RejectReason on
the MoveResult (see connect4_engine.game.rules).
"""


class Connect4Error(Exception):
    """Base exception for all engine errors."""
    pass


class InvalidDimensionsError(Connect4Error, ValueError):
    """Raised when a board is requested with unusable dimensions."""

    def __init__(self, height, width, minimum: int):
        self.height = height
        self.width = width
        self.minimum = minimum
        super().__init__(
            f"Board dimensions must be integers >= {minimum}, got {height}x{width}"
        )


class OutOfBoundsError(Connect4Error, IndexError):
    """Raised when a cell outside the grid is queried."""

    def __init__(self, row, column, height: int, width: int):
        self.row = row
        self.column = column
        super().__init__(
            f"Cell ({row}, {column}) is outside the {height}x{width} board"
        )


class CellOccupiedError(Connect4Error):
    """Raised when a piece would overwrite an occupied cell."""

    def __init__(self, row: int, column: int):
        self.row = row
        self.column = column
        super().__init__(f"Cell ({row}, {column}) is already occupied")
