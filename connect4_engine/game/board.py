"""
board.py - Board representation for the Connect Four engine

This module implements the Board class which holds piece occupancy for a
single game and answers where a piece dropped into a column would land.
The board never clears or overwrites a cell once it is occupied.
"""

from numbers import Integral
from typing import List, Optional

import numpy as np

from connect4_engine.debug import debug
from connect4_engine.errors import CellOccupiedError, InvalidDimensionsError, OutOfBoundsError
from connect4_engine.utils import ROWS, COLS, MIN_DIMENSION, Player, render_board_ascii


def _is_index(value) -> bool:
    """True for ints (including numpy integers) but not bools."""
    return isinstance(value, Integral) and not isinstance(value, bool)


class Board:
    """
    Represents a Connect Four game board.

    Rows are indexed top to bottom, so pieces settle toward row ``rows - 1``.
    """

    def __init__(self, rows: int = ROWS, cols: int = COLS):
        """
        Initialize an empty board.

        Args:
            rows: Board height, at least MIN_DIMENSION
            cols: Board width, at least MIN_DIMENSION

        Raises:
            InvalidDimensionsError: if either dimension is not an integer >= MIN_DIMENSION
        """
        if not (_is_index(rows) and _is_index(cols)
                and rows >= MIN_DIMENSION and cols >= MIN_DIMENSION):
            raise InvalidDimensionsError(rows, cols, MIN_DIMENSION)

        debug.debug(f"Initializing new {rows}x{cols} Board", "board")
        self.rows = int(rows)
        self.cols = int(cols)
        self.grid = np.zeros((self.rows, self.cols), dtype=int)

    def copy(self) -> 'Board':
        """
        Create a deep copy of the board.

        Returns:
            A new Board instance with the same pieces
        """
        new_board = Board(self.rows, self.cols)
        new_board.grid = self.grid.copy()
        return new_board

    def is_valid_column(self, column) -> bool:
        """
        Check if a column index is on the board.

        Args:
            column: Column index (bools and non-integers are never valid)

        Returns:
            True if the column exists, False otherwise
        """
        return _is_index(column) and 0 <= column < self.cols

    def is_valid_position(self, row, column) -> bool:
        """
        Check if a (row, column) position is on the board.

        Returns:
            True if the position exists, False otherwise
        """
        return (_is_index(row) and _is_index(column)
                and 0 <= row < self.rows and 0 <= column < self.cols)

    def _require_column(self, column) -> None:
        # Negative indices would wrap in numpy
        if not self.is_valid_column(column):
            raise OutOfBoundsError(None, column, self.rows, self.cols)

    def _require_position(self, row, column) -> None:
        if not self.is_valid_position(row, column):
            raise OutOfBoundsError(row, column, self.rows, self.cols)

    def find_landing_row(self, column: int) -> Optional[int]:
        """
        Find the row a piece dropped into a column would settle in.

        Args:
            column: The column to drop into

        Returns:
            The lowest empty row, or None if the column is full

        Raises:
            OutOfBoundsError: if the column is not on the board
        """
        self._require_column(column)
        for row in range(self.rows - 1, -1, -1):
            if self.grid[row, column] == Player.EMPTY.value:
                return row
        return None

    def is_column_full(self, column: int) -> bool:
        """
        Check if a column has no empty cell left.

        Raises:
            OutOfBoundsError: if the column is not on the board
        """
        self._require_column(column)
        return self.grid[0, column] != Player.EMPTY.value

    def get_valid_moves(self) -> List[int]:
        """Get the columns that can still accept a piece."""
        return [col for col in range(self.cols) if not self.is_column_full(col)]

    def place(self, row: int, column: int, player: Player) -> None:
        """
        Mark a single empty cell with a player's piece.

        Raises:
            OutOfBoundsError: if the position is not on the board
            CellOccupiedError: if the cell already holds a piece
        """
        if player == Player.EMPTY:
            raise ValueError("Cannot place an empty piece")
        self._require_position(row, column)
        if self.grid[row, column] != Player.EMPTY.value:
            raise CellOccupiedError(row, column)

        debug.trace(f"Placing {player.name} at ({row}, {column})", "board")
        self.grid[row, column] = player.value

    def get_cell(self, row: int, column: int) -> Player:
        """
        Get the occupant of a cell.

        Raises:
            OutOfBoundsError: if the position is outside the grid
        """
        self._require_position(row, column)
        return Player(int(self.grid[row, column]))

    def piece_count(self) -> int:
        """
        Count the pieces on the board.

        Returns:
            Number of occupied cells
        """
        return int(np.count_nonzero(self.grid))

    def is_full(self) -> bool:
        """Check if every cell is occupied."""
        return self.piece_count() == self.rows * self.cols

    def get_state(self) -> np.ndarray:
        """
        Get the current board state as a numpy array.

        Returns:
            A copy of the grid (0 empty, 1 player one, 2 player two)
        """
        return self.grid.copy()

    def render(self) -> str:
        """
        Render the board as a string.

        Returns:
            ASCII representation of the board
        """
        return render_board_ascii(self.grid)

    def __str__(self) -> str:
        """String representation of the board."""
        return self.render()
