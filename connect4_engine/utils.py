"""
utils.py - Constants, enumerations and win detection for the Connect Four engine

This module provides the shared constants and enumerations used by the engine,
the four-in-a-row detector, and an ASCII renderer for hosts.
"""

from enum import Enum, auto
from typing import Iterator, List, Optional, Tuple

import numpy as np

from connect4_engine.debug import debug

# Default board size
ROWS = 6
COLS = 7

CONNECT_N = 4  # Number of pieces in a row to win
MIN_DIMENSION = CONNECT_N  # Smallest board side able to hold a winning run


class Player(Enum):
    """Enumeration representing players and cell states."""
    EMPTY = 0
    ONE = 1    # First player
    TWO = 2    # Second player

    def other(self) -> 'Player':
        """Get the other player."""
        if self == Player.ONE:
            return Player.TWO
        elif self == Player.TWO:
            return Player.ONE
        return Player.EMPTY

    def __str__(self):
        if self == Player.EMPTY:
            return " "
        elif self == Player.ONE:
            return "X"
        else:
            return "O"


class GameResult(Enum):
    """Enumeration representing the game outcome."""
    IN_PROGRESS = auto()
    PLAYER_ONE_WIN = auto()
    PLAYER_TWO_WIN = auto()
    DRAW = auto()

    @classmethod
    def win_for(cls, player: Player) -> 'GameResult':
        """Get the winning result for the given player."""
        if player == Player.ONE:
            return cls.PLAYER_ONE_WIN
        if player == Player.TWO:
            return cls.PLAYER_TWO_WIN
        raise ValueError(f"No win result for {player!r}")

    def is_game_over(self) -> bool:
        """Check if the game is over."""
        return self != GameResult.IN_PROGRESS

    def winner(self) -> Optional[Player]:
        """Get the winning player, or None for a draw or unfinished game."""
        if self == GameResult.PLAYER_ONE_WIN:
            return Player.ONE
        if self == GameResult.PLAYER_TWO_WIN:
            return Player.TWO
        return None


class Direction(Enum):
    """Enumeration representing the orientations of a winning run."""
    HORIZONTAL = auto()      # left to right
    VERTICAL = auto()        # top to bottom
    DIAGONAL_DOWN_RIGHT = auto()
    DIAGONAL_DOWN_LEFT = auto()


# Direction vectors (row, col); insertion order is the scan order
DIRECTION_VECTORS = {
    Direction.HORIZONTAL: (0, 1),
    Direction.VERTICAL: (1, 0),
    Direction.DIAGONAL_DOWN_RIGHT: (1, 1),
    Direction.DIAGONAL_DOWN_LEFT: (1, -1),
}


def is_valid_position(grid: np.ndarray, row: int, col: int) -> bool:
    """
    Check if a position is within the board boundaries.

    Args:
        grid: The game board
        row: Row index
        col: Column index

    Returns:
        True if position is valid, False otherwise
    """
    rows, cols = grid.shape
    return 0 <= row < rows and 0 <= col < cols


def iter_runs(grid: np.ndarray) -> Iterator[List[Tuple[int, int]]]:
    """
    Yield every candidate run of CONNECT_N cells anchored at each board cell.

    Anchors are visited row-major and, for each anchor, runs are produced in
    DIRECTION_VECTORS order. Runs may extend past the board edges; callers
    are expected to bounds-check each cell.
    """
    rows, cols = grid.shape
    for row in range(rows):
        for col in range(cols):
            for dr, dc in DIRECTION_VECTORS.values():
                yield [(row + i * dr, col + i * dc) for i in range(CONNECT_N)]


def _is_winning_run(grid: np.ndarray, run: List[Tuple[int, int]], player_value: int) -> bool:
    # Checked before indexing: a negative index would wrap in numpy
    return all(
        is_valid_position(grid, r, c) and grid[r, c] == player_value
        for r, c in run
    )


def find_winning_line(grid: np.ndarray, player: Player) -> List[Tuple[int, int]]:
    """
    Find the first four-in-a-row belonging to a player.

    Args:
        grid: The game board
        player: The player to check for

    Returns:
        List of (row, col) positions of the run, or empty list if none
    """
    if player == Player.EMPTY:
        return []

    for run in iter_runs(grid):
        if _is_winning_run(grid, run, player.value):
            debug.trace(f"Winning run for {player.name}: {run}", "board")
            return run
    return []


def check_win(grid: np.ndarray, player: Player) -> bool:
    """
    Check the whole board for a four-in-a-row belonging to a player.

    Every cell is tried as the start of a horizontal, vertical and both
    diagonal runs, so a run is found wherever it lies on the board.

    Args:
        grid: The game board
        player: The player to check for

    Returns:
        True if the player has four in a row, False otherwise
    """
    return bool(find_winning_line(grid, player))


def check_win_at_position(grid: np.ndarray, row: int, col: int) -> bool:
    """
    Check if the piece at the given position is part of a four-in-a-row.

    Only runs through (row, col) are examined. After each placement this
    gives the same answer as check_win for the placing player, as long as
    the board held no earlier win.

    Args:
        grid: The game board
        row: Row index where piece was placed
        col: Column index where piece was placed

    Returns:
        True if the move results in a win, False otherwise
    """
    player_value = grid[row, col]
    if player_value == Player.EMPTY.value:
        return False

    for dr, dc in DIRECTION_VECTORS.values():
        count = 1  # The piece just placed

        # Check in the positive direction
        r, c = row + dr, col + dc
        while is_valid_position(grid, r, c) and grid[r, c] == player_value:
            count += 1
            r += dr
            c += dc

        # Check in the negative direction
        r, c = row - dr, col - dc
        while is_valid_position(grid, r, c) and grid[r, c] == player_value:
            count += 1
            r -= dr
            c -= dc

        if count >= CONNECT_N:
            return True

    return False


def render_board_ascii(grid: np.ndarray) -> str:
    """
    Render the board as ASCII art.

    Args:
        grid: The game board

    Returns:
        ASCII representation of the board
    """
    rows, cols = grid.shape
    border = "|" + "-" * (cols * 2 - 1) + "|"

    result = [border]
    for row in range(rows):
        cells = [str(Player(int(grid[row, col]))) for col in range(cols)]
        result.append("|" + " ".join(cells) + "|")
    result.append(border)

    # Column numbers past 9 only show their last digit
    result.append("|" + " ".join(str(col % 10) for col in range(cols)) + "|")

    return "\n".join(result)
