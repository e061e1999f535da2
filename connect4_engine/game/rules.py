"""
rules.py - Game state management for the Connect Four engine

This module provides:
1. ConnectFourGame, which owns a board, the player to move and the result
2. The result types handed back to hosts (Move, MoveResult, GameState)
3. Module-level functions mirroring the game methods for hosts that prefer them
"""

import time
from dataclasses import dataclass
from enum import Enum, auto
from typing import List, Optional, Tuple

import numpy as np

from connect4_engine.debug import debug
from connect4_engine.game.board import Board
from connect4_engine.utils import (ROWS, COLS, Player, GameResult,
                                   check_win_at_position, find_winning_line)


class RejectReason(Enum):
    """Why a drop was refused. A refused drop never changes the game."""
    INVALID_COLUMN = auto()
    COLUMN_FULL = auto()
    GAME_OVER = auto()


@dataclass(frozen=True)
class Move:
    """A single accepted placement."""
    row: int
    column: int
    player: Player


@dataclass(frozen=True)
class MoveResult:
    """
    Outcome of a drop request.

    Exactly one of ``move`` (placed) and ``reason`` (rejected) is set.
    ``result`` is the game result after the request was handled.
    """
    move: Optional[Move]
    reason: Optional[RejectReason]
    result: GameResult

    @classmethod
    def placed(cls, move: Move, result: GameResult) -> 'MoveResult':
        """Build the result of an accepted drop."""
        return cls(move=move, reason=None, result=result)

    @classmethod
    def rejected(cls, reason: RejectReason, result: GameResult) -> 'MoveResult':
        """Build the result of a refused drop."""
        return cls(move=None, reason=reason, result=result)

    @property
    def accepted(self) -> bool:
        """True if the piece was placed."""
        return self.move is not None

    def __bool__(self) -> bool:
        """Truthy only for accepted drops."""
        return self.accepted


@dataclass(frozen=True)
class GameState:
    """Snapshot of the result and the player to move."""
    result: GameResult
    current_player: Player

    def is_game_over(self) -> bool:
        """Check if the snapshot is of a finished game."""
        return self.result.is_game_over()

    @property
    def winner(self) -> Optional[Player]:
        """The winning player, or None."""
        return self.result.winner()


class ConnectFourGame:
    """
    A single Connect Four game.

    Each instance keeps its own board and player to move, so any number of
    games can be played side by side. The game is changed only by
    drop_piece and stops accepting pieces once won or drawn. Instances are
    not thread-safe; hosts sharing one across threads must serialize calls.
    """

    def __init__(self, rows: int = ROWS, cols: int = COLS):
        """
        Initialize a new game with an empty board and player one to move.

        Raises:
            InvalidDimensionsError: if the board size is unusable
        """
        self._board = Board(rows, cols)
        self.current_player = Player.ONE
        self.game_result = GameResult.IN_PROGRESS
        debug.debug(f"Initialized {rows}x{cols} ConnectFourGame", "game")

    @property
    def rows(self) -> int:
        """Board height."""
        return self._board.rows

    @property
    def cols(self) -> int:
        """Board width."""
        return self._board.cols

    def drop_piece(self, column: int) -> MoveResult:
        """
        Drop the current player's piece into a column.

        Args:
            column: The column to drop into (0-indexed)

        Returns:
            MoveResult with the placed Move, or the RejectReason if refused
        """
        if self.game_result.is_game_over():
            debug.debug(f"Rejected column {column}: game is over ({self.game_result.name})", "game")
            return MoveResult.rejected(RejectReason.GAME_OVER, self.game_result)

        if not self._board.is_valid_column(column):
            debug.debug(f"Rejected column {column}: out of bounds", "game")
            return MoveResult.rejected(RejectReason.INVALID_COLUMN, self.game_result)

        row = self._board.find_landing_row(column)
        if row is None:
            debug.debug(f"Rejected column {column}: column is full", "game")
            return MoveResult.rejected(RejectReason.COLUMN_FULL, self.game_result)

        player = self.current_player
        self._board.place(row, column, player)
        move = Move(row=row, column=int(column), player=player)
        debug.debug(f"{player.name} placed at ({row}, {column})", "game")

        # Win is checked before draw: a winning final piece is never a draw
        started = time.perf_counter()
        if check_win_at_position(self._board.grid, row, column):
            self.game_result = GameResult.win_for(player)
            debug.info(f"Player {player.name} wins after move at ({row}, {column})", "game")
        elif self._board.is_full():
            self.game_result = GameResult.DRAW
            debug.info("Game ends in a draw", "game")
        debug.trace(f"Win check took {time.perf_counter() - started:.6f} seconds", "game")

        if not self.game_result.is_game_over():
            self.current_player = player.other()
            debug.trace(f"Switching to player {self.current_player.name}", "game")

        return MoveResult.placed(move, self.game_result)

    def get_cell(self, row: int, column: int) -> Player:
        """
        Get the occupant of a cell.

        Raises:
            OutOfBoundsError: if the position is outside the grid
        """
        return self._board.get_cell(row, column)

    def get_state(self) -> GameState:
        """
        Get the current result and the player to move.

        Returns:
            GameState snapshot
        """
        return GameState(result=self.game_result, current_player=self.current_player)

    def get_grid(self) -> np.ndarray:
        """Get a copy of the board as a numpy array."""
        return self._board.get_state()

    def is_game_over(self) -> bool:
        """Check if the game is won or drawn."""
        return self.game_result.is_game_over()

    def get_winner(self) -> Optional[Player]:
        """
        Get the winner of the game.

        Returns:
            The winning player, or None if no winner yet or draw
        """
        return self.game_result.winner()

    def get_current_player(self) -> Player:
        """Get the player whose turn it is."""
        return self.current_player

    def get_valid_moves(self) -> List[int]:
        """
        Get a list of valid moves.

        Returns:
            Columns that accept a piece, or an empty list once the game is over
        """
        if self.game_result.is_game_over():
            return []
        return self._board.get_valid_moves()

    def get_winning_line(self) -> List[Tuple[int, int]]:
        """
        Get the positions of the winning line if the game is won.

        Returns:
            List of four (row, col) positions, or empty list if no win
        """
        winner = self.get_winner()
        if winner is None:
            return []
        return find_winning_line(self._board.grid, winner)

    def render(self) -> str:
        """
        Render the game board as a string.

        Returns:
            ASCII representation of the board
        """
        return self._board.render()

    def __str__(self) -> str:
        """String representation of the game."""
        return self.render()


def create_game(height: int = ROWS, width: int = COLS) -> ConnectFourGame:
    """
    Start a new game.

    Raises:
        InvalidDimensionsError: if height or width is not an integer >= 4
    """
    return ConnectFourGame(height, width)


def drop_piece(game: ConnectFourGame, column: int) -> MoveResult:
    """Drop the current player's piece into a column of the given game."""
    return game.drop_piece(column)


def get_cell(game: ConnectFourGame, row: int, column: int) -> Player:
    """Get the occupant of a cell; raises OutOfBoundsError outside the grid."""
    return game.get_cell(row, column)


def get_state(game: ConnectFourGame) -> GameState:
    """Get the result and the player to move of the given game."""
    return game.get_state()
