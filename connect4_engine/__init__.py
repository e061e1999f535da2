"""
connect4_engine - Rules engine for two-player Connect Four

This package provides the board representation, drop validation, win
detection and turn handling for Connect Four. Rendering and input are left
to the host; a small command-line host lives in connect4_engine.interfaces.
"""

# Version number
__version__ = '0.1.0'

from connect4_engine.errors import (Connect4Error, InvalidDimensionsError,
                                    OutOfBoundsError, CellOccupiedError)
from connect4_engine.utils import Player, GameResult
from connect4_engine.game import (Board, ConnectFourGame, GameState, Move, MoveResult,
                                  RejectReason, create_game, drop_piece,
                                  get_cell, get_state)

__all__ = [
    'Connect4Error', 'InvalidDimensionsError', 'OutOfBoundsError', 'CellOccupiedError',
    'Player', 'GameResult',
    'Board', 'ConnectFourGame', 'GameState', 'Move', 'MoveResult', 'RejectReason',
    'create_game', 'drop_piece', 'get_cell', 'get_state',
]
