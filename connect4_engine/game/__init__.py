"""
connect4_engine.game - Core game mechanics for Connect Four

This package contains the board representation and the game state
management (turns, wins and draws).
"""

from connect4_engine.game.board import Board
from connect4_engine.game.rules import (ConnectFourGame, GameState, Move, MoveResult,
                                        RejectReason, create_game, drop_piece,
                                        get_cell, get_state)

__all__ = ['Board', 'ConnectFourGame', 'GameState', 'Move', 'MoveResult',
           'RejectReason', 'create_game', 'drop_piece', 'get_cell', 'get_state']
