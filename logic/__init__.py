"""
Logic module for TicTacToe.
Handles the board, game state, history and rules.
"""

from .board import Cell, Board, EMPTY_BOARD
from .game_state import GameState
from .move_validator import MoveValidator
from .win_checker import WinChecker, WinResult
from .move_history import HistoryEntry, SortOrder
from .session import GameSession, GameStatus, GameView

__version__ = "1.0.0"
