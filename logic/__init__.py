"""
Logic module for TicTacToe.
Handles the board, rules, game state, and AI opponent.
"""

from .config import GameConfig
from .errors import GameLogicError, InvalidPositionError, IllegalMoveError
from .board import Board, Mark, Position
from .win_checker import WinChecker, WINNING_LINES
from .move_validator import MoveValidator, ValidationResult
from .ai_player import AIPlayer, Difficulty, select_move
from .game_state import GameState, GameMode, Move

__version__ = "1.0.0"

_win_checker = WinChecker()
_validator = MoveValidator()

# Rules as plain functions
winner = _win_checker.check_winner
is_full = _win_checker.is_full
is_draw = _win_checker.check_draw
legal_moves = _validator.legal_moves
apply_move = _validator.apply_move
