"""
Errors raised by the TicTacToe game logic.
"""


class GameLogicError(Exception):
    """Base class for game logic errors."""
    pass


class InvalidPositionError(GameLogicError, ValueError):
    """Raised when a row or column is outside the board."""
    pass


class IllegalMoveError(GameLogicError):
    """Raised when a move targets an occupied cell or a finished game."""
    pass
