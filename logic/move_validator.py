"""
Move validator for TicTacToe.
Lists legal moves, validates raw input and applies moves.
"""

from typing import Optional, List
from dataclasses import dataclass

from .board import Board, Mark, Position
from .config import GameConfig
from .errors import IllegalMoveError, InvalidPositionError


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates and applies TicTacToe moves.

    Rules:
    1. Can only place on empty cells
    2. Row and column must be on the board (0-2)
    """

    def legal_moves(self, board: Board) -> List[Position]:
        """
        Get all legal moves.

        The list is row-major: (0, 0), (0, 1), ... (2, 2). The AI
        relies on this order to break ties between equal moves.

        Args:
            board: Current board.

        Returns:
            List of empty Positions, empty if the board is full.
        """
        return board.empty_cells()

    def validate_move(self, board: Board, row: int, col: int) -> ValidationResult:
        """
        Validate a move from raw coordinates without raising.

        Args:
            board: Current board.
            row: Row to place the mark (0-2).
            col: Column to place the mark (0-2).

        Returns:
            ValidationResult with is_valid and error_message.
        """
        try:
            position = Position(row, col)
        except InvalidPositionError:
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid position ({row!r}, {col!r}). "
                              f"Must be 0-{GameConfig.BOARD_SIZE - 1}."
            )

        cell = board[position]
        if cell is not Mark.EMPTY:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell ({row}, {col}) is already occupied by {cell.symbol}"
            )

        return ValidationResult(is_valid=True)

    def apply_move(self, board: Board, position: Position, mark: Mark) -> Board:
        """
        Place a mark and return the resulting board.

        The given board is left untouched.

        Raises:
            IllegalMoveError: If the cell is taken or mark is EMPTY.
        """
        if mark is Mark.EMPTY:
            raise IllegalMoveError("Cannot place an EMPTY mark")

        current = board[position]
        if current is not Mark.EMPTY:
            raise IllegalMoveError(
                f"Cell {position} is already occupied by {current.symbol}"
            )

        return board.place(position, mark)


# Quick test
if __name__ == "__main__":
    print("Testing MoveValidator...")

    validator = MoveValidator()
    board = validator.apply_move(Board(), Position(1, 1), Mark.X)

    result = validator.validate_move(board, 1, 1)
    print(f"Move (1,1) again: valid={result.is_valid}, error={result.error_message}")

    result = validator.validate_move(board, 5, 5)
    print(f"Move (5,5): valid={result.is_valid}, error={result.error_message}")

    print(f"Legal moves: {[str(p) for p in validator.legal_moves(board)]}")

    print("\nMoveValidator test done!")
