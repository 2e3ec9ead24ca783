"""
Win checker for TicTacToe.
Checks if a player has won or if the game is a draw.
"""

from typing import Optional, Tuple

from .board import Board, Mark, Position


Line = Tuple[Position, Position, Position]

# All possible winning lines
WINNING_LINES: Tuple[Line, ...] = tuple(
    tuple(Position(row, col) for row, col in cells)
    for cells in (
        # Rows
        ((0, 0), (0, 1), (0, 2)),
        ((1, 0), (1, 1), (1, 2)),
        ((2, 0), (2, 1), (2, 2)),
        # Columns
        ((0, 0), (1, 0), (2, 0)),
        ((0, 1), (1, 1), (2, 1)),
        ((0, 2), (1, 2), (2, 2)),
        # Diagonals
        ((0, 0), (1, 1), (2, 2)),
        ((0, 2), (1, 1), (2, 0)),
    )
)


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 marks of the same player in a row
    (horizontally, vertically, or diagonally)
    """

    WINNING_LINES = WINNING_LINES

    def check_winner(self, board: Board) -> Optional[Mark]:
        """
        Check if there's a winner.

        Args:
            board: The board to check.

        Returns:
            The winning Mark, or None if no winner yet.
        """
        for line in self.WINNING_LINES:
            winner = self._check_line(board, line)
            if winner is not None:
                return winner

        return None

    def _check_line(self, board: Board, line: Line) -> Optional[Mark]:
        """Return the mark filling the whole line, if any."""
        first = board[line[0]]
        if first is Mark.EMPTY:
            return None

        if board[line[1]] is first and board[line[2]] is first:
            return first

        return None

    def is_full(self, board: Board) -> bool:
        """True when no cell is empty."""
        return Mark.EMPTY not in board.cells

    def check_draw(self, board: Board) -> bool:
        """
        Check if the game is a draw.

        A draw occurs when all cells are filled AND there is no winner.
        """
        return self.is_full(board) and self.check_winner(board) is None

    def get_winning_line(self, board: Board) -> Optional[Line]:
        """
        Get the winning line if there is one.

        Returns:
            The winning line as 3 Positions, or None.
        """
        for line in self.WINNING_LINES:
            if self._check_line(board, line) is not None:
                return line
        return None


# Quick test
if __name__ == "__main__":
    print("Testing WinChecker...")

    checker = WinChecker()

    board = Board.from_rows(["XXX", ".O.", "O.."])
    print(board)
    print(f"Winner: {checker.check_winner(board)}")
    assert checker.check_winner(board) == Mark.X

    board = Board.from_rows(["XOX", "XOO", "OXX"])
    print(board)
    print(f"Draw: {checker.check_draw(board)}")
    assert checker.check_draw(board)

    print("\nWinChecker test done!")
