"""
Game state management for TicTacToe.
Tracks the board, current player, move history and result.
"""

from enum import Enum
from typing import Optional, List
from dataclasses import dataclass, field

from .ai_player import AIPlayer, Difficulty
from .board import Board, Mark, Position
from .errors import IllegalMoveError
from .move_validator import MoveValidator
from .win_checker import WinChecker, Line


class GameMode(Enum):
    """Who is playing."""
    SINGLE_PLAYER = "single"  # Human vs computer
    TWO_PLAYER = "two"        # Human vs human


@dataclass(frozen=True)
class Move:
    """
    A move in the game.
    """
    player: Mark            # Who made the move
    position: Position      # Where
    move_number: int        # Which move this is (0-8)


_win_checker = WinChecker()
_validator = MoveValidator()


@dataclass
class GameState:
    """
    The complete state of a TicTacToe game.

    Tracks:
    - The 3x3 board
    - Current player (X always starts)
    - Mode and AI difficulty
    - Move history
    - Game status (ongoing, won, draw)
    """

    board: Board = field(default_factory=Board)

    # Current player's turn
    current_player: Mark = Mark.X

    mode: GameMode = GameMode.TWO_PLAYER
    difficulty: Difficulty = Difficulty.MEDIUM

    # Move history
    moves: List[Move] = field(default_factory=list)

    # Game result
    winner: Optional[Mark] = None
    is_draw: bool = False
    is_game_over: bool = False

    def make_move(self, row: int, col: int) -> Move:
        """
        Make a move for the current player.

        Args:
            row: Row index (0-2).
            col: Column index (0-2).

        Returns:
            The recorded Move.

        Raises:
            InvalidPositionError: If row or col is off the board.
            IllegalMoveError: If the game is over or the cell is taken.
        """
        position = Position(row, col)

        if self.is_game_over:
            raise IllegalMoveError("Game is already over!")

        self.board = _validator.apply_move(self.board, position, self.current_player)

        move = Move(
            player=self.current_player,
            position=position,
            move_number=len(self.moves)
        )
        self.moves.append(move)

        self._update_result()
        if not self.is_game_over:
            self.current_player = self.current_player.opposite()

        return move

    def computer_move(self, ai: Optional[AIPlayer] = None) -> Optional[Position]:
        """
        Let the AI play for the current player.

        Args:
            ai: The AI to ask. A new AIPlayer if not given.

        Returns:
            The Position played, or None if the game is over.
        """
        if self.is_game_over:
            return None

        ai = ai or AIPlayer()
        position = ai.select_move(self.board, self.current_player, self.difficulty)
        if position is None:
            return None

        self.make_move(position.row, position.column)
        return position

    def _update_result(self):
        """Update winner/draw information from the board."""
        winner = _win_checker.check_winner(self.board)

        if winner is not None:
            self.winner = winner
            self.is_game_over = True
        elif _win_checker.check_draw(self.board):
            self.is_draw = True
            self.is_game_over = True

    def is_valid_move(self, row: int, col: int) -> bool:
        """Check a move without raising."""
        if self.is_game_over:
            return False
        return _validator.validate_move(self.board, row, col).is_valid

    def get_empty_cells(self) -> List[Position]:
        """Get all empty cells on the board, row-major."""
        return _validator.legal_moves(self.board)

    def get_winning_line(self) -> Optional[Line]:
        """The completed line, if someone has won."""
        return _win_checker.get_winning_line(self.board)

    def reset(self):
        """Start a new game with the same mode and difficulty."""
        self.board = Board()
        self.current_player = Mark.X
        self.moves = []
        self.winner = None
        self.is_draw = False
        self.is_game_over = False

    def setup_game(self, mode: GameMode, difficulty: Difficulty = Difficulty.MEDIUM):
        """Start a new game with a new mode and difficulty."""
        self.reset()
        self.mode = mode
        self.difficulty = difficulty

    def copy(self) -> "GameState":
        """Create a copy of the game state."""
        return GameState(
            board=self.board,
            current_player=self.current_player,
            mode=self.mode,
            difficulty=self.difficulty,
            moves=list(self.moves),
            winner=self.winner,
            is_draw=self.is_draw,
            is_game_over=self.is_game_over
        )

    def print_board(self):
        """Print the board to console."""
        print("\n    0   1   2")
        print("  +---+---+---+")

        for row, cells in enumerate(self.board.rows()):
            row_str = "|".join(f" {cell.symbol} " for cell in cells)
            print(f"{row} |{row_str}|")
            print("  +---+---+---+")

        # Print game info
        if self.is_game_over:
            if self.winner:
                print(f"\n{self.winner.symbol} WINS!")
            else:
                print("\nIt's a DRAW!")
        else:
            print(f"\nCurrent turn: {self.current_player.symbol}")


# Quick test
if __name__ == "__main__":
    print("Testing GameState...")

    game = GameState()

    # Simulate a game
    moves = [
        (1, 1),  # X center
        (0, 0),  # O top-left
        (0, 2),  # X top-right
        (2, 0),  # O bottom-left
        (2, 2),  # X bottom-right
        (1, 0),  # O wins the left column
    ]

    for row, col in moves:
        print(f"\n{game.current_player.symbol} moves to ({row}, {col})")
        game.make_move(row, col)
        game.print_board()

    print("\nGame state test done!")
