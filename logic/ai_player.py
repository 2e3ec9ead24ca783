"""
AI player for TicTacToe.
Uses the Minimax algorithm with alpha-beta pruning to choose a move.
"""

import logging
import math
from enum import Enum
from typing import Optional

import numpy as np

from .board import Board, Mark, Position
from .config import GameConfig
from .move_validator import MoveValidator
from .win_checker import WinChecker

logger = logging.getLogger(__name__)


class Difficulty(Enum):
    """How strong the AI plays."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def search_depth(self) -> int:
        """Search depth (plies) for this tier."""
        return GameConfig.DIFFICULTY_DEPTHS[self.value]

    @classmethod
    def parse(cls, text: str) -> "Difficulty":
        """Parse a difficulty name. Also accepts "easy" and "hard"."""
        name = text.strip().lower()
        name = {"easy": "low", "hard": "high"}.get(name, name)
        return cls(name)


class _Search:
    """
    One minimax search for one player.

    Created fresh for every move so the node counter is never
    shared between calls.
    """

    def __init__(self, player: Mark, win_checker: WinChecker, validator: MoveValidator):
        self.player = player
        self.opponent = player.opposite()
        self.win_checker = win_checker
        self.validator = validator
        self.positions_evaluated = 0

    def best_move(self, board: Board, depth: int):
        """
        Score every legal move and keep the first best one.

        Returns:
            (move, score), move is None if the board is full.
        """
        best_score = -math.inf
        best_move = None

        for position in self.validator.legal_moves(board):
            new_board = board.place(position, self.player)
            score = self.minimax(new_board, depth - 1, False, -math.inf, math.inf)

            # Strictly greater: ties keep the earlier (row-major) move
            if score > best_score:
                best_score = score
                best_move = position

        return best_move, best_score

    def minimax(
        self,
        board: Board,
        depth: int,
        is_maximizing: bool,
        alpha: float,
        beta: float
    ) -> float:
        """
        Minimax algorithm with alpha-beta pruning.

        Args:
            board: Position to evaluate.
            depth: Plies left to search.
            is_maximizing: True if it's the searching player's turn.
            alpha: Best score the maximizer can guarantee so far.
            beta: Best score the minimizer can guarantee so far.

        Returns:
            The score of the position.
        """
        self.positions_evaluated += 1

        # Check terminal states
        winner = self.win_checker.check_winner(board)

        if winner == self.player:
            return GameConfig.WIN_SCORE + depth  # Win (prefer faster wins)
        elif winner == self.opponent:
            return -GameConfig.WIN_SCORE - depth  # Loss (prefer slower losses)

        valid_moves = self.validator.legal_moves(board)

        if depth == 0 or not valid_moves:
            return 0  # Out of depth or draw

        if is_maximizing:
            max_score = -math.inf
            for position in valid_moves:
                new_board = board.place(position, self.player)
                score = self.minimax(new_board, depth - 1, False, alpha, beta)
                max_score = max(max_score, score)
                alpha = max(alpha, score)
                if beta <= alpha:
                    break  # Prune
            return max_score
        else:
            min_score = math.inf
            for position in valid_moves:
                new_board = board.place(position, self.opponent)
                score = self.minimax(new_board, depth - 1, True, alpha, beta)
                min_score = min(min_score, score)
                beta = min(beta, score)
                if beta <= alpha:
                    break  # Prune
            return min_score


class AIPlayer:
    """
    An AI that plays TicTacToe.

    LOW plays a random legal move, MEDIUM flips a coin on every move
    between random play and a 3-ply search, HIGH searches 6 plies.

    The AI keeps no state between moves apart from its random source,
    a numpy Generator (or anything with random() and integers(n)).
    """

    def __init__(self, rng=None):
        """
        Initialize the AI player.

        Args:
            rng: Random source. A fresh numpy Generator if not given.
        """
        self.rng = rng if rng is not None else np.random.default_rng()
        self.win_checker = WinChecker()
        self.validator = MoveValidator()

    def select_move(
        self,
        board: Board,
        mark: Mark,
        difficulty: Difficulty
    ) -> Optional[Position]:
        """
        Choose a move for `mark`.

        Args:
            board: Current board (not modified).
            mark: The player to move, X or O.
            difficulty: How strong to play.

        Returns:
            The chosen Position, or None if the board is full.
        """
        if mark is Mark.EMPTY:
            raise ValueError("mark must be X or O")

        if difficulty is Difficulty.LOW:
            return self.random_move(board)

        if difficulty is Difficulty.MEDIUM:
            if self.rng.random() < GameConfig.MEDIUM_RANDOM_CHANCE:
                return self.random_move(board)
            return self.search_move(board, mark, difficulty.search_depth)

        return self.search_move(board, mark, difficulty.search_depth)

    def random_move(self, board: Board) -> Optional[Position]:
        """Pick a legal move uniformly at random."""
        valid_moves = self.validator.legal_moves(board)

        if not valid_moves:
            return None

        return valid_moves[int(self.rng.integers(len(valid_moves)))]

    def search_move(self, board: Board, mark: Mark, depth: int) -> Optional[Position]:
        """
        Get the best move for `mark` using minimax.

        Args:
            board: Current board.
            mark: The player to move.
            depth: Plies to search, counting this move.

        Returns:
            The best Position, or None if no moves available.
        """
        valid_moves = self.validator.legal_moves(board)

        if not valid_moves:
            return None

        # Special case: if only one move, just take it
        if len(valid_moves) == 1:
            return valid_moves[0]

        # Special case: every opening draws within the search horizon,
        # so open in the center
        if board.is_empty():
            return Position(*GameConfig.CENTER)

        search = _Search(mark, self.win_checker, self.validator)
        best_move, best_score = search.best_move(board, depth)

        logger.debug(
            "AI evaluated %d positions. Best move for %s: %s (score: %s)",
            search.positions_evaluated, mark.symbol, best_move, best_score
        )

        return best_move


def select_move(
    board: Board,
    mark: Mark,
    difficulty: Difficulty,
    rng=None
) -> Optional[Position]:
    """
    Choose a move for `mark` at the given difficulty.

    Uses a new AIPlayer each call, so calls never share a random
    generator unless `rng` is passed in.
    """
    return AIPlayer(rng).select_move(board, mark, difficulty)


# Quick test
if __name__ == "__main__":
    print("Testing AIPlayer...")

    ai = AIPlayer()

    # Test 1: AI should block a winning move
    board = Board.from_rows(["XX.", "O..", "..."])
    print(board)
    print("\nAI is O. X is about to win with (0,2)!")

    move = ai.select_move(board, Mark.O, Difficulty.HIGH)
    print(f"AI's move: {move}")
    assert move == Position(0, 2), f"Expected (0, 2), got {move}"

    # Test 2: AI should take a winning move
    board = Board.from_rows(["XX.", "OO.", "..."])
    print(board)
    print("\nAI is X. Can win with (0,2)!")

    move = ai.select_move(board, Mark.X, Difficulty.HIGH)
    print(f"AI's move: {move}")
    assert move == Position(0, 2), f"Expected (0, 2), got {move}"

    print("\nAIPlayer test done!")
