"""
Main script for TicTacToe.

Plays a console game:
- Human vs computer (default), with a selectable difficulty
- Human vs human (--two-player)

Run this script to play TicTacToe against the AI!
"""

import argparse
import logging
import re
from typing import Callable, Optional, Sequence, Tuple

import numpy as np

from logic.ai_player import AIPlayer, Difficulty
from logic.board import Mark
from logic.errors import GameLogicError
from logic.game_state import GameState, GameMode

logger = logging.getLogger(__name__)

QUIT_COMMANDS = {"q", "quit", "exit"}


def parse_position(text: str) -> Tuple[int, int]:
    """
    Parse "row col" or "row,col" typed by the user.

    Raises:
        ValueError: If the text is not two whole numbers.
    """
    parts = [p for p in re.split(r"[\s,]+", text.strip()) if p]
    if len(parts) != 2:
        raise ValueError(f"Expected 'row col', got {text!r}")
    return int(parts[0]), int(parts[1])


class TicTacToeGame:
    """
    Console controller for one game of TicTacToe.

    Game flow:
    1. Human enters a move as "row col"
    2. Move is validated and applied
    3. Computer (single player mode) answers with its move
    4. Repeat until someone wins or it's a draw
    """

    def __init__(
        self,
        human_player: Mark = Mark.X,
        mode: GameMode = GameMode.SINGLE_PLAYER,
        difficulty: Difficulty = Difficulty.MEDIUM,
        rng=None,
        input_func: Optional[Callable[[str], str]] = None
    ):
        """
        Initialize the game.

        Args:
            human_player: Which mark the human plays in single player mode.
            mode: Single player (vs computer) or two player.
            difficulty: AI difficulty.
            rng: Random source for the AI.
            input_func: Where moves are read from (default: input).
        """
        self.human_player = human_player
        self.computer_player = human_player.opposite()
        self.game_state = GameState()
        self.game_state.setup_game(mode, difficulty)
        self.ai = AIPlayer(rng)
        self.input_func = input_func or input
        self.is_running = False

    def _is_computer_turn(self) -> bool:
        return (
            self.game_state.mode is GameMode.SINGLE_PLAYER
            and self.game_state.current_player == self.computer_player
        )

    def start(self) -> GameState:
        """Play until the game ends or the user quits."""
        print("\n" + "=" * 40)
        print("   TicTacToe")
        if self.game_state.mode is GameMode.SINGLE_PLAYER:
            print(f"   Human plays: {self.human_player.symbol}")
            print(f"   Computer plays: {self.computer_player.symbol} "
                  f"({self.game_state.difficulty.value})")
        else:
            print("   Two players")
        print("=" * 40)
        print("Enter moves as 'row col' (0-2). Type 'q' to quit.")

        self.is_running = True
        self.game_state.print_board()

        while self.is_running and not self.game_state.is_game_over:
            if self._is_computer_turn():
                self._computer_move()
            else:
                self._human_move()

        if self.game_state.is_game_over:
            self._show_game_result()

        return self.game_state

    def _human_move(self):
        """Read and play one human move, re-prompting on bad input."""
        player = self.game_state.current_player
        text = self.input_func(f"{player.symbol} to move: ")

        if text.strip().lower() in QUIT_COMMANDS:
            print("\nGame quit by user.")
            self.is_running = False
            return

        try:
            row, col = parse_position(text)
            self.game_state.make_move(row, col)
        except (ValueError, GameLogicError) as e:
            print(f"Invalid move: {e}")
            return

        logger.info("%s played (%d, %d)", player.symbol, row, col)
        self.game_state.print_board()

    def _computer_move(self):
        """Let the AI play its move."""
        print("\n>>> Computer is thinking...")

        position = self.game_state.computer_move(self.ai)

        if position is None:
            logger.warning("AI could not find a move")
            self.is_running = False
            return

        print(f">>> Computer plays {position}")
        self.game_state.print_board()

    def _show_game_result(self):
        """Show the final game result."""
        print("\n" + "=" * 40)
        print("   GAME OVER!")
        print("=" * 40)

        winner = self.game_state.winner
        if winner is None:
            print("\nIt's a draw! Good game!")
        elif self.game_state.mode is GameMode.TWO_PLAYER:
            print(f"\n{winner.symbol} wins!")
        elif winner == self.human_player:
            print("\nCongratulations! You won!")
        else:
            print("\nComputer wins! Better luck next time!")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="TicTacToe")
    parser.add_argument(
        "--difficulty",
        type=Difficulty.parse,
        default=Difficulty.MEDIUM,
        help="AI difficulty: low, medium or high (default: medium)"
    )
    parser.add_argument(
        "--two-player",
        action="store_true",
        help="Two humans play each other"
    )
    parser.add_argument(
        "--computer-first",
        action="store_true",
        help="Let the computer play first (as X)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed the AI's random choices"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Show AI search details"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    game = TicTacToeGame(
        human_player=Mark.O if args.computer_first else Mark.X,
        mode=GameMode.TWO_PLAYER if args.two_player else GameMode.SINGLE_PLAYER,
        difficulty=args.difficulty,
        rng=np.random.default_rng(args.seed)
    )

    try:
        game.start()
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
