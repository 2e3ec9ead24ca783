"""
Tests for the AI player.
"""

import itertools

import numpy as np
import pytest

from logic import (
    AIPlayer, Board, Difficulty, GameConfig, GameMode, GameState, Mark,
    Position, legal_moves, select_move, winner,
)


class FakeRng:
    """Random source with scripted coin flips and a fixed pick index."""

    def __init__(self, coins=(0.0,), index=0):
        self.coins = itertools.cycle(coins)
        self.index = index

    def random(self):
        return next(self.coins)

    def integers(self, high):
        return min(self.index, high - 1)


FULL_BOARD = Board.from_rows(["XOX", "OXO", "XOX"])
ONE_LEFT = Board.from_rows(["XOX", "OXO", "XO."])


@pytest.fixture
def ai():
    return AIPlayer(np.random.default_rng(1234))


# ==================== DIFFICULTY ====================

def test_difficulty_depths():
    assert Difficulty.LOW.search_depth == 1
    assert Difficulty.MEDIUM.search_depth == 3
    assert Difficulty.HIGH.search_depth == 6


def test_difficulty_table_is_read_only():
    with pytest.raises(TypeError):
        GameConfig.DIFFICULTY_DEPTHS["high"] = 9


@pytest.mark.parametrize("text, expected", [
    ("low", Difficulty.LOW),
    ("Medium", Difficulty.MEDIUM),
    (" HIGH ", Difficulty.HIGH),
    ("easy", Difficulty.LOW),
    ("hard", Difficulty.HIGH),
])
def test_difficulty_parse(text, expected):
    assert Difficulty.parse(text) is expected


def test_difficulty_parse_unknown():
    with pytest.raises(ValueError):
        Difficulty.parse("impossible")


# ==================== HIGH ====================

def test_high_takes_the_win(ai):
    board = Board.from_rows(["XX.", "OO.", "..."])
    assert ai.select_move(board, Mark.X, Difficulty.HIGH) == Position(0, 2)


def test_high_blocks_the_opponent(ai):
    board = Board.from_rows(["XX.", "O..", "..."])
    assert ai.select_move(board, Mark.O, Difficulty.HIGH) == Position(0, 2)


@pytest.mark.parametrize("rows, expected", [
    (["...", "XX.", "..."], Position(1, 2)),   # row
    ([".X.", ".X.", "..."], Position(2, 1)),   # column
    (["X..", ".X.", "..."], Position(2, 2)),   # diagonal
])
def test_high_finds_winning_lines(ai, rows, expected):
    board = Board.from_rows(rows)
    move = ai.select_move(board, Mark.X, Difficulty.HIGH)
    assert move == expected
    assert winner(board.place(move, Mark.X)) is Mark.X


def test_high_prefers_winning_over_blocking(ai):
    # O can win at (1,2) or block X at (0,2); winning is better
    board = Board.from_rows(["XX.", "OO.", "X.."])
    assert ai.select_move(board, Mark.O, Difficulty.HIGH) == Position(1, 2)


def test_high_opens_in_center(ai):
    assert ai.select_move(Board(), Mark.X, Difficulty.HIGH) == Position(1, 1)
    assert ai.select_move(Board(), Mark.O, Difficulty.HIGH) == Position(1, 1)


def test_high_answers_center_with_corner(ai):
    board = Board.from_rows(["...", ".X.", "..."])
    move = ai.select_move(board, Mark.O, Difficulty.HIGH)
    assert move in {Position(0, 0), Position(0, 2), Position(2, 0), Position(2, 2)}


def test_high_prevents_fork(ai):
    board = Board.from_rows(["X..", ".X.", "..O"])
    move = ai.select_move(board, Mark.O, Difficulty.HIGH)
    assert move in {Position(0, 2), Position(2, 0)}


def test_high_accepts_finished_board(ai):
    board = Board.from_rows(["XXX", "OO.", "..."])
    move = ai.select_move(board, Mark.O, Difficulty.HIGH)
    assert move in legal_moves(board)


def _reachable_boards():
    """Every board reachable from an empty one, with the player to move."""
    seen = {}
    stack = [(Board(), Mark.X)]
    while stack:
        board, mark = stack.pop()
        if board in seen:
            continue
        seen[board] = mark
        if winner(board) is not None:
            continue
        for position in legal_moves(board):
            stack.append((board.place(position, mark), mark.opposite()))
    return seen


def _winning_cells(board, mark):
    return [p for p in legal_moves(board) if winner(board.place(p, mark)) is mark]


def test_high_wins_or_blocks_on_every_reachable_board(ai):
    checked = 0

    for board, mark in _reachable_boards().items():
        if winner(board) is not None or not legal_moves(board):
            continue

        move = ai.select_move(board, mark, Difficulty.HIGH)
        wins = _winning_cells(board, mark)
        threats = _winning_cells(board, mark.opposite())

        if wins:
            assert move in wins, f"missed win for {mark.symbol}:\n{board}"
        elif len(threats) == 1:
            assert move == threats[0], f"missed block for {mark.symbol}:\n{board}"
        checked += 1

    assert checked == 4520


def test_high_vs_high_is_a_draw(ai):
    game = GameState(mode=GameMode.TWO_PLAYER, difficulty=Difficulty.HIGH)

    while not game.is_game_over:
        assert game.computer_move(ai) is not None

    assert game.is_draw
    assert game.winner is None
    assert len(game.moves) == 9


# ==================== ALL DIFFICULTIES ====================

@pytest.mark.parametrize("difficulty", list(Difficulty))
def test_full_board_returns_none(ai, difficulty):
    assert legal_moves(FULL_BOARD) == []
    assert ai.select_move(FULL_BOARD, Mark.X, difficulty) is None
    assert ai.select_move(FULL_BOARD, Mark.O, difficulty) is None


@pytest.mark.parametrize("difficulty", list(Difficulty))
def test_last_empty_cell_is_chosen(ai, difficulty):
    assert ai.select_move(ONE_LEFT, Mark.X, difficulty) == Position(2, 2)


@pytest.mark.parametrize("difficulty", list(Difficulty))
def test_moves_are_legal(ai, difficulty):
    board = Board.from_rows(["X..", ".X.", "..."])
    for _ in range(20):
        move = ai.select_move(board, Mark.O, difficulty)
        assert move in legal_moves(board)


@pytest.mark.parametrize("difficulty", list(Difficulty))
def test_board_is_not_modified(ai, difficulty):
    board = Board.from_rows(["XO.", ".X.", "..O"])
    snapshot = board.cells
    ai.select_move(board, Mark.X, difficulty)
    assert board.cells == snapshot


def test_empty_mark_is_rejected(ai):
    with pytest.raises(ValueError):
        ai.select_move(Board(), Mark.EMPTY, Difficulty.HIGH)


# ==================== LOW / MEDIUM ====================

def test_low_is_random(ai):
    board = Board.from_rows(["XO.", "OX.", "..."])
    assert len(legal_moves(board)) == 5

    moves = {ai.select_move(board, Mark.X, Difficulty.LOW) for _ in range(1000)}

    assert len(moves) > 1
    assert moves <= set(legal_moves(board))


def test_low_uses_injected_rng():
    board = Board.from_rows(["XX.", "OO.", "..."])
    ai = AIPlayer(FakeRng(index=4))
    # Legal moves: (0,2), (1,2), (2,0), (2,1), (2,2)
    assert ai.select_move(board, Mark.X, Difficulty.LOW) == Position(2, 2)


def test_same_seed_same_moves():
    board = Board.from_rows(["X..", "...", "..O"])

    def play(seed):
        ai = AIPlayer(np.random.default_rng(seed))
        return [ai.select_move(board, Mark.X, d) for d in [Difficulty.LOW, Difficulty.MEDIUM] * 10]

    assert play(7) == play(7)


def test_medium_random_branch():
    board = Board.from_rows(["XX.", "OO.", "..."])
    ai = AIPlayer(FakeRng(coins=[0.1], index=4))
    assert ai.select_move(board, Mark.X, Difficulty.MEDIUM) == Position(2, 2)


def test_medium_search_branch():
    board = Board.from_rows(["XX.", "OO.", "..."])
    ai = AIPlayer(FakeRng(coins=[0.9], index=4))
    assert ai.select_move(board, Mark.X, Difficulty.MEDIUM) == Position(0, 2)


def test_medium_flips_every_call():
    board = Board.from_rows(["XX.", "OO.", "..."])
    ai = AIPlayer(FakeRng(coins=[0.1, 0.9], index=4))

    moves = [ai.select_move(board, Mark.X, Difficulty.MEDIUM) for _ in range(4)]

    assert moves == [Position(2, 2), Position(0, 2)] * 2


def test_medium_varies():
    board = Board.from_rows(["X..", ".X.", "..."])
    ai = AIPlayer(np.random.default_rng(99))

    moves = {ai.select_move(board, Mark.O, Difficulty.MEDIUM) for _ in range(100)}

    assert len(moves) > 1


# ==================== MODULE FUNCTION ====================

def test_select_move_function():
    board = Board.from_rows(["XX.", "O..", "..."])
    assert select_move(board, Mark.O, Difficulty.HIGH) == Position(0, 2)
    assert select_move(FULL_BOARD, Mark.O, Difficulty.LOW) is None
    assert select_move(board, Mark.O, Difficulty.LOW, rng=FakeRng(index=0)) == Position(0, 2)
