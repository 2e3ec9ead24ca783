"""
Game configuration for TicTacToe.
Board geometry, scoring and the difficulty table used by the AI.
"""

from types import MappingProxyType


class GameConfig:
    """
    Configuration class for game and AI settings.
    These are fixed rules of the game, not user settings.
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid
    BOARD_SIZE = 3
    CELL_COUNT = BOARD_SIZE * BOARD_SIZE  # 9

    # (row, col) of the middle cell
    CENTER = (1, 1)

    # ==================== AI SETTINGS ====================
    # Base score of a won position. The remaining search depth is added
    # on top so faster wins (and slower losses) score higher.
    WIN_SCORE = 10

    # Search depth (plies) per difficulty tier
    DIFFICULTY_DEPTHS = MappingProxyType({
        "low": 1,
        "medium": 3,
        "high": 6,
    })

    # Chance that MEDIUM plays a random move instead of searching.
    # Rolled again on every move.
    MEDIUM_RANDOM_CHANCE = 0.5
