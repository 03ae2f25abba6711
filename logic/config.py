"""
Game configuration for TicTacToe.
Board geometry, search scores, and console defaults.
"""


class GameConfig:
    """
    Configuration class for game settings.
    Change these values to tune the console game!
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid, cells indexed 0-8 row by row
    BOARD_SIZE = 3
    CELL_COUNT = BOARD_SIZE * BOARD_SIZE  # 9 cells

    # ==================== SEARCH SETTINGS ====================
    # Terminal scores for the HARD (minimax) tier.
    # Absolute values, never scaled by depth.
    WIN_SCORE = 10
    LOSS_SCORE = -10
    DRAW_SCORE = 0

    # ==================== CONSOLE SETTINGS ====================
    DEFAULT_MODE = "pve"
    DEFAULT_DIFFICULTY = "hard"
    DEFAULT_HUMAN_MARK = "X"

    # Artificial "thinking" pause before the AI moves (seconds)
    AI_THINK_DELAY_S = 0.0

    # Chance of a commentary line after a regular move
    COMMENTARY_CHANCE = 0.3

    # ==================== LOGGING SETTINGS ====================
    LOG_LEVEL_ENV = "LOG_LEVEL"
    DEFAULT_LOG_LEVEL = "WARNING"
    LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
