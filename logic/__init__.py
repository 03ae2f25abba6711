"""
Logic module for TicTacToe.
Handles the board, win detection, move rules, and the AI opponent.
"""

__version__ = "1.0.0"

from .config import GameConfig
from .errors import TicTacToeError, InvalidStateError
from .game_state import (
    Board,
    Difficulty,
    GameMode,
    GameState,
    GameStatus,
    Mark,
    as_board,
    empty_board,
    empty_cells,
    is_full,
    place,
)
from .move_validator import MoveValidator, ValidationResult
from .win_checker import WINNING_LINES, EvaluationResult, WinChecker, evaluate
from .ai_player import AIPlayer, score_moves, select_move
