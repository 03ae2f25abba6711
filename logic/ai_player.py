"""
AI player for TicTacToe.
Picks moves at three strength tiers: random (EASY), one-move lookahead
(MEDIUM), and a full Minimax search that never loses (HARD).
"""

import logging
from contextlib import contextmanager
from typing import Callable, Dict, List, Optional, Sequence

import numpy as np

from .config import GameConfig
from .errors import InvalidStateError
from .game_state import (
    Board,
    Difficulty,
    GameState,
    Mark,
    as_board,
    empty_cells,
    is_full,
    place,
)
from .win_checker import evaluate

logger = logging.getLogger(__name__)

# Used when the caller does not pass its own generator
_default_rng = np.random.default_rng()


@contextmanager
def _placed(cells: List[Mark], index: int, mark: Mark):
    """Put ``mark`` on ``cells[index]`` for the duration of the block."""
    cells[index] = mark
    try:
        yield cells
    finally:
        cells[index] = Mark.EMPTY


class _MinimaxSearch:
    """
    Exhaustive Minimax over a private scratch copy of the board.

    Scores are from ``mark``'s point of view: +10 win, -10 loss, 0 draw,
    regardless of how deep the result was found. Alpha-beta cut-offs are
    only taken inside a candidate's subtree, so every first-level move
    still gets its exact score.
    """

    def __init__(self, board: Sequence[Mark], mark: Mark):
        self.cells = list(board)
        self.mark = mark
        self.opponent = mark.opposite()
        self.positions_evaluated = 0

    def score_moves(self) -> Dict[int, int]:
        scores = {}
        for index in empty_cells(self.cells):
            with _placed(self.cells, index, self.mark):
                scores[index] = self._minimax(is_maximizing=False)
        return scores

    def _minimax(
        self,
        is_maximizing: bool,
        alpha: float = float('-inf'),
        beta: float = float('inf')
    ) -> int:
        self.positions_evaluated += 1

        # Check terminal states
        winner = evaluate(self.cells).winner
        if winner == self.mark:
            return GameConfig.WIN_SCORE
        if winner == self.opponent:
            return GameConfig.LOSS_SCORE
        if is_full(self.cells):
            return GameConfig.DRAW_SCORE

        to_move = self.mark if is_maximizing else self.opponent
        best_score = None

        for index in empty_cells(self.cells):
            with _placed(self.cells, index, to_move):
                score = self._minimax(not is_maximizing, alpha, beta)

            if is_maximizing:
                best_score = score if best_score is None else max(best_score, score)
                alpha = max(alpha, score)
            else:
                best_score = score if best_score is None else min(best_score, score)
                beta = min(beta, score)
            if beta <= alpha:
                break  # Prune

        return best_score


def score_moves(board: Sequence[Mark], moving_mark: Mark) -> Dict[int, int]:
    """
    Minimax score of every empty cell for ``moving_mark``.

    Returns:
        {cell index: score}, in ascending index order.
    """
    return _MinimaxSearch(as_board(board), moving_mark).score_moves()


def _random_move(available: List[int], rng: np.random.Generator) -> int:
    return int(rng.choice(available))


def _completing_move(board: Board, available: List[int], mark: Mark) -> Optional[int]:
    """First empty cell (lowest index) where ``mark`` would complete a line."""
    for index in available:
        if evaluate(place(board, index, mark)).winner == mark:
            return index
    return None


def _easy_move(board: Board, available: List[int], mark: Mark,
               rng: np.random.Generator) -> int:
    """Random empty cell; board and mark are unused, kept for the shared tier signature."""
    return _random_move(available, rng)


def _medium_move(board: Board, available: List[int], mark: Mark,
                 rng: np.random.Generator) -> int:
    # 1. Win now if we can
    move = _completing_move(board, available, mark)
    if move is not None:
        return move

    # 2. Block the opponent's win
    move = _completing_move(board, available, mark.opposite())
    if move is not None:
        return move

    # 3. Otherwise random
    return _random_move(available, rng)


def _hard_move(board: Board, available: List[int], mark: Mark,
               rng: np.random.Generator) -> int:
    search = _MinimaxSearch(board, mark)
    scores = search.score_moves()

    # Strictly greater: ties go to the lowest index
    best_move = available[0]
    best_score = float('-inf')
    for index, score in scores.items():
        if score > best_score:
            best_score = score
            best_move = index

    logger.debug(
        "Minimax evaluated %d positions. Best move: %d (score: %d)",
        search.positions_evaluated, best_move, best_score
    )
    return best_move


_POLICIES: Dict[Difficulty, Callable[..., int]] = {
    Difficulty.EASY: _easy_move,
    Difficulty.MEDIUM: _medium_move,
    Difficulty.HARD: _hard_move,
}


def select_move(
    board: Sequence[Mark],
    difficulty: Difficulty,
    moving_mark: Mark,
    rng: Optional[np.random.Generator] = None
) -> int:
    """
    Choose a cell for ``moving_mark`` using the given difficulty tier.

    Args:
        board: The current board (9 Marks). It is copied, never modified.
        difficulty: Which policy to use.
        moving_mark: The mark about to be placed (X or O).
        rng: Random generator for EASY and MEDIUM. Optional.

    Returns:
        Index (0-8) of an empty cell.

    Raises:
        InvalidStateError: If the board has no empty cell.
        ValueError: If moving_mark is not X or O, or the difficulty is unknown.
    """
    if not isinstance(moving_mark, Mark) or moving_mark == Mark.EMPTY:
        raise ValueError(f"moving_mark must be Mark.X or Mark.O, got {moving_mark!r}")

    policy = _POLICIES[Difficulty(difficulty)]
    board = as_board(board)
    available = empty_cells(board)
    if not available:
        raise InvalidStateError("No empty cell left to play")

    return policy(board, available, moving_mark, rng if rng is not None else _default_rng)


class AIPlayer:
    """
    An AI that plays one side of a TicTacToe game.

    On HARD it plays optimally - it will win if possible,
    block the opponent if needed, and never lose (at worst, draw).
    """

    def __init__(
        self,
        player: Mark = Mark.O,
        difficulty: Difficulty = Difficulty.HARD,
        rng: Optional[np.random.Generator] = None
    ):
        """
        Initialize the AI player.

        Args:
            player: Which mark the AI plays (default: O)
            difficulty: Strength tier (default: HARD)
            rng: Random generator for the EASY and MEDIUM tiers
        """
        self.player = player
        self.difficulty = difficulty
        self.rng = rng if rng is not None else np.random.default_rng()

    def get_best_move(self, game_state: GameState) -> Optional[int]:
        """
        Get the move for the current position.

        Args:
            game_state: Current game state.

        Returns:
            Cell index (0-8), or None if it's not our turn or the game is over.
        """
        if game_state.is_game_over:
            return None

        if game_state.current_player != self.player:
            logger.warning("It's not %s's turn!", self.player.value)
            return None

        move = select_move(game_state.board, self.difficulty, self.player, rng=self.rng)
        logger.debug("AI (%s, %s) plays cell %d", self.player.value, self.difficulty.value, move)
        return move

    def get_move_suggestion(self, game_state: GameState) -> str:
        """
        Get a human-readable move suggestion.

        Args:
            game_state: Current game state.

        Returns:
            A string describing the suggested move.
        """
        if game_state.current_player != self.player or game_state.is_game_over:
            return "No moves available!"

        move = self.get_best_move(game_state)
        return f"Place {self.player.value} on cell {move + 1}"
