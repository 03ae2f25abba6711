"""
Win checker for TicTacToe.
Checks if a player has won or if the game is a draw.
"""

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from .game_state import GameState, GameStatus, Mark, is_full

Line = Tuple[int, int, int]

# All possible winning lines, in the order they are scanned
WINNING_LINES: Tuple[Line, ...] = (
    # Rows
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    # Columns
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    # Diagonals
    (0, 4, 8),
    (2, 4, 6),
)


@dataclass(frozen=True)
class EvaluationResult:
    """Result of evaluating a board."""
    winner: Optional[Mark] = None
    line: Optional[Line] = None


def evaluate(board: Sequence[Mark]) -> EvaluationResult:
    """
    Find the first complete line on the board.

    Lines are scanned in WINNING_LINES order, so a board with more than
    one complete line (impossible in a real game) still gives a stable
    answer. No winner means the game goes on, or is a draw if the board
    is full; telling those apart is up to the caller.
    """
    for line in WINNING_LINES:
        a, b, c = line
        mark = board[a]
        if mark != Mark.EMPTY and mark == board[b] == board[c]:
            return EvaluationResult(winner=mark, line=line)
    return EvaluationResult()


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 marks of the same player in a row
    (horizontally, vertically, or diagonally)
    """

    def check_draw(self, game_state: GameState) -> bool:
        """A draw is a full board with no complete line."""
        return self.get_status(game_state.board) == GameStatus.DRAW

    def get_status(self, board: Sequence[Mark]) -> GameStatus:
        """
        Derive the game status from a board.

        Args:
            board: The board to inspect.

        Returns:
            X_WON / O_WON if a line is complete, DRAW if the board is
            full otherwise, PLAYING if not.
        """
        result = evaluate(board)
        if result.winner is not None:
            return GameStatus.won_by(result.winner)
        if is_full(board):
            return GameStatus.DRAW
        return GameStatus.PLAYING

    def update_game_state(self, game_state: GameState) -> GameState:
        """
        Update the game state with winner/draw information.

        Args:
            game_state: The game state to update.

        Returns:
            Updated game state.
        """
        result = evaluate(game_state.board)

        if result.winner is not None:
            game_state.status = GameStatus.won_by(result.winner)
            game_state.winning_line = result.line
        elif is_full(game_state.board):
            game_state.status = GameStatus.DRAW

        return game_state
