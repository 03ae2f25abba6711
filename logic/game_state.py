"""
Game state management for TicTacToe.
Defines marks, the 9-cell board, and the state of a single game.
"""

import logging
from enum import Enum
from typing import Optional, List, Sequence, Tuple
from dataclasses import dataclass, field

from .config import GameConfig

logger = logging.getLogger(__name__)


class Mark(Enum):
    """What can occupy a cell: one of the two players, or nothing."""
    X = "X"
    O = "O"
    EMPTY = " "

    def opposite(self) -> "Mark":
        """Get the opposing player's mark."""
        if self == Mark.EMPTY:
            raise ValueError("EMPTY has no opposite mark")
        return Mark.O if self == Mark.X else Mark.X


class Difficulty(Enum):
    """Strength tiers for the AI opponent."""
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @classmethod
    def parse(cls, text: str) -> "Difficulty":
        return cls(text.strip().lower())


class GameMode(Enum):
    """Who is playing: two humans, or a human against the AI."""
    PVP = "pvp"
    PVE = "pve"


class GameStatus(Enum):
    """Status of a game, derived from the board after every placement."""
    PLAYING = "playing"
    X_WON = "x_won"
    O_WON = "o_won"
    DRAW = "draw"

    @classmethod
    def won_by(cls, mark: Mark) -> "GameStatus":
        return cls.X_WON if mark == Mark.X else cls.O_WON


# A board is 9 marks, indexed row by row:
#   0 | 1 | 2
#   3 | 4 | 5
#   6 | 7 | 8
Board = Tuple[Mark, ...]


def empty_board() -> Board:
    """Create a board with every cell empty."""
    return (Mark.EMPTY,) * GameConfig.CELL_COUNT


def as_board(cells: Sequence[Mark]) -> Board:
    """
    Copy a sequence of marks into a board value.

    Args:
        cells: Any sequence of exactly 9 Marks.

    Returns:
        The board as a tuple, so later changes to ``cells`` are not seen.

    Raises:
        ValueError: If the length is wrong or a cell is not a Mark.
    """
    board = tuple(cells)
    if len(board) != GameConfig.CELL_COUNT:
        raise ValueError(
            f"Board must have {GameConfig.CELL_COUNT} cells, got {len(board)}"
        )
    for cell in board:
        if not isinstance(cell, Mark):
            raise ValueError(f"Invalid cell value: {cell!r}")
    return board


def empty_cells(board: Sequence[Mark]) -> List[int]:
    """Indices of the empty cells, in ascending order."""
    return [index for index, cell in enumerate(board) if cell == Mark.EMPTY]


def is_full(board: Sequence[Mark]) -> bool:
    """True when no empty cell is left."""
    return all(cell != Mark.EMPTY for cell in board)


def place(board: Sequence[Mark], index: int, mark: Mark) -> Board:
    """Return a new board with ``mark`` at ``index``; the input is untouched."""
    cells = list(board)
    cells[index] = mark
    return tuple(cells)


@dataclass
class GameState:
    """
    The complete state of one TicTacToe game.

    Tracks:
    - The 9-cell board
    - Whose turn it is (X always starts)
    - Moves played this game
    - Game status (playing, won, draw) and the winning line
    """

    board: Board = field(default_factory=empty_board)

    # Current player's turn
    current_player: Mark = Mark.X

    # Cell indices in the order they were played
    moves: List[int] = field(default_factory=list)

    # Game result, kept up to date by WinChecker.update_game_state
    status: GameStatus = GameStatus.PLAYING
    winning_line: Optional[Tuple[int, int, int]] = None

    @property
    def is_game_over(self) -> bool:
        return self.status != GameStatus.PLAYING

    @property
    def is_draw(self) -> bool:
        return self.status == GameStatus.DRAW

    @property
    def winner(self) -> Optional[Mark]:
        if self.status == GameStatus.X_WON:
            return Mark.X
        if self.status == GameStatus.O_WON:
            return Mark.O
        return None

    def make_move(self, index: int) -> bool:
        """
        Place the current player's mark at the given cell.

        Args:
            index: Cell index (0-8).

        Returns:
            True if move was successful, False otherwise.
        """
        if self.is_game_over:
            logger.warning("Game is already over!")
            return False

        if not 0 <= index < GameConfig.CELL_COUNT:
            logger.warning("Cell %s is off the board!", index)
            return False

        if self.board[index] != Mark.EMPTY:
            logger.warning("Cell %s is already occupied!", index)
            return False

        self.board = place(self.board, index, self.current_player)
        self.moves.append(index)

        # Winner check is done by WinChecker; just switch turns here
        self.current_player = self.current_player.opposite()

        return True

    def get_empty_cells(self) -> List[int]:
        return empty_cells(self.board)

    def copy(self) -> "GameState":
        """Create an independent copy of the game state."""
        return GameState(
            board=self.board,
            current_player=self.current_player,
            moves=list(self.moves),
            status=self.status,
            winning_line=self.winning_line,
        )

    def reset(self):
        """Start a fresh game; X moves first."""
        self.board = empty_board()
        self.current_player = Mark.X
        self.moves = []
        self.status = GameStatus.PLAYING
        self.winning_line = None

    def render(self) -> str:
        """
        Draw the board as text.

        Empty cells show their 1-9 key so a human knows what to type;
        cells of the winning line are wrapped in brackets.
        """
        line = self.winning_line or ()
        rows = []
        for row in range(GameConfig.BOARD_SIZE):
            cells = []
            for col in range(GameConfig.BOARD_SIZE):
                index = row * GameConfig.BOARD_SIZE + col
                mark = self.board[index]
                text = str(index + 1) if mark == Mark.EMPTY else mark.value
                cells.append(f"[{text}]" if index in line else f" {text} ")
            rows.append("|".join(cells))
        return "\n---+---+---\n".join(rows)
