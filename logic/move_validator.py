"""
Move validator for TicTacToe.
Validates that moves follow the rules.
"""

from typing import Optional, List
from dataclasses import dataclass

from .config import GameConfig
from .game_state import GameState, Mark


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Can only place on the board (cells 0-8)
    2. Can only place on empty cells
    3. Game must not be over
    """

    def parse_cell(self, text: str) -> int:
        """
        Turn console input ("1" - "9") into a cell index (0-8).

        Raises:
            ValueError: If the text is not a number from 1 to 9.
        """
        text = text.strip()
        if not text.isdigit():
            raise ValueError(f"'{text}' is not a cell number. Type 1-9.")

        index = int(text) - 1
        if not 0 <= index < GameConfig.CELL_COUNT:
            raise ValueError(f"Cell {text} is off the board. Type 1-9.")
        return index

    def validate_move(self, game_state: GameState, index: int) -> ValidationResult:
        """
        Validate a move.

        Args:
            game_state: Current game state.
            index: Cell to place the mark on (0-8).

        Returns:
            ValidationResult with is_valid and error_message.
        """
        # Check if game is over
        if game_state.is_game_over:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        # Check if index is in valid range
        if not 0 <= index < GameConfig.CELL_COUNT:
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid cell {index}. Must be 0-{GameConfig.CELL_COUNT - 1}."
            )

        # Check if cell is empty
        occupant = game_state.board[index]
        if occupant != Mark.EMPTY:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {index + 1} is already taken by {occupant.value}"
            )

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, game_state: GameState) -> List[int]:
        """
        Get all valid moves for the current player.

        Args:
            game_state: Current game state.

        Returns:
            List of empty cell indices, or [] once the game is over.
        """
        if game_state.is_game_over:
            return []
        return game_state.get_empty_cells()
