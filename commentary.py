"""
Commentary for the TicTacToe console game.
Short quips picked from the game status only; the board is never needed.
"""

from dataclasses import dataclass, field
from typing import List

import numpy as np

from logic.game_state import Difficulty, GameMode, GameStatus, Mark


@dataclass
class Commentator:
    """Generates witty one-liners based on game events."""

    rng: np.random.Generator = field(default_factory=np.random.default_rng)

    def comment(
        self,
        status: GameStatus,
        turn: Mark,
        mode: GameMode,
        difficulty: Difficulty
    ) -> str:
        """
        Pick a line for the current status.

        Args:
            status: Derived game status.
            turn: Whose turn it is (or who moved last, once the game is over).
            mode: PvP or PvE.
            difficulty: AI tier, mentioned in PvE banter.
        """
        if status == GameStatus.PLAYING:
            templates = self._playing_templates(turn, mode, difficulty)
        elif status == GameStatus.DRAW:
            templates = self._draw_templates()
        else:
            winner = Mark.X if status == GameStatus.X_WON else Mark.O
            templates = self._victory_templates(winner)
        return templates[int(self.rng.integers(len(templates)))]

    def _playing_templates(
        self, turn: Mark, mode: GameMode, difficulty: Difficulty
    ) -> List[str]:
        lines = [
            f"{turn.value}, the grid is watching. No pressure.",
            f"Your move, {turn.value}. Make it shine.",
            f"{turn.value} is up. Corners are calling.",
            f"Think fast, {turn.value}. Or slow. It's tic-tac-toe.",
        ]
        if mode == GameMode.PVE:
            lines += [
                f"The {difficulty.value} AI is humming. Your move, {turn.value}.",
                f"{turn.value} versus a {difficulty.value} machine. Bold.",
            ]
        else:
            lines.append(f"Human versus human. {turn.value}, don't blink.")
        return lines

    def _victory_templates(self, winner: Mark) -> List[str]:
        return [
            f"{winner.value} takes it! Three in a row, zero regrets.",
            f"Neon lights up for {winner.value}. Flawless line.",
            f"{winner.value} wins. Somebody call the scoreboard.",
            f"And that's a wrap. {winner.value} owns the grid.",
        ]

    def _draw_templates(self) -> List[str]:
        return [
            "A draw. Everybody wins. Nobody wins.",
            "Nine cells, zero winners. Classic.",
            "Perfect play on both sides, or perfect boredom?",
            "Stalemate. The grid sighs in neon.",
        ]
