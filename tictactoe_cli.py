"""
Main orchestration script for TicTacToe.

This script ties together:
- Logic (game state, move validation, win checking, AI)
- Commentary (quips about the game status)
- Console input/output and the running score

Run this script to play TicTacToe in the terminal!
"""

import argparse
import logging
import time
from dataclasses import dataclass
from typing import Callable, Optional

import numpy as np

from commentary import Commentator
from logging_setup import setup_logging
from logic.ai_player import AIPlayer
from logic.config import GameConfig
from logic.game_state import Difficulty, GameMode, GameState, GameStatus, Mark
from logic.move_validator import MoveValidator
from logic.win_checker import WinChecker

logger = logging.getLogger(__name__)


@dataclass
class Score:
    """Wins and draws across the rounds of one session."""
    x: int = 0
    o: int = 0
    draws: int = 0

    def record(self, status: GameStatus):
        if status == GameStatus.X_WON:
            self.x += 1
        elif status == GameStatus.O_WON:
            self.o += 1
        elif status == GameStatus.DRAW:
            self.draws += 1

    def __str__(self) -> str:
        return f"X: {self.x}  O: {self.o}  Draws: {self.draws}"


class TicTacToeGame:
    """
    Main controller for a console TicTacToe session.

    Game flow:
    1. Human (or AI) places a mark
    2. Board is checked for a winner or a draw
    3. Turn passes to the other side
    4. Repeat until someone wins or it's a draw, then update the score
    """

    def __init__(
        self,
        mode: GameMode = GameMode.PVE,
        difficulty: Difficulty = Difficulty.HARD,
        human_player: Mark = Mark.X,
        rng: Optional[np.random.Generator] = None,
        input_fn: Optional[Callable[[str], str]] = None,
        output_fn: Optional[Callable[[str], None]] = None,
        think_delay: float = GameConfig.AI_THINK_DELAY_S
    ):
        """
        Initialize the game.

        Args:
            mode: PVE plays against the AI, PVP is two humans.
            difficulty: AI strength tier (PVE only).
            human_player: Which mark the human plays in PVE. X always starts.
            rng: Random generator shared by the AI and the commentator.
            input_fn: Reads a line of input (default: input).
            output_fn: Shows a line of output (default: print).
            think_delay: Pause before each AI move, in seconds.
        """
        self.mode = mode
        self.difficulty = difficulty
        self.human_player = human_player
        self.rng = rng if rng is not None else np.random.default_rng()
        self.input_fn = input_fn or input
        self.output_fn = output_fn or print
        self.think_delay = think_delay

        self.game_state = GameState()
        self.validator = MoveValidator()
        self.win_checker = WinChecker()
        self.commentator = Commentator(self.rng)
        self.score = Score()

        self.ai: Optional[AIPlayer] = None
        if mode == GameMode.PVE:
            self.ai = AIPlayer(human_player.opposite(), difficulty, self.rng)

        self.is_running = False

    def run(self):
        """Play rounds until the user stops."""
        self.is_running = True
        self._say(self._banner())

        while self.is_running:
            status = self.play_round()
            if status is None:
                break
            self._say(f"Score -> {self.score}")

            answer = self._read("Play again? [y/N] ")
            if answer is None or answer.strip().lower() not in ("y", "yes"):
                break

        self.is_running = False
        self._say(f"Final score -> {self.score}")

    def play_round(self) -> Optional[GameStatus]:
        """
        Play one game to the end.

        Returns:
            The final status, or None if the user quit mid-game.
        """
        self.is_running = True
        self.game_state.reset()
        self._say("Fresh start! X's turn.")

        while not self.game_state.is_game_over:
            self._say("\n" + self.game_state.render() + "\n")

            if self._is_ai_turn():
                self._ai_move()
            elif not self._human_move():
                if not self.is_running:
                    self._say("Game quit by user.")
                    return None
                continue

            if self.game_state.is_game_over:
                break

            if self.rng.random() < GameConfig.COMMENTARY_CHANCE:
                self._say(self.commentator.comment(
                    GameStatus.PLAYING, self.game_state.current_player,
                    self.mode, self.difficulty
                ))

        self._show_game_result()
        return self.game_state.status

    def _is_ai_turn(self) -> bool:
        return self.ai is not None and self.game_state.current_player == self.ai.player

    def _ai_move(self):
        """Let the AI play its move."""
        self._say(">>> AI is thinking...")
        if self.think_delay > 0:
            time.sleep(self.think_delay)

        move = self.ai.get_best_move(self.game_state)
        self.game_state.make_move(move)
        self.win_checker.update_game_state(self.game_state)
        self._say(f">>> AI ({self.ai.player.value}) plays cell {move + 1}")

    def _human_move(self) -> bool:
        """
        Read and apply one command from the human.

        Returns:
            True if a mark was placed. False on bad input, a hint,
            a restart (with or without clearing the score), or quitting
            (is_running is cleared on quit).
        """
        player = self.game_state.current_player
        command = self._read(f"{player.value} to move [1-9, h=hint, r=restart, a=reset all, q=quit]: ")

        if command is None or command.strip().lower() == "q":
            self.is_running = False
            return False

        command = command.strip().lower()
        if command == "r":
            self.game_state.reset()
            self._say("Fresh start! X's turn.")
            return False
        if command == "a":
            self.score = Score()
            self.game_state.reset()
            self._say("Score cleared. Fresh start! X's turn.")
            return False
        if command == "h":
            advisor = AIPlayer(player, Difficulty.HARD)
            self._say(f"Hint: {advisor.get_move_suggestion(self.game_state)}")
            return False

        try:
            index = self.validator.parse_cell(command)
        except ValueError as exc:
            self._say(str(exc))
            return False

        result = self.validator.validate_move(self.game_state, index)
        if not result.is_valid:
            self._say(result.error_message)
            return False

        self.game_state.make_move(index)
        self.win_checker.update_game_state(self.game_state)
        return True

    def _show_game_result(self):
        """Show the final game result and update the score."""
        status = self.game_state.status
        self.score.record(status)

        self._say("\n" + "=" * 30)
        self._say("   GAME OVER!")
        self._say("=" * 30)
        self._say(self.game_state.render())

        winner = self.game_state.winner
        if winner is None:
            self._say("It's a draw!")
        elif self.ai is not None and winner == self.ai.player:
            self._say(f"AI ({winner.value}) wins! Better luck next time!")
        else:
            self._say(f"{winner.value} wins!")

        last_mover = winner or self.game_state.current_player.opposite()
        self._say(self.commentator.comment(status, last_mover, self.mode, self.difficulty))

    def _banner(self) -> str:
        if self.ai is None:
            return "Neon TicTacToe - two players. X starts."
        return (
            f"Neon TicTacToe - you are {self.human_player.value}, "
            f"AI is {self.ai.player.value} ({self.difficulty.value}). X starts."
        )

    def _read(self, prompt: str) -> Optional[str]:
        try:
            return self.input_fn(prompt)
        except EOFError:
            return None

    def _say(self, text: str):
        self.output_fn(text)


def main(argv=None):
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Neon TicTacToe")
    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in GameMode],
        default=GameConfig.DEFAULT_MODE,
        help="pve: play against the AI, pvp: two players on one console"
    )
    parser.add_argument(
        "--difficulty",
        choices=[level.value for level in Difficulty],
        default=GameConfig.DEFAULT_DIFFICULTY,
        help="AI strength tier"
    )
    parser.add_argument(
        "--human",
        choices=[Mark.X.value, Mark.O.value],
        default=GameConfig.DEFAULT_HUMAN_MARK,
        help="Mark the human plays against the AI (X moves first)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the random generator"
    )
    parser.add_argument(
        "--delay",
        type=float,
        default=GameConfig.AI_THINK_DELAY_S,
        help="Seconds the AI pauses before moving"
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help=f"Logging level (default: ${GameConfig.LOG_LEVEL_ENV} or {GameConfig.DEFAULT_LOG_LEVEL})"
    )

    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    game = TicTacToeGame(
        mode=GameMode(args.mode),
        difficulty=Difficulty.parse(args.difficulty),
        human_player=Mark(args.human),
        rng=np.random.default_rng(args.seed),
        think_delay=args.delay
    )
    logger.debug("Starting %s game, difficulty %s", args.mode, args.difficulty)

    try:
        game.run()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
