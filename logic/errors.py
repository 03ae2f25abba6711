"""Exceptions raised by the TicTacToe game logic."""


class TicTacToeError(Exception):
    """Base class for game logic errors."""


class InvalidStateError(TicTacToeError):
    """The board is in a state the requested operation cannot handle."""
