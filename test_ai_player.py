"""
Tests for the AI player: EASY, MEDIUM and HARD move selection.
"""

import numpy as np
import pytest

from logic.ai_player import AIPlayer, score_moves, select_move
from logic.errors import InvalidStateError, TicTacToeError
from logic.game_state import (
    Difficulty,
    GameState,
    Mark,
    as_board,
    empty_board,
    empty_cells,
    is_full,
    place,
)
from logic.win_checker import WinChecker, evaluate

X, O, _ = Mark.X, Mark.O, Mark.EMPTY


def make_board(text):
    """Build a board from a 9 character string of X, O and '_'."""
    return as_board([{"X": X, "O": O, "_": _}[ch] for ch in text])


def to_move(board):
    """Whose turn it is on a legally reached board (X starts)."""
    return X if board.count(X) == board.count(O) else O


def reachable_positions(min_empty=0, max_empty=9):
    """All positions reachable in a legal game that are not over yet."""
    seen = set()
    frontier = [empty_board()]
    while frontier:
        board = frontier.pop()
        if board in seen:
            continue
        seen.add(board)
        if evaluate(board).winner is not None or is_full(board):
            continue
        mark = to_move(board)
        for index in empty_cells(board):
            frontier.append(place(board, index, mark))
    return [
        board for board in seen
        if evaluate(board).winner is None and not is_full(board)
        and min_empty <= len(empty_cells(board)) <= max_empty
    ]


def immediate_win(board, mark):
    return any(
        evaluate(place(board, index, mark)).winner == mark
        for index in empty_cells(board)
    )


def play_out(x_tier, o_tier, rng, board=None):
    """Play a game to the end, each side using select_move with its tier."""
    board = board or empty_board()
    tiers = {X: x_tier, O: o_tier}
    mark = to_move(board)
    while evaluate(board).winner is None and not is_full(board):
        index = select_move(board, tiers[mark], mark, rng=rng)
        assert board[index] == _
        board = place(board, index, mark)
        mark = mark.opposite()
    return board, evaluate(board).winner


# ==================== PRECONDITIONS ====================

@pytest.mark.parametrize("difficulty", list(Difficulty))
def test_full_board_is_invalid_state(difficulty):
    board = make_board("XOXOXOOXO")
    with pytest.raises(InvalidStateError):
        select_move(board, difficulty, X)


def test_invalid_state_is_a_game_error():
    assert issubclass(InvalidStateError, TicTacToeError)


def test_empty_mark_cannot_move():
    with pytest.raises(ValueError):
        select_move(empty_board(), Difficulty.HARD, _)


@pytest.mark.parametrize("difficulty", list(Difficulty))
@pytest.mark.parametrize("moving_mark", ["X", None, 1])
def test_moving_mark_must_be_a_mark(difficulty, moving_mark):
    with pytest.raises(ValueError):
        select_move(make_board("XX_OO____"), difficulty, moving_mark)


def test_unknown_difficulty():
    with pytest.raises(ValueError):
        select_move(empty_board(), "impossible", X)


def test_difficulty_given_as_value():
    assert select_move(make_board("XX_OO____"), "medium", X) == 2


@pytest.mark.parametrize("difficulty", list(Difficulty))
def test_last_empty_cell(difficulty):
    board = make_board("XOXOXOOX_")
    assert select_move(board, difficulty, O) == 8


# ==================== EASY ====================

def test_easy_always_legal():
    rng = np.random.default_rng(7)
    for board in reachable_positions(min_empty=1)[:500]:
        index = select_move(board, Difficulty.EASY, to_move(board), rng=rng)
        assert board[index] == _


def test_easy_uses_default_rng():
    board = make_board("XOX_O_X__")
    assert board[select_move(board, Difficulty.EASY, O)] == _


# ==================== MEDIUM ====================

def test_medium_completes_own_line():
    # X X _ / O O _ / _ _ _ : X to move wins on 2
    assert select_move(make_board("XX_OO____"), Difficulty.MEDIUM, X) == 2
    # column 2,5,8
    assert select_move(make_board("X_OX_O___"), Difficulty.MEDIUM, O) == 8


def test_medium_prefers_own_win_over_block():
    # O can win on 5 and X threatens 2; winning comes first
    assert select_move(make_board("XX_OO____"), Difficulty.MEDIUM, O) == 5


def test_medium_blocks_opponent():
    board = make_board("XX__O____")
    assert select_move(board, Difficulty.MEDIUM, O) == 2


def test_medium_blocks_lowest_threat_first():
    # X threatens both 2 (row) and 6 (column); lowest index is blocked
    board = make_board("XX_X_O_O_")
    assert select_move(board, Difficulty.MEDIUM, O) == 2


def test_medium_falls_back_to_random_legal_move():
    rng = np.random.default_rng(3)
    board = make_board("X___O____")
    for _round in range(20):
        assert board[select_move(board, Difficulty.MEDIUM, X, rng=rng)] == _


def test_medium_on_every_position():
    rng = np.random.default_rng(11)
    for board in reachable_positions(min_empty=1, max_empty=6):
        mark = to_move(board)
        index = select_move(board, Difficulty.MEDIUM, mark, rng=rng)
        assert board[index] == _
        if immediate_win(board, mark):
            assert evaluate(place(board, index, mark)).winner == mark
        elif immediate_win(board, mark.opposite()):
            assert evaluate(place(board, index, mark.opposite())).winner == mark.opposite()


# ==================== HARD ====================

def test_hard_blocks_row_threat():
    # Both 2 and 5 lead to an O win; 2 is found first
    board = make_board("XX_OO____")
    scores = score_moves(board, O)
    assert scores[2] == 10
    assert scores[5] == 10
    assert select_move(board, Difficulty.HARD, O) == 2


def test_hard_takes_win():
    assert select_move(make_board("OO_XX_X__"), Difficulty.HARD, O) == 2


def test_hard_blocks_when_it_cannot_win():
    assert select_move(make_board("XX__O____"), Difficulty.HARD, O) == 2


def test_hard_scores_are_absolute():
    scores = score_moves(make_board("XX_OO____"), X)
    assert set(scores.values()) <= {10, 0, -10}
    assert scores[2] == 10


def test_hard_empty_board():
    scores = score_moves(empty_board(), X)
    assert scores == {index: 0 for index in range(9)}
    assert select_move(empty_board(), Difficulty.HARD, X) == 0


def test_hard_does_not_mutate_caller_board():
    cells = list(make_board("X___O____"))
    before = list(cells)
    select_move(cells, Difficulty.HARD, X)
    assert cells == before


def test_hard_vs_hard_draws():
    board, winner = play_out(Difficulty.HARD, Difficulty.HARD, np.random.default_rng(0))
    assert winner is None
    assert is_full(board)


@pytest.mark.parametrize("seed", range(4))
def test_hard_never_loses(seed):
    rng = np.random.default_rng(seed)
    for opponent in (Difficulty.EASY, Difficulty.MEDIUM):
        _board, winner = play_out(Difficulty.HARD, opponent, rng)
        assert winner != O
        _board, winner = play_out(opponent, Difficulty.HARD, rng)
        assert winner != X


def test_hard_never_loses_from_any_position_it_can_hold():
    # Wherever HARD's best score is not a loss, best play by the
    # opponent cannot beat it
    for board in reachable_positions(min_empty=1, max_empty=5):
        mark = to_move(board)
        if max(score_moves(board, mark).values()) < 0:
            continue
        _final, winner = play_out(
            Difficulty.HARD,
            Difficulty.HARD,
            None,
            board=board,
        )
        assert winner != mark.opposite()


def test_hard_never_hands_over_an_immediate_win():
    for board in reachable_positions(min_empty=2, max_empty=6):
        mark = to_move(board)
        index = select_move(board, Difficulty.HARD, mark)
        after = place(board, index, mark)
        if evaluate(after).winner == mark:
            continue
        if immediate_win(after, mark.opposite()):
            # Only allowed when every alternative loses too
            assert all(score == -10 for score in score_moves(board, mark).values())


# ==================== AI PLAYER ====================

def test_ai_player_waits_for_its_turn():
    ai = AIPlayer(O, Difficulty.HARD)
    game = GameState()
    assert ai.get_best_move(game) is None
    game.make_move(4)
    move = ai.get_best_move(game)
    assert move in game.get_empty_cells()


def test_ai_player_game_over():
    checker = WinChecker()
    game = GameState()
    for index in (0, 3, 1, 4, 2):
        game.make_move(index)
        checker.update_game_state(game)
    ai = AIPlayer(O, Difficulty.HARD)
    assert ai.get_best_move(game) is None
    assert ai.get_move_suggestion(game) == "No moves available!"


def test_ai_player_suggestion():
    game = GameState()
    for index in (0, 4, 1):
        game.make_move(index)
    ai = AIPlayer(O, Difficulty.HARD)
    assert ai.get_move_suggestion(game) == "Place O on cell 3"


def test_ai_player_seeded_rng_is_reproducible():
    game = GameState()
    game.make_move(4)
    first = AIPlayer(O, Difficulty.EASY, np.random.default_rng(42)).get_best_move(game)
    second = AIPlayer(O, Difficulty.EASY, np.random.default_rng(42)).get_best_move(game)
    assert first == second
