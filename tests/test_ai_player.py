"""Unit tests for the minimax AI."""

import pytest

from logic.ai_player import AIPlayer
from logic.errors import NoLegalMove
from logic.game_state import Board, Mark
from logic.win_checker import WinChecker


def test_takes_win_over_block():
    # X can win at 5, O threatens 2
    board = Board.from_list(["O", "O", None, "X", "X", None, None, None, None])
    ai = AIPlayer(Mark.X)
    assert ai.get_best_move(board) == 5
    assert ai.last_score == 9


@pytest.mark.parametrize("cells, expected", [
    # Row
    (["X", "X", None, None, "O", None, None, None, None], 2),
    # Column
    (["X", "O", None, "X", None, None, None, None, None], 6),
    # Diagonal
    ([None, None, "X", "O", "X", None, None, None, None], 6),
])
def test_blocks_immediate_threat(cells, expected):
    board = Board.from_list(cells)
    assert AIPlayer(Mark.O).get_best_move(board) == expected


@pytest.mark.parametrize("cells, expected", [
    (["O", "O", None, "X", "X", None, "X", None, None], 2),
    (["O", "X", "X", "O", "X", None, None, None, None], 6),
    (["O", "X", None, "X", "O", None, "X", None, None], 8),
])
def test_wins_immediately_as_o(cells, expected):
    assert AIPlayer(Mark.O).get_best_move(Board.from_list(cells)) == expected


def test_prefers_faster_win():
    # 2, 3 and 6 all set up forks, but 8 wins right away
    board = Board.from_list(["X", "O", None, None, "X", None, None, "O", None])
    ai = AIPlayer(Mark.X)
    assert ai.get_best_move(board) == 8
    assert ai.last_score == 9


def test_answers_center_with_first_corner():
    board = Board.empty().place(4, Mark.X)
    assert AIPlayer(Mark.O).get_best_move(board) == 0


def test_empty_board_picks_lowest_index():
    ai = AIPlayer(Mark.X)
    assert ai.get_best_move(Board.empty()) == 0
    assert ai.last_score == 0


def test_pruning_does_not_change_choice():
    boards = [
        Board.empty().place(0, Mark.X),
        Board.from_list(["X", None, None, None, "O", None, None, None, "X"]),
        Board.from_list([None, "X", None, None, "O", None, None, "X", None]),
    ]
    for board in boards:
        pruned = AIPlayer(Mark.O, use_pruning=True).get_best_move(board)
        full = AIPlayer(Mark.O, use_pruning=False).get_best_move(board)
        assert pruned == full


def test_single_empty_cell():
    board = Board.from_list(["X", "O", "X", "O", "X", "O", "O", "X", None])
    assert AIPlayer(Mark.O).get_best_move(board) == 8


def test_full_board_raises():
    board = Board.from_list(["X", "O", "X", "X", "O", "O", "O", "X", "X"])
    with pytest.raises(NoLegalMove):
        AIPlayer(Mark.O).get_best_move(board)


def test_board_is_not_modified():
    board = Board.from_list(["X", None, None, None, "O", None, None, None, "X"])
    before = board.to_list()
    AIPlayer(Mark.O).get_best_move(board)
    assert board.to_list() == before


def test_never_loses_as_second_player():
    """Play every possible X line against the AI and check X never wins."""
    checker = WinChecker()
    ai = AIPlayer(Mark.O)

    def explore(board):
        for position in board.empty_cells():
            after_human = board.place(position, Mark.X)
            outcome = checker.check(after_human)
            assert outcome.winner != Mark.X, after_human.pretty()
            if outcome.is_over:
                continue

            reply = ai.get_best_move(after_human)
            assert after_human[reply] is None
            after_ai = after_human.place(reply, Mark.O)
            if not checker.check(after_ai).is_over:
                explore(after_ai)

    explore(Board.empty())
