"""Unit tests for terminal-state detection."""

import pytest

from logic.game_state import Board, Mark
from logic.win_checker import WinChecker, Outcome


@pytest.fixture
def checker():
    return WinChecker()


def _board_with_line(line, mark):
    cells = [None] * 9
    for index in line:
        cells[index] = mark
    return Board.from_list(cells)


@pytest.mark.parametrize("line", WinChecker.WINNING_LINES)
@pytest.mark.parametrize("mark", ["X", "O"])
def test_every_line_wins(checker, line, mark):
    board = _board_with_line(line, mark)
    assert checker.check(board) == Outcome(winner=Mark(mark), is_over=True)
    assert checker.get_winning_line(board) == line


def test_row_win_with_opponent_marks(checker):
    board = Board.from_list(["O", "O", None, "X", "X", "X", None, None, None])
    outcome = checker.check(board)
    assert outcome.winner == Mark.X
    assert outcome.is_over


def test_full_board_without_line_is_draw(checker):
    board = Board.from_list(["X", "O", "X", "X", "O", "O", "O", "X", "X"])
    assert checker.check(board) == Outcome(winner=None, is_over=True)
    assert checker.check_draw(board)


def test_another_draw(checker):
    board = Board.from_list(["O", "X", "O", "X", "X", "O", "X", "O", "X"])
    assert checker.check(board) == Outcome(winner=None, is_over=True)


def test_empty_board_is_open(checker):
    assert checker.check(Board.empty()) == Outcome(winner=None, is_over=False)


def test_partial_board_is_open(checker):
    board = Board.from_list(["X", "O", "X", None, "O", None, None, "X", None])
    outcome = checker.check(board)
    assert outcome.winner is None
    assert not outcome.is_over
    assert not checker.check_draw(board)


def test_full_board_with_win_reports_win(checker):
    board = Board.from_list(["X", "X", "X", "O", "O", "X", "O", "X", "O"])
    outcome = checker.check(board)
    assert outcome == Outcome(winner=Mark.X, is_over=True)
    assert not checker.check_draw(board)


def test_no_winning_line_on_open_board(checker):
    assert checker.get_winning_line(Board.empty()) is None
    assert checker.check_winner(Board.empty()) is None
