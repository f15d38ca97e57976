"""Tests for the game service: engine plus storage."""

from concurrent.futures import ThreadPoolExecutor

import pytest

from logic.errors import CellOccupied, GameNotFound, GameNotInProgress
from logic.game_state import Board, GameStatus, Mark


def test_create_game(service):
    game = service.create_game()

    assert game.id is not None
    assert game.board == Board.empty()
    assert game.current_player == Mark.X
    assert game.status == GameStatus.IN_PROGRESS
    assert game.winner is None


def test_create_game_as_o_still_opens_with_x(service):
    game = service.create_game("O")
    assert game.current_player == Mark.X


def test_create_game_rejects_unknown_mark(service):
    with pytest.raises(ValueError):
        service.create_game("Z")


def test_move_is_stored(service):
    game = service.create_game()

    result = service.make_move(game.id, 0)

    stored = service.get_game(game.id)
    assert stored == result.game
    assert stored.board[0] == Mark.X
    assert stored.board.count(Mark.O) == 1
    assert stored.updated_at >= game.updated_at


def test_human_win_is_stored(service, stored_game):
    game = stored_game(["X", "X", None, "O", "O", None, None, None, None])

    result = service.make_move(game.id, 2)

    assert result.game_over
    stored = service.get_game(game.id)
    assert stored.status == GameStatus.WON
    assert stored.winner == Mark.X


def test_rejected_move_changes_nothing(service, stored_game):
    game = stored_game(["X", None, None, None, "O", None, None, None, None], current_player=Mark.O)

    with pytest.raises(CellOccupied):
        service.make_move(game.id, 4)

    assert service.get_game(game.id) == game


def test_move_on_finished_game(service, stored_game):
    game = stored_game(status=GameStatus.DRAW)

    with pytest.raises(GameNotInProgress):
        service.make_move(game.id, 0)

    assert service.get_game(game.id) == game


def test_missing_game(service):
    with pytest.raises(GameNotFound):
        service.make_move(999, 0)
    with pytest.raises(GameNotFound):
        service.get_game(999)


def test_list_recent_games(service):
    ids = [service.create_game().id for _ in range(12)]

    recent = service.list_recent_games()

    assert len(recent) == 10
    assert [g.id for g in recent] == list(reversed(ids))[:10]


def test_concurrent_moves_are_not_lost(service):
    game = service.create_game()

    with ThreadPoolExecutor(max_workers=2) as pool:
        results = list(pool.map(lambda p: service.make_move(game.id, p), [0, 8]))

    stored = service.get_game(game.id)
    assert len(results) == 2
    assert stored.board[0] is not None
    assert stored.board[8] is not None
    assert stored.board.count(Mark.X) == 2
    assert stored.board.count(Mark.O) == 2
    assert stored.current_player == Mark.X
