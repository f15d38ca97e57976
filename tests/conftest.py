"""Shared fixtures for the TicTacToe tests."""

import pytest

from logic.game_state import Board, Game, GameStatus, Mark
from storage.game_store import InMemoryGameStore
from storage.sqlite_store import SqliteGameStore
from api.service import GameService


@pytest.fixture(params=["memory", "sqlite"])
def store(request, tmp_path):
    if request.param == "memory":
        yield InMemoryGameStore()
    else:
        store = SqliteGameStore(str(tmp_path / "games.db"))
        yield store
        store.close()


@pytest.fixture
def service(store):
    return GameService(store)


@pytest.fixture
def stored_game(store):
    """Factory storing a game with the given board and player to move."""

    def _create(cells=None, current_player=Mark.X, status=GameStatus.IN_PROGRESS, winner=None):
        board = Board.from_list(cells) if cells is not None else Board.empty()
        game = store.create(Game(
            board=board,
            current_player=current_player,
            status=status,
            winner=winner,
        ))
        return game

    return _create
