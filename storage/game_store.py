"""
Game storage for the TicTacToe server.
Defines the store interface and an in-memory implementation.
"""

import itertools
import threading
from abc import ABC, abstractmethod
from contextlib import contextmanager
from dataclasses import replace
from datetime import datetime, timezone
from typing import Dict, Iterator, List

from logic.errors import GameNotFound
from logic.game_state import Game


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class GameStore(ABC):
    """
    Interface every game store implements.

    A round is load -> play -> save. Callers wrap it in
    transaction(game_id) so two rounds on the same game never interleave.
    """

    @abstractmethod
    def create(self, game: Game) -> Game:
        """
        Store a new game.

        Args:
            game: Game without an id.

        Returns:
            The stored game with id and timestamps filled in.
        """

    @abstractmethod
    def load(self, game_id: int) -> Game:
        """Fetch a game or raise GameNotFound."""

    @abstractmethod
    def save(self, game: Game) -> None:
        """Overwrite an existing game or raise GameNotFound."""

    @abstractmethod
    def recent(self, limit: int) -> List[Game]:
        """Newest games first, at most limit of them."""

    @abstractmethod
    def transaction(self, game_id: int):
        """
        Isolation scope for one read-modify-write on a game.

        Returns:
            A context manager. Leaving it with an exception discards
            whatever was saved inside it.
        """

    def close(self) -> None:
        pass


class InMemoryGameStore(GameStore):
    """
    Keeps games in a dict. Used for tests and console play.

    Each stored game gets its own lock when it is created, so rounds on
    different games run in parallel while rounds on the same game are
    serialized. Unknown ids never get a lock.
    """

    def __init__(self):
        self._games: Dict[int, Game] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()
        self._game_locks: Dict[int, threading.RLock] = {}

    def _game_lock(self, game_id: int) -> threading.RLock:
        with self._lock:
            lock = self._game_locks.get(game_id)
        if lock is None:
            raise GameNotFound(game_id)
        return lock

    def create(self, game: Game) -> Game:
        now = utc_now()
        with self._lock:
            stored = replace(game, id=next(self._ids), created_at=now, updated_at=now)
            self._games[stored.id] = stored
            self._game_locks[stored.id] = threading.RLock()
        return stored

    def load(self, game_id: int) -> Game:
        with self._lock:
            game = self._games.get(game_id)
        if game is None:
            raise GameNotFound(game_id)
        return game

    def save(self, game: Game) -> None:
        with self._game_lock(game.id):
            with self._lock:
                self._games[game.id] = game

    def recent(self, limit: int) -> List[Game]:
        with self._lock:
            games = list(self._games.values())
        games.sort(key=lambda g: (g.created_at, g.id), reverse=True)
        return games[:limit]

    @contextmanager
    def transaction(self, game_id: int) -> Iterator[None]:
        with self._game_lock(game_id):
            with self._lock:
                snapshot = self._games[game_id]
            try:
                yield
            except BaseException:
                # Roll back to the record as it was when the scope opened
                with self._lock:
                    self._games[game_id] = snapshot
                raise
