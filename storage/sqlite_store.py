"""
SQLite game storage for the TicTacToe server.
Persists games in a single `games` table.
"""

import json
import logging
import sqlite3
import threading
from contextlib import contextmanager
from datetime import datetime
from typing import Iterator, List, Optional

from logic.errors import GameNotFound
from logic.game_state import Board, Game, GameStatus, Mark
from .config import StorageConfig
from .game_store import GameStore, utc_now

logger = logging.getLogger(__name__)


SCHEMA = """
CREATE TABLE IF NOT EXISTS games (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    board_state TEXT NOT NULL,
    current_player TEXT NOT NULL CHECK (current_player IN ('X', 'O')),
    status TEXT NOT NULL CHECK (status IN ('in_progress', 'won', 'draw')),
    winner TEXT CHECK (winner IN ('X', 'O')),
    created_at TEXT NOT NULL,
    updated_at TEXT NOT NULL
)
"""

COLUMNS = "id, board_state, current_player, status, winner, created_at, updated_at"

# SQLite INTEGER is a signed 64-bit value
MIN_ID = -(2 ** 63)
MAX_ID = 2 ** 63 - 1


def _check_id(game_id) -> None:
    """Raise GameNotFound for ids no row can have."""
    if game_id is None or not MIN_ID <= game_id <= MAX_ID:
        raise GameNotFound(game_id)


def _format_time(value: datetime) -> str:
    # Fixed width so text order matches time order
    return value.isoformat(timespec="microseconds")


class SqliteGameStore(GameStore):
    """
    Stores games in SQLite.

    One connection is shared by all threads behind a lock. A round runs
    inside BEGIN IMMEDIATE, which takes the database write lock up front,
    so concurrent rounds (from any process) are serialized and a stale
    board can never overwrite a newer one.
    """

    def __init__(self, path: Optional[str] = None, timeout: Optional[float] = None):
        """
        Open (and if needed create) the database.

        Args:
            path: SQLite file path, or ":memory:". Defaults to StorageConfig.
            timeout: Seconds to wait for the write lock.
        """
        self.path = path or StorageConfig.DATABASE_PATH
        self._lock = threading.RLock()
        self._conn = sqlite3.connect(
            self.path,
            timeout=timeout if timeout is not None else StorageConfig.DATABASE_TIMEOUT,
            isolation_level=None,  # explicit BEGIN/COMMIT only
            check_same_thread=False,
        )
        self._conn.row_factory = sqlite3.Row

        with self._lock:
            self._conn.execute(SCHEMA)

        logger.info("Game database ready at %s", self.path)

    def _row_to_game(self, row: sqlite3.Row) -> Game:
        winner = row["winner"]
        return Game(
            id=row["id"],
            board=Board.from_list(json.loads(row["board_state"])),
            current_player=Mark(row["current_player"]),
            status=GameStatus(row["status"]),
            winner=Mark(winner) if winner is not None else None,
            created_at=datetime.fromisoformat(row["created_at"]),
            updated_at=datetime.fromisoformat(row["updated_at"]),
        )

    def create(self, game: Game) -> Game:
        now = _format_time(utc_now())
        with self._lock:
            cursor = self._conn.execute(
                "INSERT INTO games (board_state, current_player, status, winner, created_at, updated_at) "
                "VALUES (?, ?, ?, ?, ?, ?)",
                (
                    json.dumps(game.board.to_list()),
                    game.current_player.value,
                    game.status.value,
                    game.winner.value if game.winner is not None else None,
                    now,
                    now,
                ),
            )
            game_id = cursor.lastrowid
        return self.load(game_id)

    def load(self, game_id: int) -> Game:
        _check_id(game_id)
        with self._lock:
            row = self._conn.execute(
                f"SELECT {COLUMNS} FROM games WHERE id = ?", (game_id,)
            ).fetchone()
        if row is None:
            raise GameNotFound(game_id)
        return self._row_to_game(row)

    def save(self, game: Game) -> None:
        _check_id(game.id)
        updated_at = game.updated_at or utc_now()
        with self._lock:
            cursor = self._conn.execute(
                "UPDATE games SET board_state = ?, current_player = ?, status = ?, "
                "winner = ?, updated_at = ? WHERE id = ?",
                (
                    json.dumps(game.board.to_list()),
                    game.current_player.value,
                    game.status.value,
                    game.winner.value if game.winner is not None else None,
                    _format_time(updated_at),
                    game.id,
                ),
            )
            if cursor.rowcount == 0:
                raise GameNotFound(game.id)

    def recent(self, limit: int) -> List[Game]:
        with self._lock:
            rows = self._conn.execute(
                f"SELECT {COLUMNS} FROM games ORDER BY created_at DESC, id DESC LIMIT ?",
                (limit,),
            ).fetchall()
        return [self._row_to_game(row) for row in rows]

    @contextmanager
    def transaction(self, game_id: int) -> Iterator[None]:
        with self._lock:
            self._conn.execute("BEGIN IMMEDIATE")
            try:
                yield
            except BaseException:
                self._conn.execute("ROLLBACK")
                raise
            else:
                self._conn.execute("COMMIT")

    def close(self) -> None:
        with self._lock:
            self._conn.close()
