"""
Storage module for the TicTacToe server.
Keeps game records in memory or in SQLite.
"""

from .config import StorageConfig
from .game_store import GameStore, InMemoryGameStore
from .sqlite_store import SqliteGameStore
