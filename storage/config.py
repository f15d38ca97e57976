"""
Storage configuration for the TicTacToe server.
Where games are kept and how many recent games are listed.
"""

import os


class StorageConfig:
    """
    Configuration class for storage settings.
    Values can be overridden with environment variables.
    """

    # ==================== DATABASE SETTINGS ====================
    # SQLite file. Use ":memory:" for a throwaway database.
    DATABASE_PATH = os.environ.get("TICTACTOE_DB", "tictactoe.db")

    # Seconds to wait for another writer to release the database
    DATABASE_TIMEOUT = 5.0

    # ==================== QUERY SETTINGS ====================
    # Most recent games returned by the listing
    RECENT_GAMES_LIMIT = 10
