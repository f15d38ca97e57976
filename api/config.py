"""
API configuration for the TicTacToe server.
Network and logging settings, overridable through the environment.
"""

import os


class ApiConfig:
    """
    Configuration class for the HTTP server.
    Change these values based on your setup!
    """

    # ==================== SERVER SETTINGS ====================
    HOST = os.environ.get("SERVER_HOST", "127.0.0.1")
    PORT = int(os.environ.get("SERVER_PORT", "2022"))

    TITLE = "TicTacToe"
    DESCRIPTION = "Play tic-tac-toe against an unbeatable computer"

    # ==================== LOGGING SETTINGS ====================
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
    LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

    # ==================== CORS SETTINGS ====================
    # Comma separated origins allowed to call the API from a browser
    CORS_ORIGINS = [
        origin.strip()
        for origin in os.environ.get("CORS_ORIGINS", "*").split(",")
        if origin.strip()
    ]
