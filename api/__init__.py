"""
API module for the TicTacToe server.
Exposes the game service over HTTP.
"""

from .config import ApiConfig
from .service import GameService
from .app import create_app
