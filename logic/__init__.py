"""
Logic module for TicTacToe.
Handles the board, rules, turn flow, and AI opponent.
"""

from .config import GameConfig
from .errors import (
    GameError,
    OutOfRange,
    CellOccupied,
    GameNotInProgress,
    NoLegalMove,
    GameNotFound,
)
from .game_state import Board, Game, GameStatus, Mark, Move
from .move_validator import MoveValidator, ValidationResult
from .win_checker import WinChecker, Outcome
from .ai_player import AIPlayer
from .turn_engine import TurnEngine, RoundResult
