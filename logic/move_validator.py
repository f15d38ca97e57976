"""
Move validator for TicTacToe.
Validates that moves follow the rules.
"""

from typing import Optional
from dataclasses import dataclass
from .game_state import Game, GameStatus, Board
from .errors import GameError, OutOfRange, CellOccupied, GameNotInProgress


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error: Optional[GameError] = None

    @property
    def error_message(self) -> Optional[str]:
        return str(self.error) if self.error is not None else None

    def raise_if_invalid(self) -> None:
        """Raise the recorded error, if any."""
        if self.error is not None:
            raise self.error


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules, checked in this order:
    1. Game must not be over
    2. Position must be on the board (0-8)
    3. Can only place on empty cells
    """

    def validate_move(self, game: Game, position: int) -> ValidationResult:
        """
        Validate a move.

        Args:
            game: Current game record.
            position: Cell index to place the mark on (0-8).

        Returns:
            ValidationResult with is_valid and the error to raise.
        """
        # Check if game is over
        if game.status != GameStatus.IN_PROGRESS:
            return ValidationResult(
                is_valid=False,
                error=GameNotInProgress(game.id)
            )

        # Check if position is in valid range
        try:
            Board.check_index(position)
        except OutOfRange as e:
            return ValidationResult(is_valid=False, error=e)

        # Check if cell is empty
        occupant = game.board.cells[position]
        if occupant is not None:
            return ValidationResult(
                is_valid=False,
                error=CellOccupied(position, occupant.value)
            )

        # All checks passed!
        return ValidationResult(is_valid=True)
