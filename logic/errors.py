"""
Errors raised by the TicTacToe engine and its storage layer.
"""


class GameError(ValueError):
    """Base class for every rule or lookup failure."""


class OutOfRange(GameError):
    """Position is outside the board (must be 0-8)."""

    def __init__(self, position):
        super().__init__(f"Position {position} is out of range. Must be 0-8.")
        self.position = position


class CellOccupied(GameError):
    """Target cell already holds a mark."""

    def __init__(self, position: int, mark=None):
        message = f"Position {position} is already occupied"
        if mark is not None:
            message += f" by {mark}"
        super().__init__(message)
        self.position = position
        self.mark = mark


class GameNotInProgress(GameError):
    """A move was attempted on a game that is already won or drawn."""

    def __init__(self, game_id=None):
        super().__init__("Game is not in progress")
        self.game_id = game_id


class NoLegalMove(GameError):
    """
    The AI was asked to move on a full board.
    This is a caller bug, not something a player can trigger.
    """

    def __init__(self):
        super().__init__("No available moves")


class GameNotFound(GameError):
    """No stored game has the requested id."""

    def __init__(self, game_id):
        super().__init__(f"Game with id {game_id} not found")
        self.game_id = game_id
