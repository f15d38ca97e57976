"""Unit tests for move validation."""

import pytest

from logic.errors import CellOccupied, GameNotInProgress, OutOfRange
from logic.game_state import Board, Game, GameStatus, Mark
from logic.move_validator import MoveValidator


@pytest.fixture
def validator():
    return MoveValidator()


def test_valid_move(validator):
    result = validator.validate_move(Game.new(), 4)
    assert result.is_valid
    assert result.error is None
    result.raise_if_invalid()


def test_occupied_cell(validator):
    game = Game(board=Board.empty().place(4, Mark.X))
    result = validator.validate_move(game, 4)
    assert not result.is_valid
    assert isinstance(result.error, CellOccupied)
    assert "already occupied" in result.error_message


@pytest.mark.parametrize("position", [-1, 9, 100])
def test_out_of_range(validator, position):
    result = validator.validate_move(Game.new(), position)
    assert isinstance(result.error, OutOfRange)
    with pytest.raises(OutOfRange):
        result.raise_if_invalid()


def test_finished_game_checked_first(validator):
    game = Game(status=GameStatus.WON, winner=Mark.X)
    result = validator.validate_move(game, 42)
    assert isinstance(result.error, GameNotInProgress)
