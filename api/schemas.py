"""Request and response payloads for the TicTacToe HTTP API."""

from __future__ import annotations

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from logic.game_state import Game
from logic.turn_engine import RoundResult

PlayerMark = Literal["X", "O"]
Status = Literal["in_progress", "won", "draw"]


class CreateGameRequest(BaseModel):
    """Request payload for starting a new game."""

    human_player: PlayerMark = Field(
        default="X",
        description="Mark the human plays; the computer takes the other one",
    )


class MakeMoveRequest(BaseModel):
    """Request payload for submitting a move on an existing game."""

    position: int = Field(ge=0, le=8, description="Cell index, row-major 0-8")


class GameOut(BaseModel):
    id: int
    board_state: List[Optional[PlayerMark]] = Field(min_length=9, max_length=9)
    current_player: PlayerMark
    status: Status
    winner: Optional[PlayerMark] = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_game(cls, game: Game) -> "GameOut":
        return cls(
            id=game.id,
            board_state=game.board.to_list(),
            current_player=game.current_player.value,
            status=game.status.value,
            winner=game.winner.value if game.winner is not None else None,
            created_at=game.created_at,
            updated_at=game.updated_at,
        )


class MoveOut(BaseModel):
    player: PlayerMark
    position: int = Field(ge=0, le=8)


class GameMoveResponse(BaseModel):
    game: GameOut
    human_move: Optional[MoveOut]
    computer_move: Optional[MoveOut]
    game_over: bool
    message: str

    @classmethod
    def from_result(cls, result: RoundResult) -> "GameMoveResponse":
        computer = result.computer_move
        return cls(
            game=GameOut.from_game(result.game),
            human_move=MoveOut(**result.human_move.to_dict()),
            computer_move=MoveOut(**computer.to_dict()) if computer else None,
            game_over=result.game_over,
            message=result.message,
        )


class HealthOut(BaseModel):
    status: str
    timestamp: datetime
