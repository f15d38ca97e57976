"""FastAPI application exposing the TicTacToe game service."""

import logging
from typing import List, Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware

from logic.errors import (
    CellOccupied,
    GameNotFound,
    GameNotInProgress,
    NoLegalMove,
    OutOfRange,
)
from storage.game_store import utc_now
from storage.sqlite_store import SqliteGameStore

from .config import ApiConfig
from .schemas import (
    CreateGameRequest,
    GameMoveResponse,
    GameOut,
    HealthOut,
    MakeMoveRequest,
)
from .service import GameService

logger = logging.getLogger(__name__)


def _service(request: Request) -> GameService:
    return request.app.state.service


def create_app(service: Optional[GameService] = None) -> FastAPI:
    """
    Build the API around a game service.

    Args:
        service: Service to expose. Defaults to one backed by the SQLite
            database from StorageConfig.

    Returns:
        The FastAPI application.
    """
    if service is None:
        service = GameService(SqliteGameStore())

    app = FastAPI(title=ApiConfig.TITLE, description=ApiConfig.DESCRIPTION)
    app.state.service = service
    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApiConfig.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/healthcheck", response_model=HealthOut)
    def healthcheck() -> HealthOut:
        return HealthOut(status="ok", timestamp=utc_now())

    @app.post("/games", response_model=GameOut)
    def create_game(request: Request, payload: Optional[CreateGameRequest] = None) -> GameOut:
        payload = payload or CreateGameRequest()
        game = _service(request).create_game(payload.human_player)
        return GameOut.from_game(game)

    @app.get("/games", response_model=List[GameOut])
    def list_recent_games(request: Request) -> List[GameOut]:
        return [GameOut.from_game(game) for game in _service(request).list_recent_games()]

    @app.get("/games/{game_id}", response_model=GameOut)
    def get_game(request: Request, game_id: int) -> GameOut:
        try:
            game = _service(request).get_game(game_id)
        except GameNotFound as exc:
            raise HTTPException(status_code=404, detail=str(exc)) from exc
        return GameOut.from_game(game)

    @app.post("/games/{game_id}/moves", response_model=GameMoveResponse)
    def make_move(request: Request, game_id: int, payload: MakeMoveRequest) -> GameMoveResponse:
        try:
            result = _service(request).make_move(game_id, payload.position)
        except GameNotFound as exc:
            raise HTTPException(status_code=404, detail=str(exc)) from exc
        except (OutOfRange, CellOccupied, GameNotInProgress) as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        except NoLegalMove as exc:
            logger.error("AI asked to move on a full board in game %d", game_id)
            raise HTTPException(status_code=500, detail=str(exc)) from exc
        return GameMoveResponse.from_result(result)

    return app
