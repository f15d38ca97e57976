"""
Game service for the TicTacToe server.
Connects the turn engine to a game store. Holds no game rules itself.
"""

import logging
from dataclasses import replace
from typing import List, Optional, Union

from logic.errors import GameError
from logic.game_state import Game, Mark
from logic.turn_engine import TurnEngine, RoundResult
from storage.config import StorageConfig
from storage.game_store import GameStore, utc_now

logger = logging.getLogger(__name__)


class GameService:
    """
    The operations the transport layer exposes.

    Every move runs load -> engine -> save inside one store transaction,
    so either the whole round is stored or nothing is.
    """

    def __init__(self, store: GameStore, engine: Optional[TurnEngine] = None):
        """
        Args:
            store: Where games are kept.
            engine: Turn engine to use (a fresh one by default).
        """
        self.store = store
        self.engine = engine or TurnEngine()

    def create_game(self, human_player: Union[Mark, str] = Mark.X) -> Game:
        """
        Start a new game.

        Args:
            human_player: The mark the human picked. X always opens,
                so the new record starts with X to move either way.

        Returns:
            The stored game.
        """
        human = Mark(human_player)
        game = self.store.create(Game.new())
        logger.info(
            "Created game %d (human picked %s, computer plays %s)",
            game.id, human.value, human.opposite().value
        )
        return game

    def make_move(self, game_id: int, position: int) -> RoundResult:
        """
        Play the human move at position and the computer's reply.

        Args:
            game_id: Id of a stored game.
            position: Cell index (0-8).

        Returns:
            RoundResult whose game is exactly what was stored.
        """
        try:
            with self.store.transaction(game_id):
                game = self.store.load(game_id)
                result = self.engine.apply_human_move(game, position)

                stored = replace(result.game, updated_at=utc_now())
                self.store.save(stored)
        except GameError as e:
            logger.warning("Move %r on game %s rejected: %s", position, game_id, e)
            raise

        logger.info(
            "Game %d: %s played %d, computer %s -> %s",
            game_id,
            result.human_move.mark.value,
            result.human_move.position,
            result.computer_move.position if result.computer_move else "-",
            stored.status.value,
        )
        return replace(result, game=stored)

    def get_game(self, game_id: int) -> Game:
        """Fetch one game, raising GameNotFound if it does not exist."""
        return self.store.load(game_id)

    def list_recent_games(self) -> List[Game]:
        """The most recently created games, newest first."""
        return self.store.recent(StorageConfig.RECENT_GAMES_LIMIT)
