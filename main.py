"""
Main entry point for the TicTacToe server.

This script ties together:
- Logic (board, win checking, turn engine, AI)
- Storage (in-memory or SQLite games)
- API (HTTP server around the game service)

Run it to serve the HTTP API, or with --console to play in the terminal.
"""

import argparse
import logging
from typing import Optional

from logic.errors import GameError
from logic.game_state import Game, GameStatus, Mark
from storage.game_store import GameStore, InMemoryGameStore
from storage.sqlite_store import SqliteGameStore
from api.config import ApiConfig
from api.service import GameService

logger = logging.getLogger(__name__)


class ConsoleGame:
    """
    Plays one game in the terminal against the computer.

    Game flow:
    1. Human types a cell index (0-8)
    2. The service plays the move and the computer's answer
    3. Board is shown again
    4. Repeat until someone wins or it's a draw
    """

    def __init__(self, service: GameService, human_player: Mark = Mark.X):
        """
        Args:
            service: Game service to play through.
            human_player: Mark the human picked.
        """
        self.service = service
        self.game: Game = service.create_game(human_player)

    def start(self):
        """Run the game loop until the game is over or the user quits."""
        print("\n" + "=" * 40)
        print("   TicTacToe - you vs the computer")
        print("   Type 0-8 to play, 'q' to quit")
        print("=" * 40)

        while not self.game.is_over:
            self.game.print_board()

            position = self._read_position()
            if position is None:
                print("\nGame quit by user.")
                return

            try:
                result = self.service.make_move(self.game.id, position)
            except GameError as e:
                print(f"Illegal move: {e}")
                continue

            self.game = result.game
            if result.computer_move is not None:
                print(f"\n>>> Computer placed {result.computer_move.mark.value} "
                      f"at {result.computer_move.position}")
            print(f">>> {result.message}")

        self._show_game_result()

    def _read_position(self) -> Optional[int]:
        while True:
            raw = input(f"\nPlace {self.game.current_player.value} at: ").strip().lower()
            if raw in ("q", "quit", "exit"):
                return None
            try:
                return int(raw)
            except ValueError:
                print("Please type a number 0-8.")

    def _show_game_result(self):
        """Show the final game result."""
        print("\n" + "=" * 40)
        print("   GAME OVER!")
        print("=" * 40)

        self.game.print_board()

        if self.game.status == GameStatus.DRAW:
            print("\nIt's a draw! Good game!")
        else:
            print(f"\n{self.game.winner.value} takes it.")


def build_store(args: argparse.Namespace) -> GameStore:
    if args.memory:
        return InMemoryGameStore()
    return SqliteGameStore(args.db)


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(description="TicTacToe server")
    parser.add_argument(
        "--console",
        action="store_true",
        help="Play one game in the terminal instead of serving HTTP"
    )
    parser.add_argument(
        "--human-player",
        choices=[m.value for m in Mark],
        default=Mark.X.value,
        help="Mark the human plays (X always opens)"
    )
    parser.add_argument(
        "--db",
        default=None,
        help="SQLite database file (default: $TICTACTOE_DB or tictactoe.db)"
    )
    parser.add_argument(
        "--memory",
        action="store_true",
        help="Keep games in memory only"
    )
    parser.add_argument("--host", default=ApiConfig.HOST, help="Address to bind")
    parser.add_argument("--port", type=int, default=ApiConfig.PORT, help="Port to listen on")
    parser.add_argument("--log-level", default=ApiConfig.LOG_LEVEL, help="Logging level")

    args = parser.parse_args()

    logging.basicConfig(level=args.log_level.upper(), format=ApiConfig.LOG_FORMAT)

    store = build_store(args)
    service = GameService(store)

    if args.console:
        try:
            ConsoleGame(service, Mark(args.human_player)).start()
        except KeyboardInterrupt:
            print("\n\nGame interrupted by user.")
        finally:
            store.close()
            print("Goodbye!")
        return

    import uvicorn
    from api.app import create_app

    logger.info("TicTacToe server listening at %s:%d", args.host, args.port)
    try:
        uvicorn.run(create_app(service), host=args.host, port=args.port, log_level=args.log_level.lower())
    finally:
        store.close()


if __name__ == "__main__":
    main()
