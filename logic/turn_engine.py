"""
Turn engine for TicTacToe.
Plays one full round: the human move, then the computer's reply.
"""

from dataclasses import dataclass, replace
from typing import Optional

from .game_state import Game, GameStatus, Mark, Move
from .move_validator import MoveValidator
from .win_checker import WinChecker, Outcome
from .ai_player import AIPlayer


MESSAGE_CONTINUE = "Move processed successfully"
MESSAGE_DRAW = "Game ended in a draw!"


@dataclass(frozen=True)
class RoundResult:
    """Everything one round produced."""
    game: Game
    human_move: Move
    computer_move: Optional[Move]
    game_over: bool
    message: str


class TurnEngine:
    """
    Applies a human move and answers it with the AI's move.

    Round flow:
    1. Validate the move (game open, position on board, cell empty)
    2. Place the current player's mark
    3. Stop if that won or filled the board
    4. Otherwise the AI places the opposite mark
    5. Check again and hand back the new game record

    The engine never changes the Game it is given. Failed validation
    raises before anything is built, so the caller has nothing to save.
    """

    def __init__(self):
        self.validator = MoveValidator()
        self.win_checker = WinChecker()

    def apply_human_move(self, game: Game, position: int) -> RoundResult:
        """
        Play one round.

        Args:
            game: The current game record.
            position: Cell index (0-8) chosen by the human.

        Returns:
            RoundResult with the new game record and both moves.
        """
        self.validator.validate_move(game, position).raise_if_invalid()

        human = game.current_player
        computer = human.opposite()

        # Human move
        board = game.board.place(position, human)
        human_move = Move(mark=human, position=position)
        computer_move = None

        outcome = self.win_checker.check(board)
        if outcome.is_over:
            status, winner, message = self._finish(outcome, human, is_computer=False)
        else:
            # Computer reply
            ai = AIPlayer(computer)
            reply = ai.get_best_move(board)
            board = board.place(reply, computer)
            computer_move = Move(mark=computer, position=reply)

            outcome = self.win_checker.check(board)
            if outcome.is_over:
                status, winner, message = self._finish(outcome, computer, is_computer=True)
            else:
                status, winner, message = GameStatus.IN_PROGRESS, None, MESSAGE_CONTINUE

        # Next round always starts with the other mark
        new_game = replace(
            game,
            board=board,
            current_player=computer,
            status=status,
            winner=winner,
        )

        return RoundResult(
            game=new_game,
            human_move=human_move,
            computer_move=computer_move,
            game_over=status != GameStatus.IN_PROGRESS,
            message=message,
        )

    def _finish(self, outcome: Outcome, mover: Mark, is_computer: bool):
        """Status, winner and message for a board that just ended."""
        if outcome.winner is None:
            return GameStatus.DRAW, None, MESSAGE_DRAW

        if is_computer:
            message = f"Computer ({mover.value}) wins!"
        else:
            message = f"Player {mover.value} wins!"
        return GameStatus.WON, mover, message
