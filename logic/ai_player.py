"""
AI player for TicTacToe.
Uses the Minimax algorithm to choose the best move.
"""

import logging
from typing import Optional
from .config import GameConfig
from .errors import NoLegalMove
from .game_state import Board, Mark
from .win_checker import WinChecker

logger = logging.getLogger(__name__)


class AIPlayer:
    """
    An AI that plays TicTacToe using the Minimax algorithm.

    The AI will always play optimally - it will win if possible,
    block the opponent if needed, and never lose (at worst, draw).
    Among equally good moves it picks the lowest cell index, so the
    same board always gets the same answer.
    """

    def __init__(self, player: Mark = Mark.O, use_pruning: bool = GameConfig.USE_PRUNING):
        """
        Initialize the AI player.

        Args:
            player: Which mark the AI plays (default: O)
            use_pruning: Cut branches with alpha-beta. Does not change the result.
        """
        self.player = player
        self.use_pruning = use_pruning
        self.win_checker = WinChecker()

        # Search statistics from the last call (for debugging)
        self.moves_evaluated = 0
        self.last_score: Optional[int] = None

    def get_best_move(self, board: Board) -> int:
        """
        Get the best move for the AI on this board.

        Args:
            board: Current board. It is never modified.

        Returns:
            Cell index (0-8) of the best move.
        """
        self.moves_evaluated = 0

        valid_moves = board.empty_cells()
        if not valid_moves:
            raise NoLegalMove()

        best_score = float('-inf')
        best_move = valid_moves[0]
        alpha = float('-inf')
        beta = float('inf')

        for position in valid_moves:
            # Try this move
            new_board = board.place(position, self.player)

            score = self._minimax(
                new_board,
                depth=1,
                is_maximizing=False,
                alpha=alpha,
                beta=beta
            )

            # Strict improvement only, so the lowest index wins ties
            if score > best_score:
                best_score = score
                best_move = position

            if self.use_pruning:
                alpha = max(alpha, best_score)

        self.last_score = int(best_score)
        logger.debug(
            "AI %s evaluated %d positions. Best move: %d (score: %d)",
            self.player.value, self.moves_evaluated, best_move, self.last_score
        )

        return best_move

    def _minimax(
        self,
        board: Board,
        depth: int,
        is_maximizing: bool,
        alpha: float = float('-inf'),
        beta: float = float('inf')
    ) -> float:
        """
        Minimax algorithm with optional alpha-beta pruning.

        Args:
            board: Board to evaluate.
            depth: Plies played since the position the search started from.
            is_maximizing: True if it's the AI's turn.
            alpha: Alpha value for pruning.
            beta: Beta value for pruning.

        Returns:
            The score of the position.
        """
        self.moves_evaluated += 1

        # Check terminal states
        outcome = self.win_checker.check(board)

        if outcome.winner == self.player:
            return GameConfig.WIN_SCORE - depth  # Win (prefer faster wins)
        elif outcome.winner is not None:
            return depth - GameConfig.WIN_SCORE  # Loss (prefer slower losses)
        elif outcome.is_over:
            return GameConfig.DRAW_SCORE

        mover = self.player if is_maximizing else self.player.opposite()

        if is_maximizing:
            max_score = float('-inf')
            for position in board.empty_cells():
                new_board = board.place(position, mover)
                score = self._minimax(new_board, depth + 1, False, alpha, beta)
                max_score = max(max_score, score)
                if self.use_pruning:
                    alpha = max(alpha, score)
                    if beta <= alpha:
                        break  # Prune
            return max_score
        else:
            min_score = float('inf')
            for position in board.empty_cells():
                new_board = board.place(position, mover)
                score = self._minimax(new_board, depth + 1, True, alpha, beta)
                min_score = min(min_score, score)
                if self.use_pruning:
                    beta = min(beta, score)
                    if beta <= alpha:
                        break  # Prune
            return min_score


# Quick test
if __name__ == "__main__":
    print("Testing AIPlayer...")

    ai = AIPlayer(Mark.O)

    # Test 1: AI should block a winning move
    board = Board.from_list([
        "X", "X", None,
        None, "O", None,
        None, None, None,
    ])
    print(board.pretty())
    print("\nAI is O. X is about to win with 2!")

    move = ai.get_best_move(board)
    print(f"AI's move: {move}")
    assert move == 2, f"Expected 2, got {move}"
    print("AI correctly blocks the win!")

    # Test 2: AI should take a winning move
    board = Board.from_list([
        "O", "O", None,
        None, "X", None,
        "X", None, None,
    ])
    print(board.pretty())
    print("\nAI is O. Can win with 2!")

    move = ai.get_best_move(board)
    print(f"AI's move: {move}")
    assert move == 2, f"Expected 2, got {move}"
    print("AI correctly takes the win!")

    print("\nAIPlayer test done!")
