"""
Win checker for TicTacToe.
Checks if a mark has won or if the board is exhausted.
"""

from typing import Optional, Tuple
from dataclasses import dataclass
from .game_state import Board, Mark


@dataclass(frozen=True)
class Outcome:
    """Result of checking a board for a terminal state."""
    winner: Optional[Mark]
    is_over: bool


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 of the same mark in a row
    (horizontally, vertically, or diagonally)
    """

    # All possible winning lines, as cell indices. Order is the tie-break.
    WINNING_LINES: Tuple[Tuple[int, int, int], ...] = (
        # Rows
        (0, 1, 2),
        (3, 4, 5),
        (6, 7, 8),
        # Columns
        (0, 3, 6),
        (1, 4, 7),
        (2, 5, 8),
        # Diagonals
        (0, 4, 8),
        (2, 4, 6),
    )

    def check(self, board: Board) -> Outcome:
        """
        Decide whether the board is finished.

        A completed line always wins, even on a full board.

        Args:
            board: The board to inspect.

        Returns:
            Outcome with the winning Mark (or None) and whether the game is over.
        """
        winner = self.check_winner(board)
        if winner is not None:
            return Outcome(winner=winner, is_over=True)

        return Outcome(winner=None, is_over=board.is_full())

    def check_winner(self, board: Board) -> Optional[Mark]:
        """
        Check if there's a winner.

        Args:
            board: The board to inspect.

        Returns:
            The winning Mark, or None if no winner yet.
        """
        line = self.get_winning_line(board)
        if line is None:
            return None
        return board.cells[line[0]]

    def _check_line(self, board: Board, line: Tuple[int, int, int]) -> Optional[Mark]:
        """Return the mark filling the whole line, if any."""
        a, b, c = line
        cells = board.cells
        if cells[a] is not None and cells[a] == cells[b] == cells[c]:
            return cells[a]
        return None

    def check_draw(self, board: Board) -> bool:
        """
        Check if the board is a draw: every cell filled and no winner.

        Args:
            board: The board to inspect.

        Returns:
            True if the game is a draw.
        """
        # First check if there's a winner - if so, not a draw
        if self.check_winner(board) is not None:
            return False

        return board.is_full()

    def get_winning_line(self, board: Board) -> Optional[Tuple[int, int, int]]:
        """
        Get the first winning line if there is one.

        Args:
            board: The board to inspect.

        Returns:
            The winning line as a triple of cell indices, or None.
        """
        for line in self.WINNING_LINES:
            if self._check_line(board, line) is not None:
                return line
        return None


# Quick test
if __name__ == "__main__":
    print("Testing WinChecker...")

    checker = WinChecker()

    # Test 1: Horizontal win
    board = Board.from_list(["X", "X", "X", "O", "O", None, None, None, None])
    outcome = checker.check(board)
    print(f"Test 1 (horizontal): {outcome}")
    assert outcome == Outcome(Mark.X, True)

    # Test 2: Diagonal win
    board = Board.from_list(["O", "X", None, "X", "O", None, None, "X", "O"])
    outcome = checker.check(board)
    print(f"Test 2 (diagonal): {outcome}")
    assert outcome.winner == Mark.O

    # Test 3: Draw (full board, no winner)
    board = Board.from_list(["X", "O", "X", "X", "O", "O", "O", "X", "X"])
    outcome = checker.check(board)
    print(f"Test 3 (draw): {outcome}")
    assert outcome == Outcome(None, True)

    # Test 4: Full board with a win is still a win
    board = Board.from_list(["X", "X", "X", "O", "O", "X", "O", "X", "O"])
    outcome = checker.check(board)
    print(f"Test 4 (win on full board): {outcome}")
    assert outcome.winner == Mark.X

    print("\nWinChecker test done!")
