"""
Game state management for TicTacToe.
Holds the marks, the 9-cell board, and the game record.
"""

from enum import Enum
from typing import Optional, List, Tuple, Iterable
from dataclasses import dataclass, field
from datetime import datetime

from .config import GameConfig
from .errors import OutOfRange, CellOccupied


class Mark(Enum):
    """The two marks in the game."""
    X = "X"
    O = "O"

    def opposite(self) -> "Mark":
        """Get the opposite mark."""
        return Mark.O if self == Mark.X else Mark.X


class GameStatus(Enum):
    """Where a game is in its lifecycle. WON and DRAW are final."""
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAW = "draw"


Cell = Optional[Mark]


@dataclass(frozen=True)
class Board:
    """
    The 3x3 board stored as 9 cells in row-major order.

    Cell index maps to the grid as row = index // 3, col = index % 3.
    A Board is a value: placing a mark returns a new Board.
    """

    cells: Tuple[Cell, ...] = (None,) * GameConfig.CELL_COUNT

    def __post_init__(self):
        cells = tuple(self.cells)
        if len(cells) != GameConfig.CELL_COUNT:
            raise ValueError(
                f"Board must have exactly {GameConfig.CELL_COUNT} cells, got {len(cells)}"
            )
        object.__setattr__(self, "cells", cells)

    @classmethod
    def empty(cls) -> "Board":
        """Create a board with all 9 cells empty."""
        return cls()

    @classmethod
    def from_list(cls, values: Iterable[Optional[str]]) -> "Board":
        """
        Build a board from plain values ("X", "O" or None).

        Args:
            values: 9 cell values, as stored or sent over the wire.

        Returns:
            The Board.
        """
        return cls(tuple(Mark(v) if v is not None else None for v in values))

    def to_list(self) -> List[Optional[str]]:
        """Plain list of "X" / "O" / None values."""
        return [cell.value if cell is not None else None for cell in self.cells]

    @staticmethod
    def check_index(index: int) -> None:
        """Raise OutOfRange unless index is a cell index 0-8."""
        if isinstance(index, bool) or not isinstance(index, int):
            raise OutOfRange(index)
        if not 0 <= index < GameConfig.CELL_COUNT:
            raise OutOfRange(index)

    @staticmethod
    def row_col(index: int) -> Tuple[int, int]:
        """Convert a cell index to (row, col)."""
        return divmod(index, GameConfig.BOARD_SIZE)

    def get(self, index: int) -> Cell:
        """
        Read a single cell.

        Args:
            index: Cell index (0-8).

        Returns:
            The Mark in the cell, or None if it is empty.
        """
        self.check_index(index)
        return self.cells[index]

    def __getitem__(self, index: int) -> Cell:
        return self.get(index)

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self):
        return iter(self.cells)

    def place(self, index: int, mark: Mark) -> "Board":
        """
        Put a mark on an empty cell.

        Args:
            index: Cell index (0-8).
            mark: The mark to place.

        Returns:
            A new Board with the mark placed. This board is unchanged.
        """
        current = self.get(index)
        if current is not None:
            raise CellOccupied(index, current.value)

        cells = list(self.cells)
        cells[index] = mark
        return Board(tuple(cells))

    def empty_cells(self) -> List[int]:
        """
        Get all empty cells on the board.

        Returns:
            Cell indices in ascending order.
        """
        return [i for i, cell in enumerate(self.cells) if cell is None]

    def is_full(self) -> bool:
        return all(cell is not None for cell in self.cells)

    def count(self, mark: Mark) -> int:
        return sum(1 for cell in self.cells if cell == mark)

    def pretty(self) -> str:
        """Render the board as text, empty cells show their index."""
        size = GameConfig.BOARD_SIZE
        rows = []
        for row in range(size):
            symbols = []
            for col in range(size):
                index = row * size + col
                cell = self.cells[index]
                symbols.append(cell.value if cell is not None else str(index))
            rows.append(" " + " | ".join(symbols))
        return "\n---+---+---\n".join(rows)


@dataclass(frozen=True)
class Move:
    """
    A single placement: which mark went where.
    """
    mark: Mark              # Who made the move
    position: int           # Cell index (0-8)

    @property
    def row(self) -> int:
        return Board.row_col(self.position)[0]

    @property
    def col(self) -> int:
        return Board.row_col(self.position)[1]

    def to_dict(self) -> dict:
        return {"player": self.mark.value, "position": self.position}


@dataclass
class Game:
    """
    The complete record of one game.

    Tracks:
    - The board
    - Whose mark the next human move places
    - Game status and winner
    - Storage id and timestamps (set by the store)

    The turn engine never changes a Game in place, it returns a new one.
    """

    board: Board = field(default_factory=Board.empty)

    # Mark placed by the next human move
    current_player: Mark = Mark(GameConfig.FIRST_PLAYER)

    status: GameStatus = GameStatus.IN_PROGRESS
    winner: Optional[Mark] = None

    # Assigned by the store
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        if (self.winner is not None) != (self.status == GameStatus.WON):
            raise ValueError(
                f"Inconsistent game record: status={self.status.value}, winner={self.winner}"
            )

    @classmethod
    def new(cls) -> "Game":
        """Create a fresh game: empty board, X to move."""
        return cls()

    @property
    def is_over(self) -> bool:
        return self.status != GameStatus.IN_PROGRESS

    def print_board(self):
        """Print the board to console."""
        print()
        print(self.board.pretty())

        # Print game info
        if self.status == GameStatus.WON:
            print(f"\n{self.winner.value} WINS!")
        elif self.status == GameStatus.DRAW:
            print("\nIt's a DRAW!")
        else:
            print(f"\nCurrent turn: {self.current_player.value}")


# Quick test
if __name__ == "__main__":
    print("Testing Board and Game...")

    board = Board.empty()
    board = board.place(4, Mark.X).place(0, Mark.O)
    print(board.pretty())

    assert board.empty_cells() == [1, 2, 3, 5, 6, 7, 8]
    assert board[4] == Mark.X

    try:
        board.place(4, Mark.O)
    except CellOccupied as e:
        print(f"Rejected: {e}")

    game = Game(board=board)
    game.print_board()

    print("\nGame state test done!")
