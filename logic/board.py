"""
Board primitives for TicTacToe.
A board is an immutable row-major tuple of 9 cells.
"""

from enum import Enum
from typing import Tuple


class Cell(Enum):
    """The contents of one board cell."""
    EMPTY = ""
    X = "X"
    O = "O"

    @property
    def symbol(self) -> str:
        """Text shown for this cell (blank when empty)."""
        return self.value or " "


BOARD_SIZE = 3
CELL_COUNT = BOARD_SIZE * BOARD_SIZE

Board = Tuple[Cell, ...]

EMPTY_BOARD: Board = (Cell.EMPTY,) * CELL_COUNT


def index_to_row_col(index: int) -> Tuple[int, int]:
    """Convert a cell index (0-8) to a 0-based (row, col)."""
    return index // BOARD_SIZE, index % BOARD_SIZE


def index_to_location(index: int) -> Tuple[int, int]:
    """Convert a cell index (0-8) to the 1-based (row, col) shown to players."""
    row, col = index_to_row_col(index)
    return row + 1, col + 1


def place(board: Board, index: int, cell: Cell) -> Board:
    """Return a copy of the board with one cell replaced."""
    return board[:index] + (cell,) + board[index + 1:]
