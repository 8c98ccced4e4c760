"""
Win checker for TicTacToe.
Checks if a player has won or if the game is a draw.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from .board import Board, Cell


@dataclass(frozen=True)
class WinResult:
    """A winning player and the three cells that won it."""
    player: Cell
    line: Tuple[int, int, int]


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 identical marks in a row
    (horizontally, vertically, or diagonally).
    Lines are checked in the order below and the first match wins.
    """

    # All possible winning lines (as cell indices)
    WINNING_LINES = (
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

    def evaluate(self, board: Board) -> Optional[WinResult]:
        """
        Find the first completed line on the board.

        Args:
            board: Any 9-cell board.

        Returns:
            WinResult for the earliest winning line, or None.
        """
        for line in self.WINNING_LINES:
            player = self._check_line(board, line)
            if player is not None:
                return WinResult(player=player, line=line)

        return None

    def _check_line(self, board: Board, line: Tuple[int, int, int]) -> Optional[Cell]:
        """Return the player owning all 3 cells of the line, if any."""
        a, b, c = line
        if board[a] != Cell.EMPTY and board[a] == board[b] == board[c]:
            return board[a]
        return None

    def check_winner(self, board: Board) -> Optional[Cell]:
        """Get the winning player, or None if no winner yet."""
        result = self.evaluate(board)
        return result.player if result else None

    def get_winning_line(self, board: Board) -> Tuple[int, ...]:
        """Get the winning cell indices, or an empty tuple."""
        result = self.evaluate(board)
        return result.line if result else ()

    def check_draw(self, board: Board) -> bool:
        """
        Check if the game is a draw.

        A draw occurs when all cells are filled AND there is no winner.
        """
        if Cell.EMPTY in board:
            return False
        return self.evaluate(board) is None
