"""
Move validator for TicTacToe.
Validates that moves and history jumps follow the rules.
"""

from dataclasses import dataclass
from typing import List, Optional

from .board import Board, Cell, CELL_COUNT, index_to_location
from .win_checker import WinChecker


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe requests.

    Rules:
    1. Can only place on empty cells
    2. Game must not be won already
    3. Can only jump to a move that exists in the history
    """

    def __init__(self, win_checker: Optional[WinChecker] = None):
        self.win_checker = win_checker or WinChecker()

    def validate_move(self, board: Board, index: int) -> ValidationResult:
        """
        Validate placing the next mark on a cell.

        Args:
            board: The board the move would be played on.
            index: Cell index (0-8).

        Returns:
            ValidationResult with is_valid and error_message.
        """
        # bool is an int subclass but never a cell index
        if not isinstance(index, int) or isinstance(index, bool):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid position {index!r}. Must be a cell index."
            )

        if not 0 <= index < CELL_COUNT:
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid position {index}. Must be 0-{CELL_COUNT - 1}."
            )

        winner = self.win_checker.check_winner(board)
        if winner is not None:
            return ValidationResult(
                is_valid=False,
                error_message=f"Game is already won by {winner.value}!"
            )

        if board[index] != Cell.EMPTY:
            return ValidationResult(
                is_valid=False,
                error_message=(
                    f"Cell {index_to_location(index)} is already occupied "
                    f"by {board[index].value}"
                )
            )

        return ValidationResult(is_valid=True)

    def validate_jump(self, move: int, history_length: int) -> ValidationResult:
        """
        Validate selecting a snapshot from the history.

        Args:
            move: Requested move number.
            history_length: Number of snapshots in the history.

        Returns:
            ValidationResult.
        """
        if not isinstance(move, int) or isinstance(move, bool):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid move {move!r}."
            )

        if not 0 <= move < history_length:
            return ValidationResult(
                is_valid=False,
                error_message=f"No move #{move}. History has moves 0-{history_length - 1}."
            )

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, board: Board) -> List[int]:
        """
        Get all cells the next player may take.

        Returns:
            List of cell indices; empty once the board has a winner.
        """
        if self.win_checker.check_winner(board) is not None:
            return []

        return [i for i, cell in enumerate(board) if cell == Cell.EMPTY]
