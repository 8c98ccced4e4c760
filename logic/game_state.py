"""
Game state management for TicTacToe.
Tracks the history of board snapshots and which one is current.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .board import Board, Cell, EMPTY_BOARD, index_to_location, place
from .move_validator import MoveValidator, ValidationResult


@dataclass
class GameState:
    """
    The complete state of the TicTacToe game.

    Tracks:
    - Every board snapshot from the empty board to the latest move
    - Which snapshot is currently shown (current_move)

    The player to move is derived from current_move: X on even moves,
    O on odd ones.
    """

    # Board snapshots; history[0] is always the empty board
    history: List[Board] = field(default_factory=lambda: [EMPTY_BOARD])

    # Index of the snapshot being shown and played on
    current_move: int = 0

    validator: MoveValidator = field(
        default_factory=MoveValidator, repr=False, compare=False
    )

    @property
    def current_board(self) -> Board:
        """The board at the current move."""
        return self.history[self.current_move]

    @property
    def is_x_next(self) -> bool:
        return self.current_move % 2 == 0

    @property
    def current_player(self) -> Cell:
        """The player whose mark the next move places."""
        return Cell.X if self.is_x_next else Cell.O

    def check_move(self, index: int) -> ValidationResult:
        """Validate a move on the current board without playing it."""
        return self.validator.validate_move(self.current_board, index)

    def apply_move(self, index: int) -> bool:
        """
        Place the current player's mark on a cell.

        Any snapshots after the current move are discarded first.

        Args:
            index: Cell index (0-8).

        Returns:
            True if the move was played, False if it was ignored
            (occupied cell, game already won, or bad index).
        """
        if not self.check_move(index).is_valid:
            return False

        next_board = place(self.current_board, index, self.current_player)

        self.history = self.history[:self.current_move + 1]
        self.history.append(next_board)
        self.current_move = len(self.history) - 1

        return True

    def jump_to(self, move: int) -> bool:
        """
        Show an earlier (or later) snapshot without changing the history.

        Returns:
            True if the move exists, False otherwise.
        """
        if not self.validator.validate_jump(move, len(self.history)).is_valid:
            return False

        self.current_move = move
        return True

    def restart(self) -> None:
        """Go back to an empty board and forget the history."""
        self.history = [EMPTY_BOARD]
        self.current_move = 0

    def changed_index(self, move: int) -> Optional[int]:
        """
        Get the cell that was filled by a move.

        Returns:
            The cell index, or None for move 0 and unknown moves.
        """
        if not 1 <= move < len(self.history):
            return None

        previous, current = self.history[move - 1], self.history[move]
        for index, (before, after) in enumerate(zip(previous, current)):
            if before != after:
                return index

        return None

    def move_location(self, move: int) -> Optional[Tuple[int, int]]:
        """
        Get where a move was played.

        Returns:
            1-based (row, col), or None for the game start.
        """
        index = self.changed_index(move)
        if index is None:
            return None
        return index_to_location(index)

    def mover_at(self, move: int) -> Optional[Cell]:
        """
        Get the player who made a move.

        Returns:
            Cell.X or Cell.O, or None for the game start.
        """
        index = self.changed_index(move)
        if index is None:
            return None
        return self.history[move][index]

    def get_empty_cells(self) -> List[int]:
        """Get the indices of all empty cells on the current board."""
        return [i for i, cell in enumerate(self.current_board) if cell == Cell.EMPTY]

    def copy(self) -> "GameState":
        """Create a copy of the game state (snapshots are immutable)."""
        return GameState(
            history=list(self.history),
            current_move=self.current_move,
            validator=self.validator,
        )
