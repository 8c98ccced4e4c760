"""
Move history list for TicTacToe.
Turns the snapshot history into labelled entries for display.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from .board import Cell
from .game_state import GameState


class SortOrder(Enum):
    """Display order of the move history."""
    ASCENDING = "ascending"
    DESCENDING = "descending"

    def toggled(self) -> "SortOrder":
        """Get the other order."""
        if self == SortOrder.ASCENDING:
            return SortOrder.DESCENDING
        return SortOrder.ASCENDING


@dataclass(frozen=True)
class HistoryEntry:
    """
    One snapshot in the move history.
    """
    move: int                              # Move number (0 = game start)
    player: Optional[Cell]                 # Who made the move
    location: Optional[Tuple[int, int]]    # 1-based (row, col)
    is_current: bool                       # Is this the snapshot shown

    @property
    def label(self) -> str:
        if self.move == 0:
            return "Game start" if self.is_current else "Game started"

        row, col = self.location
        if self.is_current:
            return f"You are at move #{self.move} ({row}, {col})"
        return f"#{self.move}. Player {self.player.value} moved to ({row}, {col})"


def build_history(
    game_state: GameState,
    order: SortOrder = SortOrder.ASCENDING
) -> List[HistoryEntry]:
    """
    Build the history entries in display order.

    Args:
        game_state: The game whose history to list.
        order: Ascending or descending by move number.

    Returns:
        One entry per snapshot. The game state is not modified.
    """
    entries = [
        HistoryEntry(
            move=move,
            player=game_state.mover_at(move),
            location=game_state.move_location(move),
            is_current=move == game_state.current_move,
        )
        for move in range(len(game_state.history))
    ]

    if order == SortOrder.DESCENDING:
        entries.reverse()

    return entries
