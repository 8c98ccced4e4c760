"""
Game session for TicTacToe.
Connects user actions to the game state and tells views what to draw.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Tuple

from .board import Board, Cell
from .game_state import GameState
from .move_history import HistoryEntry, SortOrder, build_history
from .win_checker import WinChecker


class GameStatus(Enum):
    """Where the game stands on the current board."""
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAW = "draw"


@dataclass(frozen=True)
class GameView:
    """Everything a view needs to draw the game."""
    board: Board
    status: GameStatus
    current_player: Cell
    winner: Optional[Cell]
    winning_line: Tuple[int, ...]
    history: Tuple[HistoryEntry, ...]
    current_move: int
    sort_order: SortOrder

    @property
    def status_text(self) -> str:
        if self.status == GameStatus.WON:
            return f"Winner: {self.winner.value}"
        if self.status == GameStatus.DRAW:
            return "Draw! No one wins"
        return f"Player: {self.current_player.value}"


Listener = Callable[[GameView], None]


class GameSession:
    """
    One game being played on one device.

    Input events:
    - click_cell: a board cell was clicked
    - select_move: a history entry was selected
    - restart: start over
    - toggle_sort_order: flip the history order

    Listeners are called with a fresh GameView after every change.
    Ignored requests change nothing and notify no one.
    """

    def __init__(
        self,
        game_state: Optional[GameState] = None,
        sort_order: SortOrder = SortOrder.ASCENDING
    ):
        self.game_state = game_state or GameState()
        self.sort_order = sort_order
        self.win_checker = WinChecker()
        self._listeners: List[Listener] = []

    def add_listener(self, listener: Listener) -> None:
        """Register a callback to run after each change."""
        self._listeners.append(listener)

    def remove_listener(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def click_cell(self, index: int) -> bool:
        """Play the current player's mark on a cell."""
        if not self.game_state.apply_move(index):
            return False
        self._notify()
        return True

    def select_move(self, move: int) -> bool:
        """Jump to a snapshot in the history."""
        if move == self.game_state.current_move:
            return True
        if not self.game_state.jump_to(move):
            return False
        self._notify()
        return True

    def restart(self) -> None:
        self.game_state.restart()
        self._notify()

    def toggle_sort_order(self) -> SortOrder:
        """Flip the history order and return the new one."""
        self.sort_order = self.sort_order.toggled()
        self._notify()
        return self.sort_order

    def view(self) -> GameView:
        """
        Build the view of the current snapshot.

        Returns:
            GameView with board, status, winning line and history.
        """
        board = self.game_state.current_board
        result = self.win_checker.evaluate(board)

        if result is not None:
            status = GameStatus.WON
        elif self.win_checker.check_draw(board):
            status = GameStatus.DRAW
        else:
            status = GameStatus.IN_PROGRESS

        return GameView(
            board=board,
            status=status,
            current_player=self.game_state.current_player,
            winner=result.player if result else None,
            winning_line=result.line if result else (),
            history=tuple(build_history(self.game_state, self.sort_order)),
            current_move=self.game_state.current_move,
            sort_order=self.sort_order,
        )

    def _notify(self) -> None:
        view = self.view()
        for listener in list(self._listeners):
            listener(view)
