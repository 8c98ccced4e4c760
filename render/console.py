"""
Text renderer for TicTacToe.
Formats the board and move history for the console.
"""

from typing import Iterable, List

from logic.board import Board, BOARD_SIZE
from logic.session import GameView


def format_board(board: Board, winning_line: Iterable[int] = ()) -> str:
    """
    Draw the board with box characters.

    Winning cells are shown in brackets, e.g. [X].
    """
    winning = set(winning_line)
    lines: List[str] = ["    1   2   3", "  ┌───┬───┬───┐"]

    for row in range(BOARD_SIZE):
        row_str = "│"
        for col in range(BOARD_SIZE):
            index = row * BOARD_SIZE + col
            symbol = board[index].symbol
            if index in winning:
                row_str += f"[{symbol}]│"
            else:
                row_str += f" {symbol} │"
        lines.append(f"{row + 1} {row_str}")

        if row < BOARD_SIZE - 1:
            lines.append("  ├───┼───┼───┤")

    lines.append("  └───┴───┴───┘")
    return "\n".join(lines)


def format_view(view: GameView) -> str:
    """Format the board, status and move history."""
    lines = [format_board(view.board, view.winning_line), "", view.status_text, ""]

    lines.append(f"Move History ({view.sort_order.value}):")
    for entry in view.history:
        marker = "→" if entry.is_current else " "
        lines.append(f" {marker} {entry.label}")

    return "\n".join(lines)
