"""
Main entry point for TicTacToe.

Two players take turns on one device, either in the Tkinter window
(default) or in the console (--no-ui). Every move is kept in the history,
so players can jump back to any earlier board and play on from there.
"""

import argparse
import time
from pathlib import Path
from typing import Optional, Sequence

from logic.board import CELL_COUNT
from logic.move_history import SortOrder
from logic.session import GameSession, GameStatus
from render.board_image import BoardImageRenderer
from render.config import RenderConfig
from render.console import format_view


HELP_TEXT = """Commands:
  1-9    place your mark (cells numbered left to right, top to bottom)
  j N    jump to move N in the history
  r      restart the game
  o      toggle history order
  s      save a snapshot image
  h      show this help
  q      quit"""


class ConsoleGame:
    """
    Console controller for TicTacToe.

    Game flow:
    1. The board, status and move history are printed
    2. A player types a command
    3. The session is updated and the board is printed again
    4. Repeat until someone quits
    """

    def __init__(
        self,
        session: Optional[GameSession] = None,
        snapshot_dir: Optional[str] = None
    ):
        """
        Initialize the console game.

        Args:
            session: Game session to play (a new one if not given).
            snapshot_dir: Where snapshot images are saved.
        """
        self.session = session or GameSession()
        self.renderer = BoardImageRenderer()
        self.snapshot_dir = Path(snapshot_dir or RenderConfig.SNAPSHOT_DIR)
        self.is_running = False

        self.session.add_listener(self._print_view)

    def start(self):
        """Start the game loop."""
        print("\nStarting TicTacToe game...")
        print("Type 'h' for help, 'q' to quit\n")

        self._print_view(self.session.view())
        self.is_running = True

        while self.is_running:
            try:
                line = input("> ")
            except EOFError:
                break
            self.is_running = self.handle_command(line)

    def handle_command(self, line: str) -> bool:
        """
        Handle one line of input.

        Args:
            line: The text typed by the player.

        Returns:
            False if the player quit, True otherwise.
        """
        parts = line.strip().lower().split()
        if not parts:
            return True

        command, args = parts[0], parts[1:]

        if command == "q":
            print("\nGame quit by user.")
            return False

        if command.isdecimal() and not args:
            self._play(int(command))
        elif command == "j" and len(args) == 1 and args[0].isdecimal():
            self._jump(int(args[0]))
        elif command == "r" and not args:
            print("\nResetting game...")
            self.session.restart()
        elif command == "o" and not args:
            self.session.toggle_sort_order()
        elif command == "s" and not args:
            self.save_snapshot()
        elif command in ("h", "?"):
            print(HELP_TEXT)
        else:
            print(f"Unknown command: {line.strip()!r} (type 'h' for help)")

        return True

    def save_snapshot(self) -> Optional[Path]:
        """Save the current board as an image.

        Returns:
            The image path, or None if it could not be written.
        """
        filename = f"{RenderConfig.SNAPSHOT_PREFIX}_{int(time.time())}.png"
        path = self.snapshot_dir / filename
        if not self.renderer.save(self.session.view(), path):
            return None
        return path

    def _play(self, cell_number: int):
        """Play on a 1-based cell number."""
        if not 1 <= cell_number <= CELL_COUNT:
            print(f"Cell must be 1-{CELL_COUNT}.")
            return

        index = cell_number - 1
        result = self.session.game_state.check_move(index)
        if not self.session.click_cell(index):
            print(f"Move ignored: {result.error_message}")

    def _jump(self, move: int):
        if not self.session.select_move(move):
            last = len(self.session.game_state.history) - 1
            print(f"No move #{move}. History has moves 0-{last}.")

    def _print_view(self, view):
        print()
        print(format_view(view))

        if view.status == GameStatus.WON:
            print("\n🏆 Game over! Jump back in the history or restart.")
        elif view.status == GameStatus.DRAW:
            print("\n🤝 It's a draw! Good game!")


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="TicTacToe")
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Run without UI (console mode)"
    )
    parser.add_argument(
        "--descending",
        action="store_true",
        help="Show the move history newest first"
    )
    parser.add_argument(
        "--snapshot-dir",
        default=RenderConfig.SNAPSHOT_DIR,
        help="Directory for saved board images"
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None):
    """Main entry point."""
    args = parse_args(argv)

    order = SortOrder.DESCENDING if args.descending else SortOrder.ASCENDING
    session = GameSession(sort_order=order)

    # Launch UI by default
    if not args.no_ui:
        from ui import TicTacToeUI
        print("\n" + "="*60)
        print("   TicTacToe UI")
        print("="*60 + "\n")
        ui = TicTacToeUI(session, snapshot_dir=args.snapshot_dir)
        ui.run()
        return

    # Console mode (--no-ui)
    game = ConsoleGame(session, snapshot_dir=args.snapshot_dir)

    try:
        game.start()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
