"""
TicTacToe UI
A graphical interface for two players on one device using Tkinter.

Shows:
- Clickable 3x3 board with the winning line highlighted
- Game status (next player, winner or draw)
- Move history with time travel and sort order toggle
"""

import time
import tkinter as tk
from pathlib import Path
from tkinter import ttk
from typing import List, Optional

from logic.board import BOARD_SIZE, Cell
from logic.move_history import SortOrder
from logic.session import GameSession, GameStatus, GameView
from render.board_image import BoardImageRenderer
from render.config import RenderConfig


CELL_COLORS = {
    Cell.X: '#60a5fa',
    Cell.O: '#f87171',
    Cell.EMPTY: 'white',
}

CELL_BG = '#16213e'
WIN_BG = '#065f46'
ACTIVE_ENTRY_BG = '#6366f1'
ENTRY_BG = '#2d3748'


class TicTacToeUI:
    """
    Main UI class for TicTacToe.
    """

    def __init__(self, session: Optional[GameSession] = None, snapshot_dir: Optional[str] = None):
        """Initialize the UI."""
        self.session = session or GameSession()
        self.renderer = BoardImageRenderer()
        self.snapshot_dir = Path(snapshot_dir or RenderConfig.SNAPSHOT_DIR)

        self.board_cells: List[tk.Button] = []
        self.history_buttons: List[tk.Button] = []

        # Create UI
        self._create_ui()

        self.session.add_listener(self._refresh)
        self._refresh(self.session.view())

    def _create_ui(self):
        """Create the Tkinter UI."""
        self.root = tk.Tk()
        self.root.title("TicTacToe")
        self.root.configure(bg='#1a1a2e')

        self.root.geometry("900x600")
        self.root.minsize(700, 500)

        # Main container
        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)

        # Configure style
        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background='#1a1a2e')
        style.configure('TLabel', background='#1a1a2e', foreground='white', font=('Segoe UI', 11))
        style.configure('Title.TLabel', font=('Segoe UI', 16, 'bold'), foreground='#00d4ff')
        style.configure('Status.TLabel', font=('Segoe UI', 14, 'bold'), foreground='#ffd700')

        # Left panel - Board
        left_frame = ttk.Frame(main_frame)
        left_frame.pack(side=tk.LEFT, fill=tk.BOTH, expand=True, padx=(0, 10))

        ttk.Label(left_frame, text="🎮 Tic-Tac-Toe", style='Title.TLabel').pack(pady=(0, 10))

        self.status_label = ttk.Label(left_frame, text="", style='Status.TLabel')
        self.status_label.pack(pady=5)

        board_frame = ttk.Frame(left_frame)
        board_frame.pack(pady=10)

        for index in range(BOARD_SIZE * BOARD_SIZE):
            row, col = divmod(index, BOARD_SIZE)
            cell = tk.Button(
                board_frame,
                text="",
                font=('Segoe UI', 24, 'bold'),
                width=4,
                height=2,
                bg=CELL_BG,
                fg='white',
                activebackground='#1f2b4d',
                relief='ridge',
                borderwidth=2,
                command=lambda i=index: self._on_cell_click(i)
            )
            cell.grid(row=row, column=col, padx=2, pady=2)
            self.board_cells.append(cell)

        # Control buttons
        control_frame = ttk.Frame(left_frame)
        control_frame.pack(pady=15)

        tk.Button(
            control_frame,
            text="🔄 Restart Game",
            font=('Segoe UI', 11, 'bold'),
            bg='#6366f1',
            fg='white',
            width=14,
            command=self._restart
        ).pack(side=tk.LEFT, padx=5)

        tk.Button(
            control_frame,
            text="📷 Save Snapshot",
            font=('Segoe UI', 11, 'bold'),
            bg='#10b981',
            fg='white',
            width=14,
            command=self._save_snapshot
        ).pack(side=tk.LEFT, padx=5)

        # Right panel - Move history
        right_frame = ttk.Frame(main_frame, width=360)
        right_frame.pack(side=tk.RIGHT, fill=tk.Y, padx=(10, 0))
        right_frame.pack_propagate(False)

        header_frame = ttk.Frame(right_frame)
        header_frame.pack(fill=tk.X, pady=(0, 10))

        ttk.Label(header_frame, text="📜 Move History", style='Title.TLabel').pack(side=tk.LEFT)

        self.sort_btn = tk.Button(
            header_frame,
            text="",
            font=('Segoe UI', 10),
            bg='#2d3748',
            fg='white',
            command=self._toggle_sort_order
        )
        self.sort_btn.pack(side=tk.RIGHT)

        self.history_frame = ttk.Frame(right_frame)
        self.history_frame.pack(fill=tk.BOTH, expand=True)

        # Quit button
        tk.Button(
            right_frame,
            text="✕ Quit",
            font=('Segoe UI', 10),
            bg='#ef4444',
            fg='white',
            width=26,
            command=self._quit
        ).pack(side=tk.BOTTOM, pady=10)

        # Bind close event
        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _on_cell_click(self, index: int):
        """Handle a click on a board cell."""
        if not self.session.click_cell(index):
            result = self.session.game_state.check_move(index)
            if result.error_message:
                print(f"Ignored click: {result.error_message}")

    def _on_history_click(self, move: int):
        """Handle a click on a history entry."""
        self.session.select_move(move)

    def _restart(self):
        print("Restarting game...")
        self.session.restart()

    def _toggle_sort_order(self):
        self.session.toggle_sort_order()

    def _save_snapshot(self):
        """Save the current board as an image."""
        filename = f"{RenderConfig.SNAPSHOT_PREFIX}_{int(time.time())}.png"
        self.renderer.save(self.session.view(), self.snapshot_dir / filename)

    def _refresh(self, view: GameView):
        """Redraw everything from a game view."""
        self._update_board_display(view)
        self._update_game_info(view)
        self._update_history(view)

    def _update_board_display(self, view: GameView):
        """Update the board grid display."""
        for index, cell in enumerate(view.board):
            bg_color = WIN_BG if index in view.winning_line else CELL_BG
            self.board_cells[index].configure(
                text=cell.value,
                bg=bg_color,
                fg=CELL_COLORS[cell]
            )

    def _update_game_info(self, view: GameView):
        """Update game status labels."""
        if view.status == GameStatus.WON:
            self.status_label.configure(text=f"🏆 {view.status_text}")
        elif view.status == GameStatus.DRAW:
            self.status_label.configure(text=f"🤝 {view.status_text}")
        else:
            self.status_label.configure(text=view.status_text)

        # Button shows the order a click switches to
        if view.sort_order == SortOrder.ASCENDING:
            self.sort_btn.configure(text="↓ Descending")
        else:
            self.sort_btn.configure(text="↑ Ascending")

    def _update_history(self, view: GameView):
        """Rebuild the move history list."""
        for btn in self.history_buttons:
            btn.destroy()
        self.history_buttons = []

        for entry in view.history:
            text = f"⭐ {entry.label}" if entry.is_current else entry.label
            btn = tk.Button(
                self.history_frame,
                text=text,
                font=('Segoe UI', 10, 'bold' if entry.is_current else 'normal'),
                anchor='w',
                bg=ACTIVE_ENTRY_BG if entry.is_current else ENTRY_BG,
                fg='white',
                disabledforeground='white',
                state='disabled' if entry.is_current else 'normal',
                command=lambda m=entry.move: self._on_history_click(m)
            )
            btn.pack(fill=tk.X, pady=1)
            self.history_buttons.append(btn)

    def _quit(self):
        """Quit the application."""
        print("Quitting...")
        self.session.remove_listener(self._refresh)
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()


def main():
    """Main entry point."""
    print("\n" + "="*60)
    print("   TicTacToe UI")
    print("="*60 + "\n")

    ui = TicTacToeUI()
    ui.run()


if __name__ == "__main__":
    main()
