"""
Board image renderer for TicTacToe.
Draws the board, marks and winning line into an OpenCV image.
"""

from pathlib import Path
from typing import Optional, Tuple, Union

import cv2
import numpy as np

from logic.board import Board, Cell
from logic.session import GameView
from .config import RenderConfig


class BoardImageRenderer:
    """
    Renders a GameView to a BGR image.

    Layout:
    - 3x3 grid with 1-based row/col labels
    - X drawn as two strokes, O as a circle
    - Winning cells filled with the highlight color
    - Status text in a footer strip
    """

    def __init__(self, config: Optional[RenderConfig] = None):
        self.config = config or RenderConfig()

    def render(self, view: GameView) -> np.ndarray:
        """
        Render the view to an image.

        Args:
            view: The game view to draw.

        Returns:
            BGR image of shape (size + footer, size, 3).
        """
        size = self.config.BOARD_OUTPUT_SIZE
        height = size + self.config.FOOTER_HEIGHT

        image = np.full((height, size, 3), self.config.BACKGROUND_COLOR, dtype=np.uint8)

        for index in view.winning_line:
            self._fill_cell(image, index, self.config.WIN_HIGHLIGHT_COLOR)

        self._draw_grid(image)
        self._draw_marks(image, view.board)
        self._draw_labels(image)
        self._draw_status(image, view.status_text)

        return image

    def save(self, view: GameView, path: Union[str, Path]) -> bool:
        """
        Render the view and write it to a file.

        Args:
            view: The game view to draw.
            path: Output file (format from the extension, e.g. .png).

        Returns:
            True if the file was written.
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        if not cv2.imwrite(str(path), self.render(view)):
            print(f"ERROR: Could not write {path}")
            return False

        print(f"Saved: {path}")
        return True

    def _cell_origin(self, index: int) -> Tuple[int, int]:
        """Top-left pixel (x, y) of a cell."""
        cell_size = self.config.CELL_OUTPUT_SIZE
        row, col = divmod(index, self.config.BOARD_SIZE)
        return col * cell_size, row * cell_size

    def _fill_cell(self, image: np.ndarray, index: int, color: Tuple[int, int, int]):
        cell_size = self.config.CELL_OUTPUT_SIZE
        x, y = self._cell_origin(index)
        cv2.rectangle(image, (x, y), (x + cell_size - 1, y + cell_size - 1), color, -1)

    def _draw_grid(self, image: np.ndarray):
        size = self.config.BOARD_OUTPUT_SIZE
        cell_size = self.config.CELL_OUTPUT_SIZE
        color = self.config.GRID_COLOR
        thickness = self.config.GRID_LINE_THICKNESS

        for i in range(1, self.config.BOARD_SIZE):
            # Vertical lines
            x = i * cell_size
            cv2.line(image, (x, 0), (x, size), color, thickness)
            # Horizontal lines
            y = i * cell_size
            cv2.line(image, (0, y), (size, y), color, thickness)

        # Border
        cv2.rectangle(image, (0, 0), (size - 1, size - 1), color, thickness)

    def _draw_marks(self, image: np.ndarray, board: Board):
        cell_size = self.config.CELL_OUTPUT_SIZE
        thickness = self.config.MARKER_THICKNESS
        margin = cell_size // 5
        marker_size = cell_size // 2 - margin

        for index, cell in enumerate(board):
            if cell == Cell.EMPTY:
                continue

            x, y = self._cell_origin(index)
            cx = x + cell_size // 2
            cy = y + cell_size // 2

            if cell == Cell.X:
                color = self.config.X_COLOR
                cv2.line(image,
                         (cx - marker_size, cy - marker_size),
                         (cx + marker_size, cy + marker_size),
                         color, thickness)
                cv2.line(image,
                         (cx + marker_size, cy - marker_size),
                         (cx - marker_size, cy + marker_size),
                         color, thickness)
            else:
                cv2.circle(image, (cx, cy), marker_size, self.config.O_COLOR, thickness)

    def _draw_labels(self, image: np.ndarray):
        cell_size = self.config.CELL_OUTPUT_SIZE
        font = self.config.FONT
        color = self.config.LABEL_COLOR

        for i in range(self.config.BOARD_SIZE):
            # Column labels (top)
            cv2.putText(image, str(i + 1), (i * cell_size + cell_size // 2 - 10, 25),
                        font, 0.7, color, 2)
            # Row labels (left)
            cv2.putText(image, str(i + 1), (8, i * cell_size + cell_size // 2 + 10),
                        font, 0.7, color, 2)

    def _draw_status(self, image: np.ndarray, text: str):
        size = self.config.BOARD_OUTPUT_SIZE
        baseline_y = size + self.config.FOOTER_HEIGHT // 2 + 10
        cv2.putText(image, text, (15, baseline_y),
                    self.config.FONT, 0.9, self.config.STATUS_COLOR, 2)
