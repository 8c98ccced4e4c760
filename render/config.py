"""
Render configuration for TicTacToe.
All the settings for drawing board images.
"""

import cv2


class RenderConfig:
    """
    Configuration class for render settings.
    Change these values to restyle the board images!
    """

    # ==================== IMAGE SETTINGS ====================
    BOARD_SIZE = 3

    # Output size of the board area (pixels)
    BOARD_OUTPUT_SIZE = 600
    CELL_OUTPUT_SIZE = BOARD_OUTPUT_SIZE // BOARD_SIZE  # 200 pixels per cell

    # Strip under the board for the status text
    FOOTER_HEIGHT = 60

    GRID_LINE_THICKNESS = 3
    MARKER_THICKNESS = 8

    # ==================== COLORS (BGR) ====================
    BACKGROUND_COLOR = (255, 255, 255)
    GRID_COLOR = (0, 0, 0)
    LABEL_COLOR = (100, 100, 100)
    X_COLOR = (255, 0, 0)      # Blue
    O_COLOR = (0, 0, 255)      # Red
    WIN_HIGHLIGHT_COLOR = (128, 222, 74)  # Green
    STATUS_COLOR = (60, 60, 60)

    FONT = cv2.FONT_HERSHEY_SIMPLEX

    # ==================== OUTPUT SETTINGS ====================
    SNAPSHOT_DIR = "snapshots"
    SNAPSHOT_PREFIX = "tictactoe"
