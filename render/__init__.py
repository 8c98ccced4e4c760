"""
Render module for TicTacToe.
Draws game views as console text and as images.
"""

from .config import RenderConfig
from .board_image import BoardImageRenderer
from .console import format_board, format_view
