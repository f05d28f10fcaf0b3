"""
Display module for TicTacToe.
Handles display settings and board rendering.
"""

from .config import DisplayConfig
from .board_renderer import BoardRenderer
