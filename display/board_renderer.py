"""
Board renderer for TicTacToe.
Draws the board as an image and maps clicks on it back to cells.
"""

import time
import cv2
import numpy as np
from pathlib import Path
from typing import Optional, Tuple

from .config import DisplayConfig
from logic.game_state import Board, Player


class BoardRenderer:
    """
    Draws the 3x3 board with OpenCV.

    The image is square, BOARD_OUTPUT_SIZE pixels wide, in BGR order.
    X is drawn as two crossed lines, O as a circle.
    """

    LABEL_FONT = cv2.FONT_HERSHEY_SIMPLEX

    def __init__(self, config: Optional[DisplayConfig] = None):
        """
        Initialize the renderer.

        Args:
            config: Display configuration (uses defaults if None).
        """
        self.config = config or DisplayConfig()
        self.size = self.config.BOARD_OUTPUT_SIZE
        self.cell_size = self.size // self.config.BOARD_SIZE

    def cell_center(self, index: int) -> Tuple[int, int]:
        """Pixel (x, y) center of a cell."""
        row, col = divmod(index, self.config.BOARD_SIZE)
        return (
            col * self.cell_size + self.cell_size // 2,
            row * self.cell_size + self.cell_size // 2,
        )

    def render(
        self,
        board: Board,
        winning_line: Optional[Tuple[int, int, int]] = None
    ) -> np.ndarray:
        """
        Render the board.

        Args:
            board: The board to draw.
            winning_line: Cell indices to strike through, if any.

        Returns:
            BGR image of the board.
        """
        cfg = self.config
        image = np.full((self.size, self.size, 3), cfg.BOARD_BG_BGR, dtype=np.uint8)

        # Grid lines
        for i in range(1, cfg.BOARD_SIZE):
            x = i * self.cell_size
            cv2.line(image, (x, 0), (x, self.size), cfg.GRID_BGR, cfg.GRID_THICKNESS)
            y = i * self.cell_size
            cv2.line(image, (0, y), (self.size, y), cfg.GRID_BGR, cfg.GRID_THICKNESS)

        for index, cell in enumerate(board):
            cx, cy = self.cell_center(index)

            if cell is None:
                if cfg.SHOW_CELL_LABELS:
                    cv2.putText(image, str(index), (cx - 8, cy + 8),
                                self.LABEL_FONT, 0.6, cfg.LABEL_BGR, 1)
                continue

            marker_size = self.cell_size // 2 - cfg.MARKER_MARGIN

            if cell == Player.X:
                cv2.line(image,
                         (cx - marker_size, cy - marker_size),
                         (cx + marker_size, cy + marker_size),
                         cfg.X_BGR, cfg.MARKER_THICKNESS)
                cv2.line(image,
                         (cx + marker_size, cy - marker_size),
                         (cx - marker_size, cy + marker_size),
                         cfg.X_BGR, cfg.MARKER_THICKNESS)
            else:
                cv2.circle(image, (cx, cy), marker_size, cfg.O_BGR, cfg.MARKER_THICKNESS)

        if winning_line is not None:
            start = self.cell_center(winning_line[0])
            end = self.cell_center(winning_line[-1])
            cv2.line(image, start, end, cfg.WIN_LINE_BGR, cfg.WIN_LINE_THICKNESS)

        return image

    def cell_at(self, x: float, y: float, width: int, height: int) -> Optional[int]:
        """
        Map a pixel on a view of the board back to a cell index.

        Args:
            x, y: Pixel position in the view.
            width, height: Size of the view the board image is drawn in.

        Returns:
            Cell index 0-8, or None if the point is outside the board.
        """
        if width <= 0 or height <= 0:
            return None
        if not (0 <= x < width and 0 <= y < height):
            return None

        n = self.config.BOARD_SIZE
        col = int(x * n // width)
        row = int(y * n // height)
        return row * n + col

    def to_rgb(self, image: np.ndarray) -> np.ndarray:
        """Convert a rendered BGR image to RGB (for PIL)."""
        return cv2.cvtColor(image, cv2.COLOR_BGR2RGB)

    def save_screenshot(self, image: np.ndarray, directory: Optional[str] = None) -> Path:
        """
        Save a rendered board image as PNG.

        Returns:
            Path of the written file.
        """
        out_dir = Path(directory or self.config.SCREENSHOT_DIR)
        out_dir.mkdir(parents=True, exist_ok=True)

        filename = out_dir / f"tictactoe_{int(time.time())}.png"
        if not cv2.imwrite(str(filename), image):
            raise IOError(f"Could not write screenshot to {filename}")

        print(f"Saved: {filename}")
        return filename
