"""
Display configuration for TicTacToe.
All the settings for the window, board image, audit panel and messages.
"""


class DisplayConfig:
    """
    Configuration class for display settings.
    Change these values to restyle the game!
    """

    # ==================== WINDOW SETTINGS ====================
    WINDOW_TITLE = "Tic Tac Toe"
    WINDOW_SUBTITLE = "Ocean Professional Theme"
    WINDOW_GEOMETRY = "560x820"
    WINDOW_MIN_SIZE = (420, 640)

    # Tk colours (hex)
    BG_COLOR = '#f9fafb'
    CARD_COLOR = '#ffffff'
    TITLE_COLOR = '#111827'
    PRIMARY_COLOR = '#2563eb'
    ACCENT_COLOR = '#f59e0b'
    ERROR_BG = '#ffecec'
    ERROR_FG = '#7f1d1d'
    HELPER_FG = '#374151'
    FONT_FAMILY = 'Segoe UI'

    # ==================== BOARD IMAGE SETTINGS ====================
    # TicTacToe is a 3x3 grid
    BOARD_SIZE = 3

    # Output size for the rendered board image (pixels)
    BOARD_OUTPUT_SIZE = 420
    CELL_OUTPUT_SIZE = BOARD_OUTPUT_SIZE // BOARD_SIZE  # 140 pixels per cell

    # OpenCV colours are BGR
    BOARD_BG_BGR = (255, 255, 255)
    GRID_BGR = (235, 99, 37)       # Primary blue
    X_BGR = (235, 99, 37)
    O_BGR = (11, 158, 245)         # Amber
    WIN_LINE_BGR = (68, 68, 239)   # Red
    LABEL_BGR = (150, 150, 150)

    GRID_THICKNESS = 3
    MARKER_THICKNESS = 10
    WIN_LINE_THICKNESS = 12
    MARKER_MARGIN = CELL_OUTPUT_SIZE // 5
    SHOW_CELL_LABELS = True

    # ==================== AUDIT SETTINGS ====================
    # Pseudo user attribution for audit events
    DEFAULT_USER_ID = "anonymous"
    AUDIT_PANEL_HEIGHT = 10  # Listbox rows

    # ==================== MESSAGES ====================
    TURN_MESSAGE = "Player {player}'s turn"
    WIN_MESSAGE = "Player {player} wins!"
    DRAW_MESSAGE = "It's a draw."
    HELPER_TEXT = "Tip: First player is X. Click Restart to play again."

    # ==================== DEBUG SETTINGS ====================
    DEBUG_MODE = True
    SCREENSHOT_DIR = "screenshots"
