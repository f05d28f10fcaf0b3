"""
Logic module for TicTacToe.
Handles the board, game rules and game state.
"""

from .game_state import (
    Board,
    GameState,
    GameStatus,
    Player,
    apply_move,
    board_from_string,
    board_to_string,
    create_empty_board,
    get_empty_cells,
    next_player,
    reset_game,
)
from .move_validator import MoveError, MoveValidator, ValidationResult, is_valid_move
from .win_checker import WinChecker, WinResult, WINNING_LINES, get_winner, get_winning_line, is_draw
