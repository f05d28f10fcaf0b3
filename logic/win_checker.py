"""
Win checker for TicTacToe.
Checks if a player has won or if the game is a draw.
"""

from typing import Optional, Tuple
from dataclasses import dataclass
from .game_state import Board, GameState, Player, next_player


# All possible winning lines (as cell indices)
WINNING_LINES: Tuple[Tuple[int, int, int], ...] = (
    # Rows
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    # Columns
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    # Diagonals
    (0, 4, 8),
    (2, 4, 6),
)


@dataclass(frozen=True)
class WinResult:
    """Outcome of a board: the winner, or whether it is drawn."""
    winner: Optional[Player] = None
    draw: bool = False


def _line_owner(board: Board, line: Tuple[int, int, int]) -> Optional[Player]:
    a, b, c = line
    if board[a] is not None and board[a] == board[b] == board[c]:
        return board[a]
    return None


def get_winning_line(board: Board) -> Optional[Tuple[int, int, int]]:
    """Return the first completed line, or None."""
    for line in WINNING_LINES:
        if _line_owner(board, line) is not None:
            return line
    return None


def get_winner(board: Board) -> WinResult:
    """
    Evaluate the board.

    A completed line wins; otherwise a full board is a draw.
    """
    line = get_winning_line(board)
    if line is not None:
        return WinResult(winner=board[line[0]], draw=False)
    if all(cell is not None for cell in board):
        return WinResult(winner=None, draw=True)
    return WinResult()


def is_draw(board: Board) -> bool:
    """True if every cell is filled and nobody has a line."""
    return get_winner(board).draw


class WinChecker:
    """
    Checks for win conditions and keeps a GameState's result in sync.

    Win condition: 3 markers of the same player in a row
    (horizontally, vertically, or diagonally)
    """

    def get_winning_line(self, game_state: GameState) -> Optional[Tuple[int, int, int]]:
        """The winning line as cell indices, or None."""
        return get_winning_line(game_state.board)

    def update_game_state(self, game_state: GameState) -> GameState:
        """
        Update the game state after a move.

        Sets winner/draw and the game-over flag, or hands the turn to the
        next player when the game goes on.

        Args:
            game_state: The game state to update.

        Returns:
            Updated game state.
        """
        result = get_winner(game_state.board)

        if result.winner is not None:
            game_state.winner = result.winner
            game_state.is_game_over = True
        elif result.draw:
            game_state.is_draw = True
            game_state.is_game_over = True
        else:
            game_state.current_player = next_player(game_state.board)

        return game_state
