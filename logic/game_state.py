"""
Game state management for TicTacToe.
Holds the board model, the players and the per-session game state.

Board representation: tuple of 9 cells, row-major (index = row * 3 + col)
  - None: empty
  - Player.X / Player.O: marker
"""

from enum import Enum
from typing import Optional, List, Tuple
from dataclasses import dataclass, field


class Player(Enum):
    """The two players in the game."""
    X = "X"
    O = "O"

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.O if self == Player.X else Player.X


class GameStatus(Enum):
    """Where the game is in its lifecycle."""
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAWN = "drawn"


Cell = Optional[Player]
Board = Tuple[Cell, ...]

BOARD_CELLS = 9

# Symbols accepted by board_from_string
_SYMBOLS = {
    "X": Player.X,
    "O": Player.O,
    ".": None,
    "-": None,
    " ": None,
}


def create_empty_board() -> Board:
    """Return a new board with all 9 cells empty."""
    return (None,) * BOARD_CELLS


def reset_game() -> Board:
    """Start a new game. Returns a fresh empty board."""
    return create_empty_board()


def apply_move(board: Board, index: int, player: Player) -> Board:
    """
    Place a marker and return the new board.

    The input board is left untouched. Callers must check the move with
    is_valid_move() first; an index outside 0-8 raises IndexError.
    """
    new_board = list(board)
    new_board[index] = player
    return tuple(new_board)


def next_player(board: Board) -> Player:
    """Side to move, from the number of filled cells (X plays first)."""
    filled = sum(1 for cell in board if cell is not None)
    return Player.X if filled % 2 == 0 else Player.O


def get_empty_cells(board: Board) -> List[int]:
    """Return indices of all empty cells."""
    return [i for i, cell in enumerate(board) if cell is None]


def board_from_string(text: str) -> Board:
    """
    Build a board from 9 characters, e.g. "XOX.O...X".

    Raises:
        ValueError: wrong length or unknown symbol.
    """
    if len(text) != BOARD_CELLS:
        raise ValueError(f"Board needs {BOARD_CELLS} cells, got {len(text)}")
    cells = []
    for ch in text.upper():
        if ch not in _SYMBOLS:
            raise ValueError(f"Unknown board symbol {ch!r}")
        cells.append(_SYMBOLS[ch])
    return tuple(cells)


def board_to_string(board: Board) -> str:
    """Inverse of board_from_string, using '.' for empty cells."""
    return "".join(cell.value if cell is not None else "." for cell in board)


@dataclass
class Move:
    """
    A move in the game.
    """
    player: Player          # Who made the move
    index: int              # Cell index (0-8)
    move_number: int        # Which move this is (1-9)


@dataclass
class GameState:
    """
    The complete state of one game session.

    Tracks:
    - The board
    - Current player
    - Move history
    - Game status (ongoing, won, draw)

    A new GameState() is the state right after a reset.
    """

    board: Board = field(default_factory=create_empty_board)

    # Current player's turn
    current_player: Player = Player.X

    # Move history
    moves: List[Move] = field(default_factory=list)

    # Game result
    winner: Optional[Player] = None
    is_draw: bool = False
    is_game_over: bool = False

    @property
    def status(self) -> GameStatus:
        """Lifecycle state derived from the result fields."""
        if self.winner is not None:
            return GameStatus.WON
        if self.is_draw:
            return GameStatus.DRAWN
        return GameStatus.IN_PROGRESS

    def record_move(self, index: int, new_board: Board):
        """
        Store the board produced by a move and append it to the history.

        Outcome and turn are updated separately by WinChecker.
        """
        self.moves.append(Move(
            player=self.current_player,
            index=index,
            move_number=len(self.moves) + 1,
        ))
        self.board = new_board

    def copy(self) -> "GameState":
        """Create a copy of the game state (the board itself is immutable)."""
        return GameState(
            board=self.board,
            current_player=self.current_player,
            moves=list(self.moves),
            winner=self.winner,
            is_draw=self.is_draw,
            is_game_over=self.is_game_over
        )

    def print_board(self):
        """Print the board to console."""
        print("\n  0   1   2")
        print("┌───┬───┬───┐")

        for row in range(3):
            row_str = "│"
            for col in range(3):
                cell = self.board[row * 3 + col]
                row_str += f" {cell.value if cell else ' '} │"
            print(f"{row} {row_str}")

            if row < 2:
                print("├───┼───┼───┤")

        print("└───┴───┴───┘")

        if self.is_game_over:
            if self.winner:
                print(f"\n{self.winner.value} WINS!")
            else:
                print("\nIt's a DRAW!")
        else:
            print(f"\nCurrent turn: {self.current_player.value}")
