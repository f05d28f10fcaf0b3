"""
Move validator for TicTacToe.
Validates that moves follow the rules.
"""

from enum import Enum
from typing import Optional, List
from dataclasses import dataclass
from .game_state import Board, GameState, BOARD_CELLS


class MoveError(Enum):
    """Why a move was rejected."""
    OUT_OF_RANGE_INDEX = "out_of_range_index"
    CELL_OCCUPIED = "cell_occupied"
    GAME_ALREADY_OVER = "game_already_over"
    UNEXPECTED_FAULT = "unexpected_fault"


# Text shown to the player
ERROR_MESSAGES = {
    MoveError.OUT_OF_RANGE_INDEX: "Invalid position.",
    MoveError.GAME_ALREADY_OVER: "Game is already over. Please restart.",
    MoveError.CELL_OCCUPIED: "Cell already occupied.",
    MoveError.UNEXPECTED_FAULT: "Unexpected error",
}

# Text stored in the audit trail
AUDIT_MESSAGES = {
    MoveError.OUT_OF_RANGE_INDEX: "Out of range index",
    MoveError.GAME_ALREADY_OVER: "Move after game over",
    MoveError.CELL_OCCUPIED: "Invalid move - occupied",
    MoveError.UNEXPECTED_FAULT: "Unexpected error",
}


def is_index_in_range(index) -> bool:
    """True if index is an int in 0-8 (bools don't count)."""
    return isinstance(index, int) and not isinstance(index, bool) and 0 <= index < BOARD_CELLS


def is_valid_move(board: Board, index) -> bool:
    """
    True if index is in range and the cell is empty.

    Whose turn it is and whether the game has ended are checked by the caller.
    """
    return is_index_in_range(index) and board[index] is None


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error: Optional[MoveError] = None
    error_message: Optional[str] = None
    audit_message: Optional[str] = None

    @classmethod
    def rejected(cls, error: MoveError) -> "ValidationResult":
        return cls(
            is_valid=False,
            error=error,
            error_message=ERROR_MESSAGES[error],
            audit_message=AUDIT_MESSAGES[error],
        )


class MoveValidator:
    """
    Validates TicTacToe moves against a game session.

    Rules, checked in this order:
    1. Index must be an integer 0-8
    2. Game must not be over
    3. Can only place on empty cells
    """

    def validate_move(self, game_state: GameState, index) -> ValidationResult:
        """
        Validate a move.

        Args:
            game_state: Current game state.
            index: Cell to place the marker on (0-8).

        Returns:
            ValidationResult with is_valid and error details.
        """
        if not is_index_in_range(index):
            return ValidationResult.rejected(MoveError.OUT_OF_RANGE_INDEX)

        if game_state.is_game_over:
            return ValidationResult.rejected(MoveError.GAME_ALREADY_OVER)

        if not is_valid_move(game_state.board, index):
            return ValidationResult.rejected(MoveError.CELL_OCCUPIED)

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, game_state: GameState) -> List[int]:
        """
        Get all valid moves for the current player.

        Returns:
            List of cell indices, empty once the game is over.
        """
        if game_state.is_game_over:
            return []

        return [i for i in range(BOARD_CELLS) if is_valid_move(game_state.board, i)]
