"""
Game controller for TicTacToe.

Owns the game session and ties together:
- Logic (game state, move validation, win detection)
- Audit (recording moves, resets and rejected actions)

Both the tkinter UI and the console mode drive the game through this class.
"""

from typing import Optional

from logic.game_state import GameState, apply_move
from logic.move_validator import MoveValidator, MoveError, ValidationResult, ERROR_MESSAGES
from logic.win_checker import WinChecker
from audit.events import AuditAction, MoveMeta, ResetMeta, ErrorMeta, make_event
from audit.trail import AuditTrail
from display.config import DisplayConfig


class GameController:
    """
    Runs one game session.

    Game flow:
    1. A player clicks a cell
    2. The move is validated against the session
    3. The marker is placed and the outcome is recomputed
    4. The move (or the rejection) goes to the audit trail
    5. Repeat until someone wins or it's a draw, then reset
    """

    def __init__(
        self,
        audit_trail: Optional[AuditTrail] = None,
        config: Optional[DisplayConfig] = None,
        user_id: Optional[str] = None
    ):
        """
        Initialize the controller.

        Args:
            audit_trail: Where events are recorded (new trail if None).
            config: Display configuration (uses defaults if None).
            user_id: Attribution for audit events.
        """
        self.config = config or DisplayConfig()
        self.audit = audit_trail if audit_trail is not None else AuditTrail()
        self.user_id = user_id or self.config.DEFAULT_USER_ID

        self.game_state = GameState()
        self.validator = MoveValidator()
        self.win_checker = WinChecker()

        # Banner text for the most recent rejected action
        self.error_message: Optional[str] = None
        self.last_error: Optional[MoveError] = None

    @property
    def board(self):
        return self.game_state.board

    @property
    def status_message(self) -> str:
        """Status line for the current state."""
        state = self.game_state
        if state.winner is not None:
            return self.config.WIN_MESSAGE.format(player=state.winner.value)
        if state.is_draw:
            return self.config.DRAW_MESSAGE
        return self.config.TURN_MESSAGE.format(player=state.current_player.value)

    def handle_cell_click(self, index) -> bool:
        """
        Try to play the current player's marker at index.

        Args:
            index: Cell index (0-8). Anything else is rejected.

        Returns:
            True if the move was made, False if it was rejected.
        """
        try:
            result = self.validator.validate_move(self.game_state, index)
            if not result.is_valid:
                self._reject(result, index)
                return False

            player = self.game_state.current_player
            before = self.game_state.board
            after = apply_move(before, index, player)

            # Work on a copy so a failure leaves the session untouched
            new_state = self.game_state.copy()
            new_state.record_move(index, after)
            self.win_checker.update_game_state(new_state)

            self._log(AuditAction.MOVE, MoveMeta(index=index, player=player),
                      before=before, after=after)
            self.game_state = new_state

            if self.config.DEBUG_MODE:
                print(f"Player {player.value} placed at {index}. {self.status_message}")

            self.error_message = None
            self.last_error = None
            return True

        except Exception as e:
            message = str(e) or ERROR_MESSAGES[MoveError.UNEXPECTED_FAULT]
            print(f"Move error: {message}")
            self.error_message = message
            self.last_error = MoveError.UNEXPECTED_FAULT
            self._log(AuditAction.ERROR, ErrorMeta(message=message, index=index),
                      before=self.game_state.board)
            return False

    def reset_game(self):
        """Start a new game. The audit trail is kept."""
        print("Resetting game...")
        before = self.game_state.board
        self.game_state = GameState()
        self.error_message = None
        self.last_error = None

        self._log(AuditAction.RESET, ResetMeta(),
                  before=before, after=self.game_state.board)

    def clear_audit(self):
        """Empty the audit trail."""
        self.audit.clear()

    def _reject(self, result: ValidationResult, index):
        """Show the banner and audit a rejected move."""
        if self.config.DEBUG_MODE:
            print(f"Rejected move {index!r}: {result.audit_message}")

        self.error_message = result.error_message
        self.last_error = result.error
        self._log(AuditAction.ERROR,
                  ErrorMeta(message=result.audit_message, index=index),
                  before=self.game_state.board)

    def _log(self, action: AuditAction, meta, before=None, after=None):
        self.audit.record(make_event(action, meta, self.user_id, before=before, after=after))
