"""
Audit events for the TicTacToe session.

Each event is an immutable record of a move, a reset or a rejected action,
with before/after board snapshots for display in the audit panel.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Optional, List, Union
from dataclasses import dataclass

from logic.game_state import Board, Player


class AuditAction(Enum):
    """Kinds of audited actions."""
    MOVE = "MOVE"
    RESET = "RESET"
    ERROR = "ERROR"


@dataclass(frozen=True)
class MoveMeta:
    """A marker was placed."""
    index: int
    player: Player


@dataclass(frozen=True)
class ResetMeta:
    """A new game was started."""


@dataclass(frozen=True)
class ErrorMeta:
    """An action was rejected."""
    message: str
    index: Optional[object] = None


EventMeta = Union[MoveMeta, ResetMeta, ErrorMeta]


def utc_timestamp(now: Optional[datetime] = None) -> str:
    """ISO-8601 UTC timestamp with milliseconds, e.g. 2024-01-01T12:00:00.000Z"""
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _snapshot(board) -> Optional[Board]:
    return tuple(board) if board is not None else None


@dataclass(frozen=True)
class AuditEvent:
    """
    One entry in the audit trail.

    before/after are copied to tuples, so a list passed in by the caller
    can change later without touching the recorded event.
    """
    timestamp: str
    action: AuditAction
    user_id: str
    meta: EventMeta
    before: Optional[Board] = None
    after: Optional[Board] = None
    reason: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "before", _snapshot(self.before))
        object.__setattr__(self, "after", _snapshot(self.after))

    @property
    def message(self) -> Optional[str]:
        return self.meta.message if isinstance(self.meta, ErrorMeta) else None

    @property
    def index(self):
        return getattr(self.meta, "index", None)

    @property
    def player(self) -> Optional[Player]:
        return self.meta.player if isinstance(self.meta, MoveMeta) else None

    def describe(self) -> str:
        """Headline shown in the audit panel."""
        text = f"{self.action.value} · {self.timestamp} · user: {self.user_id}"
        if self.message:
            text += f" · {self.message}"
        if self.reason:
            text += f" · reason: {self.reason}"
        return text

    def details(self) -> List[str]:
        """Extra lines (index, player) shown under the headline."""
        lines = []
        if self.index is not None:
            lines.append(f"index: {self.index}")
        if self.player is not None:
            lines.append(f"player: {self.player.value}")
        return lines


def make_event(
    action: AuditAction,
    meta: EventMeta,
    user_id: str,
    before=None,
    after=None,
    reason: Optional[str] = None,
) -> AuditEvent:
    """Create an event stamped with the current time."""
    return AuditEvent(
        timestamp=utc_timestamp(),
        action=action,
        user_id=user_id,
        meta=meta,
        before=before,
        after=after,
        reason=reason,
    )
