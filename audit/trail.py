"""
In-memory audit trail.
Lives as long as the session; nothing is written to disk.
"""

from typing import List, Tuple

from .events import AuditEvent


class AuditTrail:
    """Append-only list of audit events, with a clear for the panel."""

    def __init__(self):
        self._events: List[AuditEvent] = []

    def __len__(self) -> int:
        return len(self._events)

    def record(self, event: AuditEvent) -> AuditEvent:
        """Append an event."""
        self._events.append(event)
        return event

    @property
    def events(self) -> Tuple[AuditEvent, ...]:
        """All events, oldest first."""
        return tuple(self._events)

    def recent(self) -> List[AuditEvent]:
        """All events, newest first (panel order)."""
        return list(reversed(self._events))

    def clear(self):
        """Drop all recorded events."""
        self._events.clear()
