"""
Audit module for TicTacToe.
Records moves, resets and rejected actions for the audit panel.
"""

from .events import AuditAction, AuditEvent, MoveMeta, ResetMeta, ErrorMeta, make_event
from .trail import AuditTrail
