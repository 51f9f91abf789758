"""
Transaction history module.

Append-only, in-memory record of confirmed deposits and withdrawals.
"""
from .log import HistoryLog
from .models import EntryKind, HistoryEntry

__all__ = ["EntryKind", "HistoryEntry", "HistoryLog"]
