"""
Append-only history log.

Entries are kept in insertion order and never modified or removed. Filtered
views are lazy and can be iterated any number of times.
"""

from typing import Iterator, Optional

import structlog

from ..utils.time import Clock, history_timestamp
from .models import EntryKind, HistoryEntry

logger = structlog.get_logger(__name__)

DEFAULT_TIMESTAMP_FORMAT = "%m/%d/%Y, %I:%M:%S %p"


class HistoryView:
    """Order-preserving view over the entries of one kind."""

    def __init__(self, entries: list[HistoryEntry], kind: EntryKind):
        self._entries = entries
        self._kind = kind

    def __iter__(self) -> Iterator[HistoryEntry]:
        return (entry for entry in self._entries if entry.kind == self._kind)

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __repr__(self) -> str:
        return f"HistoryView(kind={self._kind.value!r}, entries={len(self)})"


class HistoryLog:
    """In-memory log of confirmed ledger operations."""

    def __init__(self, timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT,
                 clock: Optional[Clock] = None):
        self.timestamp_format = timestamp_format
        self.clock = clock
        self._entries: list[HistoryEntry] = []

    def append(self, entry: HistoryEntry) -> None:
        self._entries.append(entry)
        logger.info(
            "History entry appended",
            kind=entry.kind.value,
            amount=entry.amount,
            tx_hash=entry.tx_hash,
            position=len(self._entries)
        )

    def record(self, kind: EntryKind, amount: int, tx_hash: Optional[str] = None) -> HistoryEntry:
        """Build an entry stamped with the current time and append it."""
        entry = HistoryEntry(
            amount=amount,
            timestamp=history_timestamp(self.timestamp_format, self.clock),
            kind=kind,
            tx_hash=tx_hash
        )
        self.append(entry)
        return entry

    def list_deposits(self) -> HistoryView:
        return HistoryView(self._entries, EntryKind.DEPOSIT)

    def list_withdrawals(self) -> HistoryView:
        return HistoryView(self._entries, EntryKind.WITHDRAWAL)

    @property
    def entries(self) -> tuple[HistoryEntry, ...]:
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)
