"""History data models."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class EntryKind(str, Enum):
    """Kind of confirmed ledger operation."""
    DEPOSIT = "deposit"
    WITHDRAWAL = "withdrawal"


@dataclass(frozen=True)
class HistoryEntry:
    """A confirmed deposit or withdrawal."""
    amount: int
    timestamp: str
    kind: EntryKind
    tx_hash: Optional[str] = None

    def describe(self, unit_label: str) -> str:
        """Render the entry as a history line, e.g. "1 ETH - 01/02/2024, 10:00:00 AM"."""
        return f"{self.amount} {unit_label} - {self.timestamp}"
