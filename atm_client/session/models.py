"""
Session data models.

The session is an immutable snapshot; every transition produces a new one.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional


class SessionState(str, Enum):
    """Connection lifecycle states."""
    DISCONNECTED = "disconnected"
    WALLET_DETECTED = "wallet_detected"
    CONNECTED = "connected"


@dataclass(frozen=True)
class Session:
    """Connection state for one client."""

    wallet_available: bool = False
    account: Optional[str] = None
    contract_bound: bool = False

    # None until the first successful read
    balance: Optional[int] = None

    # Name of the operation awaiting the wallet or the ledger
    operation_in_flight: Optional[str] = None

    def __post_init__(self) -> None:
        if self.contract_bound and self.account is None:
            raise ValueError("A bound contract requires an account")

    @property
    def state(self) -> SessionState:
        if self.account is not None:
            return SessionState.CONNECTED
        if self.wallet_available:
            return SessionState.WALLET_DETECTED
        return SessionState.DISCONNECTED

    @property
    def is_ready(self) -> bool:
        """True when ledger calls can be made."""
        return self.contract_bound

    @property
    def busy(self) -> bool:
        return self.operation_in_flight is not None

    def with_wallet(self, available: bool) -> "Session":
        return replace(self, wallet_available=available)

    def with_connection(self, account: str) -> "Session":
        """Connected to account with a freshly bound contract; balance unknown."""
        return replace(self, account=account, contract_bound=True, balance=None)

    def with_balance(self, balance: Optional[int]) -> "Session":
        return replace(self, balance=balance)

    def with_operation(self, operation: Optional[str]) -> "Session":
        return replace(self, operation_in_flight=operation)
