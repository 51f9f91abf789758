"""
Ledger error classifications.

These exceptions cover calls against the bound ledger contract. None of
them is retried. Balance and history are left untouched when one is raised
before confirmation; a failed balance read after confirmation leaves the
balance unknown.
"""

from typing import Optional

from .base import ClientError


class LedgerError(ClientError):
    """Base class for ledger contract failures."""

    user_message = "The ledger could not complete the request"


class TransactionReverted(LedgerError):
    """The ledger rejected a submitted state change."""

    user_message = "The transaction was reverted by the ledger"

    def __init__(self, message: str, operation: Optional[str] = None,
                 tx_hash: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.operation = operation
        self.tx_hash = tx_hash


class ContractNotBound(LedgerError):
    """A state-changing call was made before the contract was bound."""

    user_message = "Please connect your wallet first"

    def __init__(self, message: str, operation: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.operation = operation


class OperationInFlight(LedgerError):
    """Another operation is still awaiting the wallet or the ledger."""

    user_message = "Please wait for the pending transaction to settle"

    def __init__(self, message: str, pending: Optional[str] = None,
                 attempted: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.pending = pending
        self.attempted = attempted


class InvalidBalanceError(LedgerError):
    """The ledger returned a balance that is not a non-negative integer."""

    user_message = "Balance could not be read"

    def __init__(self, message: str, raw_value: Optional[object] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.raw_value = raw_value
