"""
Error classification for the ATM client.

This module provides the exception hierarchy for wallet, ledger, input and
configuration failures. Every error is terminal for the action that raised it.
"""

from .base import ClientError, ConfigurationError
from .wallet import (
    WalletError,
    WalletMissing,
    SubmissionRejected,
    WalletProviderError,
)
from .ledger import (
    LedgerError,
    TransactionReverted,
    ContractNotBound,
    OperationInFlight,
    InvalidBalanceError,
)
from .validation import (
    InputValidationError,
    MissingField,
    InvalidNumber,
)

__all__ = [
    "ClientError",
    "ConfigurationError",
    # Wallet Errors
    "WalletError",
    "WalletMissing",
    "SubmissionRejected",
    "WalletProviderError",
    # Ledger Errors
    "LedgerError",
    "TransactionReverted",
    "ContractNotBound",
    "OperationInFlight",
    "InvalidBalanceError",
    # Input Errors
    "InputValidationError",
    "MissingField",
    "InvalidNumber",
]
