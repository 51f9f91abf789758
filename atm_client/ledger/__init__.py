"""
Ledger contract module.

Contract interface, artifact loading, the in-memory development ledger and
the LedgerClient call surface used by the session.
"""
from .contract import Confirmation, ContractFactory, LedgerContract, TransactionHandle

__all__ = ["Confirmation", "ContractFactory", "LedgerContract", "TransactionHandle"]
