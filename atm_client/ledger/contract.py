"""
Ledger contract interface.

The client consumes the deployed contract only through these classes:
a balance read and two state-changing calls that return a handle which
can be awaited until the ledger settles the transaction.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Optional

from ..wallet.provider import Signer


@dataclass(frozen=True)
class Confirmation:
    """Settlement of a submitted transaction."""
    tx_hash: str
    success: bool
    block_number: Optional[int] = None


class TransactionHandle(ABC):
    """A submitted transaction that has not necessarily settled yet."""

    tx_hash: str

    @abstractmethod
    async def wait(self) -> Confirmation:
        """Suspend until the ledger settles the transaction."""
        pass


class LedgerContract(ABC):
    """Call surface of the deployed ledger contract."""

    @abstractmethod
    async def get_balance(self) -> int:
        pass

    @abstractmethod
    async def deposit(self, amount: int) -> TransactionHandle:
        """
        Submit a deposit.

        Raises:
            SubmissionRejected: If the wallet declines to sign
        """
        pass

    @abstractmethod
    async def withdraw(self, amount: int) -> TransactionHandle:
        """
        Submit a withdrawal.

        Raises:
            SubmissionRejected: If the wallet declines to sign
        """
        pass


ContractFactory = Callable[[str, Optional[list], Signer], LedgerContract]
