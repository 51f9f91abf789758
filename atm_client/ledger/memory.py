"""
In-memory ledger for local development and tests.

Mirrors the deployed contract: balances per account, deposits always
succeed, withdrawals that would overdraw the balance revert. State changes
are applied when a transaction is awaited, the way a local node mines it.
"""

import hashlib
from typing import Optional

from ..errors import SubmissionRejected
from ..wallet.provider import Signer
from .contract import Confirmation, LedgerContract, TransactionHandle


class InMemoryLedger:
    """Shared ledger state for every contract handle bound to it."""

    def __init__(self, initial_balances: Optional[dict[str, int]] = None):
        self.balances: dict[str, int] = dict(initial_balances or {})
        self.block_number = 0
        self.reject_signatures = False
        self._nonce = 0

    def bind(self, address: str, abi: Optional[list], signer: Signer) -> "InMemoryLedgerContract":
        """Contract factory compatible with SessionManager."""
        return InMemoryLedgerContract(self, address, signer)

    def balance_of(self, account: str) -> int:
        return self.balances.get(account, 0)

    def _next_hash(self, account: str, operation: str, amount: int) -> str:
        self._nonce += 1
        digest = hashlib.sha256(f"{account}:{operation}:{amount}:{self._nonce}".encode()).hexdigest()
        return "0x" + digest

    def _mine(self, account: str, operation: str, amount: int) -> bool:
        balance = self.balance_of(account)
        if operation == "withdraw" and balance < amount:
            return False

        delta = amount if operation == "deposit" else -amount
        self.balances[account] = balance + delta
        return True


class InMemoryTransaction(TransactionHandle):
    """Pending transaction against an InMemoryLedger."""

    def __init__(self, ledger: InMemoryLedger, account: str, operation: str,
                 amount: int, tx_hash: str):
        self.ledger = ledger
        self.account = account
        self.operation = operation
        self.amount = amount
        self.tx_hash = tx_hash
        self._confirmation: Optional[Confirmation] = None

    async def wait(self) -> Confirmation:
        if self._confirmation is None:
            success = self.ledger._mine(self.account, self.operation, self.amount)
            self.ledger.block_number += 1
            self._confirmation = Confirmation(
                tx_hash=self.tx_hash,
                success=success,
                block_number=self.ledger.block_number
            )
        return self._confirmation


class InMemoryLedgerContract(LedgerContract):
    """Contract handle bound to one signer."""

    def __init__(self, ledger: InMemoryLedger, address: str, signer: Signer):
        self.ledger = ledger
        self.address = address
        self.signer = signer

    async def get_balance(self) -> int:
        return self.ledger.balance_of(self.signer.account)

    async def deposit(self, amount: int) -> TransactionHandle:
        return self._submit("deposit", amount)

    async def withdraw(self, amount: int) -> TransactionHandle:
        return self._submit("withdraw", amount)

    def _submit(self, operation: str, amount: int) -> InMemoryTransaction:
        if self.ledger.reject_signatures:
            raise SubmissionRejected(
                "User denied transaction signature",
                method=operation,
                code=4001
            )

        tx_hash = self.ledger._next_hash(self.signer.account, operation, amount)
        return InMemoryTransaction(self.ledger, self.signer.account, operation, amount, tx_hash)
