"""
Ledger client.

Call surface over the contract bound by the session. Each state-changing
call runs submit → await confirmation → refresh balance → append history,
in that order. Nothing after a failed submit or confirmation runs; once the
ledger has confirmed, the history entry is appended even if the refresh
fails, and the balance is then left unknown.
"""

from typing import TYPE_CHECKING, Optional

from ..errors import InvalidBalanceError, TransactionReverted
from ..history.log import HistoryLog
from ..history.models import EntryKind
from ..logging.config import get_ledger_logger, log_ledger_operation
from .contract import Confirmation

if TYPE_CHECKING:
    from ..session.manager import SessionManager

ledger_logger = get_ledger_logger(__name__)

OPERATION_KINDS = {
    "deposit": EntryKind.DEPOSIT,
    "withdraw": EntryKind.WITHDRAWAL,
}


class LedgerClient:
    """Reads the balance and submits deposits/withdrawals."""

    def __init__(self, session_manager: "SessionManager", history: HistoryLog,
                 default_amount: int = 1):
        self.logger = ledger_logger
        self.session_manager = session_manager
        self.history = history
        self.default_amount = default_amount

    async def get_balance(self) -> Optional[int]:
        """
        Read the current balance from the bound contract.

        Returns None while no contract is bound; the session balance then
        stays unknown rather than reporting a cached number.

        Raises:
            InvalidBalanceError: If the ledger returns a negative or non-integer value
        """
        contract = self.session_manager.contract
        if contract is None or not self.session_manager.is_ready:
            self.logger.debug("Balance requested before contract binding")
            return None

        raw = await contract.get_balance()
        balance = self._as_balance(raw)

        self.session_manager.record_balance(balance)
        log_ledger_operation(self.logger, "balance", "read", context={"balance": balance})
        return balance

    async def deposit(self, amount: Optional[int] = None) -> Confirmation:
        """
        Deposit units and wait for the ledger to confirm.

        Raises:
            ContractNotBound: If no contract is bound
            OperationInFlight: If another operation is pending
            SubmissionRejected: If the wallet declines to sign
            TransactionReverted: If the ledger rejects the deposit
            InvalidBalanceError: If the balance cannot be re-read after confirmation
        """
        return await self._execute("deposit", amount)

    async def withdraw(self, amount: Optional[int] = None) -> Confirmation:
        """
        Withdraw units and wait for the ledger to confirm.

        The ledger enforces the non-negative balance; an overdraw surfaces
        as TransactionReverted.

        Raises:
            ContractNotBound: If no contract is bound
            OperationInFlight: If another operation is pending
            SubmissionRejected: If the wallet declines to sign
            TransactionReverted: If the ledger rejects the withdrawal
            InvalidBalanceError: If the balance cannot be re-read after confirmation
        """
        return await self._execute("withdraw", amount)

    async def _execute(self, operation: str, amount: Optional[int]) -> Confirmation:
        amount = self.default_amount if amount is None else amount
        if isinstance(amount, bool) or not isinstance(amount, int) or amount <= 0:
            raise ValueError(f"{operation} amount must be a positive integer, got {amount!r}")

        contract = self.session_manager.require_contract(operation)

        with self.session_manager.operation(operation):
            submit = contract.deposit if operation == "deposit" else contract.withdraw
            try:
                handle = await submit(amount)
            except Exception as e:
                log_ledger_operation(self.logger, operation, "rejected", amount,
                                     context={"error": str(e), "error_type": type(e).__name__})
                raise

            log_ledger_operation(self.logger, operation, "submitted", amount,
                                 context={"tx_hash": handle.tx_hash})

            confirmation = await handle.wait()
            if not confirmation.success:
                log_ledger_operation(self.logger, operation, "reverted", amount,
                                     context={"tx_hash": confirmation.tx_hash,
                                              "block_number": confirmation.block_number})
                raise TransactionReverted(
                    f"{operation} of {amount} reverted",
                    operation=operation,
                    tx_hash=confirmation.tx_hash
                )

            log_ledger_operation(self.logger, operation, "confirmed", amount,
                                 context={"tx_hash": confirmation.tx_hash,
                                          "block_number": confirmation.block_number})

            # Confirmed changes always reach history, even if the refresh fails
            try:
                await self.get_balance()
            except Exception as e:
                self.session_manager.record_balance(None)
                log_ledger_operation(self.logger, "balance", "refresh_failed", amount,
                                     context={"tx_hash": confirmation.tx_hash, "error": str(e)})
                raise
            finally:
                self.history.record(OPERATION_KINDS[operation], amount, confirmation.tx_hash)

        return confirmation

    @staticmethod
    def _as_balance(raw: object) -> int:
        if isinstance(raw, bool) or not isinstance(raw, int):
            raise InvalidBalanceError(f"Ledger returned a non-integer balance: {raw!r}", raw_value=raw)
        if raw < 0:
            raise InvalidBalanceError(f"Ledger returned a negative balance: {raw}", raw_value=raw)
        return raw
