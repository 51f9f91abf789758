"""
Session manager.

Owns the single Session of a client, drives its state machine and holds
the contract handle bound to the connected account.
"""

from contextlib import contextmanager
from typing import Iterator, Optional

from ..errors import ContractNotBound, OperationInFlight, SubmissionRejected, WalletMissing
from ..ledger.contract import ContractFactory, LedgerContract
from ..logging.config import get_session_logger, log_session_transition
from ..wallet.probe import WalletAvailability, WalletProbe
from ..wallet.provider import Signer
from .models import Session, SessionState

session_logger = get_session_logger(__name__)


class SessionManager:
    """Drives the wallet session state machine."""

    def __init__(self, probe: WalletProbe, contract_factory: ContractFactory,
                 contract_address: str, abi: Optional[list] = None):
        self.logger = session_logger
        self.probe = probe
        self.contract_factory = contract_factory
        self.contract_address = contract_address
        self.abi = abi
        self._session = Session()
        self._contract: Optional[LedgerContract] = None

    @property
    def session(self) -> Session:
        return self._session

    @property
    def state(self) -> SessionState:
        return self._session.state

    @property
    def contract(self) -> Optional[LedgerContract]:
        return self._contract

    @property
    def is_ready(self) -> bool:
        return self._contract is not None and self._session.is_ready

    def probe_wallet(self) -> WalletAvailability:
        """Check for an injected provider and record the result."""
        availability = self.probe.probe()
        self._transition(
            self._session.with_wallet(availability == WalletAvailability.AVAILABLE),
            trigger="probe_wallet"
        )
        return availability

    async def restore_account(self) -> Optional[str]:
        """
        Reconnect to an account the wallet already authorized.

        Only the non-interactive account query is used, so the user is never
        prompted. Returns the account, or None when there is nothing to restore.
        """
        if not self._session.wallet_available:
            return None

        accounts = await self.probe.authorized_accounts()
        if not accounts:
            self.logger.info("No authorized account to restore")
            return None

        account = accounts[0]
        self._bind(account, trigger="restore_account")
        return account

    async def connect(self) -> str:
        """
        Request account access from the wallet and bind the contract.

        Raises:
            WalletMissing: If no wallet provider was detected
            SubmissionRejected: If the user declines or approves no account
            OperationInFlight: If another operation is pending
        """
        provider = self.probe.provider
        if not self._session.wallet_available or provider is None:
            self.logger.warning("Connect attempted without a wallet provider")
            raise WalletMissing("No wallet provider detected")

        with self.operation("connect"):
            accounts = await provider.request_accounts()

        if not accounts:
            raise SubmissionRejected(
                "Wallet approved no accounts", method="eth_requestAccounts"
            )

        account = accounts[0]
        self._bind(account, trigger="connect")
        return account

    def require_contract(self, operation: str) -> LedgerContract:
        """Return the bound contract or raise ContractNotBound."""
        if not self.is_ready:
            raise ContractNotBound(
                f"Cannot {operation} before the contract is bound",
                operation=operation
            )
        return self._contract  # type: ignore[return-value]

    def record_balance(self, balance: Optional[int]) -> None:
        if balance != self._session.balance:
            self.logger.info("Balance updated", old_balance=self._session.balance, new_balance=balance)
        self._session = self._session.with_balance(balance)

    @contextmanager
    def operation(self, name: str) -> Iterator[None]:
        """
        Single-flight guard around an operation that suspends.

        Raises:
            OperationInFlight: If another operation has not settled yet
        """
        pending = self._session.operation_in_flight
        if pending is not None:
            self.logger.warning("Operation rejected while another is pending", pending=pending, attempted=name)
            raise OperationInFlight(
                f"Cannot start {name} while {pending} is pending",
                pending=pending,
                attempted=name
            )

        self._session = self._session.with_operation(name)
        try:
            yield
        finally:
            self._session = self._session.with_operation(None)

    def _bind(self, account: str, trigger: str) -> None:
        signer = Signer(provider=self.probe.provider, account=account)  # type: ignore[arg-type]
        self._contract = self.contract_factory(self.contract_address, self.abi, signer)
        self._transition(
            self._session.with_connection(account),
            trigger=trigger,
            context={"account": account, "contract_address": self.contract_address}
        )

    def _transition(self, new_session: Session, trigger: str, context: Optional[dict] = None) -> None:
        old_state = self._session.state
        self._session = new_session

        log_session_transition(
            self.logger,
            from_state=old_state.value,
            to_state=new_session.state.value,
            trigger=trigger,
            context=context
        )
