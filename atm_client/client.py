"""
Main client controller.

Owns one session and wires wallet probe, session manager, ledger client,
history log and target calculator together. User actions never raise client
errors: each failure is shown once through the notifier and the action
returns None.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Awaitable, Callable, Mapping, Optional, TypeVar

import structlog

from .config.defaults import ClientConfig, get_default_config
from .errors import ClientError
from .history.log import HistoryLog
from .ledger.artifacts import load_contract_abi
from .ledger.client import LedgerClient
from .ledger.contract import Confirmation, ContractFactory
from .logging.config import configure_logging
from .notifier import LogNotifier, Notifier
from .session.manager import SessionManager
from .targets.calculator import TargetCalculator
from .targets.models import TargetResult
from .utils.time import Clock
from .wallet.probe import ProviderLookup, WalletAvailability, WalletProbe
from .wallet.rpc import JsonRpcWalletProvider

logger = structlog.get_logger(__name__)

T = TypeVar("T")


class ClientStatus(str, Enum):
    """What the user can do next."""
    WALLET_MISSING = "wallet_missing"
    NEEDS_CONNECTION = "needs_connection"
    READY = "ready"


STATUS_PROMPTS = {
    ClientStatus.WALLET_MISSING: "Please install Metamask in order to use this ATM.",
    ClientStatus.NEEDS_CONNECTION: "Please connect your Metamask wallet",
    ClientStatus.READY: None,
}


@dataclass(frozen=True)
class ClientView:
    """Render-neutral snapshot of everything the user sees."""
    status: ClientStatus
    prompt: Optional[str]
    account: Optional[str]
    balance: Optional[int]
    targets: tuple[str, ...]
    deposits: tuple[str, ...]
    withdrawals: tuple[str, ...]
    busy: bool


class AtmClient:
    """
    Controller for a single wallet session.

    Flow: probe wallet → restore or connect account → read balance →
    deposit/withdraw → history. Target calculation is independent.
    """

    def __init__(self, session_manager: SessionManager, ledger: LedgerClient,
                 history: HistoryLog, calculator: TargetCalculator,
                 notifier: Optional[Notifier] = None, unit_label: str = "ETH"):
        self.logger = logger
        self.session_manager = session_manager
        self.ledger = ledger
        self.history = history
        self.calculator = calculator
        self.notifier = notifier or LogNotifier()
        self.unit_label = unit_label
        self.targets: Optional[TargetResult] = None

    @classmethod
    def create(cls, provider_lookup: Optional[ProviderLookup], contract_factory: ContractFactory,
               config: Optional[ClientConfig] = None, notifier: Optional[Notifier] = None,
               clock: Optional[Clock] = None, configure_logs: bool = False) -> "AtmClient":
        """
        Build a client from configuration.

        Args:
            provider_lookup: Lookup for an injected wallet provider. When None,
                a JSON-RPC provider is built from wallet.rpc_url if configured;
                otherwise no wallet is available.
            contract_factory: Binds the ledger contract for a signer
            config: Client configuration, defaults when omitted
            notifier: Receives user-facing alerts
            clock: Clock for history timestamps
            configure_logs: Apply the configured logging level and format

        Raises:
            ConfigurationError: If the configured contract artifact cannot be read
        """
        config = config or get_default_config()

        if configure_logs:
            configure_logging(level=config.logging.level, format_json=config.logging.format_json)

        if provider_lookup is None:
            provider_lookup = cls._configured_provider_lookup(config)

        abi = None
        if config.contract.artifact_path:
            abi = load_contract_abi(config.contract.artifact_path)

        session_manager = SessionManager(
            probe=WalletProbe(provider_lookup),
            contract_factory=contract_factory,
            contract_address=config.contract.address,
            abi=abi,
        )
        history = HistoryLog(timestamp_format=config.history.timestamp_format, clock=clock)
        ledger = LedgerClient(session_manager, history, default_amount=config.ledger.unit_amount)
        calculator = TargetCalculator(
            multipliers=config.targets.multipliers,
            decimals=config.targets.decimals,
        )

        client = cls(session_manager, ledger, history, calculator,
                     notifier=notifier, unit_label=config.ledger.unit_label)
        client.logger.info(
            "ATM client initialized",
            contract_address=config.contract.address,
            abi_loaded=abi is not None
        )
        return client

    @staticmethod
    def _configured_provider_lookup(config: ClientConfig) -> ProviderLookup:
        if not config.wallet.rpc_url:
            return lambda: None

        provider = JsonRpcWalletProvider(config.wallet.rpc_url, timeout=config.wallet.request_timeout)
        logger.info("Using JSON-RPC wallet provider", rpc_url=config.wallet.rpc_url,
                    timeout=config.wallet.request_timeout)
        return lambda: provider

    async def load(self) -> ClientView:
        """Detect the wallet, restore an authorized account and read the balance."""
        if self.session_manager.probe_wallet() == WalletAvailability.AVAILABLE:
            await self._run("restore_account", self.session_manager.restore_account)
            if self.session_manager.is_ready:
                await self._run("get_balance", self.ledger.get_balance)
        return self.view()

    async def connect(self) -> Optional[str]:
        account = await self._run("connect", self.session_manager.connect)
        if account is not None:
            await self._run("get_balance", self.ledger.get_balance)
        return account

    async def refresh_balance(self) -> Optional[int]:
        return await self._run("get_balance", self.ledger.get_balance)

    async def deposit(self) -> Optional[Confirmation]:
        return await self._run("deposit", self.ledger.deposit)

    async def withdraw(self) -> Optional[Confirmation]:
        return await self._run("withdraw", self.ledger.withdraw)

    def calculate_targets(self, fields: Mapping[str, Any]) -> Optional[TargetResult]:
        """Compute targets; the last successful result stays displayed on failure."""
        try:
            result = self.calculator.calculate(fields)
        except ClientError as e:
            self._report("calculate_targets", e)
            return None

        self.targets = result
        return result

    def view(self) -> ClientView:
        session = self.session_manager.session

        if not session.wallet_available:
            status = ClientStatus.WALLET_MISSING
        elif session.account is None:
            status = ClientStatus.NEEDS_CONNECTION
        else:
            status = ClientStatus.READY

        return ClientView(
            status=status,
            prompt=STATUS_PROMPTS[status],
            account=session.account,
            balance=session.balance,
            targets=self.targets.formatted if self.targets else (),
            deposits=tuple(e.describe(self.unit_label) for e in self.history.list_deposits()),
            withdrawals=tuple(e.describe(self.unit_label) for e in self.history.list_withdrawals()),
            busy=session.busy,
        )

    async def _run(self, action: str, call: Callable[[], Awaitable[T]]) -> Optional[T]:
        try:
            return await call()
        except ClientError as e:
            self._report(action, e)
            return None

    def _report(self, action: str, error: ClientError) -> None:
        self.logger.warning(
            "Action failed",
            action=action,
            error_type=type(error).__name__,
            error=str(error),
            context=error.context or None
        )
        self.notifier.alert(error.user_message)
