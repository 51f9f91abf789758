"""Pytest configuration and shared fixtures."""

import pytest
from datetime import datetime, timezone
from typing import Dict

from atm_client.history.log import HistoryLog
from atm_client.ledger.client import LedgerClient
from atm_client.ledger.memory import InMemoryLedger
from atm_client.session.manager import SessionManager
from atm_client.targets.calculator import TargetCalculator
from atm_client.wallet.memory import StaticWalletProvider
from atm_client.wallet.probe import WalletProbe

CONTRACT_ADDRESS = "0x5FbDB2315678afecb367f032d93F642f64180aa3"
ACCOUNT = "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266"


@pytest.fixture
def fixed_clock():
    """Clock pinned to 2024-01-02 10:00:00 UTC."""
    return lambda: datetime(2024, 1, 2, 10, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def wallet() -> StaticWalletProvider:
    """Wallet holding one account that has not authorized the client yet."""
    return StaticWalletProvider([ACCOUNT])


@pytest.fixture
def ledger() -> InMemoryLedger:
    """Local ledger where the test account already holds 5 units."""
    return InMemoryLedger({ACCOUNT: 5})


@pytest.fixture
def session_manager(wallet, ledger) -> SessionManager:
    """Session manager wired to the test wallet and ledger."""
    return SessionManager(
        probe=WalletProbe(lambda: wallet),
        contract_factory=ledger.bind,
        contract_address=CONTRACT_ADDRESS,
    )


@pytest.fixture
def history(fixed_clock) -> HistoryLog:
    """History log stamping entries with the fixed clock."""
    return HistoryLog(clock=fixed_clock)


@pytest.fixture
def ledger_client(session_manager, history) -> LedgerClient:
    """Ledger client over the test session."""
    return LedgerClient(session_manager, history)


@pytest.fixture
def calculator() -> TargetCalculator:
    """Target calculator with default multipliers."""
    return TargetCalculator()


@pytest.fixture
def sample_target_fields() -> Dict[str, str]:
    """The five calculator inputs as typed by a user."""
    return {
        "prev_close": "100",
        "daily_volatility": "4",
        "today_high": "105",
        "today_low": "95",
        "current_price": "102",
    }
