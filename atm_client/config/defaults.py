"""Default configuration parameters for the ATM client."""

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class ContractParams:
    """Deployed ledger contract binding."""
    address: str = "0x5FbDB2315678afecb367f032d93F642f64180aa3"
    artifact_path: Optional[str] = None               # Compiled artifact holding the ABI


@dataclass(frozen=True)
class LedgerParams:
    """Deposit/withdraw parameters."""
    unit_amount: int = 1                             # Units moved per action
    unit_label: str = "ETH"                          # Label used in history lines


@dataclass(frozen=True)
class WalletParams:
    """Wallet provider parameters."""
    rpc_url: Optional[str] = None                    # JSON-RPC endpoint, if any
    request_timeout: float = 30.0


@dataclass(frozen=True)
class HistoryParams:
    """History timestamp rendering."""
    timestamp_format: str = "%m/%d/%Y, %I:%M:%S %p"


@dataclass(frozen=True)
class TargetParams:
    """Target calculator parameters."""
    multipliers: tuple = ("2", "1.5", "1", "0.5")    # Volatility multipliers, in output order
    decimals: int = 2


@dataclass(frozen=True)
class LoggingParams:
    """Logging parameters."""
    level: str = "INFO"
    format_json: bool = False


@dataclass(frozen=True)
class ClientConfig:
    """Complete client configuration."""
    contract: ContractParams = field(default_factory=ContractParams)
    ledger: LedgerParams = field(default_factory=LedgerParams)
    wallet: WalletParams = field(default_factory=WalletParams)
    history: HistoryParams = field(default_factory=HistoryParams)
    targets: TargetParams = field(default_factory=TargetParams)
    logging: LoggingParams = field(default_factory=LoggingParams)


def get_default_config() -> ClientConfig:
    """Get the default configuration instance."""
    return ClientConfig(
        contract=ContractParams(),
        ledger=LedgerParams(),
        wallet=WalletParams(),
        history=HistoryParams(),
        targets=TargetParams(),
        logging=LoggingParams(),
    )
