"""
Wallet availability detection.

The probe looks up an injected provider and exposes the accounts that are
already authorized for this client.
"""

from enum import Enum
from typing import Callable, Optional

import structlog

from .provider import WalletProvider

logger = structlog.get_logger(__name__)

ProviderLookup = Callable[[], Optional[WalletProvider]]


class WalletAvailability(str, Enum):
    """Result of a wallet probe."""
    AVAILABLE = "available"
    ABSENT = "absent"


class WalletProbe:
    """Detects a wallet provider through a lookup callable."""

    def __init__(self, lookup: ProviderLookup):
        self._lookup = lookup
        self._provider: Optional[WalletProvider] = None

    @property
    def provider(self) -> Optional[WalletProvider]:
        """The provider found by the last probe, if any."""
        return self._provider

    def probe(self) -> WalletAvailability:
        """Look up the provider and remember it."""
        self._provider = self._lookup()

        if self._provider is None:
            logger.info("No wallet provider detected")
            return WalletAvailability.ABSENT

        logger.info("Wallet provider detected", provider=type(self._provider).__name__)
        return WalletAvailability.AVAILABLE

    async def authorized_accounts(self) -> list[str]:
        """Accounts already authorized for this client, without prompting."""
        if self._provider is None:
            return []
        return list(await self._provider.get_accounts())
