"""Base classes for wallet providers."""

from abc import ABC, abstractmethod
from dataclasses import dataclass


class WalletProvider(ABC):
    """
    Wallet provider interface.

    A provider manages the user's keys. It hands out account addresses and
    signs transactions for a contract bound to one of them.
    """

    @abstractmethod
    async def request_accounts(self) -> list[str]:
        """
        Ask the user to authorize accounts.

        This is interactive and may suspend until the user answers the
        wallet prompt.

        Raises:
            SubmissionRejected: If the user declines
        """
        pass

    @abstractmethod
    async def get_accounts(self) -> list[str]:
        """Return already-authorized accounts without prompting."""
        pass


@dataclass(frozen=True)
class Signer:
    """An account of a provider used to sign contract calls."""
    provider: WalletProvider
    account: str
