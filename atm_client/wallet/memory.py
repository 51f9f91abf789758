"""
Local development wallet provider.

Serves a fixed account list and approves or declines account requests
according to a switch. Counts interactive requests so callers can check
that nothing prompted the user.
"""

from typing import Optional

from ..errors import SubmissionRejected
from .provider import WalletProvider


class StaticWalletProvider(WalletProvider):
    """Wallet provider backed by a fixed list of accounts."""

    def __init__(self, accounts: list[str], authorized: bool = False,
                 approve: bool = True):
        self.accounts = list(accounts)
        self.authorized = authorized
        self.approve = approve
        self.interactive_requests = 0

    async def request_accounts(self) -> list[str]:
        self.interactive_requests += 1

        if not self.approve:
            raise SubmissionRejected(
                "User rejected the request",
                method="eth_requestAccounts",
                code=4001
            )

        self.authorized = True
        return list(self.accounts)

    async def get_accounts(self) -> list[str]:
        return list(self.accounts) if self.authorized else []

    @property
    def primary_account(self) -> Optional[str]:
        return self.accounts[0] if self.accounts else None
