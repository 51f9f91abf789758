"""
Wallet error classifications.

These exceptions cover the wallet provider side of a session: detection,
account approval and transaction signing.
"""

from typing import Optional

from .base import ClientError


class WalletError(ClientError):
    """Base class for wallet provider failures."""

    user_message = "The wallet could not complete the request"


class WalletMissing(WalletError):
    """No wallet provider was detected."""

    user_message = "MetaMask wallet is required to connect"


class SubmissionRejected(WalletError):
    """The user or the wallet declined an account request or a signature."""

    user_message = "The request was rejected in the wallet"

    def __init__(self, message: str, method: Optional[str] = None,
                 code: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.method = method
        self.code = code


class WalletProviderError(WalletError):
    """The provider failed for a reason other than a user decision."""

    def __init__(self, message: str, method: Optional[str] = None,
                 code: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.method = method
        self.code = code
