"""
Wallet provider module.

Provider interface, availability probe and the bundled JSON-RPC and
local development providers.
"""
from .probe import WalletAvailability, WalletProbe
from .provider import Signer, WalletProvider

__all__ = ["Signer", "WalletAvailability", "WalletProbe", "WalletProvider"]
