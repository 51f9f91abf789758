"""
Wallet session module.

Owns the connection lifecycle DISCONNECTED → WALLET_DETECTED → CONNECTED,
the bound contract handle, the balance and the pending-operation flag.
"""
