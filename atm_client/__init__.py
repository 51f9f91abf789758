"""
ATM Client - Wallet session and ledger client

A client for a deployed ledger contract. Connects a wallet, deposits and
withdraws a single fungible unit, tracks the confirmed transaction history
for the session and computes volatility-based price targets.
"""

__version__ = "0.1.0"
__author__ = "ATM Client Team"
