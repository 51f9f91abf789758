#!/usr/bin/env python3
"""
Basic Usage Example - ATM Client

This script walks through a session against the local in-memory ledger.
It shows how to:
- Build the client from configuration
- Load the session and connect the wallet
- Deposit and withdraw, including a withdrawal the ledger reverts
- Calculate price targets

Run: python examples/basic_usage.py
"""

import asyncio

from atm_client.client import AtmClient, ClientView
from atm_client.config.loader import ConfigLoader
from atm_client.ledger.memory import InMemoryLedger
from atm_client.notifier import LogNotifier
from atm_client.wallet.memory import StaticWalletProvider

DEMO_ACCOUNT = "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266"


def print_view(view: ClientView) -> None:
    """Print what the user would see."""
    print(f"📊 Status: {view.status.value}")
    if view.prompt:
        print(f"  {view.prompt}")
    print(f"  Account: {view.account or 'N/A'}")
    print(f"  Balance: {view.balance if view.balance is not None else 'N/A'}")
    if view.targets:
        print(f"  Targets: {', '.join(view.targets)}")
    print("  Deposits:")
    for line in view.deposits:
        print(f"    {line}")
    print("  Withdrawals:")
    for line in view.withdrawals:
        print(f"    {line}")
    print()


async def run_demo() -> None:
    config = ConfigLoader.create().load({"logging": {"level": "WARNING"}})

    wallet = StaticWalletProvider([DEMO_ACCOUNT])
    ledger = InMemoryLedger({DEMO_ACCOUNT: 2})
    notifier = LogNotifier()

    client = AtmClient.create(
        provider_lookup=lambda: wallet,
        contract_factory=ledger.bind,
        config=config,
        notifier=notifier,
        configure_logs=True,
    )

    print("1. Loading the session...")
    print_view(await client.load())

    print("2. Connecting the wallet...")
    await client.connect()
    print_view(client.view())

    print("3. Depositing once and withdrawing three times...")
    await client.deposit()
    for _ in range(3):
        await client.withdraw()
    print_view(client.view())

    print("4. Calculating targets...")
    client.calculate_targets({
        "prev_close": "100",
        "daily_volatility": "4",
        "today_high": "105",
        "today_low": "95",
        "current_price": "102",
    })
    print_view(client.view())

    print(f"Alerts shown: {notifier.alerts}")


def main():
    """Main demonstration function."""
    print("🚀 ATM Client - Basic Usage Demo")
    print("=" * 60)
    asyncio.run(run_demo())


if __name__ == "__main__":
    main()
