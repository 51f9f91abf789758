"""
Error classification tests for the ATM client.

Covers the exception hierarchy, the user-facing alert messages and the
guarantee that failed actions leave the session untouched.
"""

import asyncio
import pytest

from atm_client.errors import (
    ClientError,
    ConfigurationError,
    ContractNotBound,
    InputValidationError,
    InvalidNumber,
    LedgerError,
    MissingField,
    OperationInFlight,
    SubmissionRejected,
    TransactionReverted,
    WalletError,
    WalletMissing,
    WalletProviderError,
)


class TestErrorClassification:
    """Test error classification system."""

    def test_wallet_error_hierarchy(self):
        for error in (WalletMissing("x"), SubmissionRejected("x"), WalletProviderError("x")):
            assert isinstance(error, WalletError)
            assert isinstance(error, ClientError)
            assert error.recoverable is False

    def test_ledger_error_hierarchy(self):
        reverted = TransactionReverted("reverted", operation="withdraw", tx_hash="0x1")
        assert isinstance(reverted, LedgerError)
        assert reverted.operation == "withdraw"
        assert reverted.tx_hash == "0x1"

        in_flight = OperationInFlight("busy", pending="deposit", attempted="withdraw")
        assert in_flight.pending == "deposit"
        assert isinstance(ContractNotBound("x"), LedgerError)

    def test_input_errors_are_recoverable(self):
        """The user can fix the input and retry by hand."""
        missing = MissingField("missing", fields=["prev_close"])
        invalid = InvalidNumber("bad", field="today_low", raw_value="x")

        assert isinstance(missing, InputValidationError)
        assert missing.recoverable is True
        assert missing.fields == ["prev_close"]
        assert invalid.recoverable is True
        assert invalid.field == "today_low"

    def test_context_defaults_to_empty(self):
        assert ClientError("base").context == {}
        assert ClientError("base", context={"k": 1}).context == {"k": 1}

    def test_configuration_error_keeps_errors(self):
        error = ConfigurationError("bad config", errors=["a", "b"])

        assert error.errors == ["a", "b"]

    @pytest.mark.parametrize("error, message", [
        (WalletMissing("x"), "MetaMask wallet is required to connect"),
        (MissingField("x"), "Please fill in all the fields"),
        (InvalidNumber("x"), "Please enter valid numbers for all fields"),
        (TransactionReverted("x"), "The transaction was reverted by the ledger"),
    ])
    def test_user_messages(self, error, message):
        assert error.user_message == message

    def test_user_message_override(self):
        error = SubmissionRejected("x", user_message="Signature declined")

        assert error.user_message == "Signature declined"
        assert SubmissionRejected("y").user_message == "The request was rejected in the wallet"


class TestSessionUnchangedOnFailure:
    """Failures never move the session into an intermediate state."""

    def test_failed_withdraw_keeps_session(self, session_manager, ledger_client, ledger):
        session_manager.probe_wallet()
        asyncio.run(session_manager.connect())
        asyncio.run(ledger_client.get_balance())
        before = session_manager.session

        ledger.reject_signatures = True
        with pytest.raises(SubmissionRejected):
            asyncio.run(ledger_client.withdraw())

        assert session_manager.session == before

    def test_failed_connect_keeps_session(self, session_manager, wallet):
        session_manager.probe_wallet()
        wallet.approve = False
        before = session_manager.session

        with pytest.raises(SubmissionRejected):
            asyncio.run(session_manager.connect())

        assert session_manager.session == before
