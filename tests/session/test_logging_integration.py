"""Tests for structured logging of session transitions and ledger calls."""

import asyncio
import pytest

from atm_client.errors import SubmissionRejected
from atm_client.ledger.client import LedgerClient
from atm_client.logging.config import (
    configure_logging,
    get_ledger_logger,
    get_session_logger,
    log_ledger_operation,
    log_session_transition,
)


class CapturingLogger:
    """Stand-in for a bound structlog logger that records calls."""

    def __init__(self, records=None, bound=None):
        self.records = records if records is not None else []
        self.bound = bound or {}

    def bind(self, **kwargs):
        return CapturingLogger(self.records, {**self.bound, **kwargs})

    def _log(self, level, message, **kwargs):
        self.records.append({"level": level, "message": message, **self.bound, **kwargs})

    def info(self, message, **kwargs):
        self._log("info", message, **kwargs)

    def warning(self, message, **kwargs):
        self._log("warning", message, **kwargs)

    def debug(self, message, **kwargs):
        self._log("debug", message, **kwargs)


class TestLoggingHelpers:
    """Test the standardized logging helpers."""

    def setup_method(self):
        configure_logging(level="DEBUG", format_json=True)

    def test_session_transition_record(self):
        logger = CapturingLogger()

        log_session_transition(logger, "wallet_detected", "connected", "connect",
                               context={"account": "0xabc"})

        record = logger.records[0]
        assert record["level"] == "info"
        assert record["from_state"] == "wallet_detected"
        assert record["to_state"] == "connected"
        assert record["trigger"] == "connect"
        assert record["context"] == {"account": "0xabc"}

    def test_ledger_operation_levels(self):
        logger = CapturingLogger()

        log_ledger_operation(logger, "deposit", "confirmed", 1)
        log_ledger_operation(logger, "withdraw", "reverted", 1)

        assert [r["level"] for r in logger.records] == ["info", "warning"]
        assert logger.records[1]["operation"] == "withdraw"
        assert logger.records[1]["outcome"] == "reverted"

    def test_subsystem_loggers(self):
        session_logger = get_session_logger("test")
        ledger_logger = get_ledger_logger("test")

        session_logger.info("Session logger works")
        ledger_logger.info("Ledger logger works")


class TestComponentLogging:
    """Test that components log transitions and outcomes."""

    def test_session_manager_logs_transitions(self, session_manager):
        logger = CapturingLogger()
        session_manager.logger = logger

        session_manager.probe_wallet()
        asyncio.run(session_manager.connect())

        transitions = [(r["from_state"], r["to_state"], r["trigger"])
                       for r in logger.records if "trigger" in r]
        assert transitions == [
            ("disconnected", "wallet_detected", "probe_wallet"),
            ("wallet_detected", "connected", "connect"),
        ]

    def test_ledger_client_logs_outcomes(self, session_manager, history, ledger):
        session_manager.probe_wallet()
        asyncio.run(session_manager.connect())
        client = LedgerClient(session_manager, history)
        client.logger = CapturingLogger()

        asyncio.run(client.deposit())
        ledger.reject_signatures = True
        with pytest.raises(SubmissionRejected):
            asyncio.run(client.withdraw())

        outcomes = [(r["operation"], r["outcome"]) for r in client.logger.records if "outcome" in r]
        assert outcomes == [
            ("deposit", "submitted"),
            ("deposit", "confirmed"),
            ("balance", "read"),
            ("withdraw", "rejected"),
        ]

