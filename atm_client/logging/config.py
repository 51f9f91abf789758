"""
Centralized logging configuration for the ATM client.

This module provides standardized logging configuration using structlog
for all components. Session transitions and ledger operations are logged
through the helpers below so that every event carries the same keys.
"""
import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None
) -> None:
    """
    Configure structlog for the entire application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        include_caller: Include caller information (filename, line number)
        extra_processors: Additional structlog processors to include
    """
    log_level = getattr(logging, level.upper())

    logging.basicConfig(
        level=log_level,
        stream=sys.stdout,
        format="%(message)s"  # structlog will handle formatting
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                        structlog.processors.CallsiteParameter.LINENO]
        ))

    if extra_processors:
        processors.extend(extra_processors)

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_session_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound to the wallet session subsystem.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger for session transitions
    """
    return get_logger(name).bind(
        subsystem="session",
        audit_trail=True
    )


def get_ledger_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound to the ledger subsystem.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger for ledger calls
    """
    return get_logger(name).bind(
        subsystem="ledger",
        audit_trail=True
    )


def log_session_transition(
    logger: FilteringBoundLogger,
    from_state: str,
    to_state: str,
    trigger: str,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a session state transition with standardized format.

    Args:
        logger: Structlog logger instance
        from_state: Current state
        to_state: Target state
        trigger: What triggered the transition
        context: Additional context data
    """
    bound_logger = logger.bind(
        from_state=from_state,
        to_state=to_state,
        trigger=trigger,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.info("Session transition")


def log_ledger_operation(
    logger: FilteringBoundLogger,
    operation: str,
    outcome: str,
    amount: Optional[int] = None,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a ledger operation outcome with standardized format.

    Successful outcomes are logged at info level, everything else as a warning.

    Args:
        logger: Structlog logger instance
        operation: Operation name (deposit, withdraw, balance)
        outcome: submitted, confirmed, rejected, reverted, ...
        amount: Unit amount involved, if any
        context: Additional context data
    """
    bound_logger = logger.bind(
        operation=operation,
        outcome=outcome,
        amount=amount,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    if outcome in ("submitted", "confirmed", "read"):
        bound_logger.info("Ledger operation")
    else:
        bound_logger.warning("Ledger operation")
