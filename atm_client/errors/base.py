"""
Base error classification for the ATM client.

Every error raised by the client carries a short user-facing message that
the controller shows as a blocking alert, plus structured context for logs.
"""

from typing import Any, Dict, Optional


class ClientError(Exception):
    """Base class for all client errors surfaced to the user."""

    user_message = "The operation could not be completed"

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None,
                 user_message: Optional[str] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False
        if user_message is not None:
            self.user_message = user_message


class ConfigurationError(ClientError):
    """Invalid configuration or unreadable contract artifact."""

    user_message = "The client is misconfigured"

    def __init__(self, message: str, errors: Optional[list] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.errors = errors or []
