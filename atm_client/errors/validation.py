"""
Input validation error classifications for the target calculator.
"""

from typing import Optional

from .base import ClientError


class InputValidationError(ClientError):
    """Base class for rejected user input."""

    user_message = "Please check the entered values"

    def __init__(self, message: str, **kwargs):
        super().__init__(message, **kwargs)
        self.recoverable = True


class MissingField(InputValidationError):
    """One or more mandatory fields are empty."""

    user_message = "Please fill in all the fields"

    def __init__(self, message: str, fields: Optional[list] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.fields = fields or []


class InvalidNumber(InputValidationError):
    """A field does not hold a finite decimal number."""

    user_message = "Please enter valid numbers for all fields"

    def __init__(self, message: str, field: Optional[str] = None,
                 raw_value: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.field = field
        self.raw_value = raw_value
