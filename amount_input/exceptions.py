# PATH: amount_input/exceptions.py
"""
Typed exceptions for amount_input.

Edits never raise: malformed input is a rejection, not an error.
These are only for caller-side contract violations.
"""

from typing import Optional

from amount_input.constants import ErrorCode


class FormatterError(Exception):
    """Base exception for amount_input."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.UNKNOWN,
        details: Optional[dict] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def __str__(self):
        return f"[{self.code.value}] {self.message}"


class ConfigurationError(FormatterError):
    """Invalid formatter configuration (separators, digit counts, presets)."""
    pass


class ValidationError(FormatterError):
    """Invalid value passed to the formatter."""

    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(message, ErrorCode.VALUE_NOT_FINITE, details)
