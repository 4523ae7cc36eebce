"""Error classes for moneyfmt."""
from __future__ import annotations


class MoneyError(Exception):
    """Base error for moneyfmt operations."""

    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code


class ConfigurationError(MoneyError, ValueError):
    """Raised when formatting options or the currency code cannot be used."""


class InvalidAmountError(MoneyError, ValueError):
    """Raised when the value to format is not a finite real number."""

    def __init__(self, value: object):
        super().__init__("INVALID_AMOUNT", f"Cannot format amount: {value!r}")
        self.value = value
