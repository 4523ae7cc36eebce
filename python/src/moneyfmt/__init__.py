"""moneyfmt — format monetary values by currency display rules."""
from .currencies import CURRENCIES, Currency, get_currency, supported_currencies
from .errors import ConfigurationError, InvalidAmountError, MoneyError
from .format import (
    add_symbol,
    format_amount,
    format_money,
    separate_thousands,
    split_value,
)
from .types import FormatOptions, resolve_options

__all__ = [
    "format_money",
    "format_amount",
    "FormatOptions",
    "resolve_options",
    "Currency",
    "CURRENCIES",
    "get_currency",
    "supported_currencies",
    "MoneyError",
    "ConfigurationError",
    "InvalidAmountError",
    "split_value",
    "separate_thousands",
    "add_symbol",
]
