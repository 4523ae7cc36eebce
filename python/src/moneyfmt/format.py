"""Currency formatting.

format_money() is the single implementation of the display rules; the helpers
below are its steps and are exported for callers that compose their own
output.

Usage::

    format_money(10)                                    # "$10.00"
    format_money(10, currency="eur")                    # "€10.00"
    format_money(10, with_cents=False)                  # "$10"
    format_money(10, with_currency=True)                # "$10.00 USD"
    format_money(10, with_symbol=False)                 # "10.00"
    format_money(10, with_symbol_space=True)            # "$ 10.00"
    format_money(1000)                                  # "$1,000.00"
    format_money(1000, with_thousands_separator=False)  # "$1000.00"
"""
from __future__ import annotations

import math
import numbers
from collections.abc import Mapping
from decimal import Decimal
from typing import Any

from .currencies import Currency, get_currency
from .errors import InvalidAmountError
from .types import FormatOptions, resolve_options


def format_money(
    value: float,
    options: FormatOptions | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> str:
    """Format a monetary value according to currency rules and options.

    Options come from ``options`` (a FormatOptions or a plain mapping) and
    keyword overrides, on top of the FormatOptions defaults.

    Rules:
    1. Split the value into integer and two fractional digits
    2. Group the integer digits with the currency's thousands separator
    3. Append decimal mark and cents, unless the currency has no subunit
    4. Place the symbol before or after the amount (currency-driven)
    5. Append the upper-case ISO code when with_currency is set
    Negative amounts get a leading minus in front of the symbol: "-$1,000.00".

    Raises:
        ConfigurationError: invalid options or unsupported currency.
        InvalidAmountError: value is not a finite real number.
    """
    opts = resolve_options(options, **overrides)
    currency = get_currency(opts.currency)

    integer, fractional = split_value(_to_float(value))
    negative = integer.startswith("-")
    if negative:
        integer = integer[1:]
    shown_digits = integer

    if opts.with_thousands_separator:
        result = separate_thousands(integer, currency.thousands_separator)
    else:
        result = integer

    if opts.with_cents and currency.subunit is not None:
        result = f"{result}{currency.decimal_mark}{fractional}"
        shown_digits += fractional

    if opts.with_symbol:
        result = add_symbol(result, currency, opts)

    # No sign on an amount that displays as zero ("-0.4" in JPY is "¥0")
    if negative and shown_digits.strip("0"):
        result = f"-{result}"

    if opts.with_currency:
        result = f"{result} {currency.iso_code.upper()}"

    return result


def format_amount(amount_cents: int, currency: str, **overrides: Any) -> str:
    """Format an amount in minor units (cents) as a currency string.

    The amount is divided by the currency's subunit_to_unit (100 for most
    currencies, 1 for zero-decimal ones like JPY) and passed to
    format_money() with the remaining options.
    """
    if isinstance(amount_cents, bool) or not isinstance(amount_cents, int):
        raise InvalidAmountError(amount_cents)
    unit = get_currency(currency).subunit_to_unit
    return format_money(amount_cents / unit, currency=currency, **overrides)


def split_value(value: float) -> tuple[str, str]:
    """Split a value into its integer digits and exactly two fractional digits.

    The integer part is truncated toward zero. A fraction that rounds up to a
    whole unit (0.999) carries into the integer part. Negative values keep a
    leading "-" unless both parts are zero; format_money() makes the final
    call on the sign from the digits it actually shows.
    """
    fraction, integral = math.modf(value)

    fractional = f"{abs(fraction):.2f}"
    if fractional == "1.00":
        integral += math.copysign(1.0, value)
        fractional = "0.00"

    integer = f"{abs(integral):.0f}"
    if value < 0 and (integer != "0" or fractional != "0.00"):
        integer = f"-{integer}"

    return integer, fractional[2:]


def separate_thousands(value: str, separator: str) -> str:
    """Insert ``separator`` every three digits from the right.

    "1234567" -> "1,234,567". A leading "-" is kept out of the grouping.
    """
    sign = ""
    if value.startswith("-"):
        sign, value = "-", value[1:]

    head = len(value) % 3
    groups = [value[:head]] if head else []
    groups.extend(value[i:i + 3] for i in range(head, len(value), 3))

    return sign + separator.join(groups)


def add_symbol(result: str, currency: Currency, options: FormatOptions) -> str:
    """Attach the currency symbol on the side given by currency.symbol_first."""
    space = " " if options.with_symbol_space else ""

    if currency.symbol_first:
        return f"{currency.symbol}{space}{result}"
    return f"{result}{space}{currency.symbol}"


def _to_float(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (numbers.Real, Decimal)):
        raise InvalidAmountError(value)
    try:
        number = float(value)
    except (ValueError, OverflowError) as exc:
        raise InvalidAmountError(value) from exc
    if not math.isfinite(number):
        raise InvalidAmountError(value)
    return number
