"""Formatting options and their validation."""
from __future__ import annotations

import os
import sys
from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from typing import Any

from .currencies import get_currency
from .errors import ConfigurationError


_STRICT_ENV = "MONEYFMT_STRICT_OPTIONS"

# Unknown option keys already reported on stderr
_warned_keys: set[str] = set()


@dataclass(frozen=True)
class FormatOptions:
    """Display options for format_money().

    Args:
        currency: Currency code, looked up case-insensitively (default: "usd")
        with_cents: Show the fractional part (default: True)
        with_currency: Append the ISO code, e.g. "$10.00 USD" (default: False)
        with_symbol: Show the currency symbol (default: True)
        with_symbol_space: Put a space between symbol and amount (default: False)
        with_thousands_separator: Group integer digits (default: True)
    """
    currency: str = "usd"
    with_cents: bool = True
    with_currency: bool = False
    with_symbol: bool = True
    with_symbol_space: bool = False
    with_thousands_separator: bool = True


_OPTION_NAMES = tuple(f.name for f in fields(FormatOptions))


def resolve_options(
    options: FormatOptions | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> FormatOptions:
    """Merge caller options over the defaults and validate the result.

    Keyword overrides win over keys in ``options``. Unknown keys are ignored
    with a one-time MONEYFMT_OPTION_WARN line on stderr, or rejected when
    MONEYFMT_STRICT_OPTIONS is set.

    Raises:
        ConfigurationError: wrong value type, unknown currency, or (strict
            mode) unknown option key.
    """
    if options is None:
        base = FormatOptions()
        supplied: dict[str, Any] = {}
    elif isinstance(options, FormatOptions):
        base = options
        supplied = {}
    elif isinstance(options, Mapping):
        base = FormatOptions()
        supplied = dict(options)
    else:
        raise ConfigurationError(
            "INVALID_OPTIONS",
            f"options must be a FormatOptions or a mapping, got {type(options).__name__}",
        )
    supplied.update(overrides)

    known: dict[str, Any] = {}
    for key, value in supplied.items():
        if key in _OPTION_NAMES:
            known[key] = value
        else:
            _unknown_option(key, supplied.get("currency", base.currency))

    resolved = replace(base, **known)
    _validate(resolved)
    return replace(resolved, currency=resolved.currency.lower())


def _validate(options: FormatOptions) -> None:
    for name in _OPTION_NAMES:
        value = getattr(options, name)
        expected = str if name == "currency" else bool
        if type(value) is not expected:
            raise ConfigurationError(
                "INVALID_OPTION_TYPE",
                f"Option {name!r} must be {expected.__name__}, got {type(value).__name__}",
            )
    get_currency(options.currency)


def _strict() -> bool:
    return os.environ.get(_STRICT_ENV, "").lower() in ("true", "1")


def _unknown_option(key: str, currency: Any) -> None:
    if _strict():
        raise ConfigurationError("UNKNOWN_OPTION", f"Unknown option: {key!r}")
    if key in _warned_keys:
        return
    _warned_keys.add(key)
    print(
        f"MONEYFMT_OPTION_WARN key={key} currency={currency} action=ignored",
        file=sys.stderr,
    )
