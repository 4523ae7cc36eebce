"""Static currency metadata.

The table is built once at import and exposed read-only. Keys are lower-case
ISO 4217 codes.
"""
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType

from .errors import ConfigurationError


@dataclass(frozen=True)
class Currency:
    """Display attributes for one currency."""
    iso_code: str
    symbol: str
    subunit: str | None
    symbol_first: bool
    thousands_separator: str
    decimal_mark: str
    subunit_to_unit: int = 100


def _table(*rows: Currency) -> MappingProxyType:
    return MappingProxyType({row.iso_code.lower(): row for row in rows})


CURRENCIES = _table(
    Currency("USD", "$", "Cent", True, ",", "."),
    Currency("EUR", "€", "Cent", True, ",", "."),
    Currency("GBP", "£", "Penny", True, ",", "."),
    Currency("AUD", "$", "Cent", True, ",", "."),
    Currency("CAD", "$", "Cent", True, ",", "."),
    Currency("NZD", "$", "Cent", True, ",", "."),
    Currency("HKD", "$", "Cent", True, ",", "."),
    Currency("SGD", "$", "Cent", True, ",", "."),
    Currency("MXN", "$", "Centavo", True, ",", "."),
    Currency("CHF", "CHF", "Rappen", True, ",", "."),
    Currency("CNY", "¥", "Fen", True, ",", "."),
    Currency("INR", "₹", "Paisa", True, ",", "."),
    Currency("ILS", "₪", "Agora", True, ",", "."),
    Currency("ZAR", "R", "Cent", True, ",", "."),
    Currency("BRL", "R$", "Centavo", True, ".", ","),
    Currency("SEK", "kr", "Öre", False, " ", ","),
    Currency("NOK", "kr", "Øre", False, ".", ","),
    Currency("DKK", "kr.", "Øre", False, ".", ","),
    Currency("PLN", "zł", "Grosz", False, " ", ","),
    Currency("CZK", "Kč", "Haléř", False, " ", ","),
    Currency("HUF", "Ft", "Fillér", False, " ", ","),
    Currency("RUB", "₽", "Kopeck", False, ".", ","),
    Currency("UAH", "₴", "Kopiyka", False, " ", ","),
    # Zero-decimal currencies
    Currency("JPY", "¥", None, True, ",", ".", 1),
    Currency("KRW", "₩", None, True, ",", ".", 1),
    Currency("CLP", "$", None, True, ".", ",", 1),
    Currency("ISK", "kr", None, False, ".", ",", 1),
    Currency("VND", "₫", None, False, ".", ",", 1),
)


def get_currency(code: str) -> Currency:
    """Look up a currency by ISO code (case-insensitive).

    Raises ConfigurationError for codes not in the table.
    """
    currency = CURRENCIES.get(code.lower())
    if currency is None:
        raise ConfigurationError(
            "UNKNOWN_CURRENCY",
            f"Unsupported currency: {code!r}",
        )
    return currency


def supported_currencies() -> list[str]:
    """Return the lower-case codes of every supported currency, sorted."""
    return sorted(CURRENCIES)
