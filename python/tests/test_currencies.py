"""Tests for the currency table."""
from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from moneyfmt import CURRENCIES, ConfigurationError, Currency, get_currency, supported_currencies


class TestCurrencyTable:
    def test_usd(self):
        usd = get_currency("usd")
        assert usd == Currency("USD", "$", "Cent", True, ",", ".")
        assert usd.subunit_to_unit == 100

    def test_eur_uses_dot_decimal(self):
        eur = get_currency("eur")
        assert eur.symbol == "€"
        assert eur.decimal_mark == "."
        assert eur.thousands_separator == ","

    def test_lookup_case_insensitive(self):
        assert get_currency("JPY") is get_currency("jpy")

    def test_unknown_code(self):
        with pytest.raises(ConfigurationError) as exc_info:
            get_currency("xxx")
        assert exc_info.value.code == "UNKNOWN_CURRENCY"

    def test_keys_are_lower_case_iso_codes(self):
        for code, currency in CURRENCIES.items():
            assert code == currency.iso_code.lower()
            assert len(currency.iso_code) == 3

    def test_zero_decimal_currencies_have_unit_subunit(self):
        for currency in CURRENCIES.values():
            if currency.subunit is None:
                assert currency.subunit_to_unit == 1
            else:
                assert currency.subunit_to_unit == 100

    def test_supported_currencies_sorted(self):
        codes = supported_currencies()
        assert codes == sorted(codes)
        assert "usd" in codes
        assert len(codes) == len(CURRENCIES)


class TestImmutability:
    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            CURRENCIES["xxx"] = get_currency("usd")

    def test_record_is_frozen(self):
        with pytest.raises(FrozenInstanceError):
            get_currency("usd").symbol = "US$"
