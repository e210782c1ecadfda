import pytest

from uniqbot.util import currency


class TestConvert:
    def test_usd_is_identity(self):
        assert currency.convert(19.99, "USD") == 19.99

    def test_two_decimal_currency(self):
        assert currency.convert(10, "EUR") == pytest.approx(9.2)

    def test_zero_decimal_currency_rounds_half_up_to_int(self):
        converted = currency.convert(10, "JPY")
        assert converted == 1544
        assert isinstance(converted, int)

    def test_unknown_currency_uses_rate_one(self):
        assert currency.convert(10, "XYZ") == pytest.approx(10.0)

    def test_lowercase_code(self):
        assert currency.convert(10, "gbp") == pytest.approx(7.9)


class TestFormat:
    def test_jpy_has_thousands_separator_and_no_decimals(self):
        assert currency.display_price(100, "JPY") == "¥15,435"

    def test_gbp(self):
        assert currency.display_price(25, "GBP") == "£19.75"

    def test_default_symbol_for_unknown_currency(self):
        assert currency.format_price(10, "XYZ") == "$10.00"

    def test_is_supported(self):
        assert currency.is_supported("eur")
        assert not currency.is_supported("XYZ")
        assert not currency.is_supported(None)
