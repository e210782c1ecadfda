"""
Display-currency helpers for product prices.

Catalog prices are stored in USD. Rates are the fixed fallback table the
storefront uses when live exchange rates are unavailable.
"""

# Python Packages
from decimal import Decimal, ROUND_HALF_UP


DEFAULT_CURRENCY = "USD"

EXCHANGE_RATES = {
    "USD": Decimal("1"),
    "EUR": Decimal("0.92"),
    "GBP": Decimal("0.79"),
    "AUD": Decimal("1.51"),
    "CAD": Decimal("1.36"),
    "JPY": Decimal("154.35"),
}

CURRENCY_SYMBOLS = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "AUD": "A$",
    "CAD": "C$",
    "JPY": "¥",
}

# Currencies displayed without minor units.
ZERO_DECIMAL_CURRENCIES = frozenset({"JPY"})

_CENTS = Decimal("0.01")
_UNITS = Decimal("1")


def is_supported(currency: str) -> bool:
    return (currency or "").upper() in EXCHANGE_RATES


def get_exchange_rate(currency: str) -> Decimal:
    """USD → *currency* rate; unknown currencies use 1."""
    return EXCHANGE_RATES.get((currency or "").upper(), _UNITS)


def convert(amount_usd, currency: str = DEFAULT_CURRENCY):
    """
    Convert a USD amount into *currency*.

    Returns an int for zero-decimal currencies (JPY) and a float rounded
    half-up to two decimals otherwise. Converting to USD returns the amount
    unchanged.
    """
    code = (currency or DEFAULT_CURRENCY).upper()
    if code == DEFAULT_CURRENCY:
        return amount_usd

    converted = Decimal(str(amount_usd)) * get_exchange_rate(code)
    if code in ZERO_DECIMAL_CURRENCIES:
        return int(converted.quantize(_UNITS, rounding = ROUND_HALF_UP))
    return float(converted.quantize(_CENTS, rounding = ROUND_HALF_UP))


def format_price(amount, currency: str = DEFAULT_CURRENCY) -> str:
    """Format an already converted amount with the currency symbol (default "$")."""
    code = (currency or DEFAULT_CURRENCY).upper()
    symbol = CURRENCY_SYMBOLS.get(code, "$")

    if code in ZERO_DECIMAL_CURRENCIES:
        rounded = int(Decimal(str(amount)).quantize(_UNITS, rounding = ROUND_HALF_UP))
        return f"{symbol}{rounded:,}"
    return f"{symbol}{float(amount):.2f}"


def display_price(amount_usd, currency: str = DEFAULT_CURRENCY) -> str:
    """Convert then format."""
    return format_price(convert(amount_usd, currency), currency)
