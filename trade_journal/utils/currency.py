"""Fixed-rate currency lookup. Journal values are stored in USD."""

from __future__ import annotations

CURRENCY_SYMBOLS = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "JPY": "¥",
    "AUD": "A$",
    "CAD": "C$",
    "INR": "₹",
}

# Units of currency per 1 USD.
CURRENCY_RATES = {
    "USD": 1.0,
    "EUR": 0.92,
    "GBP": 0.79,
    "JPY": 150.0,
    "AUD": 1.52,
    "CAD": 1.36,
    "INR": 83.5,
}


class CurrencyFormatter:
    """Converts USD amounts and renders them with the currency symbol. Unknown codes act as USD."""

    __slots__ = ("currency", "symbol", "rate")

    def __init__(self, currency: str = "USD"):
        self.currency = (currency or "USD").upper()
        self.symbol = CURRENCY_SYMBOLS.get(self.currency, "$")
        self.rate = CURRENCY_RATES.get(self.currency, 1.0)

    def convert(self, usd_value: float) -> float:
        return usd_value * self.rate

    def format(self, usd_value: float) -> str:
        return f"{self.symbol}{self.convert(usd_value):,.2f}"

    def format_compact(self, usd_value: float) -> str:
        converted = self.convert(usd_value)
        if abs(converted) >= 1_000_000:
            return f"{self.symbol}{converted / 1_000_000:.2f}M"
        if abs(converted) >= 1_000:
            return f"{self.symbol}{converted / 1_000:.2f}K"
        return f"{self.symbol}{converted:.2f}"
