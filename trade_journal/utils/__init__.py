"""Utils: dates and filters, currency lookup, Telegram."""

from trade_journal.utils.currency import CurrencyFormatter
from trade_journal.utils.dates import filter_by_date, filter_trades, parse_window, resolve_timezone
from trade_journal.utils.telegram import notify_risk_lock, send_telegram

__all__ = [
    "CurrencyFormatter",
    "filter_by_date",
    "filter_trades",
    "parse_window",
    "resolve_timezone",
    "notify_risk_lock",
    "send_telegram",
]
