"""Timezone-aware day helpers and trade filters (date window, attributes)."""

from __future__ import annotations
import logging
from datetime import date, datetime, timedelta, timezone
from typing import Iterable, List, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from trade_journal.core.types import DateFilter, DateFilterType, Trade, parse_timestamp

logger = logging.getLogger("trade_journal.utils.dates")

DEFAULT_RELATIVE_DAYS = 30


def resolve_timezone(name: Optional[str]) -> ZoneInfo:
    """IANA zone for `name`; falls back to UTC when empty or unknown."""
    if not name:
        return ZoneInfo("UTC")
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning("Unknown timezone %r, using UTC", name)
        return ZoneInfo("UTC")


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def to_utc(ts: datetime) -> datetime:
    return parse_timestamp(ts).astimezone(timezone.utc)


def local_date(ts: datetime, tz: ZoneInfo) -> date:
    """Calendar date of `ts` as seen in `tz`."""
    return parse_timestamp(ts).astimezone(tz).date()


def parse_window(window: str) -> int:
    """Convert a window string (e.g. '7d', '2w') to days."""
    w = window.strip().lower()
    if w.endswith("d") and w[:-1].isdigit():
        return int(w[:-1])
    if w.endswith("w") and w[:-1].isdigit():
        return int(w[:-1]) * 7
    raise ValueError(f"Unsupported window: {window}")


def filter_by_date(
    trades: Iterable[Trade],
    date_filter: Optional[DateFilter],
    now: Optional[datetime] = None,
) -> List[Trade]:
    """
    Keep trades whose entry date falls in the filter window.
    LIFETIME, unknown types and incomplete ABSOLUTE ranges keep everything.
    """
    trades = list(trades)
    if date_filter is None:
        return trades
    kind = getattr(date_filter.type, "value", date_filter.type)
    if kind == DateFilterType.RELATIVE.value:
        try:
            days = int(date_filter.days) if date_filter.days else DEFAULT_RELATIVE_DAYS
        except (TypeError, ValueError):
            logger.warning("Invalid relative window %r, keeping all trades", date_filter.days)
            return trades
        end = to_utc(now) if now else utc_now()
        start = end - timedelta(days=days)
    elif kind == DateFilterType.ABSOLUTE.value and date_filter.start and date_filter.end:
        start, end = to_utc(date_filter.start), to_utc(date_filter.end)
    else:
        if kind != DateFilterType.LIFETIME.value:
            logger.debug("Date filter %r not applied, keeping all trades", kind)
        return trades
    return [t for t in trades if start <= to_utc(t.entry_date) <= end]


def filter_trades(
    trades: Iterable[Trade],
    symbol: Optional[str] = None,
    strategy: Optional[str] = None,
    side: Optional[str] = None,
) -> List[Trade]:
    """Attribute filter. None or 'All' leaves that attribute unconstrained."""

    def wanted(value: Optional[str]) -> bool:
        return bool(value) and value != "All"

    out = []
    for t in trades:
        if wanted(symbol) and t.symbol != symbol:
            continue
        if wanted(strategy) and t.strategy != strategy:
            continue
        if wanted(side) and t.side.value != getattr(side, "value", side):
            continue
        out.append(t)
    return out
