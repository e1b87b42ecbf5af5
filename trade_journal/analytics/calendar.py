"""
Calendar views: per-day P&L for a month and Mon..Sun aggregates.
Days are local calendar days in the journal timezone.
"""

from __future__ import annotations
import calendar as _calendar
from dataclasses import dataclass
from datetime import date
from typing import Iterable, List, Optional

import pandas as pd

from trade_journal.core.types import Trade
from trade_journal.utils.dates import local_date, resolve_timezone

WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


@dataclass(frozen=True)
class CalendarDay:
    day: date
    pnl: float = 0.0
    trade_count: int = 0
    wins: int = 0

    @property
    def outcome(self) -> str:
        if self.trade_count == 0:
            return "none"
        if self.pnl > 0:
            return "profit"
        if self.pnl == 0:
            return "breakeven"
        return "loss"


def _closed_frame(trades: Iterable[Trade], timezone: Optional[str]) -> pd.DataFrame:
    """One row per closed trade: local day and pnl. Exit date, or entry date if missing."""
    tz = resolve_timezone(timezone)
    rows = [
        {"day": local_date(t.exit_date or t.entry_date, tz), "pnl": t.pnl or 0.0}
        for t in trades
        if t.is_closed
    ]
    return pd.DataFrame(rows, columns=["day", "pnl"])


def monthly_calendar(
    trades: Iterable[Trade],
    year: int,
    month: int,
    timezone: Optional[str] = "UTC",
) -> List[CalendarDay]:
    """One CalendarDay per day of the month, empty days included."""
    df = _closed_frame(trades, timezone)
    days_in_month = _calendar.monthrange(year, month)[1]
    month_days = [date(year, month, d) for d in range(1, days_in_month + 1)]
    if df.empty:
        return [CalendarDay(day=d) for d in month_days]
    df["win"] = df["pnl"] > 0
    agg = df.groupby("day").agg(pnl=("pnl", "sum"), trade_count=("pnl", "size"), wins=("win", "sum"))
    out = []
    for d in month_days:
        if d in agg.index:
            row = agg.loc[d]
            out.append(CalendarDay(day=d, pnl=float(row["pnl"]), trade_count=int(row["trade_count"]), wins=int(row["wins"])))
        else:
            out.append(CalendarDay(day=d))
    return out


def weekday_pnl(trades: Iterable[Trade], timezone: Optional[str] = "UTC") -> List[float]:
    """Closed P&L by exit weekday, Monday first."""
    tz = resolve_timezone(timezone)
    totals = [0.0] * 7
    for t in trades:
        if t.is_closed and t.exit_date is not None:
            totals[local_date(t.exit_date, tz).weekday()] += t.pnl or 0.0
    return totals


def weekday_activity(trades: Iterable[Trade], timezone: Optional[str] = "UTC") -> List[int]:
    """Trade count by entry weekday, Monday first. Open trades count."""
    tz = resolve_timezone(timezone)
    counts = [0] * 7
    for t in trades:
        counts[local_date(t.entry_date, tz).weekday()] += 1
    return counts
