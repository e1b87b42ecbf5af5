"""Unit tests for analytics.calendar."""

from datetime import date, datetime, timedelta, timezone

import pytest
from trade_journal.analytics.calendar import monthly_calendar, weekday_activity, weekday_pnl
from trade_journal.core.types import Trade, TradeSide


def _closed(tid, pnl, exit_at):
    t = Trade.open(tid, "X", TradeSide.LONG, 1000.0, 1000.0, exit_at - timedelta(hours=2))
    return t.close(1000.0 + pnl, exit_at)


def _utc(day, hour=12):
    return datetime(2024, 5, day, hour, tzinfo=timezone.utc)


TRADES = [
    _closed("a", 50.0, _utc(6)),
    _closed("b", -20.0, _utc(6, 15)),
    _closed("c", -5.0, _utc(7)),
    _closed("d", 0.0, _utc(8)),
    Trade.open("open", "X", TradeSide.LONG, 10.0, 10.0, _utc(9)),
]


def test_monthly_calendar():
    days = monthly_calendar(TRADES, 2024, 5)
    assert len(days) == 31
    by_day = {d.day: d for d in days}
    may6 = by_day[date(2024, 5, 6)]
    assert may6.pnl == pytest.approx(30.0)
    assert may6.trade_count == 2
    assert may6.wins == 1
    assert may6.outcome == "profit"
    assert by_day[date(2024, 5, 7)].outcome == "loss"
    assert by_day[date(2024, 5, 8)].outcome == "breakeven"
    assert by_day[date(2024, 5, 9)].outcome == "none"  # open trade only


def test_monthly_calendar_empty_month():
    days = monthly_calendar(TRADES, 2024, 2)
    assert len(days) == 29
    assert all(d.trade_count == 0 for d in days)


def test_weekday_pnl_monday_first():
    totals = weekday_pnl(TRADES)
    # May 6 2024 is a Monday
    assert totals[0] == pytest.approx(30.0)
    assert totals[1] == pytest.approx(-5.0)
    assert sum(totals) == pytest.approx(25.0)


def test_weekday_activity_counts_open_trades():
    counts = weekday_activity(TRADES)
    assert counts[0] == 2
    assert counts[3] == 1  # Thursday May 9
    assert sum(counts) == 5
