"""Unit tests for analytics.goals."""

from datetime import datetime, timedelta, timezone

import pytest
from trade_journal.analytics.goals import calculate_goal_progress
from trade_journal.core.types import GoalSetting, ProfitGoals, Trade, TradeSide

NOW = datetime(2024, 5, 20, 12, 0, tzinfo=timezone.utc)
GOALS = ProfitGoals(daily=GoalSetting(1.0), weekly=GoalSetting(5.0), monthly=GoalSetting(10.0, active=False))


def _closed(pnl, exit_at, tid="t"):
    t = Trade.open(tid, "X", TradeSide.LONG, 1000.0, 1000.0, exit_at - timedelta(hours=1))
    return t.close(1000.0 + pnl, exit_at)


def test_daily_weekly_monthly_windows():
    trades = [
        _closed(50.0, NOW - timedelta(hours=2), "today"),
        _closed(30.0, NOW - timedelta(days=3), "this-week"),
        _closed(20.0, NOW - timedelta(days=20), "this-month"),
        _closed(999.0, NOW - timedelta(days=40), "old"),
    ]
    r = calculate_goal_progress(trades, GOALS, 10000.0, "UTC", NOW)
    assert r.daily.pnl == pytest.approx(50.0)
    assert r.daily.target == pytest.approx(100.0)
    assert r.daily.progress == pytest.approx(50.0)
    assert r.weekly.pnl == pytest.approx(80.0)
    assert r.weekly.target == pytest.approx(500.0)
    assert r.monthly.pnl == pytest.approx(100.0)
    assert r.monthly.progress == pytest.approx(10.0)


def test_active_flag_passes_through():
    r = calculate_goal_progress([], GOALS, 10000.0, "UTC", NOW)
    assert r.daily.active is True
    assert r.monthly.active is False


def test_negative_progress_is_clamped():
    trades = [_closed(-20.0, NOW - timedelta(hours=1))]
    r = calculate_goal_progress(trades, ProfitGoals(daily=GoalSetting(1.0)), 10000.0, "UTC", NOW)
    assert r.daily.target == pytest.approx(100.0)
    assert r.daily.pnl == pytest.approx(-20.0)
    assert r.daily.progress == 0.0


def test_zero_balance_gives_zero_progress():
    trades = [_closed(20.0, NOW - timedelta(hours=1))]
    r = calculate_goal_progress(trades, GOALS, 0.0, "UTC", NOW)
    assert r.daily.target == 0.0
    assert r.daily.progress == 0.0


def test_open_trades_ignored():
    open_trade = Trade.open("o", "X", TradeSide.LONG, 10.0, 10.0, NOW - timedelta(hours=1))
    r = calculate_goal_progress([open_trade], GOALS, 1000.0, "UTC", NOW)
    assert r.weekly.pnl == 0.0


def test_daily_uses_local_calendar_day():
    # 20:00 UTC May 19 is already May 20 in Tokyo; 12:00 UTC May 20 is May 20 21:00 in Tokyo
    trades = [_closed(40.0, datetime(2024, 5, 19, 20, 0, tzinfo=timezone.utc))]
    assert calculate_goal_progress(trades, GOALS, 10000.0, "Asia/Tokyo", NOW).daily.pnl == pytest.approx(40.0)
    assert calculate_goal_progress(trades, GOALS, 10000.0, "UTC", NOW).daily.pnl == 0.0
