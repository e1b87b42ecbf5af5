"""
Profit goal progress. Targets are a percent of the current balance.
Daily is the local calendar day; weekly and monthly are rolling 7 / 30 day windows.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Iterable, List, Optional

from trade_journal.core.types import GoalSetting, ProfitGoals, Trade
from trade_journal.utils.dates import local_date, resolve_timezone, to_utc, utc_now

WEEKLY_WINDOW = timedelta(days=7)
MONTHLY_WINDOW = timedelta(days=30)


@dataclass(frozen=True)
class GoalProgress:
    pnl: float = 0.0
    target: float = 0.0
    progress: float = 0.0  # percent of target, never negative
    active: bool = False


@dataclass(frozen=True)
class GoalProgressReport:
    daily: GoalProgress
    weekly: GoalProgress
    monthly: GoalProgress


def _progress(trades: List[Trade], goal: GoalSetting, balance: float) -> GoalProgress:
    pnl = sum((t.pnl or 0.0) for t in trades)
    target = balance * goal.target / 100
    progress = pnl / target * 100 if target > 0 else 0.0
    return GoalProgress(pnl=pnl, target=target, progress=max(0.0, progress), active=goal.active)


def calculate_goal_progress(
    trades: Iterable[Trade],
    goals: ProfitGoals,
    balance: float,
    timezone: Optional[str] = "UTC",
    now: Optional[datetime] = None,
) -> GoalProgressReport:
    """Progress of closed-trade P&L against daily/weekly/monthly targets."""
    tz = resolve_timezone(timezone)
    now = to_utc(now) if now else utc_now()
    today = local_date(now, tz)
    closed = [t for t in trades if t.is_closed and t.exit_date is not None]

    daily = [t for t in closed if local_date(t.exit_date, tz) == today]
    week_start = now - WEEKLY_WINDOW
    weekly = [t for t in closed if to_utc(t.exit_date) >= week_start]
    month_start = now - MONTHLY_WINDOW
    monthly = [t for t in closed if to_utc(t.exit_date) >= month_start]

    return GoalProgressReport(
        daily=_progress(daily, goals.daily, balance),
        weekly=_progress(weekly, goals.weekly, balance),
        monthly=_progress(monthly, goals.monthly, balance),
    )
