"""Analytics: trade statistics, breakdowns, goals, calendar and curves."""

from trade_journal.analytics.metrics import (
    PROFIT_FACTOR_CAP,
    Streaks,
    TradeStats,
    calculate_streaks,
    closed_trades_sorted,
    compute_stats,
    expectancy,
    max_drawdown,
    profit_factor,
    sharpe_ratio,
    win_rate,
)
from trade_journal.analytics.breakdown import DIMENSIONS, GroupSummary, group_by
from trade_journal.analytics.goals import GoalProgress, GoalProgressReport, calculate_goal_progress
from trade_journal.analytics.calendar import CalendarDay, monthly_calendar, weekday_activity, weekday_pnl
from trade_journal.analytics.curves import cumulative_pnl, performance_curve

__all__ = [
    "PROFIT_FACTOR_CAP",
    "Streaks",
    "TradeStats",
    "calculate_streaks",
    "closed_trades_sorted",
    "compute_stats",
    "expectancy",
    "max_drawdown",
    "profit_factor",
    "sharpe_ratio",
    "win_rate",
    "DIMENSIONS",
    "GroupSummary",
    "group_by",
    "GoalProgress",
    "GoalProgressReport",
    "calculate_goal_progress",
    "CalendarDay",
    "monthly_calendar",
    "weekday_activity",
    "weekday_pnl",
    "cumulative_pnl",
    "performance_curve",
]
