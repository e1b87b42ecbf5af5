"""Running equity and performance series over ordered closed trades."""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime
from typing import List

from trade_journal.core.types import Trade

# Profit factor plotted while no loss has occurred yet.
CURVE_PROFIT_FACTOR_CAP = 5.0


@dataclass(frozen=True)
class CurvePoint:
    date: datetime
    value: float


@dataclass(frozen=True)
class PerformancePoint:
    date: datetime
    pnl: float
    win_rate: float
    profit_factor: float


def cumulative_pnl(trades: List[Trade]) -> List[CurvePoint]:
    running = 0.0
    points = []
    for t in trades:
        running += t.pnl or 0.0
        points.append(CurvePoint(date=t.exit_date or t.entry_date, value=running))
    return points


def performance_curve(trades: List[Trade]) -> List[PerformancePoint]:
    """Running P&L, win rate and profit factor after each trade."""
    running_pnl = win_pnl = loss_pnl = 0.0
    wins = 0
    points = []
    for i, t in enumerate(trades, start=1):
        pnl = t.pnl or 0.0
        running_pnl += pnl
        if pnl > 0:
            wins += 1
            win_pnl += pnl
        else:
            loss_pnl += abs(pnl)
        if loss_pnl == 0:
            pf = CURVE_PROFIT_FACTOR_CAP if win_pnl > 0 else 0.0
        else:
            pf = win_pnl / loss_pnl
        points.append(PerformancePoint(
            date=t.exit_date or t.entry_date,
            pnl=running_pnl,
            win_rate=wins / i * 100,
            profit_factor=pf,
        ))
    return points
