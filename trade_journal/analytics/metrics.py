"""
Performance metrics over closed trades: win rate, profit factor, expectancy,
Sharpe, max drawdown, streaks.
Trades are taken in the order given (callers sort by entry date); drawdown and
streaks depend on that order.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterable, List

import numpy as np

from trade_journal.core.types import Trade

# Profit factor reported when there are wins but no losses.
PROFIT_FACTOR_CAP = 999.0


@dataclass(frozen=True)
class Streaks:
    max_win: int = 0
    max_loss: int = 0


@dataclass(frozen=True)
class TradeStats:
    """Aggregate journal statistics. Currency values are in base currency."""
    total_trades: int = 0
    winning_trades: int = 0
    losing_trades: int = 0
    win_rate: float = 0.0
    total_win_pnl: float = 0.0
    total_loss_pnl: float = 0.0
    profit_factor: float = 0.0
    net_pnl: float = 0.0
    expectancy: float = 0.0
    avg_win: float = 0.0
    avg_loss: float = 0.0
    avg_rr: float = 0.0
    sharpe_ratio: float = 0.0
    max_dd: float = 0.0
    streaks: Streaks = field(default_factory=Streaks)
    highest_win: float = 0.0
    highest_loss: float = 0.0


def closed_trades_sorted(trades: Iterable[Trade]) -> List[Trade]:
    """Closed trades in ascending entry-date order."""
    return sorted((t for t in trades if t.is_closed), key=lambda t: t.entry_date)


def trade_pnls(trades: Iterable[Trade]) -> List[float]:
    return [t.pnl or 0.0 for t in trades]


def win_rate(pnls: List[float]) -> float:
    """Percent of trades with positive PnL. Zero PnL is not a win."""
    if not pnls:
        return 0.0
    return sum(1 for p in pnls if p > 0) / len(pnls) * 100


def profit_factor(pnls: List[float]) -> float:
    """Gross profit / gross loss. PROFIT_FACTOR_CAP if no losses, 0 if nothing won."""
    wins = sum(p for p in pnls if p > 0)
    losses = abs(sum(p for p in pnls if p <= 0))
    if losses > 0:
        return wins / losses
    return PROFIT_FACTOR_CAP if wins > 0 else 0.0


def expectancy(pnls: List[float]) -> float:
    """Average PnL per trade."""
    if not pnls:
        return 0.0
    return sum(pnls) / len(pnls)


def sharpe_ratio(pnls: List[float]) -> float:
    """Per-trade Sharpe: mean / population std. Not annualized."""
    if not pnls:
        return 0.0
    arr = np.asarray(pnls, dtype=float)
    std = arr.std()  # ddof=0
    if std <= 1e-12:
        return 0.0
    return float(arr.mean() / std)


def max_drawdown(pnls: List[float]) -> float:
    """Largest drop from the running P&L peak, in currency. Peak starts at 0."""
    if not pnls:
        return 0.0
    balance = np.cumsum(np.asarray(pnls, dtype=float))
    peak = np.maximum.accumulate(np.maximum(balance, 0.0))
    return float(np.max(peak - balance))


def calculate_streaks(pnls: List[float]) -> Streaks:
    """Longest consecutive win run (pnl > 0) and loss run (pnl <= 0)."""
    current_win = current_loss = max_win = max_loss = 0
    for p in pnls:
        if p > 0:
            current_win += 1
            current_loss = 0
            max_win = max(max_win, current_win)
        else:
            current_loss += 1
            current_win = 0
            max_loss = max(max_loss, current_loss)
    return Streaks(max_win=max_win, max_loss=max_loss)


def compute_stats(trades: List[Trade]) -> TradeStats:
    """
    Compute the full statistics bundle from closed trades.
    Uses each trade's stored pnl; open trades should be filtered out by the caller.
    """
    total_trades = len(trades)
    if total_trades == 0:
        return TradeStats()
    pnls = trade_pnls(trades)
    wins = [p for p in pnls if p > 0]
    losses = [p for p in pnls if p <= 0]
    total_win_pnl = sum(wins)
    total_loss_pnl = abs(sum(losses))
    net_pnl = total_win_pnl - total_loss_pnl
    return TradeStats(
        total_trades=total_trades,
        winning_trades=len(wins),
        losing_trades=len(losses),
        win_rate=win_rate(pnls),
        total_win_pnl=total_win_pnl,
        total_loss_pnl=total_loss_pnl,
        profit_factor=profit_factor(pnls),
        net_pnl=net_pnl,
        expectancy=net_pnl / total_trades,
        avg_win=total_win_pnl / len(wins) if wins else 0.0,
        avg_loss=total_loss_pnl / len(losses) if losses else 0.0,
        avg_rr=sum((t.risk_reward or 0.0) for t in trades) / total_trades,
        sharpe_ratio=sharpe_ratio(pnls),
        max_dd=max_drawdown(pnls),
        streaks=calculate_streaks(pnls),
        highest_win=max(wins) if wins else 0.0,
        highest_loss=min(losses) if losses else 0.0,
    )
