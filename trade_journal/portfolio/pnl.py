"""
Trade P&L and position sizing.
Quantity = capital * leverage / entry_price, fixed when the trade is opened.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from trade_journal.core.types import FeeSchedule, FeeType, Trade, TradeSide


@dataclass(frozen=True)
class PnLResult:
    pnl: float = 0.0
    pnl_percentage: float = 0.0


def compute_trade_pnl(trade: Trade, exit_price: Optional[float]) -> PnLResult:
    """
    P&L for `trade` if closed at `exit_price`.
    LONG: (exit - entry) * qty. SHORT: (entry - exit) * qty.
    Missing or non-positive prices give zero P&L.
    """
    if not exit_price or exit_price <= 0 or not trade.entry_price or trade.entry_price <= 0:
        return PnLResult()
    qty = trade.quantity or 0.0
    if trade.side == TradeSide.LONG:
        pnl = (exit_price - trade.entry_price) * qty
    else:
        pnl = (trade.entry_price - exit_price) * qty
    pnl_pct = pnl / trade.capital * 100 if trade.capital and trade.capital > 0 else 0.0
    return PnLResult(pnl=pnl, pnl_percentage=pnl_pct)


def compute_unrealized_pnl(trade: Trade, current_price: Optional[float]) -> PnLResult:
    """Open trades are marked at `current_price`; closed trades keep their stored, realized P&L."""
    if trade.is_closed:
        return PnLResult(pnl=trade.pnl or 0.0, pnl_percentage=trade.pnl_percentage or 0.0)
    return compute_trade_pnl(trade, current_price)


def position_size(capital: float, leverage: float = 1.0) -> float:
    return (capital or 0.0) * (leverage or 1.0)


def position_quantity(capital: float, leverage: float, entry_price: float) -> float:
    if not entry_price or entry_price <= 0:
        return 0.0
    return position_size(capital, leverage) / entry_price


def estimate_fees(size: float, fees: Optional[FeeSchedule] = None) -> float:
    """Round-trip taker fees: FIXED charges taker twice, PERCENTAGE charges taker% of size twice."""
    fees = fees or FeeSchedule()
    if fees.type == FeeType.FIXED:
        return fees.taker * 2
    rate = (fees.taker or 0.05) / 100
    return size * rate * 2


def liquidation_price(entry_price: float, leverage: float, side: TradeSide) -> float:
    """Approximate liquidation price with a 0.5% maintenance buffer."""
    if not entry_price or entry_price <= 0:
        return 0.0
    lev = leverage or 1.0
    if side == TradeSide.LONG:
        price = entry_price * (1 - (1 / lev) + 0.005)
    else:
        price = entry_price * (1 + (1 / lev) - 0.005)
    return max(0.0, price)


def risk_reward_ratio(
    entry_price: Optional[float],
    stop_loss: Optional[float],
    take_profit: Optional[float],
) -> float:
    """Reward/risk from stop and target, 2 dp. 0 if any level is missing."""
    if not entry_price or not stop_loss or not take_profit:
        return 0.0
    risk = abs(entry_price - stop_loss)
    if risk <= 0:
        return 0.0
    reward = abs(take_profit - entry_price)
    return round(reward / risk, 2)
