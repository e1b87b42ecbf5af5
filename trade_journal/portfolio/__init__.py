"""Portfolio: trade P&L, position sizing, balance."""

from trade_journal.portfolio.pnl import (
    PnLResult,
    compute_trade_pnl,
    compute_unrealized_pnl,
    position_size,
    position_quantity,
    estimate_fees,
    liquidation_price,
    risk_reward_ratio,
)
from trade_journal.portfolio.balance import (
    compute_balance,
    compute_roi,
    data_trades,
    net_deposits,
    portfolio_trades,
    total_pnl,
)

__all__ = [
    "PnLResult",
    "compute_trade_pnl",
    "compute_unrealized_pnl",
    "position_size",
    "position_quantity",
    "estimate_fees",
    "liquidation_price",
    "risk_reward_ratio",
    "compute_balance",
    "compute_roi",
    "data_trades",
    "net_deposits",
    "portfolio_trades",
    "total_pnl",
]
