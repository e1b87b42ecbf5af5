"""Account balance from the deposit/withdrawal ledger and realized P&L."""

from __future__ import annotations
from typing import Iterable, List

from trade_journal.core.types import Trade, TradeType, Transaction, TransactionType


def portfolio_trades(trades: Iterable[Trade]) -> List[Trade]:
    """Trades that touch real capital (everything except DATA)."""
    return [t for t in trades if t.trade_type != TradeType.DATA]


def data_trades(trades: Iterable[Trade]) -> List[Trade]:
    """Backtest / study trades only."""
    return [t for t in trades if t.trade_type == TradeType.DATA]


def net_deposits(transactions: Iterable[Transaction]) -> float:
    total = 0.0
    for tx in transactions:
        if tx.type == TransactionType.DEPOSIT:
            total += tx.amount
        elif tx.type == TransactionType.WITHDRAWAL:
            total -= tx.amount
    return total


def total_pnl(trades: Iterable[Trade]) -> float:
    """Sum of realized P&L over closed trades."""
    return sum((t.pnl or 0.0) for t in trades if t.is_closed)


def compute_balance(transactions: Iterable[Transaction], trades: Iterable[Trade]) -> float:
    """
    Deposits - withdrawals + realized P&L.
    `trades` should already be the portfolio subset (see portfolio_trades).
    """
    return net_deposits(transactions) + total_pnl(trades)


def compute_roi(trades: Iterable[Trade], initial_capital: float) -> float:
    """Realized P&L as percent of initial capital."""
    if not initial_capital or initial_capital <= 0:
        return 0.0
    return total_pnl(trades) / initial_capital * 100
