"""Unit tests for portfolio.balance."""

from datetime import datetime, timezone

import pytest
from trade_journal.core.types import Trade, TradeSide, TradeType, Transaction, TransactionType
from trade_journal.portfolio.balance import (
    compute_balance,
    compute_roi,
    data_trades,
    portfolio_trades,
    total_pnl,
)

T0 = datetime(2024, 5, 1, tzinfo=timezone.utc)
LEDGER = [
    Transaction(TransactionType.DEPOSIT, 10000.0, T0),
    Transaction(TransactionType.DEPOSIT, 500.0, T0),
    Transaction(TransactionType.WITHDRAWAL, 1500.0, T0),
]


def _trade(tid, trade_type=TradeType.LIVE, exit_price=None):
    t = Trade.open(tid, "X", TradeSide.LONG, 100.0, 1000.0, T0, trade_type=trade_type)
    return t.close(exit_price, T0) if exit_price else t


def test_balance_without_trades_is_net_deposits():
    assert compute_balance(LEDGER, []) == pytest.approx(9000.0)


def test_closed_trade_adds_its_pnl():
    closed = _trade("a", exit_price=112.0)  # qty 10 -> +120
    assert compute_balance(LEDGER, [closed]) == pytest.approx(9120.0)


def test_open_trades_do_not_count():
    assert compute_balance(LEDGER, [_trade("open")]) == pytest.approx(9000.0)


def test_portfolio_and_data_partition():
    trades = [_trade("live"), _trade("past", TradeType.PAST), _trade("study", TradeType.DATA)]
    assert [t.id for t in portfolio_trades(trades)] == ["live", "past"]
    assert [t.id for t in data_trades(trades)] == ["study"]


def test_total_pnl_and_roi():
    trades = [_trade("a", exit_price=110.0), _trade("b", exit_price=95.0), _trade("c")]
    assert total_pnl(trades) == pytest.approx(50.0)
    assert compute_roi(trades, 1000.0) == pytest.approx(5.0)
    assert compute_roi(trades, 0.0) == 0.0
