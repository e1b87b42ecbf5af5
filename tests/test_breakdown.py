"""Unit tests for analytics.breakdown."""

from dataclasses import replace
from datetime import datetime, timedelta, timezone

import pytest
from trade_journal.analytics.breakdown import DIMENSIONS, group_by
from trade_journal.core.types import Trade, TradeSide

# 2024-05-06 is a Monday
MONDAY = datetime(2024, 5, 6, 9, 15, tzinfo=timezone.utc)


def _closed(tid, symbol, pnl, side=TradeSide.LONG, strategy=None, entry=MONDAY):
    t = Trade.open(tid, symbol, side, 1000.0, 1000.0, entry, strategy=strategy)
    exit_price = 1000.0 + pnl if side == TradeSide.LONG else 1000.0 - pnl
    return t.close(exit_price, entry + timedelta(hours=1))


TRADES = [
    _closed("1", "BTC", 50.0, strategy="Breakout"),
    _closed("2", "ETH", -20.0, side=TradeSide.SHORT, entry=MONDAY + timedelta(days=1, hours=5)),
    _closed("3", "BTC", -10.0, strategy="Breakout", entry=MONDAY + timedelta(days=2)),
    _closed("4", "SOL", 30.0, side=TradeSide.SHORT, strategy="Pullback"),
]


def test_symbol_groups_sorted_by_pnl():
    groups = group_by(TRADES, "Symbol")
    assert [g.name for g in groups] == ["BTC", "SOL", "ETH"]
    btc = groups[0]
    assert btc.pnl == pytest.approx(40.0)
    assert btc.total == 2
    assert btc.wins == 1
    assert btc.win_rate == pytest.approx(50.0)


@pytest.mark.parametrize("dimension", DIMENSIONS)
def test_groups_partition_trades(dimension):
    groups = group_by(TRADES, dimension)
    assert sum(g.total for g in groups) == len(TRADES)
    assert sum(g.pnl for g in groups) == pytest.approx(sum(t.pnl for t in TRADES))


def test_missing_strategy_bucket():
    names = [g.name for g in group_by(TRADES, "Strategy")]
    assert "No Strategy" in names
    assert set(names) == {"Breakout", "Pullback", "No Strategy"}


def test_day_hour_and_side_keys():
    assert {g.name for g in group_by(TRADES, "Day")} == {"Monday", "Tuesday", "Wednesday"}
    assert {g.name for g in group_by(TRADES, "Hour")} == {"9:00", "14:00"}
    assert [g.name for g in group_by(TRADES, "Side")] == ["LONG", "SHORT"]


def test_hour_uses_timezone():
    names = {g.name for g in group_by(TRADES[:1], "Hour", "Asia/Tokyo")}
    assert names == {"18:00"}


def test_ties_keep_encounter_order():
    trades = [_closed("a", "AAA", 10.0), _closed("b", "BBB", 10.0), _closed("c", "CCC", 10.0)]
    assert [g.name for g in group_by(trades, "Symbol")] == ["AAA", "BBB", "CCC"]


def test_unknown_dimension_single_bucket():
    groups = group_by(TRADES, "Exchange")
    assert len(groups) == 1
    assert groups[0].name == "Unknown"
    assert groups[0].total == 4


def test_empty_input():
    assert group_by([], "Symbol") == []


def test_hour_of_naive_entry_read_as_utc():
    naive = replace(_closed("n", "BTC", 5.0), entry_date=datetime(2024, 5, 6, 9, 0))
    assert [g.name for g in group_by([naive], "Hour", "UTC")] == ["9:00"]
