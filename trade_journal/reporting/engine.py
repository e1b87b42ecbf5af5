"""
Report engine: reads a snapshot from the injected TradeStore and runs the calculators.
Balance, risk and goals use portfolio trades only; analytics views use every trade.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from trade_journal.analytics.breakdown import GroupSummary, group_by
from trade_journal.analytics.calendar import CalendarDay, monthly_calendar
from trade_journal.analytics.curves import CurvePoint, cumulative_pnl
from trade_journal.analytics.goals import GoalProgressReport, calculate_goal_progress
from trade_journal.analytics.metrics import TradeStats, closed_trades_sorted, compute_stats
from trade_journal.core.types import DateFilter, Profile, ProfitGoals, RiskSettings, Trade, Transaction
from trade_journal.portfolio.balance import compute_balance, portfolio_trades
from trade_journal.risk.manager import RiskManager, RiskState
from trade_journal.storage.base import TradeStore
from trade_journal.utils.dates import filter_by_date, filter_trades

logger = logging.getLogger("trade_journal.reporting")


@dataclass(frozen=True)
class JournalSnapshot:
    """Everything read from the store for one invocation."""
    trades: List[Trade]
    transactions: List[Transaction]
    profile: Profile
    risk_settings: RiskSettings
    profit_goals: ProfitGoals

    @property
    def portfolio_trades(self) -> List[Trade]:
        return portfolio_trades(self.trades)

    @property
    def balance(self) -> float:
        return compute_balance(self.transactions, self.portfolio_trades)


@dataclass
class JournalReport:
    """Everything the dashboard shows, computed from one snapshot."""
    balance: float
    stats: TradeStats
    risk: RiskState
    goals: GoalProgressReport
    breakdown: List[GroupSummary] = field(default_factory=list)
    equity_curve: List[CurvePoint] = field(default_factory=list)


class ReportEngine:
    """
    Computes journal metrics from `store`. Holds no state besides the store.
    Each public call reads the store once; pass `snapshot` to share one read across calls.
    """

    def __init__(self, store: TradeStore):
        self.store = store

    def snapshot(self) -> JournalSnapshot:
        return JournalSnapshot(
            trades=self.store.get_trades(),
            transactions=self.store.get_transactions(),
            profile=self.store.get_profile(),
            risk_settings=self.store.get_risk_settings(),
            profit_goals=self.store.get_profit_goals(),
        )

    @property
    def timezone(self) -> str:
        return self.store.get_profile().timezone

    def balance(self, snapshot: Optional[JournalSnapshot] = None) -> float:
        return (snapshot or self.snapshot()).balance

    def analysis_trades(
        self,
        date_filter: Optional[DateFilter] = None,
        symbol: Optional[str] = None,
        strategy: Optional[str] = None,
        side: Optional[str] = None,
        now: Optional[datetime] = None,
        snapshot: Optional[JournalSnapshot] = None,
    ) -> List[Trade]:
        """Closed trades after date and attribute filters, oldest entry first."""
        trades = (snapshot or self.snapshot()).trades
        trades = filter_by_date(trades, date_filter, now)
        trades = filter_trades(trades, symbol=symbol, strategy=strategy, side=side)
        return closed_trades_sorted(trades)

    def stats(
        self,
        date_filter: Optional[DateFilter] = None,
        snapshot: Optional[JournalSnapshot] = None,
        **filters,
    ) -> TradeStats:
        return compute_stats(self.analysis_trades(date_filter, snapshot=snapshot, **filters))

    def risk_state(self, now: Optional[datetime] = None, snapshot: Optional[JournalSnapshot] = None) -> RiskState:
        snap = snapshot or self.snapshot()
        manager = RiskManager(snap.risk_settings)
        return manager.evaluate(snap.portfolio_trades, snap.transactions, snap.balance, snap.profile.timezone, now)

    def goal_progress(
        self, now: Optional[datetime] = None, snapshot: Optional[JournalSnapshot] = None
    ) -> GoalProgressReport:
        snap = snapshot or self.snapshot()
        return calculate_goal_progress(
            snap.portfolio_trades, snap.profit_goals, snap.balance, snap.profile.timezone, now
        )

    def breakdown(
        self,
        dimension: str,
        date_filter: Optional[DateFilter] = None,
        snapshot: Optional[JournalSnapshot] = None,
        **filters,
    ) -> List[GroupSummary]:
        snap = snapshot or self.snapshot()
        return group_by(self.analysis_trades(date_filter, snapshot=snap, **filters), dimension, snap.profile.timezone)

    def calendar(self, year: int, month: int, snapshot: Optional[JournalSnapshot] = None) -> List[CalendarDay]:
        snap = snapshot or self.snapshot()
        return monthly_calendar(snap.trades, year, month, snap.profile.timezone)

    def build_report(
        self,
        date_filter: Optional[DateFilter] = None,
        dimension: str = "Symbol",
        now: Optional[datetime] = None,
    ) -> JournalReport:
        snap = self.snapshot()
        closed = self.analysis_trades(date_filter, now=now, snapshot=snap)
        logger.debug("Building report over %d closed trades", len(closed))
        return JournalReport(
            balance=snap.balance,
            stats=compute_stats(closed),
            risk=self.risk_state(now, snapshot=snap),
            goals=self.goal_progress(now, snapshot=snap),
            breakdown=group_by(closed, dimension, snap.profile.timezone),
            equity_curve=cumulative_pnl(closed),
        )
