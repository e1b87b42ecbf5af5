"""
Risk manager: daily drawdown and daily trade-count limits.
Drawdown is today's realized loss as percent of the start-of-day balance.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, Optional

from trade_journal.core.types import RiskSettings, Trade, Transaction, TransactionType
from trade_journal.utils.dates import local_date, resolve_timezone, to_utc, utc_now

logger = logging.getLogger("trade_journal.risk")


@dataclass(frozen=True)
class RiskState:
    """Snapshot of today's risk usage. Does not block anything by itself."""
    current_dd: float = 0.0
    daily_dd_limit: float = 0.0
    trade_count: int = 0
    max_trades: int = 0
    is_locked: bool = False
    lock_reason: str = ""
    start_of_day_balance: float = 0.0
    today_realized_pnl: float = 0.0
    today_net_deposits: float = 0.0


class RiskManager:
    """
    Evaluates: daily drawdown cap and max trades per day.
    A limit of 0 disables that check.
    """

    def __init__(self, settings: Optional[RiskSettings] = None):
        settings = settings or RiskSettings()
        self.daily_dd_limit = max(0.0, float(settings.daily_dd or 0.0))
        self.max_trades_day = max(0, int(settings.max_trades_day or 0))

    def check_drawdown(self, current_dd: float) -> bool:
        """Return False if the daily drawdown cap is reached."""
        return not (self.daily_dd_limit > 0 and current_dd >= self.daily_dd_limit)

    def check_trade_count(self, trade_count: int) -> bool:
        """Return False if the daily trade limit is reached."""
        return not (self.max_trades_day > 0 and trade_count >= self.max_trades_day)

    def evaluate(
        self,
        portfolio_trades: Iterable[Trade],
        transactions: Iterable[Transaction],
        current_balance: float,
        timezone: Optional[str] = "UTC",
        now: Optional[datetime] = None,
    ) -> RiskState:
        """Compute today's drawdown and trade count against the limits."""
        tz = resolve_timezone(timezone)
        today = local_date(to_utc(now) if now else utc_now(), tz)
        trades = list(portfolio_trades)

        trade_count = sum(1 for t in trades if local_date(t.entry_date, tz) == today)
        realized = sum(
            (t.pnl or 0.0)
            for t in trades
            if t.is_closed and t.exit_date is not None and local_date(t.exit_date, tz) == today
        )
        net_dep = 0.0
        for tx in transactions:
            if local_date(tx.date, tz) != today:
                continue
            net_dep += tx.amount if tx.type == TransactionType.DEPOSIT else -tx.amount

        start_balance = current_balance - net_dep - realized
        current_dd = 0.0
        if realized < 0 and start_balance > 0:
            current_dd = abs(realized) / start_balance * 100

        dd_ok = self.check_drawdown(current_dd)
        count_ok = self.check_trade_count(trade_count)
        reason = ""
        if not dd_ok:
            reason = f"Daily Drawdown Hit ({current_dd:.1f}% / {self.daily_dd_limit:g}%)"
        elif not count_ok:
            reason = f"Daily Trade Limit Reached ({trade_count}/{self.max_trades_day})"
        if reason:
            logger.warning("Trading locked: %s", reason)
        else:
            logger.debug("Risk ok: dd=%.2f%% trades=%d", current_dd, trade_count)

        return RiskState(
            current_dd=current_dd,
            daily_dd_limit=self.daily_dd_limit,
            trade_count=trade_count,
            max_trades=self.max_trades_day,
            is_locked=not (dd_ok and count_ok),
            lock_reason=reason,
            start_of_day_balance=start_balance,
            today_realized_pnl=realized,
            today_net_deposits=net_dep,
        )


def calculate_risk_state(
    portfolio_trades: Iterable[Trade],
    transactions: Iterable[Transaction],
    current_balance: float,
    settings: Optional[RiskSettings] = None,
    timezone: Optional[str] = "UTC",
    now: Optional[datetime] = None,
) -> RiskState:
    return RiskManager(settings).evaluate(portfolio_trades, transactions, current_balance, timezone, now)
