"""
Breakdown of closed-trade performance by symbol, strategy, weekday, hour or side.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from trade_journal.core.types import Trade
from trade_journal.utils.dates import resolve_timezone

logger = logging.getLogger("trade_journal.analytics.breakdown")

DIMENSIONS = ("Symbol", "Strategy", "Day", "Hour", "Side")
NO_STRATEGY = "No Strategy"
UNKNOWN = "Unknown"


@dataclass
class GroupSummary:
    name: str
    pnl: float = 0.0
    total: int = 0
    wins: int = 0

    @property
    def win_rate(self) -> float:
        return self.wins / self.total * 100 if self.total else 0.0


def _key_func(dimension: str, tz_name: Optional[str]) -> Callable[[Trade], str]:
    tz = resolve_timezone(tz_name)
    if dimension == "Symbol":
        return lambda t: t.symbol
    if dimension == "Strategy":
        return lambda t: t.strategy or NO_STRATEGY
    if dimension == "Day":
        return lambda t: t.entry_date.astimezone(tz).strftime("%A")
    if dimension == "Hour":
        return lambda t: f"{t.entry_date.astimezone(tz).hour}:00"
    if dimension == "Side":
        return lambda t: t.side.value
    logger.warning("Unknown breakdown dimension %r", dimension)
    return lambda t: UNKNOWN


def group_by(closed_trades: List[Trade], dimension: str, timezone: Optional[str] = "UTC") -> List[GroupSummary]:
    """
    Aggregate pnl, count and wins per key. Sorted by pnl descending;
    ties keep first-seen order.
    """
    key = _key_func(dimension, timezone)
    groups: Dict[str, GroupSummary] = {}
    for t in closed_trades:
        name = key(t)
        g = groups.setdefault(name, GroupSummary(name=name))
        pnl = t.pnl or 0.0
        g.pnl += pnl
        g.total += 1
        if pnl > 0:
            g.wins += 1
    return sorted(groups.values(), key=lambda g: g.pnl, reverse=True)
