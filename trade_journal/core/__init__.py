"""Core: config, types, logging."""

from trade_journal.core.config import load_config, Config
from trade_journal.core.types import (
    DateFilter,
    GoalSetting,
    Profile,
    ProfitGoals,
    RiskSettings,
    Trade,
    TradeSide,
    TradeStatus,
    TradeType,
    Transaction,
    TransactionType,
)
from trade_journal.core.logger import setup_logging

__all__ = [
    "load_config",
    "Config",
    "DateFilter",
    "GoalSetting",
    "Profile",
    "ProfitGoals",
    "RiskSettings",
    "Trade",
    "TradeSide",
    "TradeStatus",
    "TradeType",
    "Transaction",
    "TransactionType",
    "setup_logging",
]
