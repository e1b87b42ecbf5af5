"""
Journal export file as a read-only TradeStore.
Layout: {"TRADES": [...], "TRANSACTIONS": [...], "PROFILE": {...},
"RISK_SETTINGS": {...}, "PROFIT_GOALS": {...}} with camelCase records.
"""

from __future__ import annotations
import json
import logging
from pathlib import Path
from typing import Any, List, Optional

from trade_journal.core.types import Profile, ProfitGoals, RiskSettings, Trade, Transaction
from trade_journal.storage.base import TradeStore

logger = logging.getLogger("trade_journal.storage")


class JsonTradeStore(TradeStore):
    """
    Reads the file on every call. A missing or unreadable file yields the defaults;
    malformed records are skipped with a warning.
    """

    def __init__(
        self,
        path: Path,
        profile: Optional[Profile] = None,
        risk_settings: Optional[RiskSettings] = None,
        profit_goals: Optional[ProfitGoals] = None,
    ):
        self.path = Path(path)
        self.default_profile = profile or Profile()
        self.default_risk_settings = risk_settings or RiskSettings()
        self.default_profit_goals = profit_goals or ProfitGoals()

    def _read(self, key: str) -> Any:
        if not self.path.exists():
            logger.error("Journal file not found: %s", self.path)
            return None
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error("Could not read %s from %s: %s", key, self.path, e)
            return None
        if not isinstance(data, dict):
            logger.error("Journal file %s is not a JSON object", self.path)
            return None
        return data.get(key)

    def get_trades(self) -> List[Trade]:
        trades = []
        for i, raw in enumerate(self._read("TRADES") or []):
            try:
                trades.append(Trade.from_dict(raw))
            except ValueError as e:
                logger.warning("Skipping trade #%d: %s", i, e)
        return trades

    def get_transactions(self) -> List[Transaction]:
        txs = []
        for i, raw in enumerate(self._read("TRANSACTIONS") or []):
            try:
                txs.append(Transaction.from_dict(raw))
            except ValueError as e:
                logger.warning("Skipping transaction #%d: %s", i, e)
        return txs

    def get_profile(self) -> Profile:
        raw = self._read("PROFILE")
        if not isinstance(raw, dict):
            return self.default_profile
        try:
            return Profile.from_dict(raw, self.default_profile)
        except (ValueError, TypeError) as e:
            logger.warning("Invalid profile, using defaults: %s", e)
            return self.default_profile

    def get_risk_settings(self) -> RiskSettings:
        raw = self._read("RISK_SETTINGS")
        if not isinstance(raw, dict):
            return self.default_risk_settings
        try:
            return RiskSettings.from_dict(raw)
        except (ValueError, TypeError) as e:
            logger.warning("Invalid risk settings, using defaults: %s", e)
            return self.default_risk_settings

    def get_profit_goals(self) -> ProfitGoals:
        raw = self._read("PROFIT_GOALS")
        if not isinstance(raw, dict):
            return self.default_profit_goals
        try:
            return ProfitGoals.from_dict(raw, self.default_profit_goals)
        except (ValueError, TypeError) as e:
            logger.warning("Invalid profit goals, using defaults: %s", e)
            return self.default_profit_goals
