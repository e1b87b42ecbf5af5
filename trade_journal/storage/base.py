"""Read-only storage interface the analytics read snapshots from."""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Iterable, List, Optional

from trade_journal.core.types import Profile, ProfitGoals, RiskSettings, Trade, Transaction


class TradeStore(ABC):
    """Supplies journal snapshots. Calculations never write back."""

    @abstractmethod
    def get_trades(self) -> List[Trade]:
        """All trades, any status and type."""
        pass

    @abstractmethod
    def get_transactions(self) -> List[Transaction]:
        """Deposit / withdrawal ledger."""
        pass

    @abstractmethod
    def get_profile(self) -> Profile:
        pass

    @abstractmethod
    def get_risk_settings(self) -> RiskSettings:
        pass

    @abstractmethod
    def get_profit_goals(self) -> ProfitGoals:
        pass


class InMemoryTradeStore(TradeStore):
    """Store over in-memory data. Returns copies so callers cannot mutate the snapshot."""

    def __init__(
        self,
        trades: Iterable[Trade] = (),
        transactions: Iterable[Transaction] = (),
        profile: Optional[Profile] = None,
        risk_settings: Optional[RiskSettings] = None,
        profit_goals: Optional[ProfitGoals] = None,
    ):
        self._trades = list(trades)
        self._transactions = list(transactions)
        self._profile = profile or Profile()
        self._risk_settings = risk_settings or RiskSettings()
        self._profit_goals = profit_goals or ProfitGoals()

    def get_trades(self) -> List[Trade]:
        return list(self._trades)

    def get_transactions(self) -> List[Transaction]:
        return list(self._transactions)

    def get_profile(self) -> Profile:
        return self._profile

    def get_risk_settings(self) -> RiskSettings:
        return self._risk_settings

    def get_profit_goals(self) -> ProfitGoals:
        return self._profit_goals
