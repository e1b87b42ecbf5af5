"""Risk management: daily drawdown and trade-count locks."""

from trade_journal.risk.manager import RiskManager, RiskState, calculate_risk_state

__all__ = ["RiskManager", "RiskState", "calculate_risk_state"]
