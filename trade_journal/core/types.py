"""
Core data types for trades, ledger transactions, settings, and date filters.
"""

from __future__ import annotations
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from enum import Enum
from typing import Any, List, Optional


class TradeSide(str, Enum):
    LONG = "LONG"
    SHORT = "SHORT"


class TradeStatus(str, Enum):
    OPEN = "OPEN"
    CLOSED = "CLOSED"


class TradeType(str, Enum):
    LIVE = "LIVE"
    PAST = "PAST"
    DATA = "DATA"  # backtested study, never real capital


class TransactionType(str, Enum):
    DEPOSIT = "DEPOSIT"
    WITHDRAWAL = "WITHDRAWAL"


class FeeType(str, Enum):
    PERCENTAGE = "PERCENTAGE"
    FIXED = "FIXED"


class DateFilterType(str, Enum):
    LIFETIME = "LIFETIME"
    RELATIVE = "RELATIVE"
    ABSOLUTE = "ABSOLUTE"


def parse_timestamp(value: Any) -> Optional[datetime]:
    """ISO string or datetime -> tz-aware datetime. Naive values are taken as UTC."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        ts = value
    else:
        text = str(value).strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        ts = datetime.fromisoformat(text)
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=timezone.utc)
    return ts


def _optional_float(value: Any) -> Optional[float]:
    if value is None or value == "":
        return None
    return float(value)


@dataclass(frozen=True)
class Trade:
    """Journal trade. Open trades carry no exit fields; closed trades carry pnl."""
    id: str
    symbol: str
    side: TradeSide
    status: TradeStatus
    trade_type: TradeType
    entry_date: datetime
    entry_price: float
    quantity: float
    capital: float
    leverage: float = 1.0
    exit_date: Optional[datetime] = None
    exit_price: Optional[float] = None
    pnl: Optional[float] = None
    pnl_percentage: Optional[float] = None
    strategy: Optional[str] = None
    risk_reward: Optional[float] = None
    exit_quality: Optional[int] = None
    stop_loss: Optional[float] = None
    take_profit: Optional[float] = None
    exchange: Optional[str] = None
    notes: str = ""
    entry_reasons: List[str] = field(default_factory=list)
    exit_reasons: List[str] = field(default_factory=list)
    mental_state: List[str] = field(default_factory=list)
    tags: List[str] = field(default_factory=list)
    setups: List[str] = field(default_factory=list)

    def __post_init__(self):
        # All timestamps are tz-aware; naive ones are UTC
        entry = parse_timestamp(self.entry_date)
        if entry is None:
            raise ValueError(f"Trade {self.id} has no entry date")
        object.__setattr__(self, "entry_date", entry)
        object.__setattr__(self, "exit_date", parse_timestamp(self.exit_date))

    @property
    def is_closed(self) -> bool:
        return self.status == TradeStatus.CLOSED

    @property
    def is_portfolio(self) -> bool:
        return self.trade_type != TradeType.DATA

    @classmethod
    def open(
        cls,
        id: str,
        symbol: str,
        side: TradeSide,
        entry_price: float,
        capital: float,
        entry_date: datetime,
        leverage: float = 1.0,
        trade_type: TradeType = TradeType.LIVE,
        **extra: Any,
    ) -> "Trade":
        """
        New OPEN trade. Quantity is frozen here as capital * leverage / entry_price.
        Risk-reward is derived from stop_loss / take_profit when both are given.
        """
        from trade_journal.portfolio.pnl import position_quantity, risk_reward_ratio

        if "risk_reward" not in extra:
            extra["risk_reward"] = risk_reward_ratio(
                entry_price, extra.get("stop_loss"), extra.get("take_profit")
            )
        return cls(
            id=id,
            symbol=symbol.upper(),
            side=TradeSide(side),
            status=TradeStatus.OPEN,
            trade_type=TradeType(trade_type),
            entry_date=parse_timestamp(entry_date),
            entry_price=entry_price,
            quantity=position_quantity(capital, leverage, entry_price),
            capital=capital,
            leverage=leverage,
            **extra,
        )

    def close(self, exit_price: float, exit_date: datetime, exit_quality: Optional[int] = None) -> "Trade":
        """Return the CLOSED version of this trade. Closed trades cannot be closed again."""
        from trade_journal.portfolio.pnl import compute_trade_pnl

        if self.is_closed:
            raise ValueError(f"Trade {self.id} is already closed")
        result = compute_trade_pnl(self, exit_price)
        return replace(
            self,
            status=TradeStatus.CLOSED,
            exit_price=exit_price,
            exit_date=parse_timestamp(exit_date),
            pnl=result.pnl,
            pnl_percentage=round(result.pnl_percentage, 2),
            exit_quality=exit_quality if exit_quality is not None else self.exit_quality,
        )

    @classmethod
    def from_dict(cls, data: dict) -> "Trade":
        """
        Build from a journal export record (camelCase keys). Raises ValueError if malformed.
        Missing quantity is derived from capital and leverage; a closed record without
        stored pnl gets the computed one.
        """
        from trade_journal.portfolio.pnl import compute_trade_pnl, position_quantity

        try:
            symbol = str(data["symbol"]).strip()
            if not symbol:
                raise ValueError("empty symbol")
            status = TradeStatus(data.get("status", "OPEN"))
            entry_date = parse_timestamp(data["entryDate"])
            if entry_date is None:
                raise ValueError("missing entry date")
            entry_price = float(data["entryPrice"])
            exit_date = parse_timestamp(data.get("exitDate"))
            exit_price = _optional_float(data.get("exitPrice"))
            if status == TradeStatus.CLOSED and (exit_date is None or exit_price is None):
                raise ValueError("closed trade without exit date/price")
            capital = float(data.get("capital") or 0.0)
            leverage = float(data.get("leverage") or 1.0)
            quantity = _optional_float(data.get("quantity"))
            if quantity is None:
                quantity = position_quantity(capital, leverage, entry_price)
            quality = data.get("exitQuality")
            trade = cls(
                id=str(data["id"]),
                symbol=symbol,
                side=TradeSide(data["side"]),
                status=status,
                trade_type=TradeType(data.get("tradeType", "LIVE")),
                entry_date=entry_date,
                entry_price=entry_price,
                quantity=quantity,
                capital=capital,
                leverage=leverage,
                exit_date=exit_date,
                exit_price=exit_price,
                pnl=_optional_float(data.get("pnl")),
                pnl_percentage=_optional_float(data.get("pnlPercentage")),
                strategy=data.get("strategy") or None,
                risk_reward=_optional_float(data.get("riskReward")),
                exit_quality=int(quality) if quality else None,
                stop_loss=_optional_float(data.get("stopLoss")),
                take_profit=_optional_float(data.get("takeProfit")),
                exchange=data.get("exchange"),
                notes=data.get("notes") or "",
                entry_reasons=list(data.get("entryReasons") or []),
                exit_reasons=list(data.get("exitReasons") or []),
                mental_state=list(data.get("mentalState") or []),
                tags=list(data.get("tags") or []),
                setups=list(data.get("setups") or []),
            )
        except (KeyError, TypeError) as e:
            raise ValueError(f"Malformed trade record: {e}") from e

        if not trade.is_closed:
            return trade
        if trade.pnl is None:
            result = compute_trade_pnl(trade, trade.exit_price)
            return replace(trade, pnl=result.pnl, pnl_percentage=round(result.pnl_percentage, 2))
        if trade.pnl_percentage is None:
            pct = trade.pnl / trade.capital * 100 if trade.capital > 0 else 0.0
            return replace(trade, pnl_percentage=round(pct, 2))
        return trade

    def to_dict(self) -> dict:
        def iso(ts: Optional[datetime]) -> Optional[str]:
            return ts.isoformat() if ts else None

        return {
            "id": self.id,
            "symbol": self.symbol,
            "side": self.side.value,
            "status": self.status.value,
            "tradeType": self.trade_type.value,
            "entryDate": iso(self.entry_date),
            "entryPrice": self.entry_price,
            "quantity": self.quantity,
            "capital": self.capital,
            "leverage": self.leverage,
            "exitDate": iso(self.exit_date),
            "exitPrice": self.exit_price,
            "pnl": self.pnl,
            "pnlPercentage": self.pnl_percentage,
            "strategy": self.strategy,
            "riskReward": self.risk_reward,
            "exitQuality": self.exit_quality,
            "stopLoss": self.stop_loss,
            "takeProfit": self.take_profit,
            "exchange": self.exchange,
            "notes": self.notes,
            "entryReasons": list(self.entry_reasons),
            "exitReasons": list(self.exit_reasons),
            "mentalState": list(self.mental_state),
            "tags": list(self.tags),
            "setups": list(self.setups),
        }


@dataclass(frozen=True)
class Transaction:
    """Ledger entry (deposit or withdrawal)."""
    type: TransactionType
    amount: float
    date: datetime
    account_id: str = "main"
    id: str = ""
    note: str = ""

    def __post_init__(self):
        ts = parse_timestamp(self.date)
        if ts is None:
            raise ValueError("Transaction has no date")
        object.__setattr__(self, "date", ts)

    @classmethod
    def from_dict(cls, data: dict) -> "Transaction":
        try:
            return cls(
                type=TransactionType(data["type"]),
                amount=float(data["amount"]),
                date=parse_timestamp(data["date"]),
                account_id=str(data.get("accountId", "main")),
                id=str(data.get("id", "")),
                note=data.get("note") or "",
            )
        except (KeyError, TypeError) as e:
            raise ValueError(f"Malformed transaction record: {e}") from e


@dataclass(frozen=True)
class RiskSettings:
    """Daily limits. 0 disables a limit."""
    daily_dd: float = 5.0
    max_trades_day: int = 0

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> "RiskSettings":
        data = data or {}
        return cls(
            daily_dd=float(data.get("dailyDD") or 0.0),
            max_trades_day=int(data.get("maxTradesDay") or 0),
        )


@dataclass(frozen=True)
class GoalSetting:
    target: float
    active: bool = True


@dataclass(frozen=True)
class ProfitGoals:
    """Profit targets as percent of balance, per period."""
    daily: GoalSetting = GoalSetting(1.5)
    weekly: GoalSetting = GoalSetting(5.0)
    monthly: GoalSetting = GoalSetting(15.0)

    @classmethod
    def from_dict(cls, data: Optional[dict], defaults: Optional["ProfitGoals"] = None) -> "ProfitGoals":
        data = data or {}
        defaults = defaults or cls()

        def goal(key: str) -> GoalSetting:
            raw = data.get(key)
            fallback = getattr(defaults, key)
            if not isinstance(raw, dict):
                return fallback
            return GoalSetting(
                target=float(raw.get("target", fallback.target) or 0.0),
                active=bool(raw.get("active", fallback.active)),
            )

        return cls(daily=goal("daily"), weekly=goal("weekly"), monthly=goal("monthly"))


@dataclass(frozen=True)
class FeeSchedule:
    maker: float = 0.02
    taker: float = 0.05
    type: FeeType = FeeType.PERCENTAGE


@dataclass(frozen=True)
class Profile:
    timezone: str = "UTC"
    base_currency: str = "USD"
    fees: FeeSchedule = FeeSchedule()

    @classmethod
    def from_dict(cls, data: Optional[dict], defaults: Optional["Profile"] = None) -> "Profile":
        data = data or {}
        defaults = defaults or cls()
        fees = data.get("fees")
        fee_schedule = defaults.fees
        if isinstance(fees, dict):
            fee_schedule = FeeSchedule(
                maker=float(fees.get("maker", fee_schedule.maker)),
                taker=float(fees.get("taker", fee_schedule.taker)),
                type=FeeType(fees.get("type", fee_schedule.type)),
            )
        return cls(
            timezone=data.get("timezone") or defaults.timezone,
            base_currency=data.get("baseCurrency") or defaults.base_currency,
            fees=fee_schedule,
        )


@dataclass(frozen=True)
class DateFilter:
    """Analytics date window. Unknown types behave like LIFETIME."""
    type: str = DateFilterType.LIFETIME.value
    days: Optional[int] = None
    start: Optional[datetime] = None
    end: Optional[datetime] = None

    @classmethod
    def lifetime(cls) -> "DateFilter":
        return cls(DateFilterType.LIFETIME.value)

    @classmethod
    def relative(cls, days: Optional[int] = None) -> "DateFilter":
        return cls(DateFilterType.RELATIVE.value, days=days)

    @classmethod
    def absolute(cls, start: datetime, end: datetime) -> "DateFilter":
        return cls(DateFilterType.ABSOLUTE.value, start=parse_timestamp(start), end=parse_timestamp(end))
