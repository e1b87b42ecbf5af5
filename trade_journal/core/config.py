"""
Load configuration from config.yaml and .env. Telegram secrets only from env.
"""

from __future__ import annotations
import os
from pathlib import Path
from typing import Any, Optional

import yaml
from dotenv import load_dotenv

from trade_journal.core.types import GoalSetting, Profile, ProfitGoals, RiskSettings


def _env_path(project_root: Optional[Path] = None) -> Path:
    root = project_root or Path(__file__).resolve().parents[2]
    return root / ".env"


def load_dotenv_if_exists(project_root: Optional[Path] = None) -> None:
    """Load .env from project root if present."""
    path = _env_path(project_root)
    if path.exists():
        load_dotenv(path)


def load_config(config_path: Optional[Path] = None, project_root: Optional[Path] = None) -> "Config":
    """Load config.yaml and overlay with env. Returns Config."""
    load_dotenv_if_exists(project_root)
    root = project_root or Path(__file__).resolve().parents[2]
    path = config_path or root / "config.yaml"
    data: dict[str, Any] = {}
    if path.exists():
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

    def env(key: str, default: str = "") -> str:
        return os.getenv(key, default).strip()

    def env_int(key: str, default: int = 0) -> int:
        try:
            return int(os.getenv(key, str(default)))
        except ValueError:
            return default

    def env_float(key: str, default: float = 0.0) -> float:
        try:
            return float(os.getenv(key, str(default)))
        except ValueError:
            return default

    journal = data.get("journal", {})
    profile = data.get("profile", {})
    risk = data.get("risk", {})
    goals = data.get("goals", {})
    telegram = data.get("telegram", {})
    logging_cfg = data.get("logging", {})

    def goal(name: str, default_target: float) -> GoalSetting:
        g = goals.get(name, {}) or {}
        return GoalSetting(target=float(g.get("target", default_target)), active=bool(g.get("active", True)))

    return Config(
        journal_path=Path(env("JOURNAL_PATH", str(journal.get("path", "journal.json")))),
        timezone=env("TIMEZONE", profile.get("timezone", "UTC")),
        base_currency=env("BASE_CURRENCY", profile.get("base_currency", "USD")).upper(),
        daily_dd=env_float("DAILY_DD", risk.get("daily_dd", 5.0)),
        max_trades_day=env_int("MAX_TRADES_DAY", risk.get("max_trades_day", 0)),
        daily_goal=goal("daily", 1.5),
        weekly_goal=goal("weekly", 5.0),
        monthly_goal=goal("monthly", 15.0),
        telegram_bot_token=env("TELEGRAM_BOT_TOKEN", telegram.get("bot_token", "")),
        telegram_chat_id=env("TELEGRAM_CHAT_ID", str(telegram.get("chat_id", ""))),
        log_level=logging_cfg.get("level", "INFO"),
        log_dir=logging_cfg.get("log_dir"),
        log_file=logging_cfg.get("log_file"),
    )


class Config:
    """Unified configuration. Immutable after load."""

    __slots__ = (
        "journal_path", "timezone", "base_currency",
        "daily_dd", "max_trades_day",
        "daily_goal", "weekly_goal", "monthly_goal",
        "telegram_bot_token", "telegram_chat_id",
        "log_level", "log_dir", "log_file",
    )

    def __init__(
        self,
        journal_path: Path = None,
        timezone: str = "UTC",
        base_currency: str = "USD",
        daily_dd: float = 5.0,
        max_trades_day: int = 0,
        daily_goal: Optional[GoalSetting] = None,
        weekly_goal: Optional[GoalSetting] = None,
        monthly_goal: Optional[GoalSetting] = None,
        telegram_bot_token: str = "",
        telegram_chat_id: str = "",
        log_level: str = "INFO",
        log_dir: Optional[Path] = None,
        log_file: Optional[str] = None,
    ):
        defaults = ProfitGoals()
        self.journal_path = Path(journal_path) if journal_path else Path("journal.json")
        self.timezone = timezone
        self.base_currency = base_currency
        self.daily_dd = daily_dd
        self.max_trades_day = max_trades_day
        self.daily_goal = daily_goal or defaults.daily
        self.weekly_goal = weekly_goal or defaults.weekly
        self.monthly_goal = monthly_goal or defaults.monthly
        self.telegram_bot_token = telegram_bot_token
        self.telegram_chat_id = telegram_chat_id
        self.log_level = log_level
        self.log_dir = Path(log_dir) if log_dir else None
        self.log_file = log_file

    def risk_settings(self) -> RiskSettings:
        return RiskSettings(daily_dd=self.daily_dd, max_trades_day=self.max_trades_day)

    def profit_goals(self) -> ProfitGoals:
        return ProfitGoals(daily=self.daily_goal, weekly=self.weekly_goal, monthly=self.monthly_goal)

    def profile(self) -> Profile:
        return Profile(timezone=self.timezone, base_currency=self.base_currency)
