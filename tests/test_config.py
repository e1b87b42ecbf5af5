"""Unit tests for core.config."""

import os

import pytest
from trade_journal.core.config import Config, load_config
from trade_journal.core.types import ProfitGoals, RiskSettings

ENV_KEYS = ("JOURNAL_PATH", "TIMEZONE", "BASE_CURRENCY", "DAILY_DD", "MAX_TRADES_DAY",
            "TELEGRAM_BOT_TOKEN", "TELEGRAM_CHAT_ID")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    yield
    # load_dotenv writes os.environ directly
    for key in ENV_KEYS:
        os.environ.pop(key, None)


def test_defaults_without_files(tmp_path):
    config = load_config(tmp_path / "config.yaml", tmp_path)
    assert config.timezone == "UTC"
    assert config.base_currency == "USD"
    assert config.risk_settings() == RiskSettings(5.0, 0)
    assert config.profit_goals() == ProfitGoals()
    assert config.journal_path.name == "journal.json"


def test_yaml_values(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "journal:\n  path: data/my.json\n"
        "profile:\n  timezone: America/New_York\n  base_currency: gbp\n"
        "risk:\n  daily_dd: 2.5\n  max_trades_day: 4\n"
        "goals:\n  daily:\n    target: 0.5\n    active: false\n"
        "logging:\n  level: DEBUG\n",
        encoding="utf-8",
    )
    config = load_config(path, tmp_path)
    assert str(config.journal_path).endswith("my.json")
    assert config.timezone == "America/New_York"
    assert config.base_currency == "GBP"
    assert config.risk_settings() == RiskSettings(2.5, 4)
    assert config.daily_goal.target == 0.5
    assert config.daily_goal.active is False
    assert config.weekly_goal.target == 5.0
    assert config.log_level == "DEBUG"
    assert config.profile().base_currency == "GBP"


def test_env_overrides(tmp_path, monkeypatch):
    path = tmp_path / "config.yaml"
    path.write_text("risk:\n  daily_dd: 2.5\n", encoding="utf-8")
    monkeypatch.setenv("DAILY_DD", "7")
    monkeypatch.setenv("MAX_TRADES_DAY", "not-a-number")
    monkeypatch.setenv("TIMEZONE", "Asia/Tokyo")
    config = load_config(path, tmp_path)
    assert config.daily_dd == 7.0
    assert config.max_trades_day == 0
    assert config.timezone == "Asia/Tokyo"


def test_dotenv_file(tmp_path, monkeypatch):
    (tmp_path / ".env").write_text("TELEGRAM_BOT_TOKEN=abc\nTELEGRAM_CHAT_ID=42\n", encoding="utf-8")
    config = load_config(tmp_path / "config.yaml", tmp_path)
    assert config.telegram_bot_token == "abc"
    assert config.telegram_chat_id == "42"


def test_config_slots():
    config = Config()
    with pytest.raises(AttributeError):
        config.unknown = 1
