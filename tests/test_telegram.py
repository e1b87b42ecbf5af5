"""Unit tests for utils.telegram."""

import requests
from trade_journal.risk.manager import RiskState
from trade_journal.utils import telegram
from trade_journal.utils.telegram import notify_risk_lock, send_telegram


class _Response:
    def __init__(self, status_code, text=""):
        self.status_code = status_code
        self.text = text


def test_not_configured_sends_nothing(monkeypatch):
    calls = []
    monkeypatch.setattr(telegram.requests, "post", lambda *a, **k: calls.append(a))
    assert send_telegram("hello") is False
    assert calls == []


def test_send_success_and_failure(monkeypatch):
    sent = {}

    def fake_post(url, json, timeout):
        sent.update(url=url, json=json)
        return _Response(200)

    monkeypatch.setattr(telegram.requests, "post", fake_post)
    assert send_telegram("hello", "TOKEN", "1") is True
    assert sent["json"] == {"chat_id": "1", "text": "hello"}
    assert "botTOKEN" in sent["url"]

    monkeypatch.setattr(telegram.requests, "post", lambda *a, **k: _Response(400, "bad"))
    assert send_telegram("hello", "TOKEN", "1") is False


def test_request_error_returns_false(monkeypatch):
    def boom(*a, **k):
        raise requests.ConnectionError("down")

    monkeypatch.setattr(telegram.requests, "post", boom)
    assert send_telegram("hello", "TOKEN", "1") is False


def test_notify_only_when_locked(monkeypatch):
    texts = []
    monkeypatch.setattr(telegram, "send_telegram", lambda text, token, chat: texts.append(text) or True)
    assert notify_risk_lock(RiskState(), "T", "1") is False
    locked = RiskState(is_locked=True, lock_reason="Daily Trade Limit Reached (3/3)", trade_count=3)
    assert notify_risk_lock(locked, "T", "1") is True
    assert "Daily Trade Limit Reached" in texts[0]
