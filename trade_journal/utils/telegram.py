"""Telegram alerts for risk locks. Token and chat id are never logged."""

from __future__ import annotations
import logging
from typing import TYPE_CHECKING

import requests

if TYPE_CHECKING:
    from trade_journal.risk.manager import RiskState

logger = logging.getLogger("trade_journal.utils.telegram")

API_URL = "https://api.telegram.org/bot{token}/sendMessage"


def send_telegram(text: str, bot_token: str = "", chat_id: str = "") -> bool:
    """Post `text` to the chat. False when unconfigured or the request fails."""
    if not bot_token or not chat_id:
        logger.debug("Telegram not configured, message dropped (len=%d)", len(text))
        return False
    try:
        r = requests.post(API_URL.format(token=bot_token), json={"chat_id": chat_id, "text": text}, timeout=10)
    except requests.RequestException as e:
        logger.error("Telegram request failed: %s", type(e).__name__)
        return False
    if r.status_code != 200:
        logger.warning("Telegram send failed: %s %s", r.status_code, r.text[:200])
        return False
    return True


def notify_risk_lock(state: "RiskState", bot_token: str = "", chat_id: str = "") -> bool:
    """Send the lock reason if trading is locked. Nothing is sent otherwise."""
    if not state.is_locked:
        return False
    text = (
        f"Trading locked: {state.lock_reason}\n"
        f"Today's P&L: {state.today_realized_pnl:+.2f} | trades: {state.trade_count}"
    )
    return send_telegram(text, bot_token, chat_id)
