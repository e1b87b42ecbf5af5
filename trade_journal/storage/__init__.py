"""Storage: read-only journal stores."""

from trade_journal.storage.base import InMemoryTradeStore, TradeStore
from trade_journal.storage.json_store import JsonTradeStore

__all__ = ["InMemoryTradeStore", "JsonTradeStore", "TradeStore"]
