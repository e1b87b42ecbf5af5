#!/usr/bin/env python3
"""
Trade Journal CLI: stats | risk | goals | breakdown | calendar
Usage:
  python main.py stats [--range 30d] [--journal journal.json] [--config config.yaml]
  python main.py risk [--notify]
  python main.py goals
  python main.py breakdown [--by Symbol|Strategy|Day|Hour|Side]
  python main.py calendar [--month 2024-05]
"""

from __future__ import annotations
import argparse
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

ROOT = Path(__file__).resolve().parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from trade_journal.analytics.breakdown import DIMENSIONS
from trade_journal.core.config import Config, load_config
from trade_journal.core.logger import setup_logging
from trade_journal.core.types import DateFilter
from trade_journal.reporting.engine import ReportEngine
from trade_journal.storage.json_store import JsonTradeStore
from trade_journal.utils.currency import CurrencyFormatter
from trade_journal.utils.dates import parse_window
from trade_journal.utils.telegram import notify_risk_lock

logger = logging.getLogger("trade_journal")


def build_engine(config: Config, journal: Optional[Path]) -> Optional[ReportEngine]:
    path = journal or config.journal_path
    if not path.exists():
        logger.error("Journal file not found: %s", path)
        return None
    store = JsonTradeStore(
        path,
        profile=config.profile(),
        risk_settings=config.risk_settings(),
        profit_goals=config.profit_goals(),
    )
    return ReportEngine(store)


def parse_range(value: Optional[str]) -> DateFilter:
    if not value or value.lower() == "lifetime":
        return DateFilter.lifetime()
    return DateFilter.relative(parse_window(value))


def run_stats(engine: ReportEngine, fmt: CurrencyFormatter, date_filter: DateFilter) -> int:
    snap = engine.snapshot()
    s = engine.stats(date_filter, snapshot=snap)
    print("\n--- Journal Statistics ---")
    print(f"Balance: {fmt.format(engine.balance(snap))}")
    print(f"Total trades: {s.total_trades} (wins: {s.winning_trades}, losses: {s.losing_trades})")
    print(f"Win rate: {s.win_rate:.0f}%")
    print(f"Net P&L: {fmt.format(s.net_pnl)}")
    print(f"Profit factor: {s.profit_factor:.2f}")
    print(f"Expectancy: {fmt.format(s.expectancy)}/trade")
    print(f"Avg win / loss: {fmt.format(s.avg_win)} / {fmt.format(s.avg_loss)}")
    print(f"Avg R:R: {s.avg_rr:.2f}:1")
    print(f"Sharpe ratio: {s.sharpe_ratio:.2f}")
    print(f"Max drawdown: {fmt.format(s.max_dd)}")
    print(f"Streaks: {s.streaks.max_win}W / {s.streaks.max_loss}L")
    return 0


def run_risk(engine: ReportEngine, config: Config, notify: bool) -> int:
    r = engine.risk_state()
    print("\n--- Daily Risk ---")
    print(f"Drawdown: {r.current_dd:.2f}% / {r.daily_dd_limit:g}%")
    print(f"Trades today: {r.trade_count}/{r.max_trades or 'unlimited'}")
    print(f"Status: {'LOCKED - ' + r.lock_reason if r.is_locked else 'open'}")
    if notify:
        notify_risk_lock(r, config.telegram_bot_token, config.telegram_chat_id)
    return 0


def run_goals(engine: ReportEngine, fmt: CurrencyFormatter) -> int:
    g = engine.goal_progress()
    print("\n--- Profit Goals ---")
    for name in ("daily", "weekly", "monthly"):
        p = getattr(g, name)
        state = "" if p.active else " (inactive)"
        print(f"{name.capitalize()}: {fmt.format(p.pnl)} / {fmt.format(p.target)} ({p.progress:.0f}%){state}")
    return 0


def run_breakdown(engine: ReportEngine, fmt: CurrencyFormatter, dimension: str, date_filter: DateFilter) -> int:
    print(f"\n--- Breakdown by {dimension} ---")
    for g in engine.breakdown(dimension, date_filter):
        print(f"{g.name:<16} {fmt.format(g.pnl):>14}  {g.total:>4} trades  {g.win_rate:5.1f}% win")
    return 0


def run_calendar(engine: ReportEngine, fmt: CurrencyFormatter, month: Optional[str]) -> int:
    when = datetime.strptime(month, "%Y-%m") if month else datetime.now()
    print(f"\n--- {when:%B %Y} ---")
    for d in engine.calendar(when.year, when.month):
        if d.trade_count:
            print(f"{d.day:%a %d}  {fmt.format(d.pnl):>12}  {d.trade_count} trade(s) ({d.wins}W)  {d.outcome}")
    return 0


def main() -> int:
    parser = argparse.ArgumentParser(description="Trade Journal CLI")
    parser.add_argument("mode", choices=["stats", "risk", "goals", "breakdown", "calendar"])
    parser.add_argument("--config", type=Path, default=None, help="Path to config.yaml")
    parser.add_argument("--journal", type=Path, default=None, help="Journal export JSON")
    parser.add_argument("--range", dest="window", default=None, help="lifetime or e.g. 7d, 4w")
    parser.add_argument("--by", choices=DIMENSIONS, default="Symbol", help="Breakdown dimension")
    parser.add_argument("--month", default=None, help="Calendar month, YYYY-MM")
    parser.add_argument("--notify", action="store_true", help="Send Telegram alert when locked")
    args = parser.parse_args()

    config = load_config(args.config, ROOT)
    setup_logging(config.log_level, config.log_dir, config.log_file)
    engine = build_engine(config, args.journal)
    if engine is None:
        return 1
    fmt = CurrencyFormatter(engine.store.get_profile().base_currency)
    try:
        date_filter = parse_range(args.window)
    except ValueError as e:
        logger.error("%s", e)
        return 1

    if args.mode == "stats":
        return run_stats(engine, fmt, date_filter)
    if args.mode == "risk":
        return run_risk(engine, config, args.notify)
    if args.mode == "goals":
        return run_goals(engine, fmt)
    if args.mode == "breakdown":
        return run_breakdown(engine, fmt, args.by, date_filter)
    return run_calendar(engine, fmt, args.month)


if __name__ == "__main__":
    exit(main())
