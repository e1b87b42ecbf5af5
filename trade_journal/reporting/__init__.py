"""Reporting: store-driven journal report engine."""

from trade_journal.reporting.engine import JournalReport, JournalSnapshot, ReportEngine

__all__ = ["JournalReport", "JournalSnapshot", "ReportEngine"]
