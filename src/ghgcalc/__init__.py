"""Greenhouse-gas emission calculators for industrial carbon inventories."""

from .events import EmissionReport, ReportEmitter
from .summary import INDUSTRIES, IndustryLedger, SummaryTotals, summarize, summary_rows

__version__ = "0.1.0"

__all__ = [
    "EmissionReport",
    "INDUSTRIES",
    "IndustryLedger",
    "ReportEmitter",
    "SummaryTotals",
    "summarize",
    "summary_rows",
]
