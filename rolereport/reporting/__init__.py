"""Report formatters and their registry."""
from __future__ import annotations

from .base import ReportFormatter
from .csv_formatter import CsvReportFormatter
from .html_formatter import HtmlReportFormatter
from .registry import available_report_types, resolve_formatter

__all__ = [
    "CsvReportFormatter",
    "HtmlReportFormatter",
    "ReportFormatter",
    "available_report_types",
    "resolve_formatter",
]
