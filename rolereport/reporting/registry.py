"""Closed mapping from report types to their formatter singletons."""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from rolereport.errors import UnknownFormatError
from rolereport.models import ReportType
from rolereport.reporting.base import ReportFormatter
from rolereport.reporting.csv_formatter import CsvReportFormatter
from rolereport.reporting.html_formatter import HtmlReportFormatter

_FORMATTERS: Mapping[ReportType, ReportFormatter] = MappingProxyType(
    {
        ReportType.CSV: CsvReportFormatter(),
        ReportType.HTML: HtmlReportFormatter(),
    }
)


def available_report_types() -> tuple[str, ...]:
    """Return the supported report type keys in declaration order."""

    return tuple(report_type.value for report_type in _FORMATTERS)


def resolve_formatter(report_type: ReportType | str) -> ReportFormatter:
    """Return the formatter registered for *report_type*.

    Raises ``UnknownFormatError`` carrying the requested key when the type is
    not one of the registered formats.
    """

    try:
        key = ReportType(report_type)
    except ValueError as exc:
        raise UnknownFormatError(report_type, available_report_types()) from exc

    formatter = _FORMATTERS.get(key)
    if formatter is None:  # pragma: no cover - every ReportType is registered
        raise UnknownFormatError(report_type, available_report_types())
    return formatter


__all__ = ["available_report_types", "resolve_formatter"]
