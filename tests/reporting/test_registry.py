from __future__ import annotations

from typing import Sequence

import pytest

from rolereport.errors import UnknownFormatError
from rolereport.models import Item, ReportType, User
from rolereport.reporting import (
    CsvReportFormatter,
    HtmlReportFormatter,
    ReportFormatter,
    available_report_types,
    resolve_formatter,
)


def test_resolve_formatter_returns_distinct_formatters() -> None:
    csv_formatter = resolve_formatter("CSV")
    html_formatter = resolve_formatter("HTML")

    assert isinstance(csv_formatter, CsvReportFormatter)
    assert isinstance(html_formatter, HtmlReportFormatter)
    assert csv_formatter is not html_formatter


def test_resolve_formatter_accepts_enum_members() -> None:
    assert resolve_formatter(ReportType.HTML) is resolve_formatter("HTML")


@pytest.mark.parametrize("key", ["XML", "csv", "", "PDF"])
def test_resolve_formatter_rejects_unknown_keys(key: str) -> None:
    with pytest.raises(UnknownFormatError) as exc:
        resolve_formatter(key)

    assert exc.value.report_type == key
    assert exc.value.message == f"Unknown report format: {key}"
    assert exc.value.remediation == "Choose one of: CSV, HTML."


def test_unknown_format_message_names_key() -> None:
    with pytest.raises(UnknownFormatError) as exc:
        resolve_formatter("XML")

    assert str(exc.value) == "Unknown report format: XML"


def test_available_report_types_lists_supported_keys() -> None:
    assert available_report_types() == ("CSV", "HTML")


def test_formatter_missing_a_hook_cannot_be_instantiated() -> None:
    class HeaderlessFormatter(ReportFormatter):
        def format_body(self, user: User, items: Sequence[Item]) -> str:
            return ""

        def format_footer(self, items: Sequence[Item]) -> str:
            return ""

    with pytest.raises(TypeError):
        HeaderlessFormatter()


def test_calculate_total_sums_values() -> None:
    items = (Item(id=1, name="A", value=1.5), Item(id=2, name="B", value=2))

    assert ReportFormatter.calculate_total(items) == 3.5
    assert ReportFormatter.calculate_total(()) == 0


@pytest.mark.parametrize(
    ("value", "expected"),
    [(1500, "1500"), (1500.0, "1500"), (-3.0, "-3"), (2.25, "2.25"), (1e21, "1e+21")],
)
def test_format_amount_drops_fraction_of_whole_floats(value: float, expected: str) -> None:
    assert ReportFormatter.format_amount(value) == expected
