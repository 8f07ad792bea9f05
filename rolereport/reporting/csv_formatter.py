"""Comma-separated report output."""
from __future__ import annotations

from typing import Sequence

from rolereport.models import Item, User
from rolereport.reporting.base import ReportFormatter

_HEADER = "ID,NOME,VALOR,USUARIO"
_TOTAL_LABEL = "Total,,"


class CsvReportFormatter(ReportFormatter):
    """Plain CSV rows; field values are written without quoting."""

    __slots__ = ()

    def format_header(self, user: User) -> str:
        return f"{_HEADER}\n"

    def format_body(self, user: User, items: Sequence[Item]) -> str:
        return "\n".join(self._format_row(item, user) for item in items) + "\n"

    def format_footer(self, items: Sequence[Item]) -> str:
        total = self.calculate_total(items)
        return f"\n{_TOTAL_LABEL}\n{self.format_amount(total)},,\n"

    def _format_row(self, item: Item, user: User) -> str:
        """Render one comma-joined item line."""

        value = self.format_amount(item.value)
        return f"{item.id},{item.name},{value},{user.name}"


__all__ = ["CsvReportFormatter"]
