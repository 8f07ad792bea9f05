"""HTML document report output."""
from __future__ import annotations

from typing import Sequence

from rolereport.models import Item, User
from rolereport.reporting.base import ReportFormatter

_PRIORITY_STYLE = ' style="font-weight:bold;"'


class HtmlReportFormatter(ReportFormatter):
    """Single-table HTML page; item fields are inserted without escaping."""

    __slots__ = ()

    def format_header(self, user: User) -> str:
        return (
            "<html><body>\n"
            "<h1>Relatório</h1>\n"
            f"<h2>Usuário: {user.name}</h2>\n"
            "<table>\n"
            "<tr><th>ID</th><th>Nome</th><th>Valor</th></tr>\n"
        )

    def format_body(self, user: User, items: Sequence[Item]) -> str:
        # Rows do not depend on the user.
        return "".join(self._format_row(item) for item in items)

    def format_footer(self, items: Sequence[Item]) -> str:
        total = self.calculate_total(items)
        return (
            "</table>\n"
            f"<h3>Total: {self.format_amount(total)}</h3>\n"
            "</body></html>\n"
        )

    def _format_row(self, item: Item) -> str:
        """Render one table row, bold when the item is flagged as priority."""

        style = _PRIORITY_STYLE if item.priority else ""
        value = self.format_amount(item.value)
        return (
            f"<tr{style}><td>{item.id}</td><td>{item.name}</td>"
            f"<td>{value}</td></tr>\n"
        )


__all__ = ["HtmlReportFormatter"]
