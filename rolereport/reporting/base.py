"""Shared rendering contract for report formatters."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from rolereport.models import Amount, Item, User

# Whole floats at or above this magnitude keep exponent notation.
_EXPONENT_LIMIT = 1e21


class ReportFormatter(ABC):
    """Renders a header, a body and a footer for one output format.

    Subclasses must implement every hook; a variant missing one cannot be
    instantiated. Formatters hold no state and are shared between calls.
    """

    __slots__ = ()

    def render(self, user: User, items: Sequence[Item]) -> str:
        """Assemble the full report and strip surrounding whitespace."""

        report = self.format_header(user)
        report += self.format_body(user, items)
        report += self.format_footer(items)
        return report.strip()

    @staticmethod
    def calculate_total(items: Sequence[Item]) -> Amount:
        """Return the sum of item values shown in every footer."""

        return sum(item.value for item in items)

    @staticmethod
    def format_amount(value: Amount) -> str:
        """Render a value or total, dropping the fraction of whole floats."""

        if isinstance(value, float) and value.is_integer() and abs(value) < _EXPONENT_LIMIT:
            return str(int(value))
        return str(value)

    @abstractmethod
    def format_header(self, user: User) -> str:
        """Return the text preceding the item rows."""

    @abstractmethod
    def format_body(self, user: User, items: Sequence[Item]) -> str:
        """Return the item rows."""

    @abstractmethod
    def format_footer(self, items: Sequence[Item]) -> str:
        """Return the closing section including the total."""


__all__ = ["ReportFormatter"]
