"""Domain-specific exception hierarchy for Role Report."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass
class RoleReportError(Exception):
    """Base exception for report generation failures.

    ``remediation`` is logged after the message by the CLI runner.
    """

    message: str
    remediation: str | None = None

    def __post_init__(self) -> None:  # pragma: no cover - dataclass validation hook
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class InputValidationError(RoleReportError):
    """Raised when the CLI receives invalid input or a malformed item file."""


class UnknownFormatError(RoleReportError):
    """Raised when no formatter is registered for the requested report type."""

    def __init__(self, report_type: object, supported: tuple[str, ...] = ()) -> None:
        self.report_type = report_type
        remediation = None
        if supported:
            remediation = f"Choose one of: {', '.join(supported)}."
        super().__init__(
            message=f"Unknown report format: {report_type}",
            remediation=remediation,
        )


__all__ = [
    "RoleReportError",
    "InputValidationError",
    "UnknownFormatError",
]
