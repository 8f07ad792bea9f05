"""Execution orchestrator for Role Report CLI commands."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from rolereport.errors import InputValidationError, RoleReportError, UnknownFormatError
from rolereport.exit_codes import ExitCode
from rolereport.ingestion import format_display_path, load_report_items
from rolereport.models import User
from rolereport.service import generate_report

logger = logging.getLogger("rolereport.orchestration.runner")


@dataclass(frozen=True)
class ExecutionOutcome:
    """Result of invoking the report pipeline."""

    exit_code: ExitCode
    status: str
    message: str | None = None
    remediation: str | None = None
    report: str | None = None


_ERROR_MAPPINGS: tuple[
    tuple[type[RoleReportError], ExitCode, str, str | None],
    ...,
] = (
    (
        InputValidationError,
        ExitCode.INVALID_INPUT,
        "Input validation failed.",
        "Double-check the item file path and its contents.",
    ),
    (
        UnknownFormatError,
        ExitCode.UNKNOWN_FORMAT,
        "Unknown report format requested.",
        "Run `rolereport formats` to list the supported report types.",
    ),
)


def run_report(
    items_path: Path,
    *,
    report_type: str,
    user_name: str,
    role: str,
    output_path: Path | None = None,
) -> ExecutionOutcome:
    """Load items, render the report and optionally write it to disk."""

    try:
        user = _build_user(user_name, role)
        items = load_report_items(items_path)
        logger.info(
            "Loaded report items",
            extra={"items_file": format_display_path(items_path), "item_count": len(items)},
        )
        report = generate_report(report_type, user, items)
        if output_path is not None:
            _write_report(output_path, report)
    except RoleReportError as error:
        return handle_domain_error(error)
    except Exception as error:  # pragma: no cover - defensive
        logger.exception("Unexpected error occurred while generating the report.")
        return ExecutionOutcome(
            exit_code=ExitCode.UNEXPECTED_ERROR,
            status="failure",
            message=str(error) or "An unexpected error occurred while generating the report.",
            remediation="Re-run without --quiet and inspect the logs for details.",
        )

    if output_path is not None:
        message = f"Wrote {report_type} report to {format_display_path(output_path)}."
        logger.info(message)
        return ExecutionOutcome(exit_code=ExitCode.SUCCESS, status="success", message=message)

    return ExecutionOutcome(exit_code=ExitCode.SUCCESS, status="success", report=report)


def _build_user(user_name: str, role: str) -> User:
    """Build the requesting user from CLI values, rejecting blank fields."""

    name = (user_name or "").strip()
    if not name:
        raise InputValidationError(
            message="User name cannot be empty.",
            remediation="Pass the requesting user's name with --user.",
        )
    role_key = (role or "").strip()
    if not role_key:
        raise InputValidationError(
            message="Role cannot be empty.",
            remediation="Pass ADMIN, USER or another role name with --role.",
        )
    return User(name=name, role=role_key)


def _write_report(path: Path, report: str) -> None:
    """Write the rendered report as UTF-8 with a trailing newline."""

    try:
        path.write_text(report + "\n", encoding="utf-8")
    except OSError as exc:
        raise InputValidationError(
            message=f"Unable to write the report to {format_display_path(path)}.",
            remediation="Check that the target directory exists and is writable.",
        ) from exc


def handle_domain_error(error: RoleReportError) -> ExecutionOutcome:
    """Translate a domain error into an execution outcome and log remediation hints."""

    exit_code, default_message, default_remediation = _map_error(error)
    message = error.message or default_message
    remediation = error.remediation or default_remediation

    logger.error(message, extra={"exit_code": int(exit_code)})
    if remediation:
        logger.error("Remediation: %s", remediation)

    return ExecutionOutcome(
        exit_code=exit_code,
        status="failure",
        message=message,
        remediation=remediation,
    )


def _map_error(error: RoleReportError) -> tuple[ExitCode, str, str | None]:
    """Match an error instance to its configured exit code and remediation."""

    for error_type, exit_code, message, remediation in _ERROR_MAPPINGS:
        if isinstance(error, error_type):
            return exit_code, message, remediation

    return (
        ExitCode.UNEXPECTED_ERROR,
        "The report could not be generated.",
        "Re-run `rolereport render` without --quiet and attach the item file to the bug report.",
    )


__all__ = ["ExecutionOutcome", "handle_domain_error", "run_report"]
