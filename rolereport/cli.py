from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich.logging import RichHandler

from . import __version__
from .exit_codes import ExitCode
from .models import ReportType, Role
from .orchestration import run_report
from .reporting import available_report_types

APP_NAME = "rolereport"
_LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

app = typer.Typer(
    name=APP_NAME,
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


def configure_logging(*, quiet: bool = False) -> None:
    """Initialise application-wide logging."""

    level = logging.WARNING if quiet else logging.INFO
    root = logging.getLogger()

    if getattr(configure_logging, "_configured", False):
        root.setLevel(level)
        for handler in root.handlers:
            handler.setLevel(level)
        configure_logging._level = level
        return

    handler = RichHandler(
        rich_tracebacks=True,
        show_path=False,
        markup=False,
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt=_DATE_FORMAT))

    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)

    configure_logging._configured = True
    configure_logging._level = level


def _is_quiet_mode() -> bool:
    """Determine if the CLI is currently running in quiet mode."""

    return getattr(configure_logging, "_level", logging.INFO) == logging.WARNING


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    quiet: bool = typer.Option(
        False,
        "--quiet",
        help="Reduce log output to warnings and errors.",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show the Role Report version and exit.",
    ),
) -> None:
    """Configure logging and handle global options."""

    configure_logging(quiet=quiet)

    if version:
        typer.echo(__version__)
        raise typer.Exit(code=int(ExitCode.SUCCESS))

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit(code=int(ExitCode.SUCCESS))


@app.command("render")
def render(
    items: Path = typer.Option(
        ...,
        "--items",
        "-i",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        help="Path to a YAML or JSON file listing the report items.",
    ),
    user: str = typer.Option(
        ...,
        "--user",
        "-u",
        help="Name of the user requesting the report.",
    ),
    role: str = typer.Option(
        Role.USER.value,
        "--role",
        "-r",
        help="Role of the requesting user (ADMIN, USER or any other name).",
        show_default=True,
    ),
    report_format: str = typer.Option(
        ReportType.CSV.value,
        "--format",
        "-f",
        help="Report format key (CSV or HTML).",
        show_default=True,
    ),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        file_okay=True,
        dir_okay=False,
        help="Write the report to this file instead of standard output.",
    ),
) -> None:
    """Render the items visible to the user in the chosen format."""

    outcome = run_report(
        items,
        report_type=report_format,
        user_name=user,
        role=role,
        output_path=output,
    )

    if outcome.message and not _is_quiet_mode():
        typer.echo(outcome.message)

    if outcome.report is not None:
        typer.echo(outcome.report)

    raise typer.Exit(code=int(outcome.exit_code))


@app.command("formats")
def formats() -> None:
    """List the supported report formats."""

    for report_type in available_report_types():
        typer.echo(report_type)
    raise typer.Exit(code=int(ExitCode.SUCCESS))


def entrypoint() -> None:
    """Execute the Typer application."""

    app()


__all__ = ["app", "entrypoint", "configure_logging", "ExitCode"]
