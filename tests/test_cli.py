from __future__ import annotations

import logging
from pathlib import Path

import pytest
from typer.testing import CliRunner

from rolereport import __version__
from rolereport.cli import ExitCode, app, configure_logging

runner = CliRunner()


@pytest.fixture(autouse=True)
def reset_logging_state() -> None:
    """Ensure each test runs with a clean logging configuration."""

    configure_logging._configured = False  # type: ignore[attr-defined]
    configure_logging._level = logging.INFO  # type: ignore[attr-defined]
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(logging.NOTSET)
    yield
    root.handlers.clear()
    root.setLevel(logging.NOTSET)
    configure_logging._configured = False  # type: ignore[attr-defined]
    configure_logging._level = logging.INFO  # type: ignore[attr-defined]


@pytest.fixture
def items_file(tmp_path: Path) -> Path:
    path = tmp_path / "items.yaml"
    path.write_text(
        "- {id: 1, name: A, value: 300}\n"
        "- {id: 2, name: B, value: 1200}\n",
        encoding="utf-8",
    )
    return path


def _normalize(output: str) -> str:
    """Collapse whitespace to simplify assertions across Rich formatting."""

    return " ".join(output.split())


def test_root_help_lists_commands() -> None:
    result = runner.invoke(app, ["--help"])

    assert result.exit_code == int(ExitCode.SUCCESS)
    normalized = _normalize(result.output)
    assert "render" in normalized
    assert "formats" in normalized
    assert "--quiet" in normalized


def test_version_flag_prints_version() -> None:
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == int(ExitCode.SUCCESS)
    assert result.output.strip() == __version__


def test_formats_lists_report_types() -> None:
    result = runner.invoke(app, ["formats"])

    assert result.exit_code == int(ExitCode.SUCCESS)
    assert result.output.split() == ["CSV", "HTML"]


def test_render_requires_items_and_user() -> None:
    result = runner.invoke(app, ["render"])

    assert result.exit_code == int(ExitCode.INVALID_INPUT)
    assert "Missing option" in result.output or "Usage" in result.output


def test_render_csv_for_admin(items_file: Path) -> None:
    result = runner.invoke(
        app,
        ["--quiet", "render", "--items", str(items_file), "--user", "Bob", "--role", "ADMIN"],
    )

    assert result.exit_code == int(ExitCode.SUCCESS)
    assert "ID,NOME,VALOR,USUARIO" in result.output
    assert "1,A,300,Bob" in result.output
    assert "2,B,1200,Bob" in result.output
    assert "1500,," in result.output


def test_render_html_defaults_to_user_role(items_file: Path) -> None:
    result = runner.invoke(
        app,
        ["--quiet", "render", "-i", str(items_file), "-u", "Ana", "-f", "HTML"],
    )

    assert result.exit_code == int(ExitCode.SUCCESS)
    assert "<td>A</td>" in result.output
    assert "<td>B</td>" not in result.output
    assert "<h3>Total: 300</h3>" in result.output


def test_render_unknown_format_exits_with_dedicated_code(items_file: Path) -> None:
    result = runner.invoke(
        app,
        ["render", "--items", str(items_file), "--user", "Bob", "--format", "XML"],
    )

    assert result.exit_code == int(ExitCode.UNKNOWN_FORMAT)
    assert "ID,NOME" not in result.output


def test_render_writes_output_file(items_file: Path, tmp_path: Path) -> None:
    target = tmp_path / "report.csv"

    result = runner.invoke(
        app,
        [
            "render",
            "--items",
            str(items_file),
            "--user",
            "Bob",
            "--role",
            "ADMIN",
            "--output",
            str(target),
        ],
    )

    assert result.exit_code == int(ExitCode.SUCCESS)
    assert "Wrote CSV report to report.csv." in _normalize(result.output)
    assert target.read_text(encoding="utf-8").startswith("ID,NOME,VALOR,USUARIO\n1,A,300,Bob")


def test_render_rejects_malformed_items(tmp_path: Path) -> None:
    broken = tmp_path / "items.yaml"
    broken.write_text("- {id: 1, name: A}\n", encoding="utf-8")

    result = runner.invoke(app, ["render", "--items", str(broken), "--user", "Bob"])

    assert result.exit_code == int(ExitCode.INVALID_INPUT)


def test_configure_logging_is_idempotent() -> None:
    configure_logging()
    configure_logging(quiet=True)

    root = logging.getLogger()
    assert len(root.handlers) == 1
    assert root.level == logging.WARNING
