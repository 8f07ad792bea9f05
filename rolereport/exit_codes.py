"""Shared exit code definitions for Role Report CLI operations."""
from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Deterministic process exit codes."""

    SUCCESS = 0
    UNEXPECTED_ERROR = 1
    INVALID_INPUT = 2
    UNKNOWN_FORMAT = 3


__all__ = ["ExitCode"]
