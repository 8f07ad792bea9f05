"""Input loaders feeding the report service."""
from __future__ import annotations

from .items_file import format_display_path, load_report_items

__all__ = ["format_display_path", "load_report_items"]
