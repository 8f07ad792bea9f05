"""Load report items from YAML or JSON documents on disk."""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from numbers import Real
from pathlib import Path

import yaml

from rolereport.errors import InputValidationError
from rolereport.models import Item

_PREFERRED_ENCODINGS: tuple[str, ...] = ("utf-8-sig", "cp1252")


def load_report_items(path: Path) -> tuple[Item, ...]:
    """Parse *path* into items, accepting a list or an ``items`` mapping."""

    payload = _load_document(path)
    if payload is None:
        return ()
    if isinstance(payload, Mapping) and "items" not in payload:
        raise _layout_error(path)

    entries = payload["items"] if isinstance(payload, Mapping) else payload
    if entries is None:
        return ()
    if not isinstance(entries, Sequence) or isinstance(entries, str | bytes):
        raise _layout_error(path)

    return tuple(_build_item(entry, index, path) for index, entry in enumerate(entries))


def format_display_path(path: Path) -> str:
    """Format a path for messages, quoting names that contain spaces."""

    name = path.name
    if " " in name:
        return f'"{name}"'
    return name


def _layout_error(path: Path) -> InputValidationError:
    """Build the error raised when the document holds no item list."""

    return InputValidationError(
        message=f"Item file {format_display_path(path)} must contain a list of items.",
        remediation="Provide a top-level list or an 'items' list of mappings.",
    )


def _read_text(path: Path) -> str:
    """Decode the file as UTF-8 (BOM tolerated), falling back to Windows-1252."""

    try:
        data = path.read_bytes()
    except OSError as exc:
        raise InputValidationError(
            message=f"Unable to read the item file {format_display_path(path)}.",
            remediation="Verify file permissions and that the path points to a file.",
        ) from exc

    last_error: UnicodeDecodeError | None = None
    for encoding in _PREFERRED_ENCODINGS:
        try:
            return data.decode(encoding)
        except UnicodeDecodeError as exc:
            last_error = exc

    raise InputValidationError(
        message=f"The item file {format_display_path(path)} is not UTF-8 or Windows-1252 text.",
        remediation="Re-save the file as UTF-8 and retry.",
    ) from last_error


def _load_document(path: Path) -> object:
    """Parse the decoded file with the YAML loader, which also reads JSON."""

    raw_text = _read_text(path)
    try:
        return yaml.safe_load(raw_text)
    except yaml.YAMLError as exc:
        raise InputValidationError(
            message=f"Item file {format_display_path(path)} contains invalid YAML or JSON.",
            remediation="Check the file syntax against the documented item layout.",
        ) from exc


def _build_item(entry: object, index: int, source: Path) -> Item:
    """Validate one raw entry and convert it into an ``Item``."""

    display = format_display_path(source)
    if not isinstance(entry, Mapping):
        raise InputValidationError(
            message=f"Item #{index + 1} in {display} must be a mapping.",
            remediation="Describe each item with 'id', 'name' and 'value' keys.",
        )

    missing = [key for key in ("id", "name", "value") if key not in entry]
    if missing:
        raise InputValidationError(
            message=f"Item #{index + 1} in {display} is missing: {', '.join(missing)}.",
            remediation="Describe each item with 'id', 'name' and 'value' keys.",
        )

    item_id = entry["id"]
    if isinstance(item_id, bool) or not isinstance(item_id, int | str):
        raise InputValidationError(
            message=f"Item #{index + 1} in {display} has an invalid id {item_id!r}.",
            remediation="Use an integer or a string for item ids.",
        )

    name = entry["name"]
    if not isinstance(name, str):
        raise InputValidationError(
            message=f"Item #{index + 1} in {display} must have a text name.",
            remediation="Quote the item name if it looks like a number.",
        )

    value = entry["value"]
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InputValidationError(
            message=f"Item #{index + 1} in {display} has a non-numeric value {value!r}.",
            remediation="Use a plain integer or decimal number for 'value'.",
        )

    # Priority is derived by the visibility policy, never read from input.
    return Item(id=item_id, name=name, value=value)


__all__ = ["format_display_path", "load_report_items"]
