"""Dataclasses describing report items, users and report types."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

ItemId = int | str
Amount = int | float


class Role(str, Enum):
    """Roles with dedicated visibility rules; any other string is allowed."""

    ADMIN = "ADMIN"
    USER = "USER"


class ReportType(str, Enum):
    """Output formats with a registered formatter."""

    CSV = "CSV"
    HTML = "HTML"


@dataclass(frozen=True)
class Item:
    """A single report line entry."""

    id: ItemId
    name: str
    value: Amount
    priority: bool | None = None


@dataclass(frozen=True)
class User:
    """The requesting user; only ``role`` drives visibility decisions."""

    name: str
    role: str

    def __post_init__(self) -> None:  # pragma: no cover - simple normalization
        if isinstance(self.role, Role):
            object.__setattr__(self, "role", self.role.value)


__all__ = [
    "Amount",
    "Item",
    "ItemId",
    "ReportType",
    "Role",
    "User",
]
