"""Role-based visibility rules applied to report items before rendering."""
from __future__ import annotations

from dataclasses import replace
from typing import Iterable

from rolereport.models import Item, Role, User

PRIORITY_THRESHOLD = 1000
USER_THRESHOLD = 500


def apply_visibility_policy(user: User, items: Iterable[Item]) -> tuple[Item, ...]:
    """Return the items *user* may see, annotated for admins.

    Admins see every item with ``priority`` recomputed from its value. Regular
    users only see items at or below ``USER_THRESHOLD``. Any other role gets
    the items back untouched.
    """

    if user.role == Role.ADMIN:
        return _annotate_priority(items)
    if user.role == Role.USER:
        return _filter_user_items(items)
    # Unrecognised roles fall through without filtering or annotation.
    return tuple(items)


def _annotate_priority(items: Iterable[Item]) -> tuple[Item, ...]:
    return tuple(
        replace(item, priority=item.value > PRIORITY_THRESHOLD) for item in items
    )


def _filter_user_items(items: Iterable[Item]) -> tuple[Item, ...]:
    return tuple(item for item in items if item.value <= USER_THRESHOLD)


__all__ = [
    "PRIORITY_THRESHOLD",
    "USER_THRESHOLD",
    "apply_visibility_policy",
]
