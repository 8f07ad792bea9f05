"""Single entry point composing the visibility policy with a formatter."""
from __future__ import annotations

import logging
from typing import Iterable

from rolereport.models import Item, ReportType, User
from rolereport.policy import apply_visibility_policy
from rolereport.reporting import resolve_formatter

logger = logging.getLogger("rolereport.service")


def generate_report(
    report_type: ReportType | str,
    user: User,
    items: Iterable[Item],
) -> str:
    """Render the items visible to *user* in the requested format.

    Raises ``UnknownFormatError`` when *report_type* is neither CSV nor HTML.
    """

    formatter = resolve_formatter(report_type)
    source = tuple(items)
    visible = apply_visibility_policy(user, source)
    logger.debug(
        "Rendering report",
        extra={
            "report_type": str(getattr(report_type, "value", report_type)),
            "role": user.role,
            "input_items": len(source),
            "visible_items": len(visible),
        },
    )
    return formatter.render(user, visible)


__all__ = ["generate_report"]
