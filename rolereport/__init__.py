"""Role-filtered CSV and HTML report rendering."""
from __future__ import annotations

__version__ = "0.1.0"

from .errors import InputValidationError, RoleReportError, UnknownFormatError
from .models import Item, ReportType, Role, User
from .policy import apply_visibility_policy
from .service import generate_report

__all__ = (
    "__version__",
    "InputValidationError",
    "Item",
    "ReportType",
    "Role",
    "RoleReportError",
    "UnknownFormatError",
    "User",
    "apply_visibility_policy",
    "generate_report",
)
