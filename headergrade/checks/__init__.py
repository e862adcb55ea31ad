"""Security header checks and the fixed check catalog."""

from headergrade.checks.catalog import CHECK_CATALOG, catalog_total_weight, get_check
from headergrade.checks.headers import find_header, truncate_value
from headergrade.checks.protocol import (
    SEVERITY_WEIGHTS,
    CheckDefinition,
    CheckOutcome,
    CheckResult,
    Severity,
)

__all__ = [
    "CHECK_CATALOG",
    "SEVERITY_WEIGHTS",
    "CheckDefinition",
    "CheckOutcome",
    "CheckResult",
    "Severity",
    "catalog_total_weight",
    "find_header",
    "get_check",
    "truncate_value",
]
