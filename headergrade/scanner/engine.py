"""Scan engine that applies the check catalog to crawled pages."""

import logging
from collections.abc import Iterable

from headergrade.checks.catalog import CHECK_CATALOG
from headergrade.checks.protocol import CheckDefinition, CheckResult
from headergrade.scanner.models import PageInput

logger = logging.getLogger(__name__)


class ScanEngine:
    """
    Runs a set of checks against one page at a time.

    The engine holds no per-page state, so a single instance can be shared
    across threads or reused for any number of pages.
    """

    def __init__(self, enabled_checks: Iterable[str] | None = None):
        """
        Initialize the scan engine.

        Args:
            enabled_checks: Names of the checks to run, in any order.
                            If None, the full catalog is used.
        """
        if enabled_checks is None:
            self.checks: tuple[CheckDefinition, ...] = CHECK_CATALOG
        else:
            wanted = set(enabled_checks)
            unknown = [name for name in wanted if name not in _catalog_names()]
            if unknown:
                raise ValueError(f"Unknown checks: {', '.join(sorted(unknown))}")
            # Keep catalog order whatever order the names were given in
            self.checks = tuple(
                check for check in CHECK_CATALOG if check.name in wanted
            )

        logger.debug(f"Scan engine initialized with {len(self.checks)} checks")

    def evaluate(self, page: PageInput) -> list[CheckResult]:
        """Apply every enabled check, in catalog order, to a single page."""
        results = [check.run(page.headers, page.content) for check in self.checks]
        logger.debug(
            f"Evaluated {page.url}: "
            f"{sum(1 for r in results if r.passed)}/{len(results)} checks passed"
        )
        return results


def _catalog_names() -> set[str]:
    return {check.name for check in CHECK_CATALOG}


_default_engine = ScanEngine()


def evaluate_page(page: PageInput) -> list[CheckResult]:
    """Apply the full check catalog to one page."""
    return _default_engine.evaluate(page)
