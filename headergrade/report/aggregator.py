"""Builds page results from crawl records and computes fleet-wide statistics."""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from headergrade.scanner.engine import evaluate_page
from headergrade.scanner.models import PageInput, PageResult
from headergrade.scorer.grades import Grade, grade_from_score
from headergrade.scorer.weighted_scorer import calculate_score, round_half_up
from headergrade.utils.pages import coerce_page

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScanSummary:
    """Fleet-wide statistics over a set of page results."""

    pages: int
    average_score: int
    average_grade: Grade
    grades: dict[Grade, int]


def scan_page(page: PageInput) -> PageResult:
    """Evaluate and score a single page."""
    checks = evaluate_page(page)
    pass_count = sum(1 for check in checks if check.passed)

    return PageResult(
        url=page.url,
        headers=page.headers,
        score=calculate_score(checks),
        checks=tuple(checks),
        pass_count=pass_count,
        fail_count=len(checks) - pass_count,
    )


def aggregate(pages: Iterable[PageInput | Mapping[str, Any]]) -> list[PageResult]:
    """
    Build page results for every usable crawl record, preserving input order.

    Records without a URL are skipped; crawlers stream partial records and
    those are not errors.

    Args:
        pages: PageInput objects or raw ``{url, headers, content}`` mappings.

    Returns:
        One PageResult per record that carries a URL.
    """
    results: list[PageResult] = []
    skipped = 0

    for raw in pages:
        page = coerce_page(raw)
        if page is None:
            skipped += 1
            continue
        results.append(scan_page(page))

    if skipped:
        logger.debug(f"Skipped {skipped} crawl records without a URL")

    return results


def average_score(results: list[PageResult]) -> int:
    """Rounded mean score, 0 when there are no results."""
    if not results:
        return 0
    return round_half_up(Decimal(sum(r.score for r in results)) / len(results))


def grade_histogram(results: Iterable[PageResult]) -> dict[Grade, int]:
    """Count results per grade; every grade is present in the returned dict."""
    histogram = {grade: 0 for grade in Grade}
    for result in results:
        histogram[result.grade] += 1
    return histogram


def summarize(results: list[PageResult]) -> ScanSummary:
    """Page count, average score and grade breakdown for a result set."""
    average = average_score(results)
    return ScanSummary(
        pages=len(results),
        average_score=average,
        average_grade=grade_from_score(average),
        grades=grade_histogram(results),
    )
