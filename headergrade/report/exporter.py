"""Serialization of page results to JSON, CSV and Markdown reports."""

import json
import logging
from collections.abc import Callable, Sequence
from typing import Any, Literal
from urllib.parse import urlparse

from headergrade.scanner.models import PageResult

logger = logging.getLogger(__name__)

ExportFormat = Literal["json", "csv", "md"]

EXPORT_MEDIA_TYPES: dict[str, str] = {
    "json": "application/json",
    "csv": "text/csv",
    "md": "text/markdown",
}

EXPORT_FORMATS = tuple(EXPORT_MEDIA_TYPES)

CSV_HEADER = "URL,Score,Grade,Pass,Fail"

MARKDOWN_TITLE = "# Security Scan Report"
MARKDOWN_HEADER = "| URL | Score | Grade | Pass | Fail |"
MARKDOWN_SEPARATOR = "|---|---|---|---|---|"

# Schemes whose URLs always carry a path, "/" when empty
HIERARCHICAL_SCHEMES = frozenset({"http", "https", "ftp", "ws", "wss", "file"})


def display_path(url: str) -> str:
    """
    Path portion of a URL, or the raw string when it does not parse as one.

    Any string with a scheme counts as a URL. Hierarchical schemes report an
    empty path as ``/``; opaque ones such as ``mailto:`` keep their path as is.
    """
    try:
        parsed = urlparse(url)
    except ValueError:
        return url

    if not parsed.scheme:
        return url
    if parsed.scheme in HIERARCHICAL_SCHEMES:
        return parsed.path or "/"
    return parsed.path


def report_filename(fmt: str) -> str:
    """File name downstream consumers expect for a report format."""
    return f"security-report.{fmt}"


def _page_to_dict(result: PageResult) -> dict[str, Any]:
    checks = []
    for check in result.checks:
        entry: dict[str, Any] = {
            "name": check.definition.name,
            "severity": check.definition.severity.value,
            "pass": check.outcome.passed,
        }
        # Absent values are left out rather than written as null
        if check.outcome.value is not None:
            entry["value"] = check.outcome.value
        if check.outcome.detail is not None:
            entry["detail"] = check.outcome.detail
        checks.append(entry)

    return {
        "url": result.url,
        "score": result.score,
        "grade": result.grade.value,
        "checks": checks,
    }


def to_json(results: Sequence[PageResult]) -> str:
    return json.dumps(
        [_page_to_dict(r) for r in results], indent=2, ensure_ascii=False
    )


def to_csv(results: Sequence[PageResult]) -> str:
    rows = [
        f'"{r.url}",{r.score},{r.grade.value},{r.pass_count},{r.fail_count}'
        for r in results
    ]
    return "\n".join([CSV_HEADER, *rows])


def to_markdown(results: Sequence[PageResult]) -> str:
    rows = [
        f"| {display_path(r.url)} | {r.score} | {r.grade.value} "
        f"| {r.pass_count} | {r.fail_count} |"
        for r in results
    ]
    return "\n".join([MARKDOWN_TITLE, "", MARKDOWN_HEADER, MARKDOWN_SEPARATOR, *rows])


_EXPORTERS: dict[str, Callable[[Sequence[PageResult]], str]] = {
    "json": to_json,
    "csv": to_csv,
    "md": to_markdown,
}


def export_results(results: Sequence[PageResult], fmt: ExportFormat) -> str:
    """
    Serialize an already filtered and sorted result set.

    Args:
        results: Page results in display order.
        fmt: One of ``json``, ``csv`` or ``md``.

    Returns:
        The report text, or an empty string when there is nothing to export.
        Callers should skip writing files for an empty report.

    Raises:
        ValueError: If the format is not supported.
    """
    if fmt not in _EXPORTERS:
        raise ValueError(f"Export format must be one of {list(EXPORT_FORMATS)}")

    if not results:
        logger.debug(f"Nothing to export as {fmt}")
        return ""

    return _EXPORTERS[fmt](results)
