"""
Command line entry point.

Reads crawl records from a JSON or YAML file, grades them and prints a
summary or writes a report.

Usage: headergrade crawl.json --format md --grade F --output report.md
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

import yaml

from headergrade.config import LOG_LEVELS, settings
from headergrade.report.aggregator import aggregate, summarize
from headergrade.report.exporter import EXPORT_FORMATS, display_path, export_results
from headergrade.report.view import (
    GRADE_FILTERS,
    SORT_DIRECTIONS,
    SORT_FIELDS,
    SortState,
    apply_view,
)
from headergrade.scanner.models import PageResult

logger = logging.getLogger(__name__)

YAML_SUFFIXES = (".yaml", ".yml")


def load_records(source: str) -> list[Any]:
    """
    Load crawl records from a file path, or JSON on stdin for ``-``.

    The document may be a list of records or an object with a ``pages`` list.
    """
    if source == "-":
        document = json.load(sys.stdin)
    else:
        path = Path(source)
        text = path.read_text(encoding="utf-8")
        if path.suffix.lower() in YAML_SUFFIXES:
            document = yaml.safe_load(text)
        else:
            document = json.loads(text)

    if isinstance(document, dict):
        document = document.get("pages", [])
    if not isinstance(document, list):
        raise ValueError("Input must be a list of crawl records or {'pages': [...]}")
    return document


def format_summary(results: list[PageResult], view: list[PageResult]) -> str:
    """Plain text summary table of the scan."""
    summary = summarize(results)
    grades = ", ".join(f"{g.value}={n}" for g, n in summary.grades.items())
    lines = [
        f"Pages: {summary.pages}",
        f"Average score: {summary.average_score}/100 ({summary.average_grade.value})",
        f"Grades: {grades}",
        "",
        f"{'Score':>5}  {'Grade':<5}  {'Pass':>4}  {'Fail':>4}  Page",
    ]
    for r in view:
        lines.append(
            f"{r.score:>5}  {r.grade.value:<5}  {r.pass_count:>4}  {r.fail_count:>4}  "
            f"{display_path(r.url)}"
        )
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="headergrade",
        description="Grade the HTTP security headers of crawled pages",
    )
    parser.add_argument("input", help="JSON or YAML file with crawl records ('-' for stdin)")
    parser.add_argument(
        "--format", choices=EXPORT_FORMATS, help="Write a report instead of a summary"
    )
    parser.add_argument("--grade", choices=GRADE_FILTERS, default="all")
    parser.add_argument("--sort", choices=list(SORT_FIELDS), default="score")
    parser.add_argument("--direction", choices=SORT_DIRECTIONS, default="asc")
    parser.add_argument("--output", help="Report path (defaults to stdout)")
    parser.add_argument(
        "--log-level", type=str.upper, choices=LOG_LEVELS, default=settings.log_level
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    try:
        records = load_records(args.input)
    except (OSError, ValueError, yaml.YAMLError) as e:
        logger.error(f"Failed to read crawl records from {args.input}: {e}")
        return 1

    results = aggregate(records)
    view = apply_view(results, args.grade, SortState(args.sort, args.direction))
    logger.info(f"Graded {len(results)} pages from {len(records)} records")

    if not args.format:
        print(format_summary(results, view))
        return 0

    report = export_results(view, args.format)
    if not report:
        logger.warning("No pages match the current view, nothing written")
        return 0

    if args.output:
        Path(args.output).write_text(report, encoding="utf-8")
        logger.info(f"Wrote {args.format} report to {args.output}")
    else:
        print(report)
    return 0


if __name__ == "__main__":
    sys.exit(main())
