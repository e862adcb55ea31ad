"""Aggregation, view shaping and export of scan results."""

from headergrade.report.aggregator import (
    ScanSummary,
    aggregate,
    average_score,
    grade_histogram,
    scan_page,
    summarize,
)
from headergrade.report.exporter import (
    EXPORT_FORMATS,
    EXPORT_MEDIA_TYPES,
    display_path,
    export_results,
    report_filename,
)
from headergrade.report.view import (
    SortState,
    apply_view,
    filter_by_grade,
    sort_results,
)

__all__ = [
    "EXPORT_FORMATS",
    "EXPORT_MEDIA_TYPES",
    "ScanSummary",
    "SortState",
    "aggregate",
    "apply_view",
    "average_score",
    "display_path",
    "export_results",
    "filter_by_grade",
    "grade_histogram",
    "report_filename",
    "scan_page",
    "sort_results",
    "summarize",
]
