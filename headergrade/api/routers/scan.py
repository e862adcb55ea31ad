"""Header scan and report export endpoints."""

import logging
import time
from datetime import UTC, datetime

from fastapi import APIRouter, HTTPException, status
from starlette.responses import Response

from headergrade.api.metrics import PAGE_GRADES, PAGES_SCANNED
from headergrade.api.schemas import (
    ERROR_RESPONSES,
    CheckSchema,
    PageResultSchema,
    ScanRequest,
    ScanResponse,
    SummarySchema,
)
from headergrade.checks.catalog import CHECK_CATALOG
from headergrade.config import settings
from headergrade.report.aggregator import aggregate, summarize
from headergrade.report.exporter import (
    EXPORT_FORMATS,
    EXPORT_MEDIA_TYPES,
    export_results,
    report_filename,
)
from headergrade.report.view import SortState, apply_view
from headergrade.scanner.models import PageResult

logger = logging.getLogger(__name__)

router = APIRouter(tags=["scan"])


def _scan(request: ScanRequest) -> list[PageResult]:
    """Evaluate every record of the request and record metrics."""
    if len(request.pages) > settings.max_pages_per_request:
        raise HTTPException(
            status_code=413,
            detail=f"Too many pages: at most {settings.max_pages_per_request} per request",
        )

    results = aggregate(page.model_dump() for page in request.pages)

    PAGES_SCANNED.inc(len(results))
    for result in results:
        PAGE_GRADES.labels(grade=result.grade.value).inc()

    return results


@router.get("/checks", response_model=list[CheckSchema])
def list_checks() -> list[CheckSchema]:
    """List the security header checks in evaluation order."""
    return [
        CheckSchema(
            name=check.name,
            header=check.header,
            description=check.description,
            severity=check.severity.value,
            weight=check.weight,
        )
        for check in CHECK_CATALOG
    ]


@router.post(
    "/scan",
    response_model=ScanResponse,
    responses={code: ERROR_RESPONSES[code] for code in (413, 422)},
)
def scan_pages(request: ScanRequest) -> ScanResponse:
    """
    Grade the security headers of a batch of crawled pages.

    Declared sync so FastAPI runs the CPU-bound scan in its threadpool.

    Every record is run through the full check catalog and scored. The
    summary covers all scanned pages; the result list is filtered by grade
    and sorted as requested.
    """
    start_time = time.time()

    results = _scan(request)
    view = apply_view(results, request.grade, SortState(request.sort_key, request.sort_dir))

    logger.info(
        f"Scanned {len(results)} of {len(request.pages)} records, "
        f"{len(view)} in view"
    )

    return ScanResponse(
        summary=SummarySchema.from_summary(summarize(results)),
        results=[PageResultSchema.from_result(r) for r in view],
        timestamp=datetime.now(UTC).isoformat(),
        processing_time_ms=(time.time() - start_time) * 1000,
    )


@router.post("/export/{fmt}", responses=ERROR_RESPONSES)
def export_report(fmt: str, request: ScanRequest) -> Response:
    """
    Scan a batch and return the filtered, sorted view as a report file.

    Returns 204 with no body when no page is left in the view.
    """
    if fmt not in EXPORT_FORMATS:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Unsupported export format '{fmt}', expected one of {list(EXPORT_FORMATS)}",
        )

    results = _scan(request)
    view = apply_view(results, request.grade, SortState(request.sort_key, request.sort_dir))

    if not view:
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return Response(
        content=export_results(view, fmt),
        media_type=EXPORT_MEDIA_TYPES[fmt],
        headers={
            "Content-Disposition": f'attachment; filename="{report_filename(fmt)}"'
        },
    )
