"""Pydantic schemas for API request/response models."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from headergrade.checks.protocol import CheckResult
from headergrade.report.aggregator import ScanSummary
from headergrade.scanner.models import PageResult


class PageInputSchema(BaseModel):
    """One crawl record. Records without a URL are skipped, not rejected."""

    url: str | None = Field(None, description="Crawled page URL")
    headers: dict[str, str] | None = Field(
        default=None, description="HTTP response headers, any casing"
    )
    content: str | None = Field(default=None, description="Page markup")


class ScanRequest(BaseModel):
    """Request schema for scanning a batch of crawl records."""

    pages: list[PageInputSchema] = Field(
        ...,
        description="Crawl records to evaluate",
        examples=[
            [
                {
                    "url": "https://example.com/",
                    "headers": {"x-frame-options": "DENY"},
                }
            ]
        ],
    )
    grade: Literal["all", "A", "B", "C", "F"] = Field(
        default="all", description="Keep only pages with this grade"
    )
    sort_key: Literal["url", "score", "pass", "fail"] = Field(
        default="score", description="Column to sort by"
    )
    sort_dir: Literal["asc", "desc"] = Field(default="asc", description="Sort direction")


class CheckSchema(BaseModel):
    """Catalog entry."""

    name: str
    header: str
    description: str
    severity: str
    weight: int


class CheckResultSchema(BaseModel):
    """Outcome of one check for one page."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., description="Check name")
    severity: str = Field(..., description="critical, high, medium or low")
    passed: bool = Field(..., alias="pass", description="Whether the check passed")
    value: str | None = Field(None, description="Observed header value")
    detail: str | None = Field(None, description="Explanation or advisory note")

    @classmethod
    def from_result(cls, result: CheckResult) -> "CheckResultSchema":
        return cls(
            name=result.definition.name,
            severity=result.definition.severity.value,
            passed=result.outcome.passed,
            value=result.outcome.value,
            detail=result.outcome.detail,
        )


class PageResultSchema(BaseModel):
    """Evaluation output for one page."""

    url: str
    score: int = Field(..., ge=0, le=100, description="Weighted score (0-100)")
    grade: str = Field(..., description="Letter grade A, B, C or F")
    pass_count: int
    fail_count: int
    checks: list[CheckResultSchema] = Field(default_factory=list)

    @classmethod
    def from_result(cls, result: PageResult) -> "PageResultSchema":
        return cls(
            url=result.url,
            score=result.score,
            grade=result.grade.value,
            pass_count=result.pass_count,
            fail_count=result.fail_count,
            checks=[CheckResultSchema.from_result(c) for c in result.checks],
        )


class SummarySchema(BaseModel):
    """Fleet-wide statistics over every scanned page (before filtering)."""

    pages: int
    average_score: int
    average_grade: str
    grades: dict[str, int]

    @classmethod
    def from_summary(cls, summary: ScanSummary) -> "SummarySchema":
        return cls(
            pages=summary.pages,
            average_score=summary.average_score,
            average_grade=summary.average_grade.value,
            grades={grade.value: count for grade, count in summary.grades.items()},
        )


class ScanResponse(BaseModel):
    """Response schema for a batch scan."""

    summary: SummarySchema
    results: list[PageResultSchema] = Field(
        default_factory=list, description="Filtered and sorted page results"
    )
    timestamp: str = Field(..., description="Scan timestamp (ISO format)")
    processing_time_ms: float = Field(..., description="Total processing time in ms")


class ErrorDetail(BaseModel):
    """Body of an error envelope."""

    code: int = Field(..., description="HTTP status code")
    message: str = Field(..., description="Human readable message")
    type: str = Field(..., description="http_error, validation_error or internal_error")
    details: list[dict[str, Any]] | None = Field(
        None, description="Per-field validation problems"
    )


class ErrorResponse(BaseModel):
    """Error envelope returned by every failing endpoint."""

    error: ErrorDetail = Field(
        ...,
        examples=[
            {"code": 400, "message": "Unsupported export format", "type": "http_error"}
        ],
    )


# OpenAPI documentation for the error envelope on scan routes
ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    400: {"model": ErrorResponse, "description": "Unsupported export format"},
    413: {"model": ErrorResponse, "description": "Too many pages in one request"},
    422: {"model": ErrorResponse, "description": "Invalid request body"},
}
