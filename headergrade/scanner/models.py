"""Input and output records for page scans."""

from dataclasses import dataclass, field

from headergrade.checks.protocol import CheckResult, HeaderMap
from headergrade.scorer.grades import Grade, grade_from_score


@dataclass(frozen=True)
class PageInput:
    """One crawled page as handed over by the crawler."""

    url: str
    headers: HeaderMap = field(default_factory=dict)
    content: str = ""


@dataclass(frozen=True)
class PageResult:
    """Complete evaluation output for one crawled page."""

    url: str
    headers: HeaderMap
    score: int  # 0-100 scale
    checks: tuple[CheckResult, ...]
    pass_count: int
    fail_count: int

    @property
    def grade(self) -> Grade:
        return grade_from_score(self.score)
