"""Data types shared by every security header check."""

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import Enum

HeaderMap = Mapping[str, str]


class Severity(str, Enum):
    """Risk class of a check, bound to a fixed scoring weight."""

    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def weight(self) -> int:
        return SEVERITY_WEIGHTS[self]


SEVERITY_WEIGHTS: dict[Severity, int] = {
    Severity.CRITICAL: 30,
    Severity.HIGH: 20,
    Severity.MEDIUM: 15,
    Severity.LOW: 10,
}


@dataclass(frozen=True)
class CheckOutcome:
    """Outcome of one check against one page."""

    passed: bool
    value: str | None = None  # Observed header value or excerpt
    detail: str | None = None  # Human explanation, mostly on failure


@dataclass(frozen=True)
class CheckDefinition:
    """
    A single catalog entry.

    ``evaluate`` is a pure function of the page headers and the page markup.
    It must never raise: a missing header is reported as a failed outcome.
    """

    name: str
    header: str  # Informational target header
    description: str
    severity: Severity
    evaluate: Callable[[HeaderMap, str], CheckOutcome]

    @property
    def weight(self) -> int:
        return self.severity.weight

    def run(self, headers: HeaderMap, content: str = "") -> "CheckResult":
        """Evaluate this check and pair the outcome with its definition."""
        return CheckResult(definition=self, outcome=self.evaluate(headers, content))


@dataclass(frozen=True)
class CheckResult:
    """A catalog entry paired with its outcome for one page."""

    definition: CheckDefinition
    outcome: CheckOutcome

    @property
    def passed(self) -> bool:
        return self.outcome.passed
