"""Severity-weighted scorer for check results."""

import logging
from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal

from headergrade.checks.protocol import CheckResult, Severity
from headergrade.scorer.grades import Grade, grade_from_score

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScoringResult:
    """Score for one page together with the weights it was derived from."""

    score: int  # 0-100 scale
    grade: Grade
    earned_weight: int
    total_weight: int
    # Per severity: (earned, total)
    breakdown: dict[Severity, tuple[int, int]] = field(default_factory=dict)


def round_half_up(value: float | Decimal) -> int:
    """Round to the nearest integer, ties away from zero."""
    return int(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


class WeightedScorer:
    """
    Scores a page as the share of severity weight earned by passing checks.

    Score = round(100 * Σ weight(passed) / Σ weight(all))

    Weights come from the severity of each check (critical=30, high=20,
    medium=15, low=10). The result does not depend on check order.
    """

    @property
    def name(self) -> str:
        return "weighted_scorer"

    @property
    def version(self) -> str:
        return "1.0.0"

    def calculate_score(self, results: list[CheckResult]) -> ScoringResult:
        """Calculate the weighted score and grade for one page's check results."""
        earned_weight = 0
        total_weight = 0
        breakdown: dict[Severity, tuple[int, int]] = {}

        for result in results:
            severity = result.definition.severity
            weight = severity.weight
            earned, total = breakdown.get(severity, (0, 0))

            total_weight += weight
            total += weight
            if result.passed:
                earned_weight += weight
                earned += weight

            breakdown[severity] = (earned, total)

        if total_weight > 0:
            score = round_half_up(Decimal(earned_weight * 100) / total_weight)
        else:
            score = 0

        return ScoringResult(
            score=score,
            grade=grade_from_score(score),
            earned_weight=earned_weight,
            total_weight=total_weight,
            breakdown=breakdown,
        )


_scorer = WeightedScorer()


def calculate_score(results: list[CheckResult]) -> int:
    """Weighted 0-100 score of a page's check results, 0 when there are none."""
    return _scorer.calculate_score(results).score
