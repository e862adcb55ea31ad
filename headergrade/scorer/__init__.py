"""Weighted scoring and letter grades."""

from headergrade.scorer.grades import Grade, grade_from_score
from headergrade.scorer.weighted_scorer import (
    ScoringResult,
    WeightedScorer,
    calculate_score,
    round_half_up,
)

__all__ = [
    "Grade",
    "ScoringResult",
    "WeightedScorer",
    "calculate_score",
    "grade_from_score",
    "round_half_up",
]
