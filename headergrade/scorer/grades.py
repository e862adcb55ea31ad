"""Letter grades derived from numeric scores."""

from enum import Enum


class Grade(str, Enum):
    """Letter grade for a 0-100 security score."""

    A = "A"
    B = "B"
    C = "C"
    F = "F"


# Lower bounds, checked from best to worst
GRADE_THRESHOLDS: tuple[tuple[Grade, int], ...] = (
    (Grade.A, 90),
    (Grade.B, 70),
    (Grade.C, 50),
)


def grade_from_score(score: float) -> Grade:
    """Map a score to its grade: A >= 90, B >= 70, C >= 50, F otherwise."""
    for grade, threshold in GRADE_THRESHOLDS:
        if score >= threshold:
            return grade
    return Grade.F
