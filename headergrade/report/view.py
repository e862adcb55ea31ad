"""Filtering and sorting of page results for display and export."""

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from functools import cmp_to_key
from typing import Any, Literal

from headergrade.scanner.models import PageResult
from headergrade.scorer.grades import Grade

SortKey = Literal["url", "score", "pass", "fail"]
SortDirection = Literal["asc", "desc"]

GRADE_FILTERS = ("all", *(grade.value for grade in Grade))

SORT_FIELDS: dict[str, Callable[[PageResult], Any]] = {
    "url": lambda r: r.url,
    "score": lambda r: r.score,
    "pass": lambda r: r.pass_count,
    "fail": lambda r: r.fail_count,
}

SORT_DIRECTIONS = ("asc", "desc")


def filter_by_grade(
    results: Sequence[PageResult], grade: str | Grade = "all"
) -> list[PageResult]:
    """Keep the results whose grade matches; ``"all"`` keeps everything."""
    grade = grade.value if isinstance(grade, Grade) else grade
    if grade not in GRADE_FILTERS:
        raise ValueError(f"Grade filter must be one of {list(GRADE_FILTERS)}")

    if grade == "all":
        return list(results)
    return [r for r in results if r.grade.value == grade]


def _compare(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


def sort_results(
    results: Sequence[PageResult],
    key: SortKey = "score",
    direction: SortDirection = "asc",
) -> list[PageResult]:
    """
    Return a new, stably sorted list of results.

    Descending order negates the comparator instead of reversing the list,
    so results that compare equal keep their input order either way.
    """
    if key not in SORT_FIELDS:
        raise ValueError(f"Sort key must be one of {list(SORT_FIELDS)}")
    if direction not in SORT_DIRECTIONS:
        raise ValueError(f"Sort direction must be one of {list(SORT_DIRECTIONS)}")

    field_of = SORT_FIELDS[key]
    sign = -1 if direction == "desc" else 1

    def comparator(a: PageResult, b: PageResult) -> int:
        return sign * _compare(field_of(a), field_of(b))

    return sorted(results, key=cmp_to_key(comparator))


@dataclass(frozen=True)
class SortState:
    """Current sort column and direction of a result table."""

    key: SortKey = "score"
    direction: SortDirection = "asc"

    def toggle(self, key: SortKey) -> "SortState":
        """
        Sort state after clicking a column.

        Clicking the active column flips the direction. A new column starts
        ascending for ``score`` (worst pages first) and descending otherwise.
        """
        if key not in SORT_FIELDS:
            raise ValueError(f"Sort key must be one of {list(SORT_FIELDS)}")
        if key == self.key:
            return SortState(key, "desc" if self.direction == "asc" else "asc")
        return SortState(key, "asc" if key == "score" else "desc")


def apply_view(
    results: Sequence[PageResult],
    grade: str | Grade = "all",
    sort: SortState | None = None,
) -> list[PageResult]:
    """Filter by grade, then sort."""
    sort = sort or SortState()
    return sort_results(filter_by_grade(results, grade), sort.key, sort.direction)
