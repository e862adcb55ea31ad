"""Tests for result aggregation and fleet statistics."""

from headergrade.report.aggregator import (
    aggregate,
    average_score,
    grade_histogram,
    scan_page,
    summarize,
)
from headergrade.scanner.models import PageInput
from headergrade.scorer.grades import Grade


class TestAggregate:
    """Tests for building page results."""

    def test_end_to_end_partial_page(self, partial_page):
        result = scan_page(partial_page)

        assert result.url == "https://a.test/"
        assert result.pass_count == 6
        assert result.fail_count == 4
        assert result.score == 76
        assert result.grade is Grade.B

    def test_skips_records_without_url(self, sample_crawl_records):
        results = aggregate(sample_crawl_records)

        assert [r.url for r in results] == [
            "https://example.com/",
            "https://a.test/",
            "https://example.com/bare",
        ]

    def test_counts_and_score_bounds(self, sample_crawl_records):
        for result in aggregate(sample_crawl_records):
            assert result.pass_count + result.fail_count == 10
            assert 0 <= result.score <= 100

    def test_hardened_and_bare_pages(self, sample_crawl_records):
        hardened, _, bare = aggregate(sample_crawl_records)

        assert hardened.score == 100
        # Only the HTTPS check passes: 30 of 185
        assert bare.score == 16
        assert bare.grade is Grade.F

    def test_accepts_page_inputs_and_missing_fields(self):
        results = aggregate(
            [
                PageInput(url="https://example.com/"),
                {"url": "https://example.com/none", "headers": None, "content": None},
                {"url": ""},
                None,
            ]
        )

        assert len(results) == 2
        assert results[1].headers == {}

    def test_idempotent(self, sample_crawl_records):
        assert aggregate(sample_crawl_records) == aggregate(sample_crawl_records)

    def test_does_not_mutate_input(self, sample_crawl_records):
        snapshot = [dict(record) for record in sample_crawl_records]
        aggregate(sample_crawl_records)

        assert sample_crawl_records == snapshot


class TestStatistics:
    """Tests for average and grade breakdown."""

    def test_average_score(self, make_result):
        results = [make_result(score=s) for s in (95, 40, 60, 20)]

        # 215 / 4 = 53.75
        assert average_score(results) == 54

    def test_average_rounds_half_up(self, make_result):
        assert average_score([make_result(score=70), make_result(score=71)]) == 71

    def test_average_of_nothing(self):
        assert average_score([]) == 0

    def test_grade_histogram(self, make_result):
        results = [make_result(score=s) for s in (95, 90, 75, 40, 20)]

        assert grade_histogram(results) == {
            Grade.A: 2,
            Grade.B: 1,
            Grade.C: 0,
            Grade.F: 2,
        }

    def test_empty_histogram_has_every_grade(self):
        assert grade_histogram([]) == {Grade.A: 0, Grade.B: 0, Grade.C: 0, Grade.F: 0}

    def test_summarize(self, make_result):
        summary = summarize([make_result(score=s) for s in (100, 80)])

        assert summary.pages == 2
        assert summary.average_score == 90
        assert summary.average_grade is Grade.A
        assert summary.grades[Grade.B] == 1
