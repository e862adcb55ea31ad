"""Tests for JSON, CSV and Markdown report export."""

import json

import pytest

from headergrade.report.aggregator import aggregate
from headergrade.report.exporter import display_path, export_results, report_filename


@pytest.fixture
def results(sample_crawl_records):
    return aggregate(sample_crawl_records)


class TestJsonExport:
    """Tests for the JSON report."""

    def test_parses_back(self, results):
        data = json.loads(export_results(results, "json"))

        assert [page["url"] for page in data] == [r.url for r in results]
        assert [page["score"] for page in data] == [r.score for r in results]
        for page, result in zip(data, results, strict=True):
            assert [c["pass"] for c in page["checks"]] == [c.passed for c in result.checks]

    def test_field_order(self, results):
        data = json.loads(export_results(results, "json"))

        assert list(data[0]) == ["url", "score", "grade", "checks"]
        assert list(data[0]["checks"][1]) == ["name", "severity", "pass", "value"]

    def test_absent_fields_are_omitted(self, results):
        bare = json.loads(export_results(results, "json"))[2]
        frame_check = bare["checks"][3]

        assert frame_check == {
            "name": "X-Frame-Options",
            "severity": "high",
            "pass": False,
            "detail": "Missing - page can be embedded in iframes (clickjacking risk)",
        }

    def test_two_space_indent(self, results):
        text = export_results(results, "json")

        assert text.startswith('[\n  {\n    "url": ')


class TestCsvExport:
    def test_rows(self, results):
        text = export_results(results, "csv")

        assert text.split("\n") == [
            "URL,Score,Grade,Pass,Fail",
            '"https://example.com/",100,A,10,0',
            '"https://a.test/",76,B,6,4',
            '"https://example.com/bare",16,F,1,9',
        ]


class TestMarkdownExport:
    def test_table(self, results):
        text = export_results(results, "md")

        assert text.split("\n") == [
            "# Security Scan Report",
            "",
            "| URL | Score | Grade | Pass | Fail |",
            "|---|---|---|---|---|",
            "| / | 100 | A | 10 | 0 |",
            "| / | 76 | B | 6 | 4 |",
            "| /bare | 16 | F | 1 | 9 |",
        ]


class TestExportResults:
    @pytest.mark.parametrize("fmt", ["json", "csv", "md"])
    def test_empty_results(self, fmt):
        assert export_results([], fmt) == ""

    def test_unknown_format(self, results):
        with pytest.raises(ValueError):
            export_results(results, "xml")

    def test_report_filename(self):
        assert report_filename("csv") == "security-report.csv"


class TestDisplayPath:
    @pytest.mark.parametrize(
        "url,expected",
        [
            ("https://example.com/docs/page?x=1", "/docs/page"),
            ("https://example.com", "/"),
            ("not a url", "not a url"),
            ("/relative/path", "/relative/path"),
            ("http://[::1", "http://[::1"),
            ("file:///var/www/index.html", "/var/www/index.html"),
            ("mailto:ops@a.test", "ops@a.test"),
            ("ftp://files.example.com", "/"),
        ],
    )
    def test_display_path(self, url, expected):
        assert display_path(url) == expected
