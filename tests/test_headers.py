"""Tests for case-insensitive header lookup."""

import httpx

from headergrade.checks.headers import find_header, truncate_value


class TestFindHeader:
    """Tests for find_header."""

    def test_matches_regardless_of_case(self):
        headers = {"x-frame-options": "DENY"}

        assert find_header(headers, "X-Frame-Options") == "DENY"
        assert find_header({"X-FRAME-OPTIONS": "DENY"}, "x-frame-options") == "DENY"

    def test_absent_header_returns_none(self):
        assert find_header({"server": "nginx"}, "x-frame-options") is None

    def test_empty_or_missing_mapping(self):
        assert find_header({}, "referrer-policy") is None
        assert find_header(None, "referrer-policy") is None

    def test_first_key_wins_on_case_collision(self):
        headers = {"Referrer-Policy": "no-referrer", "referrer-policy": "origin"}

        assert find_header(headers, "REFERRER-POLICY") == "no-referrer"

    def test_works_with_httpx_headers(self):
        headers = httpx.Headers({"Content-Security-Policy": "default-src 'self'"})

        assert find_header(headers, "content-security-policy") == "default-src 'self'"


class TestTruncateValue:
    """Tests for header value excerpts."""

    def test_short_value_unchanged(self):
        assert truncate_value("default-src 'self'") == "default-src 'self'"

    def test_exactly_limit_unchanged(self):
        value = "a" * 80

        assert truncate_value(value) == value

    def test_long_value_cut_with_ellipsis(self):
        value = "b" * 81

        assert truncate_value(value) == "b" * 80 + "..."
