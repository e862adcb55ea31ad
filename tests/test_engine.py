"""Tests for the scan engine."""

import pytest

from headergrade.checks.catalog import CHECK_CATALOG
from headergrade.scanner.engine import ScanEngine, evaluate_page
from headergrade.scanner.models import PageInput


class TestScanEngine:
    """Tests for page evaluation."""

    def test_evaluates_full_catalog_in_order(self, partial_page):
        results = evaluate_page(partial_page)

        assert [r.definition for r in results] == list(CHECK_CATALOG)

    def test_partial_page_outcomes(self, partial_page):
        results = {r.definition.name: r.passed for r in evaluate_page(partial_page)}

        assert results == {
            "HTTPS": True,
            "Strict-Transport-Security": True,
            "Content-Security-Policy": True,
            "X-Frame-Options": True,
            "X-Content-Type-Options": True,
            "Referrer-Policy": True,
            "Permissions-Policy": False,
            "X-XSS-Protection": False,
            "Cross-Origin-Opener-Policy": False,
            "Cross-Origin-Resource-Policy": False,
        }

    def test_repeat_evaluation_is_identical(self, partial_page):
        assert evaluate_page(partial_page) == evaluate_page(partial_page)

    def test_enabled_checks_keep_catalog_order(self):
        engine = ScanEngine(enabled_checks=["X-Frame-Options", "HTTPS"])
        results = engine.evaluate(PageInput(url="https://example.com/"))

        assert [r.definition.name for r in results] == ["HTTPS", "X-Frame-Options"]

    def test_unknown_check_rejected(self):
        with pytest.raises(ValueError, match="Server-Timing"):
            ScanEngine(enabled_checks=["Server-Timing"])
