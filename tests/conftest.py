"""Pytest configuration and shared fixtures."""

import pytest

from headergrade.scanner.models import PageInput, PageResult


@pytest.fixture
def hardened_headers() -> dict[str, str]:
    """Headers of a page that passes every check."""
    return {
        "Strict-Transport-Security": "max-age=63072000; includeSubDomains; preload",
        "Content-Security-Policy": "default-src 'self'",
        "X-Frame-Options": "DENY",
        "X-Content-Type-Options": "nosniff",
        "Referrer-Policy": "strict-origin-when-cross-origin",
        "Permissions-Policy": "camera=(), microphone=(), geolocation=()",
        "X-XSS-Protection": "1; mode=block",
        "Cross-Origin-Opener-Policy": "same-origin",
        "Cross-Origin-Resource-Policy": "same-origin",
    }


@pytest.fixture
def partial_page() -> PageInput:
    """Page with six of ten checks passing."""
    return PageInput(
        url="https://a.test/",
        headers={
            "strict-transport-security": "max-age=31536000",
            "content-security-policy": "default-src 'self'",
            "x-frame-options": "DENY",
            "x-content-type-options": "nosniff",
            "referrer-policy": "no-referrer",
        },
    )


@pytest.fixture
def make_result():
    """Factory for page results with a given score and counts."""

    def _make(
        url: str = "https://example.com/",
        score: int = 50,
        pass_count: int = 5,
        fail_count: int = 5,
    ) -> PageResult:
        return PageResult(
            url=url,
            headers={},
            score=score,
            checks=(),
            pass_count=pass_count,
            fail_count=fail_count,
        )

    return _make


@pytest.fixture
def sample_crawl_records(hardened_headers, partial_page) -> list[dict]:
    """Raw crawl records as an upstream crawler would hand them over."""
    return [
        {"url": "https://example.com/", "headers": hardened_headers, "content": "<html></html>"},
        {"url": partial_page.url, "headers": dict(partial_page.headers)},
        {"url": "https://example.com/bare", "headers": {}},
        {"headers": {"x-frame-options": "DENY"}},  # no url
    ]
