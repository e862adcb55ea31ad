"""Prometheus metrics for the API."""

from prometheus_client import Counter, Histogram

# HTTP metrics
REQUEST_COUNT = Counter(
    "http_requests_total", "Total HTTP requests", ["method", "endpoint", "status"]
)
REQUEST_DURATION = Histogram(
    "http_request_duration_seconds", "HTTP request duration", ["method", "endpoint"]
)

# Scan metrics
PAGES_SCANNED = Counter("pages_scanned_total", "Total crawled pages scanned")
PAGE_GRADES = Counter("page_grades_total", "Scanned pages per grade", ["grade"])
