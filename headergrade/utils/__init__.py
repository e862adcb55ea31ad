"""Utility functions and helpers."""

from headergrade.utils.pages import coerce_page, page_from_response

__all__ = [
    "coerce_page",
    "page_from_response",
]
