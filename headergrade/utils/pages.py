"""Conversion of crawler output into PageInput records."""

from collections.abc import Mapping
from typing import Any

import httpx

from headergrade.scanner.models import PageInput


def coerce_page(raw: PageInput | Mapping[str, Any] | None) -> PageInput | None:
    """
    Turn a crawl record into a PageInput.

    Accepts PageInput instances as-is and ``{url, headers, content}``
    mappings with optional ``headers``/``content``. Returns None for records
    that carry no URL so callers can skip them.
    """
    if isinstance(raw, PageInput):
        return raw if raw.url else None

    if not isinstance(raw, Mapping):
        return None

    url = raw.get("url")
    if not url:
        return None

    return PageInput(
        url=str(url),
        headers=raw.get("headers") or {},
        content=raw.get("content") or "",
    )


def page_from_response(response: httpx.Response) -> PageInput:
    """
    Build a PageInput from a response the crawler already fetched.

    Headers are copied into a plain dict; repeated headers are joined with
    commas by httpx.
    """
    try:
        content = response.text
    except httpx.ResponseNotRead:
        # Streamed responses that were never read have no markup to offer
        content = ""

    return PageInput(
        url=str(response.url),
        headers=dict(response.headers.items()),
        content=content,
    )
