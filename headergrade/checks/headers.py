"""Case-insensitive access to HTTP response headers."""

from headergrade.checks.protocol import HeaderMap

VALUE_EXCERPT_LENGTH = 80


def find_header(headers: HeaderMap | None, name: str) -> str | None:
    """
    Look up a header value regardless of the casing of its name.

    Crawlers hand over headers as plain mappings whose keys keep whatever case
    the server sent. When several keys only differ by case, the first one in
    iteration order wins.

    Args:
        headers: Header name to value mapping (may be ``None``).
        name: Header name to look for.

    Returns:
        The header value, or ``None`` when the header is absent.
    """
    if not headers:
        return None

    wanted = name.lower()
    for key, value in headers.items():
        if key.lower() == wanted:
            return value
    return None


def truncate_value(value: str, limit: int = VALUE_EXCERPT_LENGTH) -> str:
    """Shorten long header values for display, marking the cut with an ellipsis."""
    if len(value) > limit:
        return value[:limit] + "..."
    return value
