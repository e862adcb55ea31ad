"""Page evaluation against the check catalog."""

from headergrade.scanner.engine import ScanEngine, evaluate_page
from headergrade.scanner.models import PageInput, PageResult

__all__ = ["PageInput", "PageResult", "ScanEngine", "evaluate_page"]
