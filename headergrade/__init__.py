"""
Headergrade - Security header grading for crawled pages.

Runs a fixed catalog of HTTP security header checks against pages collected
by a crawler and turns the outcomes into weighted scores and letter grades.
"""

__version__ = "0.1.0"
__author__ = "Headergrade Team"

from headergrade.config import settings

__all__ = ["settings"]
