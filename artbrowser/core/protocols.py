"""Protocol definitions for dependency injection."""

from typing import Protocol

from artbrowser.core.models import PageResult


class PageFetcher(Protocol):
    def fetch(self, page_number: int, page_size: int) -> PageResult: ...


class PageFetchError(Exception):
    """Raised when a page cannot be fetched; the user may request it again"""
    pass
