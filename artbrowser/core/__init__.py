"""Core models and interfaces."""

from .models import Artwork, PageItem, PageResult, PageView, ViewRow
from .protocols import PageFetcher, PageFetchError

__all__ = [
    "Artwork",
    "PageFetcher",
    "PageFetchError",
    "PageItem",
    "PageResult",
    "PageView",
    "ViewRow",
]
