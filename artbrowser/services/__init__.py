"""Page fetching and session services."""

from .artwork_service import ArtworkService, PageFetchError
from .browse_session import BrowseSession

__all__ = ["ArtworkService", "BrowseSession", "PageFetchError"]
