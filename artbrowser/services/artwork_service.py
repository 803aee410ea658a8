"""Artwork API client: fetches one page of the remote collection at a time."""

import logging
from typing import List, Optional

import requests
from pydantic import ValidationError

from artbrowser.core.models import ArtworkPage, PageResult
from artbrowser.core.protocols import PageFetchError

logger = logging.getLogger("ArtBrowser.ArtworkService")

DEFAULT_BASE_URL = "https://api.artic.edu/api/v1/artworks"


class ArtworkService:
    """Fetches artwork pages over HTTP."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 10.0,
        fields: Optional[List[str]] = None,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.fields = fields
        self.session = session or requests.Session()

    def build_params(self, page_number: int, page_size: int) -> dict:
        params = {"page": page_number, "limit": page_size}
        if self.fields:
            params["fields"] = ",".join(self.fields)
        return params

    def fetch(self, page_number: int, page_size: int) -> PageResult:
        """Fetch a page of artworks.

        Args:
            page_number: 1-based page to fetch
            page_size: Number of artworks per page

        Returns:
            PageResult with the page's artworks and the collection total

        Raises:
            PageFetchError: On transport errors, bad status or malformed bodies
        """
        params = self.build_params(page_number, page_size)
        logger.info(f"Fetching artworks page {page_number} (limit {page_size})")

        try:
            response = self.session.get(self.base_url, params=params, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            logger.error(f"Error fetching artworks page {page_number}: {e}")
            raise PageFetchError(f"Request for page {page_number} failed: {e}") from e

        try:
            body = response.json()
        except ValueError as e:
            logger.error(f"Artworks page {page_number} is not valid JSON: {e}")
            raise PageFetchError(f"Malformed response for page {page_number}") from e

        try:
            page = ArtworkPage.model_validate(body)
        except ValidationError as e:
            logger.error(f"Unexpected artworks payload for page {page_number}: {e}")
            raise PageFetchError(f"Malformed response for page {page_number}") from e

        logger.debug(
            f"Received {len(page.data)} artworks (total: {page.pagination.total})"
        )
        return PageResult(items=list(page.data), total_count=page.pagination.total)

    def close(self) -> None:
        self.session.close()
