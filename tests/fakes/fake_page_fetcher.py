"""Fake page fetcher for testing."""
import threading
from typing import Dict, List, Set, Tuple

from artbrowser.core.models import Artwork, PageResult
from artbrowser.core.protocols import PageFetchError


def make_artwork(position: int) -> Artwork:
    return Artwork(
        id=1000 + position,
        title=f"Artwork {position}",
        artist_display=f"Artist {position}",
        place_of_origin="France",
        date_start=1800 + position,
        date_end=1810 + position,
    )


class FakePageFetcher:
    """In-memory collection of ``total`` artworks served page by page."""

    def __init__(self, total: int = 95):
        self.total = total
        self.calls: List[Tuple[int, int]] = []
        self.fail_pages: Set[int] = set()
        self.gates: Dict[int, threading.Event] = {}

    def hold(self, page: int) -> threading.Event:
        """Make fetches of ``page`` block until the returned event is set."""
        gate = threading.Event()
        self.gates[page] = gate
        return gate

    def fetch(self, page_number: int, page_size: int) -> PageResult:
        self.calls.append((page_number, page_size))
        gate = self.gates.get(page_number)
        if gate is not None:
            gate.wait(timeout=5)
        if page_number in self.fail_pages:
            raise PageFetchError(f"Request for page {page_number} failed")
        start = (page_number - 1) * page_size + 1
        end = min(start + page_size - 1, self.total)
        items = [make_artwork(position) for position in range(start, end + 1)]
        return PageResult(items=items, total_count=self.total)
