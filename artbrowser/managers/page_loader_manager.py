"""Page Loader Manager - Fetches pages in the background and drops superseded results."""

import logging
import threading
from typing import Callable, List, Optional

from artbrowser.core.models import PageResult
from artbrowser.core.protocols import PageFetcher, PageFetchError

logger = logging.getLogger("ArtBrowser.PageLoaderManager")


def _call_now(callback: Callable, *args) -> None:
    callback(*args)


class PageLoaderManager:
    """Runs page fetches on daemon threads.

    Every request gets a generation number. Only the newest request may deliver
    its result, so a slow fetch for a page the user already left never replaces
    the page they navigated to.
    """

    def __init__(self, fetcher: PageFetcher, dispatch: Optional[Callable] = None):
        """Initialize PageLoaderManager.

        Args:
            fetcher: Capability returning a PageResult for (page, page_size)
            dispatch: Called as dispatch(callback, *args) to hand results to the
                consumer, e.g. a GUI main-loop scheduler. Defaults to a direct call.
        """
        self.fetcher = fetcher
        self.dispatch = dispatch or _call_now
        self._generation = 0
        self._lock = threading.RLock()
        self._threads: List[threading.Thread] = []

    def load(
        self,
        page: int,
        page_size: int,
        on_loaded: Callable[[int, PageResult], None],
        on_error: Callable[[int, str], None],
    ) -> int:
        """Start fetching ``page``; supersedes any request still in flight."""
        with self._lock:
            self._generation += 1
            generation = self._generation
            self._threads = [t for t in self._threads if t.is_alive()]

        def run_fetch():
            try:
                result = self.fetcher.fetch(page, page_size)
            except PageFetchError as e:
                self._deliver(generation, page, on_error, str(e))
                return
            self._deliver(generation, page, on_loaded, result)

        thread = threading.Thread(target=run_fetch, daemon=True)
        with self._lock:
            self._threads.append(thread)
        thread.start()
        logger.debug(f"Requested page {page} (generation {generation})")
        return generation

    def _deliver(self, generation: int, page: int, callback: Callable, payload) -> None:
        with self._lock:
            if generation != self._generation:
                logger.info(f"Dropping superseded result for page {page}")
                return
            self.dispatch(callback, page, payload)

    def cancel(self) -> None:
        """Make every in-flight request stale."""
        with self._lock:
            self._generation += 1

    def wait(self, timeout: Optional[float] = None) -> None:
        """Block until all started fetches have finished."""
        with self._lock:
            threads = list(self._threads)
        for thread in threads:
            thread.join(timeout)
