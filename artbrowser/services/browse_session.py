"""Browse session: pages through the collection while keeping one selection."""

import logging
from typing import Iterable, List, Optional

from artbrowser.core.models import PageItem, PageResult, PageView
from artbrowser.core.protocols import PageFetcher, PageFetchError
from artbrowser.managers.bulk_select_manager import parse_bulk_count
from artbrowser.managers.page_loader_manager import PageLoaderManager
from artbrowser.managers.pagination_manager import PaginationManager
from artbrowser.managers.selection_manager import (
    SelectionSet,
    assign_positions,
    derive_view,
)

logger = logging.getLogger("ArtBrowser.BrowseSession")

FETCH_ERROR_MESSAGE = "Failed to fetch artworks. Please try again later."


class BrowseSession:
    """Connects page fetching, pagination state and the selection set.

    The selection set lives as long as the session. The page view is rebuilt
    from it after every fetch and every selection change.
    """

    def __init__(
        self,
        fetcher: PageFetcher,
        pagination: Optional[PaginationManager] = None,
        selection: Optional[SelectionSet] = None,
    ):
        self.fetcher = fetcher
        self.pagination = pagination or PaginationManager()
        self.selection = selection if selection is not None else SelectionSet()
        self.items: List[PageItem] = []
        self.view = PageView()
        self.error: Optional[str] = None
        self.pending_page: Optional[int] = None

    @property
    def loading(self) -> bool:
        return self.pagination.loading

    @property
    def selected_count(self) -> int:
        return self.selection.selected_count()

    @property
    def total_records(self) -> Optional[int]:
        return self.pagination.total_records

    # Page loading

    @property
    def page_to_reload(self) -> int:
        """The page a failed or unfinished load asked for, else the page shown."""
        if self.pending_page is not None:
            return self.pending_page
        return self.pagination.current_page

    def begin_load(self, page: int) -> None:
        self.pagination.check_page(page)
        self.pending_page = page
        self.pagination.start_loading()
        self.error = None

    def load_page(self, page: Optional[int] = None) -> PageView:
        """Fetch ``page`` (default: the current page) and rebuild the view."""
        page = self.pagination.current_page if page is None else page
        self.begin_load(page)
        try:
            result = self.fetcher.fetch(page, self.pagination.rows_per_page)
        except PageFetchError as e:
            self.show_fetch_error(page, str(e))
            return self.view
        return self.show_page_result(page, result)

    def request_page(self, page: int, loader: PageLoaderManager) -> int:
        """Like load_page, but the fetch runs on the loader's thread."""
        self.begin_load(page)
        return loader.load(
            page,
            self.pagination.rows_per_page,
            on_loaded=self.show_page_result,
            on_error=self.show_fetch_error,
        )

    def show_page_result(self, page: int, result: PageResult) -> PageView:
        self.pagination.finish_loading(result.total_count)
        self.pagination.current_page = page
        self.pending_page = None
        self.items = assign_positions(page, self.pagination.rows_per_page, result.items)
        self.error = None
        logger.info(
            f"Showing page {page}: {len(self.items)} of {result.total_count} artworks"
        )
        return self.refresh_view()

    def show_fetch_error(self, page: int, message: str) -> None:
        logger.error(f"Error loading page {page}: {message}")
        self.pagination.finish_loading()
        self.error = FETCH_ERROR_MESSAGE

    def refresh_view(self) -> PageView:
        self.view = derive_view(self.items, self.selection)
        return self.view

    def next_page(self) -> PageView:
        return self.load_page(self.pagination.current_page + 1)

    def previous_page(self) -> PageView:
        return self.load_page(self.pagination.current_page - 1)

    def go_to_page(self, page: int) -> PageView:
        return self.load_page(page)

    def reload(self) -> PageView:
        return self.load_page(self.page_to_reload)

    # Selection edits

    def set_page_selection(self, selected_positions: Iterable[int]) -> PageView:
        """Report the complete selected subset of the visible page."""
        page_positions = [item.position for item in self.items]
        self.selection.apply_view_selection_change(page_positions, set(selected_positions))
        return self.refresh_view()

    def toggle_row(self, row_index: int) -> PageView:
        """Flip the selection of the row at zero-based ``row_index``."""
        if not 0 <= row_index < len(self.view):
            raise IndexError(f"No row {row_index + 1} on this page")
        position = self.view[row_index].position
        selected = self.view.selected_positions
        if position in selected:
            selected.discard(position)
        else:
            selected.add(position)
        return self.set_page_selection(selected)

    def select_all_on_page(self) -> PageView:
        return self.set_page_selection(self.view.positions)

    def clear_page_selection(self) -> PageView:
        return self.set_page_selection(())

    def bulk_select(self, count: int) -> PageView:
        """Select ``count`` positions starting at the first row of the page on screen."""
        self.selection.apply_bulk_range(self.pagination.first_position, count)
        return self.refresh_view()

    def bulk_select_text(self, text: str) -> PageView:
        """Validate typed input before it reaches the selection set."""
        return self.bulk_select(parse_bulk_count(text))
