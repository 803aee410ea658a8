"""Pagination state management for page-by-page browsing."""

import math
from typing import Optional

from artbrowser.managers.selection_manager import global_position


class PaginationManager:
    def __init__(self, rows_per_page: int = 10, start_page: int = 1):
        if rows_per_page < 1:
            raise ValueError("rows_per_page must be at least 1")
        if start_page < 1:
            raise ValueError("start_page must be at least 1")
        self.rows_per_page = rows_per_page
        self.current_page = start_page
        self.total_records: Optional[int] = None
        self.loading = False

    @property
    def total_pages(self) -> Optional[int]:
        if self.total_records is None:
            return None
        return max(1, math.ceil(self.total_records / self.rows_per_page))

    @property
    def first_position(self) -> int:
        """Global position of the first row on the current page."""
        return global_position(self.current_page, self.rows_per_page, 0)

    def has_previous(self) -> bool:
        return self.current_page > 1

    def has_next(self) -> bool:
        total_pages = self.total_pages
        return total_pages is None or self.current_page < total_pages

    def check_page(self, page: int) -> None:
        if page < 1:
            raise ValueError(f"Page must be at least 1, got {page}")
        total_pages = self.total_pages
        if total_pages is not None and page > total_pages:
            raise ValueError(f"Page {page} is past the last page ({total_pages})")

    def start_loading(self) -> None:
        self.loading = True

    def finish_loading(self, total_records: Optional[int] = None) -> None:
        self.loading = False
        if total_records is not None:
            self.update_total(total_records)

    def update_total(self, total_records: int) -> None:
        self.total_records = max(0, total_records)
