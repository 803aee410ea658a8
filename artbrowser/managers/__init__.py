"""Manager classes for browsing state."""

from .bulk_select_manager import (
    InvalidBulkCountError,
    parse_bulk_count,
)
from .page_loader_manager import PageLoaderManager
from .pagination_manager import PaginationManager
from .selection_manager import SelectionSet, assign_positions, derive_view

__all__ = [
    "InvalidBulkCountError",
    "PageLoaderManager",
    "PaginationManager",
    "SelectionSet",
    "assign_positions",
    "derive_view",
    "parse_bulk_count",
]
