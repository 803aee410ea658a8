"""Selection tracking across server-side pages.

Selection is keyed by global position (1-based rank in the whole remote
collection), so it survives page changes and can cover pages that were never
fetched. Only selected positions are stored.
"""

import logging
import threading
from typing import Any, Iterable, List, Sequence

from artbrowser.core.models import PageItem, PageView, ViewRow

logger = logging.getLogger("ArtBrowser.SelectionSet")


def global_position(page: int, page_size: int, index: int) -> int:
    """Position of the item at zero-based ``index`` on 1-based ``page``."""
    return (page - 1) * page_size + index + 1


def assign_positions(page: int, page_size: int, payloads: Sequence[Any]) -> List[PageItem]:
    return [
        PageItem(position=global_position(page, page_size, index), payload=payload)
        for index, payload in enumerate(payloads)
    ]


def derive_view(items: Iterable[PageItem], selection: "SelectionSet") -> PageView:
    """Annotate page items with their current selection state. Does not mutate."""
    return PageView(
        rows=tuple(
            ViewRow(
                position=item.position,
                payload=item.payload,
                selected=selection.contains(item.position),
            )
            for item in items
        )
    )


class SelectionSet:
    """Sparse set of selected global positions."""

    def __init__(self):
        self._selected: set = set()
        self._lock = threading.Lock()

    def contains(self, position: int) -> bool:
        return position in self._selected

    def __contains__(self, position: int) -> bool:
        return self.contains(position)

    def __len__(self) -> int:
        return len(self._selected)

    def selected_count(self) -> int:
        return len(self._selected)

    def selected_positions(self) -> List[int]:
        with self._lock:
            return sorted(self._selected)

    def apply_view_selection_change(
        self, old_page_positions: Iterable[int], new_selected: Iterable[int]
    ) -> "SelectionSet":
        """Replace the selection of one page with the subset the view reports.

        Every position of the page is cleared first, then ``new_selected`` is
        inserted, so a row deselected in the view cannot linger in the set.
        Positions outside the page are left alone.
        """
        new_selected = [p for p in new_selected if p >= 1]
        with self._lock:
            for position in old_page_positions:
                self._selected.discard(position)
            self._selected.update(new_selected)
            count = len(self._selected)
        logger.debug(f"Page selection now {sorted(new_selected)} ({count} selected in total)")
        return self

    def apply_bulk_range(self, start_position: int, count: int) -> "SelectionSet":
        """Select ``count`` consecutive positions beginning at ``start_position``.

        Works on position numbers only, so pages that are not loaded yet are
        covered too. Positions past the end of the collection stay in the set
        without effect. Invalid ranges are ignored.
        """
        if count <= 0 or start_position < 1:
            logger.warning(
                f"Ignoring bulk range start={start_position} count={count}"
            )
            return self

        end_position = start_position + count - 1
        with self._lock:
            before = len(self._selected)
            self._selected.update(range(start_position, end_position + 1))
            added = len(self._selected) - before
        logger.debug(
            f"Bulk selected positions {start_position}-{end_position} ({added} newly selected)"
        )
        return self
