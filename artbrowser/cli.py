"""Terminal front end for browsing artworks and building a selection."""

import logging
import shlex
from typing import Callable, List, Optional

from artbrowser.core.models import Artwork, PageView
from artbrowser.managers.bulk_select_manager import InvalidBulkCountError
from artbrowser.managers.page_loader_manager import PageLoaderManager
from artbrowser.services.browse_session import BrowseSession
from artbrowser.utils.formatting import (
    format_artist,
    format_date,
    format_inscriptions,
    format_origin,
    format_status,
    format_title,
    truncate_text,
)

logger = logging.getLogger("ArtBrowser.CLI")

HELP_TEXT = """Commands:
  n               next page
  p               previous page
  g <page>        go to page
  t <row> [...]   toggle rows on this page (row numbers as shown)
  a               select every row on this page
  x               clear the selection on this page
  b <count>       select <count> rows starting at the first row of this page
  s               list selected positions
  r               reload the current page
  h               show this help
  q               quit"""


def render_row(index: int, position: int, payload, selected: bool) -> str:
    mark = "[x]" if selected else "[ ]"
    if isinstance(payload, Artwork):
        columns = [
            truncate_text(format_title(payload), 40),
            truncate_text(format_artist(payload), 30),
            truncate_text(format_origin(payload), 20),
            format_date(payload),
            truncate_text(format_inscriptions(payload), 30),
        ]
        text = " | ".join(columns)
    else:
        text = str(payload)
    return f"{mark} {index:>3}. #{position:<6} {text}"


def render_view(view: PageView) -> List[str]:
    return [
        render_row(index, row.position, row.payload, row.selected)
        for index, row in enumerate(view, start=1)
    ]


class BrowserCli:
    """Reads commands, drives a BrowseSession and prints the page table."""

    def __init__(
        self,
        session: BrowseSession,
        loader: Optional[PageLoaderManager] = None,
        input_fn: Callable[[str], str] = input,
        output: Callable[[str], None] = print,
    ):
        self.session = session
        self.loader = loader
        self.input_fn = input_fn
        self.output = output
        self.running = False

    def show_page(self, page: int) -> None:
        if self.loader is None:
            self.session.load_page(page)
            return
        self.output("Loading...")
        self.session.request_page(page, self.loader)
        self.loader.wait()

    def render(self) -> None:
        session = self.session
        if session.error:
            self.output(f"Error: {session.error}")
        pagination = session.pagination
        total_pages = pagination.total_pages
        self.output(
            f"Page {pagination.current_page} of {'?' if total_pages is None else total_pages}"
        )
        for line in render_view(session.view):
            self.output(line)
        self.output(
            format_status(
                session.view.first_position,
                session.view.last_position,
                session.total_records,
                session.selected_count,
            )
        )

    def handle(self, line: str) -> bool:
        """Run one command. Returns False when the user quits."""
        try:
            parts = shlex.split(line)
        except ValueError as e:
            self.output(f"Could not read command: {e}")
            return True
        if not parts:
            return True

        command, args = parts[0].lower(), parts[1:]
        session = self.session
        pagination = session.pagination
        try:
            if command in ("q", "quit", "exit"):
                return False
            elif command in ("h", "help", "?"):
                self.output(HELP_TEXT)
                return True
            elif command in ("n", "next"):
                if not pagination.has_next():
                    raise ValueError("Already on the last page")
                self.show_page(pagination.current_page + 1)
            elif command in ("p", "prev", "previous"):
                if not pagination.has_previous():
                    raise ValueError("Already on the first page")
                self.show_page(pagination.current_page - 1)
            elif command in ("g", "go", "goto"):
                page = self._single_int(args, "g <page>")
                pagination.check_page(page)
                self.show_page(page)
            elif command in ("r", "reload"):
                self.show_page(session.page_to_reload)
            elif command in ("t", "toggle"):
                if not args:
                    raise ValueError("Usage: t <row> [...]")
                for arg in args:
                    session.toggle_row(int(arg) - 1)
            elif command in ("a", "all"):
                session.select_all_on_page()
            elif command in ("x", "clear"):
                session.clear_page_selection()
            elif command in ("b", "bulk"):
                if len(args) != 1:
                    raise ValueError("Usage: b <count>")
                session.bulk_select_text(args[0])
            elif command in ("s", "selected"):
                positions = session.selection.selected_positions()
                self.output(
                    f"{len(positions)} selected: "
                    + (", ".join(str(p) for p in positions) or "none")
                )
                return True
            else:
                self.output(f"Unknown command: {command} (h for help)")
                return True
        except InvalidBulkCountError as e:
            self.output(f"Invalid count: {e}")
            return True
        except (ValueError, IndexError) as e:
            self.output(str(e))
            return True

        self.render()
        return True

    @staticmethod
    def _single_int(args: List[str], usage: str) -> int:
        if len(args) != 1:
            raise ValueError(f"Usage: {usage}")
        return int(args[0])

    def run(self) -> int:
        self.running = True
        self.show_page(self.session.pagination.current_page)
        self.render()
        self.output("Type h for help.")
        while self.running:
            try:
                line = self.input_fn("> ")
            except (EOFError, KeyboardInterrupt):
                self.output("")
                break
            if not self.handle(line):
                break
        self.running = False
        logger.info(f"Exiting with {self.session.selected_count} artworks selected")
        return 0
