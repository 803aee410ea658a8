"""Domain models shared by the selection core and its collaborators."""

from dataclasses import dataclass, field
from typing import Any, List, Optional, Set, Tuple

from pydantic import BaseModel, Field


class Artwork(BaseModel):
    """One artwork record, reduced to the fields the table shows."""

    id: int
    title: Optional[str] = None
    place_of_origin: Optional[str] = None
    artist_display: Optional[str] = None
    inscriptions: Optional[str] = None
    date_start: Optional[int] = None
    date_end: Optional[int] = None


class PaginationInfo(BaseModel):
    total: int = Field(ge=0)
    total_pages: int = Field(default=0, ge=0)
    current_page: int = Field(default=1, ge=1)
    limit: int = Field(default=0, ge=0)


class ArtworkPage(BaseModel):
    """Body of a paginated artworks response."""

    data: List[Artwork]
    pagination: PaginationInfo


@dataclass(frozen=True)
class PageResult:
    """What a page fetch hands back: the page's payloads and the collection size."""

    items: List[Any]
    total_count: int


@dataclass(frozen=True)
class PageItem:
    position: int
    payload: Any


@dataclass(frozen=True)
class ViewRow:
    position: int
    payload: Any
    selected: bool


@dataclass(frozen=True)
class PageView:
    """Rows of the displayed page annotated with their selection state.

    Built from the selection set each time a page is shown; never written back.
    """

    rows: Tuple[ViewRow, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self):
        return iter(self.rows)

    def __getitem__(self, index: int) -> ViewRow:
        return self.rows[index]

    @property
    def positions(self) -> List[int]:
        return [row.position for row in self.rows]

    @property
    def selected_positions(self) -> Set[int]:
        return {row.position for row in self.rows if row.selected}

    @property
    def first_position(self) -> Optional[int]:
        return self.rows[0].position if self.rows else None

    @property
    def last_position(self) -> Optional[int]:
        return self.rows[-1].position if self.rows else None
