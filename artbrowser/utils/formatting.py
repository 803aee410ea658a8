"""Text formatting utilities."""

from typing import Optional

from artbrowser.core.models import Artwork


def truncate_text(text: str, max_length: int = 100) -> str:
    if len(text) <= max_length:
        return text
    return text[:max_length] + "..."


def single_line(text: str) -> str:
    return " ".join(text.split())


def format_title(artwork: Artwork) -> str:
    return artwork.title or "Untitled"


def format_artist(artwork: Artwork) -> str:
    return single_line(artwork.artist_display or "") or "Unknown Artist"


def format_origin(artwork: Artwork) -> str:
    return artwork.place_of_origin or ""


def format_inscriptions(artwork: Artwork) -> str:
    return single_line(artwork.inscriptions or "") or "No inscriptions"


def format_date_range(start: Optional[int], end: Optional[int]) -> str:
    if start and end:
        return f"{start} - {end}"
    elif start:
        return str(start)
    else:
        return "Unknown"


def format_date(artwork: Artwork) -> str:
    return format_date_range(artwork.date_start, artwork.date_end)


def format_status(
    first_position: Optional[int],
    last_position: Optional[int],
    total: Optional[int],
    selected: int,
) -> str:
    if first_position is None or last_position is None:
        return f"No artworks on this page, {selected} selected"
    total_text = "?" if total is None else str(total)
    return (
        f"Showing {first_position}-{last_position} of {total_text} artworks, "
        f"{selected} selected"
    )
