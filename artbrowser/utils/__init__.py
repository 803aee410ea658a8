"""Utility functions."""

from .formatting import (
    format_artist,
    format_date,
    format_inscriptions,
    format_status,
    format_title,
    truncate_text,
)

__all__ = [
    "format_artist",
    "format_date",
    "format_inscriptions",
    "format_status",
    "format_title",
    "truncate_text",
]
