"""Validation of the bulk-selection count typed by the user."""

import re

_DIGITS = re.compile(r"\d+", re.ASCII)


class InvalidBulkCountError(ValueError):
    """Raised when bulk-selection input is not a positive whole number"""
    pass


def parse_bulk_count(text: str) -> int:
    value = (text or "").strip()
    if not _DIGITS.fullmatch(value):
        raise InvalidBulkCountError(f"Not a whole number: {text!r}")
    count = int(value)
    if count <= 0:
        raise InvalidBulkCountError("Bulk selection count must be greater than zero")
    return count
