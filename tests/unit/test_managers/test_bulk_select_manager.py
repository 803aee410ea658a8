"""Tests for bulk-selection input validation."""

import pytest


def test_parse_bulk_count_accepts_digits():
    from artbrowser.managers.bulk_select_manager import parse_bulk_count

    assert parse_bulk_count("15") == 15
    assert parse_bulk_count("  7 ") == 7
    assert parse_bulk_count("007") == 7


@pytest.mark.parametrize("text", ["", "   ", "0", "000", "-3", "abc", "1.5", "2e3", "١٢"])
def test_parse_bulk_count_rejects_invalid_input(text):
    from artbrowser.managers.bulk_select_manager import (
        InvalidBulkCountError,
        parse_bulk_count,
    )

    with pytest.raises(InvalidBulkCountError):
        parse_bulk_count(text)


def test_invalid_bulk_count_is_a_value_error():
    from artbrowser.managers.bulk_select_manager import (
        InvalidBulkCountError,
        parse_bulk_count,
    )

    assert issubclass(InvalidBulkCountError, ValueError)
    with pytest.raises(ValueError):
        parse_bulk_count(None)
