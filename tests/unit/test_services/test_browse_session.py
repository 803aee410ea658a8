"""Tests for BrowseSession."""

import pytest

from tests.fakes.fake_page_fetcher import FakePageFetcher


def test_load_page_builds_view(session, fetcher: FakePageFetcher):
    view = session.load_page(3)

    assert view.positions == list(range(21, 31))
    assert view.selected_positions == set()
    assert view[0].payload.title == "Artwork 21"
    assert session.total_records == 95
    assert session.pagination.total_pages == 10
    assert session.loading is False
    assert fetcher.calls == [(3, 10)]


def test_last_page_is_partial(session):
    view = session.load_page(10)

    assert view.positions == [91, 92, 93, 94, 95]


def test_bulk_select_from_current_page(session):
    session.load_page(3)

    view = session.bulk_select(15)

    assert session.selected_count == 15
    assert view.selected_positions == set(range(21, 31))

    page_four = session.next_page()
    assert page_four.selected_positions == {31, 32, 33, 34, 35}
    assert [row.selected for row in page_four][5:] == [False] * 5


def test_selection_survives_navigation(session):
    session.load_page(1)
    session.set_page_selection({2, 4})
    session.next_page()
    session.set_page_selection({15})
    session.go_to_page(7)

    view = session.go_to_page(1)

    assert view.selected_positions == {2, 4}
    assert session.selected_count == 3


def test_toggle_row(session):
    session.load_page(2)

    session.toggle_row(0)
    session.toggle_row(3)
    assert session.view.selected_positions == {11, 14}

    view = session.toggle_row(0)
    assert view.selected_positions == {14}
    assert view[0].selected is False
    assert session.selected_count == 1


def test_toggle_row_out_of_range(session):
    session.load_page(1)

    with pytest.raises(IndexError):
        session.toggle_row(10)
    with pytest.raises(IndexError):
        session.toggle_row(-1)


def test_select_all_and_clear_page(session):
    session.load_page(1)
    session.bulk_select(25)

    session.next_page()
    session.clear_page_selection()
    assert session.selection.selected_positions() == list(range(1, 11)) + list(range(21, 26))

    session.select_all_on_page()
    assert session.selected_count == 25


def test_bulk_select_text_validates_input(session):
    from artbrowser.managers.bulk_select_manager import InvalidBulkCountError

    session.load_page(1)

    with pytest.raises(InvalidBulkCountError):
        session.bulk_select_text("ten")
    with pytest.raises(InvalidBulkCountError):
        session.bulk_select_text("0")
    assert session.selected_count == 0

    session.bulk_select_text("12")
    assert session.selected_count == 12


def test_fetch_error_keeps_selection(session, fetcher: FakePageFetcher):
    from artbrowser.services.browse_session import FETCH_ERROR_MESSAGE

    session.load_page(1)
    session.set_page_selection({1, 5})
    fetcher.fail_pages.add(2)

    view = session.next_page()

    assert session.error == FETCH_ERROR_MESSAGE
    assert session.loading is False
    assert view.positions == list(range(1, 11))
    assert session.selection.selected_positions() == [1, 5]
    assert session.pagination.current_page == 1
    assert session.page_to_reload == 2

    fetcher.fail_pages.clear()
    session.reload()
    assert session.page_to_reload == 2
    assert session.pagination.current_page == 2
    assert session.error is None
    assert session.view.positions == list(range(11, 21))


def test_failed_fetch_then_bulk_starts_at_displayed_page(session, fetcher: FakePageFetcher):
    session.load_page(1)
    fetcher.fail_pages.add(2)
    session.next_page()

    session.bulk_select(3)

    assert session.pagination.current_page == 1
    assert session.selection.selected_positions() == [1, 2, 3]
    assert session.view.selected_positions == {1, 2, 3}


def test_failed_fetch_then_next_loads_following_page(session, fetcher: FakePageFetcher):
    session.load_page(1)
    fetcher.fail_pages.add(2)
    session.next_page()
    fetcher.fail_pages.clear()

    session.next_page()

    assert session.error is None
    assert session.pagination.current_page == 2
    assert session.page_to_reload == 2
    assert session.view.positions == list(range(11, 21))
    assert fetcher.calls[-1] == (2, 10)


def test_navigation_past_last_page_raises(session):
    session.load_page(10)

    with pytest.raises(ValueError):
        session.next_page()
    with pytest.raises(ValueError):
        session.go_to_page(0)


def test_request_page_through_loader(session, fetcher: FakePageFetcher):
    from artbrowser.managers.page_loader_manager import PageLoaderManager

    loader = PageLoaderManager(fetcher)
    session.selection.apply_bulk_range(41, 3)

    session.request_page(5, loader)
    loader.wait(timeout=5)

    assert session.loading is False
    assert session.view.positions == list(range(41, 51))
    assert session.view.selected_positions == {41, 42, 43}


def test_request_page_drops_stale_page(session, fetcher: FakePageFetcher):
    from artbrowser.managers.page_loader_manager import PageLoaderManager

    gate = fetcher.hold(2)
    loader = PageLoaderManager(fetcher)

    session.request_page(2, loader)
    session.request_page(6, loader)
    gate.set()
    loader.wait(timeout=5)

    assert session.pagination.current_page == 6
    assert session.view.positions == list(range(51, 61))
