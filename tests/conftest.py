"""Pytest configuration and shared fixtures."""

from pathlib import Path

import pytest

from tests.fakes.fake_page_fetcher import FakePageFetcher


@pytest.fixture
def temp_config_path(tmp_path: Path) -> Path:
    return tmp_path / "settings.yml"


@pytest.fixture
def fetcher() -> FakePageFetcher:
    return FakePageFetcher(total=95)


@pytest.fixture
def session(fetcher: FakePageFetcher):
    from artbrowser.managers.pagination_manager import PaginationManager
    from artbrowser.services.browse_session import BrowseSession

    return BrowseSession(fetcher, PaginationManager(rows_per_page=10))


@pytest.fixture
def artworks_payload() -> dict:
    return {
        "pagination": {
            "total": 128000,
            "limit": 2,
            "offset": 0,
            "total_pages": 64000,
            "current_page": 1,
        },
        "data": [
            {
                "id": 4,
                "title": "Priest and Boy",
                "place_of_origin": "Ireland",
                "artist_display": "Lawrence Carmichael Earle\nAmerican, 1845-1921",
                "inscriptions": None,
                "date_start": 1880,
                "date_end": 1885,
                "thumbnail": {"alt_text": "ignored"},
            },
            {
                "id": 7,
                "title": None,
                "place_of_origin": None,
                "artist_display": None,
                "inscriptions": "signed lower right",
                "date_start": None,
                "date_end": None,
            },
        ],
    }
