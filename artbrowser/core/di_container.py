"""Dependency injection container."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from artbrowser.config import SettingsManager
from artbrowser.managers import PageLoaderManager, PaginationManager, SelectionSet
from artbrowser.services import ArtworkService, BrowseSession


@dataclass
class AppContainer:
    settings: SettingsManager

    _artwork_service: Optional[ArtworkService] = field(
        default=None, init=False, repr=False
    )
    _selection: Optional[SelectionSet] = field(
        default=None, init=False, repr=False
    )
    _session: Optional[BrowseSession] = field(
        default=None, init=False, repr=False
    )
    _page_loader: Optional[PageLoaderManager] = field(
        default=None, init=False, repr=False
    )

    @property
    def artwork_service(self) -> ArtworkService:
        if self._artwork_service is None:
            self._artwork_service = ArtworkService(
                base_url=self.settings.api_base_url,
                timeout=self.settings.api_timeout,
                fields=self.settings.api_fields,
            )
        return self._artwork_service

    @property
    def selection(self) -> SelectionSet:
        if self._selection is None:
            self._selection = SelectionSet()
        return self._selection

    @property
    def session(self) -> BrowseSession:
        if self._session is None:
            self._session = BrowseSession(
                self.artwork_service,
                PaginationManager(
                    rows_per_page=self.settings.rows_per_page,
                    start_page=self.settings.start_page,
                ),
                self.selection,
            )
        return self._session

    @property
    def page_loader(self) -> PageLoaderManager:
        if self._page_loader is None:
            self._page_loader = PageLoaderManager(self.artwork_service)
        return self._page_loader

    @classmethod
    def create(
        cls,
        settings: Optional[SettingsManager] = None,
        config_path: Optional[Path] = None,
    ) -> "AppContainer":
        return cls(settings=settings or SettingsManager(config_path))

    def close(self) -> None:
        if self._page_loader is not None:
            self._page_loader.cancel()
        if self._artwork_service is not None:
            self._artwork_service.close()
