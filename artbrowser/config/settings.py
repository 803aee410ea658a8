"""
ArtBrowser Settings Management
Loads and validates settings from settings.yml using Pydantic
"""

import logging
from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import BaseModel, Field, field_validator

logger = logging.getLogger("ArtBrowser.Settings")

DEFAULT_FIELDS = [
    "id",
    "title",
    "place_of_origin",
    "artist_display",
    "inscriptions",
    "date_start",
    "date_end",
]


class PaginationSettings(BaseModel):
    """Pagination-related settings"""
    rows_per_page: int = Field(
        default=10,
        ge=1,
        le=100,
        description="Number of artworks fetched per page (1-100)"
    )
    start_page: int = Field(
        default=1,
        ge=1,
        description="Page shown when the session starts"
    )


class ApiSettings(BaseModel):
    """Artwork API settings"""
    base_url: str = Field(
        default="https://api.artic.edu/api/v1/artworks",
        description="Endpoint returning paginated artworks"
    )
    timeout: float = Field(
        default=10.0,
        gt=0,
        description="Request timeout in seconds"
    )
    fields: List[str] = Field(default_factory=lambda: list(DEFAULT_FIELDS))

    @field_validator('base_url')
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Ensure the URL is http(s) and has no trailing slash"""
        if not v.startswith(("http://", "https://")):
            raise ValueError("base_url must start with http:// or https://")
        return v.rstrip("/")

    @field_validator('fields')
    @classmethod
    def validate_fields(cls, v: List[str]) -> List[str]:
        """The id field is always requested"""
        if "id" not in v:
            v = ["id"] + v
        return v


class Settings(BaseModel):
    """Main settings model"""
    pagination: PaginationSettings = Field(default_factory=PaginationSettings)
    api: ApiSettings = Field(default_factory=ApiSettings)


class SettingsManager:
    """Manages loading and accessing settings"""

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize settings manager

        Args:
            config_path: Path to settings.yml file. Defaults to the settings.yml
                next to this module
        """
        if config_path is None:
            config_path = Path(__file__).parent / "settings.yml"

        self.config_path = Path(config_path)
        self.settings = self._load_settings()

    def _load_settings(self) -> Settings:
        """Load and validate settings from YAML file"""
        try:
            if not self.config_path.exists():
                logger.info(f"Settings file not found at {self.config_path}, using defaults")
                return Settings()

            with open(self.config_path, 'r') as f:
                config_data = yaml.safe_load(f)

            if config_data is None:
                logger.info("Settings file is empty, using defaults")
                return Settings()

            settings = Settings(**config_data)
            logger.info(f"Loaded settings from {self.config_path}")
            logger.debug(f"  - Rows per page: {settings.pagination.rows_per_page}")
            return settings

        except yaml.YAMLError as e:
            logger.warning(f"Error parsing settings YAML: {e}. Using default settings")
            return Settings()
        except Exception as e:
            logger.warning(f"Error loading settings: {e}. Using default settings")
            return Settings()

    @property
    def rows_per_page(self) -> int:
        return self.settings.pagination.rows_per_page

    @property
    def start_page(self) -> int:
        return self.settings.pagination.start_page

    @property
    def api_base_url(self) -> str:
        return self.settings.api.base_url

    @property
    def api_timeout(self) -> float:
        return self.settings.api.timeout

    @property
    def api_fields(self) -> List[str]:
        return list(self.settings.api.fields)

    def override(self, **kwargs):
        """Apply settings in memory without saving.

        Nested keys use dots, e.g. ``override(**{"pagination.rows_per_page": 25})``.
        Raises pydantic.ValidationError if the result is invalid; the current
        settings are kept in that case.
        """
        data = self.settings.model_dump()
        for key, value in kwargs.items():
            parts = key.split('.')
            target = data
            for part in parts[:-1]:
                target = target[part]
            target[parts[-1]] = value

        self.settings = Settings(**data)

    def update_settings(self, **kwargs):
        """Update settings and save to file"""
        self.override(**kwargs)
        self._save_settings()

    def _save_settings(self):
        """Save current settings to YAML file"""
        config_data = self.settings.model_dump()
        with open(self.config_path, 'w') as f:
            yaml.dump(config_data, f, default_flow_style=False)
