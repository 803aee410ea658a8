"""Configuration management."""

from .settings import (
    ApiSettings,
    PaginationSettings,
    Settings,
    SettingsManager,
)

__all__ = [
    "ApiSettings",
    "PaginationSettings",
    "Settings",
    "SettingsManager",
]
