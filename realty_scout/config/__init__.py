"""Configuration module for Realty Scout."""

from .app_config import (
    APP_CONFIG,
    AppSettings,
    PaginationConfig,
    FilterDefaults,
    StorageConfig,
    MapConfig,
    get_app_settings,
)

__all__ = [
    'APP_CONFIG',
    'AppSettings',
    'PaginationConfig',
    'FilterDefaults',
    'StorageConfig',
    'MapConfig',
    'get_app_settings',
]
