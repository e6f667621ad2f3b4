"""Tests for configuration module."""

from realty_scout.config import (
    APP_CONFIG,
    AppSettings,
    PaginationConfig,
    FilterDefaults,
    StorageConfig,
    MapConfig,
    get_app_settings,
)


def test_app_config_exists():
    """Test that APP_CONFIG dictionary is properly defined."""
    assert isinstance(APP_CONFIG, dict)
    assert "catalog_path" in APP_CONFIG
    assert "pagination" in APP_CONFIG
    assert "filter_defaults" in APP_CONFIG
    assert "storage" in APP_CONFIG
    assert "map_config" in APP_CONFIG


def test_app_config_defaults():
    """Test that APP_CONFIG has correct default values."""
    assert APP_CONFIG["pagination"]["page_size"] == 8
    assert APP_CONFIG["filter_defaults"]["min_price"] == 0
    assert APP_CONFIG["filter_defaults"]["max_price"] == 10_000_000
    assert APP_CONFIG["storage"]["favorites_key"] == "rs:favs"


def test_get_app_settings():
    """Test that get_app_settings returns proper AppSettings object."""
    settings = get_app_settings()

    assert isinstance(settings, AppSettings)

    assert isinstance(settings.pagination, PaginationConfig)
    assert settings.pagination.page_size == 8

    assert isinstance(settings.filter_defaults, FilterDefaults)
    assert settings.filter_defaults.max_price == 10_000_000

    assert isinstance(settings.storage, StorageConfig)
    assert settings.storage.favorites_key == "rs:favs"

    assert isinstance(settings.map_config, MapConfig)
    assert settings.map_config.agent_email == "agent@realty.example"


def test_app_settings_with_custom_values():
    """Test creating AppSettings with custom values."""
    settings = AppSettings(
        catalog_path="catalog.json",
        pagination=PaginationConfig(page_size=12),
        storage=StorageConfig(storage_type="memory"),
    )

    assert settings.catalog_path == "catalog.json"
    assert settings.pagination.page_size == 12
    assert settings.storage.storage_type == "memory"
    assert settings.storage.favorites_key == "rs:favs"
    assert settings.filter_defaults.min_price == 0


def test_get_app_settings_returns_independent_objects():
    first = get_app_settings()
    first.pagination.page_size = 99

    assert get_app_settings().pagination.page_size == 8


def test_dataclass_initialization():
    """Test that all config dataclasses can be initialized."""
    assert PaginationConfig().page_size == 8
    assert FilterDefaults().max_price == 10_000_000
    assert StorageConfig().storage_type == "file"
    assert MapConfig().mapbox_token is None
