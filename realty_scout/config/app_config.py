"""Application configuration settings for Realty Scout."""

from dataclasses import dataclass
from typing import Optional
import os

from dotenv import load_dotenv


# Pick up a local .env before reading the environment
load_dotenv()


@dataclass
class PaginationConfig:
    """Pagination configuration."""
    page_size: int = 8


@dataclass
class FilterDefaults:
    """Session-start filter values."""
    min_price: int = 0
    max_price: int = 10_000_000


@dataclass
class StorageConfig:
    """Favorites persistence configuration."""
    storage_type: str = "file"
    favorites_file: str = "./realty_scout_data/favorites.json"
    favorites_key: str = "rs:favs"


@dataclass
class MapConfig:
    """Map embed and contact configuration."""
    mapbox_token: Optional[str] = None
    agent_email: str = "agent@realty.example"


@dataclass
class AppSettings:
    """Main application configuration settings."""
    catalog_path: Optional[str] = None
    pagination: PaginationConfig = None
    filter_defaults: FilterDefaults = None
    storage: StorageConfig = None
    map_config: MapConfig = None

    def __post_init__(self):
        """Initialize nested configs if not provided."""
        if self.pagination is None:
            self.pagination = PaginationConfig()
        if self.filter_defaults is None:
            self.filter_defaults = FilterDefaults()
        if self.storage is None:
            self.storage = StorageConfig()
        if self.map_config is None:
            self.map_config = MapConfig()


# Default application configuration
APP_CONFIG = {
    "catalog_path": os.getenv("CATALOG_PATH") or None,
    "pagination": {
        "page_size": int(os.getenv("PAGE_SIZE", "8")),
    },
    "filter_defaults": {
        "min_price": 0,
        "max_price": int(os.getenv("DEFAULT_MAX_PRICE", "10000000")),
    },
    "storage": {
        "storage_type": os.getenv("STORAGE_TYPE", "file"),
        "favorites_file": os.getenv("FAVORITES_FILE", "./realty_scout_data/favorites.json"),
        "favorites_key": os.getenv("FAVORITES_KEY", "rs:favs"),
    },
    "map_config": {
        "mapbox_token": os.getenv("MAPBOX_TOKEN") or None,
        "agent_email": os.getenv("AGENT_EMAIL", "agent@realty.example"),
    },
}


def get_app_settings() -> AppSettings:
    """Get application settings from configuration."""
    return AppSettings(
        catalog_path=APP_CONFIG["catalog_path"],
        pagination=PaginationConfig(**APP_CONFIG["pagination"]),
        filter_defaults=FilterDefaults(**APP_CONFIG["filter_defaults"]),
        storage=StorageConfig(**APP_CONFIG["storage"]),
        map_config=MapConfig(**APP_CONFIG["map_config"]),
    )
