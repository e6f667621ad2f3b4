"""
Favorites module.

Persisted set of favorited listing ids over a pluggable key-value store.
"""

from .favorites_store import (
    DEFAULT_FAVORITES_KEY,
    FavoritesStore,
    resolve_favorites,
    toggle_favorite,
)
from .key_value_store import (
    FileKeyValueStore,
    InMemoryKeyValueStore,
    KeyValueStore,
    create_store,
)

__all__ = [
    'DEFAULT_FAVORITES_KEY',
    'FavoritesStore',
    'resolve_favorites',
    'toggle_favorite',
    'FileKeyValueStore',
    'InMemoryKeyValueStore',
    'KeyValueStore',
    'create_store',
]
