"""
Favorites management for Realty Scout.

This module handles the persisted set of favorited listing ids. The set is
an ordered list without duplicates; toggling returns a new list and writes
it through to the key-value store immediately.
"""

import json
import logging
from typing import Iterable, List, Optional, Sequence

from realty_scout.error_handling import ErrorHandler
from realty_scout.favorites.key_value_store import InMemoryKeyValueStore, KeyValueStore
from realty_scout.models import Listing


logger = logging.getLogger(__name__)

DEFAULT_FAVORITES_KEY = "rs:favs"


def toggle_favorite(favorites: Sequence[str], listing_id: str) -> List[str]:
    """Add or remove an id without modifying the input.

    Args:
        favorites: Current favorite ids in insertion order
        listing_id: Id to toggle

    Returns:
        New list with the id removed if present, appended otherwise
    """
    if listing_id in favorites:
        return [fav for fav in favorites if fav != listing_id]
    return [*favorites, listing_id]


def resolve_favorites(catalog: Iterable[Listing], favorites: Sequence[str]) -> List[Listing]:
    """Look up favorite ids in the catalog for display.

    Stale ids with no listing in the catalog are skipped.

    Args:
        catalog: Listings to search
        favorites: Favorite ids in insertion order

    Returns:
        Listings in favorites order
    """
    by_id = {listing.id: listing for listing in catalog}
    return [by_id[fav] for fav in favorites if fav in by_id]


class FavoritesStore:
    """Persisted, ordered set of favorite listing ids.

    Loading and saving are best-effort: a missing or corrupt value loads
    as an empty set, and a failed write is logged while the in-memory set
    stays authoritative for the session.

    Attributes:
        store: Key-value backend
        key: Key the JSON-encoded id list is stored under
        favorites: Current favorite ids
    """

    def __init__(
        self,
        store: Optional[KeyValueStore] = None,
        key: str = DEFAULT_FAVORITES_KEY,
        error_handler: Optional[ErrorHandler] = None
    ):
        """Initialize favorites store and load the persisted set.

        Args:
            store: Key-value backend; defaults to an in-memory store
            key: Storage key
            error_handler: Handler used to swallow persistence failures
        """
        self.store = store if store is not None else InMemoryKeyValueStore()
        self.key = key
        self.error_handler = error_handler or ErrorHandler()
        self.favorites: List[str] = self.load()

    def load(self) -> List[str]:
        """Read the persisted favorites.

        Returns:
            Favorite ids, or an empty list if nothing valid is stored
        """
        favorites = self.error_handler.best_effort(
            self._read,
            default=[],
            description=f"load favorites ({self.key})"
        )
        logger.info(f"Loaded {len(favorites)} favorite(s)")
        return favorites

    def save(self, favorites: Sequence[str]) -> bool:
        """Write favorites to the backend.

        Args:
            favorites: Favorite ids to persist

        Returns:
            True if the write succeeded, False otherwise
        """
        return self.error_handler.best_effort(
            self._write,
            list(favorites),
            default=False,
            description=f"save favorites ({self.key})"
        )

    def toggle(self, listing_id: str) -> List[str]:
        """Toggle an id and persist the result.

        Args:
            listing_id: Id to add or remove

        Returns:
            The new favorites list
        """
        self.favorites = toggle_favorite(self.favorites, listing_id)
        self.save(self.favorites)
        return list(self.favorites)

    def is_favorite(self, listing_id: str) -> bool:
        return listing_id in self.favorites

    def resolve(self, catalog: Iterable[Listing]) -> List[Listing]:
        """Favorite listings present in the catalog, in favorites order."""
        return resolve_favorites(catalog, self.favorites)

    def _read(self) -> List[str]:
        raw = self.store.get(self.key)
        if not raw:
            return []

        data = json.loads(raw)
        if not isinstance(data, list):
            raise ValueError(f"Expected a JSON array of ids, got {type(data).__name__}")
        # Drop duplicates and non-string entries, keeping first occurrence
        return list(dict.fromkeys(item for item in data if isinstance(item, str)))

    def _write(self, favorites: List[str]) -> bool:
        self.store.set(self.key, json.dumps(favorites))
        logger.debug(f"Saved {len(favorites)} favorite(s)")
        return True
