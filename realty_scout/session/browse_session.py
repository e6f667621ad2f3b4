"""
Browse session for Realty Scout.

This module owns the user-controlled state of one browsing session (filter
criteria, page position and favorites) and recomputes the displayed view
from scratch whenever any of it changes.
"""

import dataclasses
import logging
from typing import List, Optional, Sequence

from realty_scout.catalog import get_catalog
from realty_scout.config.app_config import AppSettings, get_app_settings
from realty_scout.export.csv_exporter import to_csv
from realty_scout.favorites.favorites_store import FavoritesStore
from realty_scout.favorites.key_value_store import create_store
from realty_scout.models import BrowseView, FilterCriteria, Listing, SortMode
from realty_scout.pagination.paginator import PaginationState, paginate
from realty_scout.query.query_engine import QueryEngine


logger = logging.getLogger(__name__)


class BrowseSession:
    """Single-user browsing state over a read-only catalog.

    The view is a pure function of (catalog, criteria, page); every mutating
    call recomputes it and applies the page-reset policy.

    Attributes:
        catalog: Listings in catalog order
        criteria: Current filter criteria
        pagination: Current page position
        favorites: Persisted favorites
    """

    def __init__(
        self,
        catalog: Sequence[Listing],
        favorites: Optional[FavoritesStore] = None,
        criteria: Optional[FilterCriteria] = None,
        page_size: int = 8,
        engine: Optional[QueryEngine] = None
    ):
        """Initialize session with default criteria on page 1.

        Args:
            catalog: Listings in catalog order
            favorites: Favorites store; defaults to an in-memory store
            criteria: Starting criteria; defaults to no restrictions
            page_size: Listings per page
            engine: Query engine to use
        """
        self.catalog = tuple(catalog)
        self.favorites = favorites if favorites is not None else FavoritesStore()
        self.criteria = criteria or FilterCriteria()
        self._initial_criteria = dataclasses.replace(self.criteria)
        self.pagination = PaginationState(page=1, page_size=page_size)
        self.engine = engine or QueryEngine()
        self._results: List[Listing] = []
        self._recompute()

    def _recompute(self) -> None:
        self._results = self.engine.run(self.catalog, self.criteria)
        if self.pagination.sync(len(self._results)):
            logger.debug("Current page out of range after results changed, reset to page 1")

    def update_criteria(self, **changes) -> BrowseView:
        """Replace individual criteria fields and recompute.

        Args:
            **changes: FilterCriteria field names and new values

        Returns:
            The recomputed view
        """
        if 'sort_mode' in changes:
            changes['sort_mode'] = SortMode.parse(changes['sort_mode'])
        self.criteria = dataclasses.replace(self.criteria, **changes)
        logger.info(f"Criteria updated: {self.criteria.to_dict()}")
        self._recompute()
        return self.view()

    def reset_criteria(self) -> BrowseView:
        """Return to the criteria the session started with."""
        self.criteria = dataclasses.replace(self._initial_criteria)
        self._recompute()
        return self.view()

    def go_to_page(self, page: int) -> BrowseView:
        """Jump to a page; out-of-range requests are ignored."""
        self.pagination.go_to(page)
        return self.view()

    def next_page(self) -> BrowseView:
        self.pagination.next()
        return self.view()

    def prev_page(self) -> BrowseView:
        self.pagination.prev()
        return self.view()

    def view(self) -> BrowseView:
        """Snapshot of the current results, page and favorites."""
        page = paginate(self._results, self.pagination.page, self.pagination.page_size)
        return BrowseView(
            results=list(self._results),
            page_items=page.items,
            page=page.page,
            total_pages=page.total_pages,
            favorites=list(self.favorites.favorites),
            criteria=dataclasses.replace(self.criteria),
        )

    def toggle_favorite(self, listing_id: str) -> List[str]:
        """Toggle a favorite and persist it."""
        return self.favorites.toggle(listing_id)

    def favorite_listings(self) -> List[Listing]:
        """Favorites found in the catalog, stale ids skipped."""
        return self.favorites.resolve(self.catalog)

    def export_csv(self) -> str:
        """CSV of the full filtered result, not just the current page."""
        return to_csv(self._results)


def create_session(settings: Optional[AppSettings] = None) -> BrowseSession:
    """Build a session from application settings.

    Args:
        settings: Application settings; read from the environment if omitted

    Returns:
        BrowseSession over the configured catalog with persisted favorites

    Raises:
        CatalogError: If a configured catalog file cannot be loaded
    """
    settings = settings or get_app_settings()
    catalog = get_catalog(settings.catalog_path)
    store = create_store(settings.storage.storage_type, settings.storage.favorites_file)
    favorites = FavoritesStore(store=store, key=settings.storage.favorites_key)
    criteria = FilterCriteria(
        min_price=settings.filter_defaults.min_price,
        max_price=settings.filter_defaults.max_price,
    )
    return BrowseSession(
        catalog,
        favorites=favorites,
        criteria=criteria,
        page_size=settings.pagination.page_size,
    )
