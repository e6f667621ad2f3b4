"""
Query engine for the listing catalog.

Composes the listing filter with a sort order chosen by the criteria's sort
mode. The catalog is never modified; every run returns a new list.
"""

import logging
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from realty_scout.filtering.listing_filter import ListingFilter
from realty_scout.models import FilterCriteria, Listing, SortMode


logger = logging.getLogger(__name__)


# Sort key and direction per mode. Relevance has no entry: it keeps catalog order.
SORT_KEYS: Dict[SortMode, Tuple[Callable[[Listing], int], bool]] = {
    SortMode.PRICE_ASCENDING: (lambda listing: listing.price, False),
    SortMode.PRICE_DESCENDING: (lambda listing: listing.price, True),
    SortMode.BEDS_DESCENDING: (lambda listing: listing.beds, True),
}


class QueryEngine:
    """Produces the ordered result sequence for a catalog and criteria.

    Attributes:
        listing_filter: Predicate used to select listings
    """

    def __init__(self, listing_filter: Optional[ListingFilter] = None):
        self.listing_filter = listing_filter or ListingFilter()

    def run(self, catalog: Sequence[Listing], criteria: FilterCriteria) -> List[Listing]:
        """Filter then sort the catalog.

        Args:
            catalog: Listings in catalog order
            criteria: Filter criteria including the sort mode

        Returns:
            New list of matching listings in the requested order
        """
        results = self.listing_filter.filter_listings(catalog, criteria)
        ordered = sort_listings(results, criteria.sort_mode)
        logger.debug(
            f"Query matched {len(ordered)}/{len(catalog)} listings "
            f"(sort={criteria.sort_mode.value})"
        )
        return ordered


def sort_listings(listings: Sequence[Listing], sort_mode: SortMode) -> List[Listing]:
    """Order listings by sort mode.

    sorted() is stable, and reverse=True keeps equal elements in their
    original relative order, so ties always stay in catalog order.

    Args:
        listings: Listings in catalog order
        sort_mode: Requested ordering

    Returns:
        New list in the requested order
    """
    if sort_mode not in SORT_KEYS:
        return list(listings)
    key, descending = SORT_KEYS[sort_mode]
    return sorted(listings, key=key, reverse=descending)
