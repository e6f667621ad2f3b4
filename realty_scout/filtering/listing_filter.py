"""
Listing filter implementation for catalog results.

This module provides the filter predicate that decides whether a single
listing satisfies the user's criteria, plus lenient parsing of the numeric
filter inputs typed by the user.
"""

import logging
from typing import Iterable, List, Optional, Union

from realty_scout.models import (
    ANY_TYPE,
    DEFAULT_MAX_PRICE,
    DEFAULT_MIN_PRICE,
    FilterCriteria,
    Listing,
)


logger = logging.getLogger(__name__)


class ListingFilter:
    """Filters catalog listings against FilterCriteria.

    Each check is a pure function of the listing and the criteria; the
    listing passes only when every check passes.
    """

    def matches(self, listing: Listing, criteria: FilterCriteria) -> bool:
        """Check a listing against all criteria.

        Args:
            listing: Listing to evaluate
            criteria: Current filter criteria

        Returns:
            True if the listing satisfies every criterion
        """
        return (
            self.matches_type(listing, criteria.property_type)
            and self.matches_price(listing, criteria.min_price, criteria.max_price)
            and self.matches_beds(listing, criteria.min_beds)
            and self.matches_text(listing, criteria.query)
        )

    def filter_listings(
        self,
        listings: Iterable[Listing],
        criteria: FilterCriteria
    ) -> List[Listing]:
        """Filter listings, preserving their input order.

        Args:
            listings: Listings to filter
            criteria: Current filter criteria

        Returns:
            New list of the listings that satisfy the criteria
        """
        return [listing for listing in listings if self.matches(listing, criteria)]

    def matches_type(self, listing: Listing, property_type: str) -> bool:
        """Pass unless a specific type is requested and differs."""
        if property_type == ANY_TYPE:
            return True
        return listing.type == property_type

    def matches_price(self, listing: Listing, min_price: int, max_price: int) -> bool:
        """Inclusive price range check.

        An inverted range (min above max) matches nothing.
        """
        return min_price <= listing.price <= max_price

    def matches_beds(self, listing: Listing, min_beds: int) -> bool:
        """Minimum bedroom check, 0 disables it."""
        if min_beds <= 0:
            return True
        return listing.beds >= min_beds

    def matches_text(self, listing: Listing, query: str) -> bool:
        """Case-insensitive substring search across title, address and description.

        Args:
            listing: Listing to search
            query: Search text; blank text matches every listing

        Returns:
            True if the trimmed, lowercased query occurs in any searchable field
        """
        needle = (query or "").strip().lower()
        if not needle:
            return True
        return any(
            needle in text.lower()
            for text in (listing.title, listing.address, listing.description)
        )


def parse_price_bound(
    value: Optional[Union[str, int, float]],
    default: int
) -> int:
    """Parse a user-typed price bound, substituting a default on bad input.

    Accepts integers and numeric strings with optional thousands separators
    such as "60,000". Empty or non-numeric input yields the default.

    Args:
        value: Raw input value
        default: Value to use when the input is missing or not numeric

    Returns:
        Integer price bound
    """
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value

    text = str(value).strip().replace(',', '').replace('_', '')
    if not text:
        return default
    try:
        # int() rejects nan and inf
        return int(float(text))
    except (ValueError, OverflowError):
        logger.debug(f"Ignoring non-numeric price bound {value!r}, using {default}")
        return default


def parse_min_price(value: Optional[Union[str, int, float]]) -> int:
    """Parse the minimum price input, defaulting to 0."""
    return parse_price_bound(value, DEFAULT_MIN_PRICE)


def parse_max_price(value: Optional[Union[str, int, float]]) -> int:
    """Parse the maximum price input, defaulting to the price ceiling."""
    return parse_price_bound(value, DEFAULT_MAX_PRICE)
