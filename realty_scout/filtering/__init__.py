"""
Filtering module for catalog listings.

This module provides the filter predicate applied to each listing and the
lenient parsers for user-typed numeric filter inputs.
"""

from .listing_filter import ListingFilter, parse_max_price, parse_min_price, parse_price_bound

__all__ = ['ListingFilter', 'parse_max_price', 'parse_min_price', 'parse_price_bound']
