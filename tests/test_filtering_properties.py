"""
Property-based tests for listing filtering.

These tests verify universal properties that should hold across all valid
executions of the filter predicate.
"""

import dataclasses

import pytest
from hypothesis import given, settings, strategies as st

from realty_scout.filtering import ListingFilter, parse_max_price, parse_min_price, parse_price_bound
from realty_scout.models import ANY_TYPE, DEFAULT_MAX_PRICE, FilterCriteria, Listing, PropertyType


texts = st.text(
    alphabet=st.characters(blacklist_categories=('Cs', 'Cc')),
    max_size=60
)

listings = st.builds(
    Listing,
    id=st.from_regex(r'L-[0-9]{4}', fullmatch=True),
    title=texts,
    address=texts,
    description=texts,
    price=st.integers(min_value=0, max_value=500000),
    beds=st.integers(min_value=0, max_value=6),
    baths=st.integers(min_value=0, max_value=4),
    type=st.sampled_from(PropertyType),
    sqft=st.integers(min_value=1, max_value=5000),
    images=st.just(("https://example.com/primary.jpg",)),
)


@given(listing=listings, min_price=st.integers(0, 500000), max_price=st.integers(0, 500000))
@settings(max_examples=100)
def test_price_range_is_inclusive(listing, min_price, max_price):
    """
    A listing passes the price check iff min_price <= price <= max_price.
    An inverted range never matches.
    """
    criteria = FilterCriteria(min_price=min_price, max_price=max_price)
    expected = min_price <= listing.price <= max_price

    assert ListingFilter().matches(listing, criteria) is expected
    if min_price > max_price:
        assert not ListingFilter().matches(listing, criteria)


@given(listing=listings, property_type=st.sampled_from(PropertyType))
@settings(max_examples=100)
def test_type_filter(listing, property_type):
    listing_filter = ListingFilter()

    assert listing_filter.matches(listing, FilterCriteria(property_type=ANY_TYPE))
    assert listing_filter.matches(
        listing, FilterCriteria(property_type=property_type.value)
    ) is (listing.type == property_type)


@given(listing=listings, min_beds=st.integers(min_value=0, max_value=6))
@settings(max_examples=100)
def test_min_beds_filter(listing, min_beds):
    result = ListingFilter().matches(listing, FilterCriteria(min_beds=min_beds))

    if min_beds == 0:
        assert result
    else:
        assert result is (listing.beds >= min_beds)


@given(listing=listings, query=texts)
@settings(max_examples=100)
def test_text_search_matches_any_field(listing, query):
    """
    A non-blank query matches iff its trimmed lowercase form is a substring
    of the lowercased title, address or description.
    """
    needle = query.strip().lower()
    fields = [listing.title.lower(), listing.address.lower(), listing.description.lower()]
    expected = not needle or any(needle in field for field in fields)

    assert ListingFilter().matches(listing, FilterCriteria(query=query)) is expected


@given(listing=listings)
@settings(max_examples=50)
def test_blank_query_matches_everything(listing):
    for query in ("", "   ", "\t"):
        assert ListingFilter().matches_text(listing, query)


@given(listing=listings, title=st.from_regex(r"[A-Za-z0-9 ]{1,30}", fullmatch=True))
@settings(max_examples=50)
def test_title_matches_regardless_of_case(listing, title):
    listing = dataclasses.replace(listing, title=title)
    assert ListingFilter().matches_text(listing, title.upper())


def test_filter_listings_preserves_order():
    base = dict(address="Karen", description="", beds=2, baths=1,
                type=PropertyType.HOUSE, sqft=800, images=("a.jpg",))
    catalog = [
        Listing(id="a", title="Garden villa", price=300, **base),
        Listing(id="b", title="Flat", price=100, **base),
        Listing(id="c", title="Garden cottage", price=200, **base),
    ]

    results = ListingFilter().filter_listings(catalog, FilterCriteria(query="garden"))

    assert [listing.id for listing in results] == ["a", "c"]


@pytest.mark.parametrize("raw, expected", [
    ("60000", 60000),
    ("60,000", 60000),
    (" 1_000 ", 1000),
    ("150000.75", 150000),
    (42, 42),
    (12.9, 12),
])
def test_parse_price_bound_accepts_numbers(raw, expected):
    assert parse_price_bound(raw, default=-1) == expected


@pytest.mark.parametrize("raw", [
    None, "", "   ", "abc", "12abc", "nan", "1e400", True,
    float("nan"), float("inf"), float("-inf"),
])
def test_parse_price_bound_falls_back_to_default(raw):
    assert parse_price_bound(raw, default=7) == 7


def test_min_and_max_price_defaults():
    assert parse_min_price("not a number") == 0
    assert parse_max_price("not a number") == DEFAULT_MAX_PRICE
    assert parse_max_price(None) == 10_000_000
