"""
Data models for Realty Scout.

This module defines the core data structures used throughout the application.
"""

from dataclasses import dataclass, asdict, field
from enum import Enum
from typing import List, Optional, Tuple


ANY_TYPE = "Any"
DEFAULT_MIN_PRICE = 0
DEFAULT_MAX_PRICE = 10_000_000


class PropertyType(str, Enum):
    """Closed set of property types a listing can have."""
    APARTMENT = "Apartment"
    HOUSE = "House"
    STUDIO = "Studio"
    TOWNHOUSE = "Townhouse"


class SortMode(str, Enum):
    """Result ordering selected by the user.

    The values are the wire names accepted by the CLI and the HTTP API.
    """
    RELEVANCE = "relevance"
    PRICE_ASCENDING = "price-asc"
    PRICE_DESCENDING = "price-desc"
    BEDS_DESCENDING = "beds"

    @classmethod
    def parse(cls, value: "str | SortMode") -> "SortMode":
        """Parse a sort mode from its wire name or member name.

        Args:
            value: Wire name ("price-asc"), member name ("PRICE_ASCENDING")
                or an existing SortMode

        Returns:
            Matching SortMode

        Raises:
            ValueError: If the value names no sort mode
        """
        if isinstance(value, cls):
            return value
        text = str(value).strip()
        try:
            return cls(text.lower())
        except ValueError:
            pass
        try:
            return cls[text.upper().replace("-", "_")]
        except KeyError:
            raise ValueError(f"Unknown sort mode: {value!r}") from None


@dataclass(frozen=True)
class Listing:
    """Represents one property record in the catalog.

    Listings are created once when the catalog is loaded and never mutated.

    Attributes:
        id: Unique identifier, stable for the catalog's lifetime
        title: Headline shown on the listing card
        address: Human-readable location
        description: Free-text description
        price: Asking price in whole currency units
        beds: Number of bedrooms
        baths: Number of bathrooms
        type: Property type
        sqft: Floor area in square feet
        images: Image URLs, the first is the primary image
        lat: Latitude
        lng: Longitude
    """
    id: str
    title: str
    address: str
    description: str
    price: int
    beds: int
    baths: int
    type: PropertyType
    sqft: int
    images: Tuple[str, ...]
    lat: float = 0.0
    lng: float = 0.0

    @property
    def primary_image(self) -> str:
        """URL of the listing's primary image."""
        return self.images[0]

    def to_dict(self) -> dict:
        """Convert listing to dictionary for JSON serialization.

        Returns:
            Dictionary representation with the type as its display name
        """
        data = asdict(self)
        data['type'] = self.type.value
        data['images'] = list(self.images)
        return data

    @classmethod
    def from_dict(cls, data: dict) -> 'Listing':
        """Create Listing instance from dictionary.

        Args:
            data: Dictionary containing listing data

        Returns:
            Listing instance

        Raises:
            ValueError: If the type is not a known property type
            TypeError: If images is not a list of strings or a field is unknown
        """
        data = data.copy()
        data['type'] = PropertyType(data['type'])
        images = data.get('images') or ()
        if not isinstance(images, (list, tuple)) or not all(isinstance(url, str) for url in images):
            raise TypeError("images must be a list of URL strings")
        data['images'] = tuple(images)
        return cls(**data)


@dataclass
class FilterCriteria:
    """User-chosen constraints applied to the catalog.

    A range with min_price greater than max_price is allowed and simply
    matches nothing.

    Attributes:
        query: Free text, matched case-insensitively; empty means no text filter
        property_type: A PropertyType value or ANY_TYPE
        min_price: Inclusive lower price bound
        max_price: Inclusive upper price bound
        min_beds: Minimum bedrooms, 0 means no restriction
        sort_mode: Result ordering
    """
    query: str = ""
    property_type: str = ANY_TYPE
    min_price: int = DEFAULT_MIN_PRICE
    max_price: int = DEFAULT_MAX_PRICE
    min_beds: int = 0
    sort_mode: SortMode = SortMode.RELEVANCE

    def to_dict(self) -> dict:
        """Convert criteria to a plain dictionary for logging and responses."""
        data = asdict(self)
        data['property_type'] = str(getattr(self.property_type, 'value', self.property_type))
        data['sort_mode'] = self.sort_mode.value
        return data


@dataclass
class PageResult:
    """One page of an ordered result sequence.

    Attributes:
        items: Listings on the page
        page: Effective 1-based page number the items were sliced for
        total_pages: Number of pages, never less than 1
        reset: True when the requested page was out of range and was reset to 1
    """
    items: List[Listing]
    page: int
    total_pages: int
    reset: bool = False


@dataclass
class BrowseView:
    """Snapshot of everything the rendering layer needs for one frame.

    Attributes:
        results: Full filtered and sorted result sequence
        page_items: Listings on the current page
        page: Current page number
        total_pages: Number of pages for the current results
        favorites: Favorite listing ids in insertion order
        criteria: Criteria the snapshot was computed from
    """
    results: List[Listing]
    page_items: List[Listing]
    page: int
    total_pages: int
    favorites: List[str] = field(default_factory=list)
    criteria: Optional[FilterCriteria] = None

    @property
    def result_count(self) -> int:
        return len(self.results)
