"""
Listing catalog providers.

The catalog is an ordered, read-only sequence of listings. It either comes
from the built-in seed data or from a JSON file containing an array of
listing objects.
"""

import json
import logging
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from realty_scout.error_handling import CatalogError
from realty_scout.models import Listing, PropertyType


logger = logging.getLogger(__name__)

SEED_TITLES = (
    "Modern 2BR apartment in Kilimani",
    "Spacious family home near CBD",
    "Stylish studio — perfect for students",
    "Renovated 3BR townhouse with garden",
)
SEED_TYPES = (
    PropertyType.APARTMENT,
    PropertyType.HOUSE,
    PropertyType.STUDIO,
    PropertyType.TOWNHOUSE,
)
SEED_ADDRESSES = (
    "Kilimani, Nairobi",
    "Westlands, Nairobi",
    "Langata, Nairobi",
    "Karen, Nairobi",
)
SEED_DESCRIPTION = (
    "Beautiful property with excellent natural light, modern finishes, "
    "and convenient access to transport and amenities."
)
SEED_ORIGIN = (-1.2921, 36.8219)


def generate_seed_catalog(count: int = 24) -> Tuple[Listing, ...]:
    """Build the demo catalog of Nairobi listings.

    Args:
        count: Number of listings to generate

    Returns:
        Tuple of listings with ids L-1000, L-1001, ...
    """
    return tuple(_seed_listing(i) for i in range(count))


def _seed_listing(i: int) -> Listing:
    lat, lng = SEED_ORIGIN
    return Listing(
        id=f"L-{1000 + i}",
        title=SEED_TITLES[i % 4],
        address=SEED_ADDRESSES[i % 4],
        description=SEED_DESCRIPTION,
        price=(6 + i % 10) * 10000,
        beds=i % 4 + 1,
        baths=i % 3 + 1,
        type=SEED_TYPES[i % 4],
        sqft=500 + (i % 10) * 120,
        images=tuple(f"https://picsum.photos/seed/{i}-{n}/800/600" for n in (1, 2, 3)),
        lat=lat + (i % 5) * 0.01,
        lng=lng + (i % 5) * 0.01,
    )


def load_catalog(path: str) -> Tuple[Listing, ...]:
    """Load and validate a catalog from a JSON file.

    Args:
        path: File containing a JSON array of listing objects

    Returns:
        Tuple of listings in file order

    Raises:
        CatalogError: If the file cannot be read or a record is invalid
    """
    catalog_file = Path(path)
    try:
        with open(catalog_file, 'r', encoding='utf-8') as f:
            records = json.load(f)
    except json.JSONDecodeError as e:
        raise CatalogError(f"Failed to parse catalog JSON from {catalog_file}: {e}") from e
    except OSError as e:
        raise CatalogError(f"Failed to read catalog file {catalog_file}: {e}") from e

    if not isinstance(records, list):
        raise CatalogError(f"Catalog file {catalog_file} must contain a JSON array")

    listings = []
    for index, record in enumerate(records):
        try:
            listings.append(Listing.from_dict(record))
        except (TypeError, ValueError, KeyError, AttributeError) as e:
            raise CatalogError(f"Invalid listing at index {index}: {e}") from e

    validate_catalog(listings)
    logger.info(f"Loaded {len(listings)} listing(s) from {catalog_file}")
    return tuple(listings)


def validate_catalog(listings: Sequence[Listing]) -> None:
    """Check catalog invariants.

    Raises:
        CatalogError: On a mistyped field, duplicate id, missing image or out-of-range number
    """
    seen = set()
    for index, listing in enumerate(listings):
        _check_field_types(listing, index)

        if listing.id in seen:
            raise CatalogError(f"Duplicate listing id {listing.id!r}")
        seen.add(listing.id)

        if not listing.images:
            raise CatalogError(f"Listing {listing.id!r} has no images")
        if listing.price < 0:
            raise CatalogError(f"Listing {listing.id!r} has a negative price")
        if listing.beds < 0 or listing.baths < 0:
            raise CatalogError(f"Listing {listing.id!r} has a negative room count")
        if listing.sqft <= 0:
            raise CatalogError(f"Listing {listing.id!r} must have a positive sqft")


def _check_field_types(listing: Listing, index: int) -> None:
    for name in ('id', 'title', 'address', 'description'):
        if not isinstance(getattr(listing, name), str):
            raise CatalogError(f"Listing at index {index}: {name} must be a string")

    # bool is an int subclass but never a valid count or price
    for name in ('price', 'beds', 'baths', 'sqft'):
        value = getattr(listing, name)
        if isinstance(value, bool) or not isinstance(value, int):
            raise CatalogError(f"Listing {listing.id!r}: {name} must be an integer, got {value!r}")

    for name in ('lat', 'lng'):
        value = getattr(listing, name)
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise CatalogError(f"Listing {listing.id!r}: {name} must be a number, got {value!r}")


def get_catalog(path: Optional[str] = None) -> Tuple[Listing, ...]:
    """Catalog from path if given, otherwise the seed catalog."""
    if path:
        return load_catalog(path)
    return generate_seed_catalog()


def find_listing(catalog: Sequence[Listing], listing_id: str) -> Optional[Listing]:
    """Return the listing with listing_id, or None."""
    for listing in catalog:
        if listing.id == listing_id:
            return listing
    return None


def catalog_to_json(catalog: Sequence[Listing]) -> List[dict]:
    """Serializable form of a catalog, the inverse of load_catalog."""
    return [listing.to_dict() for listing in catalog]
