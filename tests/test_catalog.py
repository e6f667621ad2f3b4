"""Tests for catalog providers and the listing model."""

import json
import tempfile
from pathlib import Path

import pytest

from realty_scout.catalog import (
    catalog_to_json,
    find_listing,
    generate_seed_catalog,
    get_catalog,
    load_catalog,
)
from realty_scout.error_handling import CatalogError
from realty_scout.models import Listing, PropertyType, SortMode


def write_json(directory, data, name="catalog.json"):
    path = Path(directory) / name
    path.write_text(json.dumps(data))
    return str(path)


def test_seed_catalog_shape():
    catalog = generate_seed_catalog()

    assert len(catalog) == 24
    assert len({listing.id for listing in catalog}) == 24
    assert catalog[0].id == "L-1000"
    assert catalog[-1].id == "L-1023"


def test_seed_catalog_values():
    catalog = generate_seed_catalog()

    first, second, eleventh = catalog[0], catalog[1], catalog[10]
    assert first.type == PropertyType.APARTMENT
    assert first.price == 60000
    assert (first.beds, first.baths, first.sqft) == (1, 1, 500)
    assert first.primary_image == "https://picsum.photos/seed/0-1/800/600"
    assert len(first.images) == 3

    assert second.type == PropertyType.HOUSE
    assert second.address == "Westlands, Nairobi"
    assert second.title == "Spacious family home near CBD"

    assert eleventh.price == 60000
    assert eleventh.sqft == 500
    assert eleventh.lat == pytest.approx(-1.2921)
    assert catalog[4].lng == pytest.approx(36.8219 + 0.04)


def test_listing_is_immutable():
    listing = generate_seed_catalog(1)[0]

    with pytest.raises(AttributeError):
        listing.price = 1


def test_listing_dict_round_trip():
    for listing in generate_seed_catalog(4):
        data = listing.to_dict()
        assert data["type"] in {"Apartment", "House", "Studio", "Townhouse"}
        assert isinstance(data["images"], list)
        assert Listing.from_dict(data) == listing


def test_load_catalog_from_file():
    catalog = generate_seed_catalog(5)

    with tempfile.TemporaryDirectory() as temp_dir:
        path = write_json(temp_dir, catalog_to_json(catalog))
        loaded = load_catalog(path)

    assert loaded == catalog


def test_get_catalog_defaults_to_seed():
    assert get_catalog(None) == generate_seed_catalog()


@pytest.mark.parametrize("mutate, message", [
    (lambda records: records.append(dict(records[0])), "Duplicate"),
    (lambda records: records[0].update(images=[]), "no images"),
    (lambda records: records[0].update(price=-1), "negative price"),
    (lambda records: records[0].update(sqft=0), "sqft"),
    (lambda records: records[0].update(type="Castle"), "index 0"),
    (lambda records: records[0].pop("title"), "index 0"),
    (lambda records: records[0].update(unexpected=True), "index 0"),
    (lambda records: records[0].update(price="60000"), "price must be an integer"),
    (lambda records: records[0].update(beds=2.5), "beds must be an integer"),
    (lambda records: records[0].update(baths=True), "baths must be an integer"),
    (lambda records: records[0].update(sqft=None), "sqft must be an integer"),
    (lambda records: records[0].update(lat="north"), "lat must be a number"),
    (lambda records: records[0].update(id=1000), "id must be a string"),
    (lambda records: records[0].update(images="abc.jpg"), "index 0"),
    (lambda records: records[0].update(images=["a.jpg", 7]), "index 0"),
])
def test_invalid_records_raise_catalog_error(mutate, message):
    records = catalog_to_json(generate_seed_catalog(2))
    mutate(records)

    with tempfile.TemporaryDirectory() as temp_dir:
        path = write_json(temp_dir, records)
        with pytest.raises(CatalogError, match=message):
            load_catalog(path)


def test_unreadable_catalog_raises_catalog_error():
    with tempfile.TemporaryDirectory() as temp_dir:
        with pytest.raises(CatalogError):
            load_catalog(str(Path(temp_dir) / "missing.json"))

        bad = Path(temp_dir) / "bad.json"
        bad.write_text("{not json")
        with pytest.raises(CatalogError):
            load_catalog(str(bad))

        with pytest.raises(CatalogError, match="JSON array"):
            load_catalog(write_json(temp_dir, {"listings": []}, "object.json"))


def test_find_listing():
    catalog = generate_seed_catalog()

    assert find_listing(catalog, "L-1003").beds == 4
    assert find_listing(catalog, "L-9999") is None


@pytest.mark.parametrize("value, expected", [
    ("relevance", SortMode.RELEVANCE),
    ("price-asc", SortMode.PRICE_ASCENDING),
    ("PRICE-DESC", SortMode.PRICE_DESCENDING),
    ("beds", SortMode.BEDS_DESCENDING),
    ("price_ascending", SortMode.PRICE_ASCENDING),
    ("BEDS_DESCENDING", SortMode.BEDS_DESCENDING),
    (SortMode.BEDS_DESCENDING, SortMode.BEDS_DESCENDING),
])
def test_sort_mode_parse(value, expected):
    assert SortMode.parse(value) is expected


def test_sort_mode_parse_rejects_unknown():
    with pytest.raises(ValueError):
        SortMode.parse("newest")
