"""
Listing routes: search, detail, CSV export and map.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import Response

from realty_scout.api.dependencies import get_browse_session, get_settings
from realty_scout.api.schemas import ListingDetail, ListingOut, ListingPage, MapMarker, MapOut
from realty_scout.catalog import find_listing
from realty_scout.config.app_config import AppSettings
from realty_scout.export.csv_exporter import to_csv
from realty_scout.filtering.listing_filter import parse_price_bound
from realty_scout.models import ANY_TYPE, FilterCriteria, Listing, PropertyType, SortMode
from realty_scout.pagination.paginator import paginate
from realty_scout.presentation import contact_mailto, inquiry_message, map_embed_url, map_markers
from realty_scout.session.browse_session import BrowseSession

logger = logging.getLogger(__name__)

router = APIRouter()

PROPERTY_TYPES = [ANY_TYPE] + [t.value for t in PropertyType]


def criteria_params(
    settings: AppSettings = Depends(get_settings),
    query: str = Query("", description="Text matched against title, address and description"),
    property_type: str = Query(ANY_TYPE, alias="type", description=f"One of: {', '.join(PROPERTY_TYPES)}"),
    min_price: Optional[str] = Query(None, description="Minimum price, non-numeric input is ignored"),
    max_price: Optional[str] = Query(None, description="Maximum price, non-numeric input is ignored"),
    min_beds: int = Query(0, ge=0, description="Minimum bedrooms, 0 for any"),
    sort: str = Query(
        SortMode.RELEVANCE.value,
        description=f"One of: {', '.join(mode.value for mode in SortMode)}, or an enum member name"
    ),
) -> FilterCriteria:
    """Build filter criteria from query parameters."""
    if property_type not in PROPERTY_TYPES:
        raise HTTPException(
            status_code=422,
            detail=f"Unknown property type {property_type!r}, expected one of {PROPERTY_TYPES}"
        )
    try:
        sort_mode = SortMode.parse(sort)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e

    return FilterCriteria(
        query=query,
        property_type=property_type,
        min_price=parse_price_bound(min_price, settings.filter_defaults.min_price),
        max_price=parse_price_bound(max_price, settings.filter_defaults.max_price),
        min_beds=min_beds,
        sort_mode=sort_mode,
    )


def _run_query(session: BrowseSession, criteria: FilterCriteria) -> List[Listing]:
    return session.engine.run(session.catalog, criteria)


@router.get("/listings", response_model=ListingPage)
def search_listings(
    criteria: FilterCriteria = Depends(criteria_params),
    page: int = Query(1, ge=1, description="1-based page number"),
    page_size: Optional[int] = Query(None, ge=1, le=100, description="Listings per page"),
    session: BrowseSession = Depends(get_browse_session),
):
    """
    Search the catalog.

    Pages beyond the last page are answered with page 1 and reset=true.
    """
    size = page_size or session.pagination.page_size
    results = _run_query(session, criteria)
    result_page = paginate(results, page, size)

    logger.info(
        f"Search {criteria.to_dict()} -> {len(results)} result(s), "
        f"page {result_page.page}/{result_page.total_pages}"
    )

    return ListingPage(
        items=[ListingOut.from_listing(listing) for listing in result_page.items],
        page=result_page.page,
        total_pages=result_page.total_pages,
        result_count=len(results),
        page_size=size,
        reset=result_page.reset,
        favorites=list(session.favorites.favorites),
    )


@router.get("/listings/export.csv")
def export_listings(
    criteria: FilterCriteria = Depends(criteria_params),
    session: BrowseSession = Depends(get_browse_session),
):
    """Download all listings matching the filters as CSV."""
    csv_text = to_csv(_run_query(session, criteria))
    return Response(
        content=csv_text,
        media_type="text/csv",
        headers={"Content-Disposition": 'attachment; filename="listings.csv"'},
    )


@router.get("/listings/{listing_id}", response_model=ListingDetail)
def get_listing(
    listing_id: str,
    session: BrowseSession = Depends(get_browse_session),
    settings: AppSettings = Depends(get_settings),
):
    """Get a single listing with the prefilled inquiry."""
    listing = find_listing(session.catalog, listing_id)
    if listing is None:
        raise HTTPException(status_code=404, detail="Listing not found")

    return ListingDetail(
        listing=ListingOut.from_listing(listing),
        is_favorite=session.favorites.is_favorite(listing.id),
        inquiry_message=inquiry_message(listing),
        contact_url=contact_mailto(listing, settings.map_config.agent_email),
    )


@router.get("/map", response_model=MapOut)
def get_map(
    session: BrowseSession = Depends(get_browse_session),
    settings: AppSettings = Depends(get_settings),
):
    """Map embed URL and markers for the whole catalog."""
    return MapOut(
        embed_url=map_embed_url(settings.map_config.mapbox_token),
        markers=[
            MapMarker(id=listing_id, lat=lat, lng=lng)
            for listing_id, lat, lng in map_markers(session.catalog)
        ],
    )
