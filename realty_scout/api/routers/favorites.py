"""
Favorites routes.
"""

import logging
from fastapi import APIRouter, Depends

from realty_scout.api.dependencies import get_browse_session
from realty_scout.api.schemas import FavoritesOut, ListingOut
from realty_scout.session.browse_session import BrowseSession

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/favorites", response_model=FavoritesOut)
def list_favorites(session: BrowseSession = Depends(get_browse_session)):
    """
    Saved properties panel.

    Ids no longer present in the catalog are kept in `ids` but skipped in
    `listings`.
    """
    return FavoritesOut(
        ids=list(session.favorites.favorites),
        listings=[ListingOut.from_listing(listing) for listing in session.favorite_listings()],
    )


@router.post("/favorites/{listing_id}/toggle", response_model=FavoritesOut)
def toggle_favorite(listing_id: str, session: BrowseSession = Depends(get_browse_session)):
    """Add the listing to favorites, or remove it if already saved."""
    session.toggle_favorite(listing_id)
    logger.info(f"Toggled favorite {listing_id}, {len(session.favorites.favorites)} saved")
    return list_favorites(session)
