"""Response models for the Realty Scout API"""

from pydantic import BaseModel, Field
from typing import List, Optional

from realty_scout.models import Listing


class ListingOut(BaseModel):
    """Listing as returned by the API"""
    id: str
    title: str
    address: str
    description: str
    price: int
    beds: int
    baths: int
    type: str
    sqft: int
    images: List[str]
    lat: float
    lng: float

    @classmethod
    def from_listing(cls, listing: Listing) -> "ListingOut":
        return cls(**listing.to_dict())


class ListingPage(BaseModel):
    """One page of search results with metadata"""
    items: List[ListingOut]
    page: int
    total_pages: int
    result_count: int
    page_size: int
    reset: bool = False
    favorites: List[str] = Field(default_factory=list)


class ListingDetail(BaseModel):
    """Single listing with contact details"""
    listing: ListingOut
    is_favorite: bool
    inquiry_message: str
    contact_url: str


class FavoritesOut(BaseModel):
    """Favorites panel: raw ids and the listings still in the catalog"""
    ids: List[str]
    listings: List[ListingOut]


class MapMarker(BaseModel):
    id: str
    lat: float
    lng: float


class MapOut(BaseModel):
    """Map embed; embed_url is null when no token is configured"""
    embed_url: Optional[str] = None
    markers: List[MapMarker]
