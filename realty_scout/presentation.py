"""
Display helpers for listings.

Formats prices, listing cards and result pages for console output, and
builds the prefilled inquiry text, contact link and map embed used by
the rendering layer.
"""

from typing import Iterable, List, Optional, Sequence, Tuple
from urllib.parse import quote

from realty_scout.models import BrowseView, Listing


MAP_STYLE_URL = "https://api.mapbox.com/styles/v1/mapbox/streets-v11.html"


def format_currency(amount: Optional[int]) -> str:
    """Format an amount in Kenyan shillings without decimals, e.g. "KES 60,000"."""
    return f"KES {amount or 0:,.0f}"


def inquiry_message(listing: Listing) -> str:
    """Prefilled message for the lead-capture form."""
    return f"I'm interested in {listing.title} ({listing.id})"


def contact_mailto(listing: Listing, agent_email: str) -> str:
    """Build a mailto: link addressed to the listing agent.

    Args:
        listing: Listing the user is asking about
        agent_email: Agent address

    Returns:
        mailto URL with an encoded subject and body
    """
    subject = quote(f"Interest in {listing.id}", safe="")
    body = quote(f"I am interested in {listing.title}", safe="")
    return f"mailto:{agent_email}?subject={subject}&body={body}"


def map_embed_url(token: Optional[str]) -> Optional[str]:
    """Mapbox embed URL, or None when no access token is configured."""
    if not token:
        return None
    return f"{MAP_STYLE_URL}?title=copy&access_token={quote(token, safe='')}"


def map_markers(listings: Iterable[Listing]) -> List[Tuple[str, float, float]]:
    """(id, lat, lng) for each listing, in order."""
    return [(listing.id, listing.lat, listing.lng) for listing in listings]


def format_listing(listing: Listing, is_favorite: bool = False) -> str:
    """
    Format a listing card for console output.

    Args:
        listing: Listing to format
        is_favorite: Whether to mark the listing as saved

    Returns:
        Multi-line card text
    """
    star = "★" if is_favorite else "☆"
    lines = [
        f"{star} {listing.title}  [{listing.id}]",
        f"   {format_currency(listing.price)} | {listing.address} | {listing.sqft} sqft",
        f"   {listing.beds} beds | {listing.baths} baths | {listing.type.value}",
        "",
    ]
    return "\n".join(lines)


def format_page(view: BrowseView) -> str:
    """
    Format the current page of results for console output.

    Args:
        view: Snapshot to render

    Returns:
        Page header, listing cards and page indicator
    """
    if not view.results:
        return "No listings match your filters.\n"

    favorites = set(view.favorites)
    output = [
        f"\n{'=' * 60}\n",
        f"Showing {view.result_count} result(s), page {view.page} / {view.total_pages}\n",
        f"{'=' * 60}\n\n",
    ]
    for listing in view.page_items:
        output.append(format_listing(listing, listing.id in favorites))
        output.append("\n")
    output.append(f"{'=' * 60}\n")
    return "".join(output)


def format_favorites_panel(favorites: Sequence[Listing]) -> str:
    """Format the saved-properties panel."""
    if not favorites:
        return "Saved properties (0)\n   No saved items yet\n"

    lines = [f"Saved properties ({len(favorites)})"]
    for listing in favorites:
        lines.append(f"   {listing.id}  {listing.title} - {format_currency(listing.price)}")
    return "\n".join(lines) + "\n"
