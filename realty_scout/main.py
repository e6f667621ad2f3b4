"""
Main entry point and CLI for Realty Scout.

Provides command-line interface for searching the listing catalog with
text search, filters, sort order and pagination, plus favorites and CSV
export.
"""

import argparse
import logging
import sys
from typing import List, Optional

from realty_scout.config.app_config import AppSettings, get_app_settings, APP_CONFIG
from realty_scout.error_handling import CatalogError
from realty_scout.export.csv_exporter import write_csv
from realty_scout.filtering.listing_filter import parse_price_bound
from realty_scout.models import ANY_TYPE, PropertyType, SortMode
from realty_scout.presentation import format_favorites_panel, format_page
from realty_scout.session.browse_session import create_session


# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def run_search(
    query: str = "",
    property_type: str = ANY_TYPE,
    min_price: Optional[str] = None,
    max_price: Optional[str] = None,
    min_beds: int = 0,
    sort: str = SortMode.RELEVANCE.value,
    page: int = 1,
    toggle_favorites: Optional[List[str]] = None,
    show_favorites: bool = False,
    export_path: Optional[str] = None,
    settings: Optional[AppSettings] = None,
    verbose: bool = False
) -> int:
    """
    Execute one search against the catalog and print the requested page.

    Args:
        query: Free-text search
        property_type: Property type or "Any"
        min_price: Raw minimum price input, parsed leniently
        max_price: Raw maximum price input, parsed leniently
        min_beds: Minimum bedrooms
        sort: Sort mode wire name
        page: Requested page number
        toggle_favorites: Listing ids to toggle before searching
        show_favorites: Print the saved-properties panel
        export_path: Write the full result set as CSV to this path
        settings: Application settings
        verbose: Enable verbose logging output

    Returns:
        Exit code (0 for success, 1 for error)
    """
    # Set logging level based on verbose flag
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
        logger.debug("Verbose logging enabled")

    try:
        settings = settings or get_app_settings()
        logger.debug(f"Using configuration: {APP_CONFIG}")

        session = create_session(settings)

        for listing_id in toggle_favorites or []:
            favorites = session.toggle_favorite(listing_id)
            state = "saved" if listing_id in favorites else "removed"
            print(f"⭐ {listing_id} {state} ({len(favorites)} saved)")

        session.update_criteria(
            query=query,
            property_type=property_type,
            min_price=parse_price_bound(min_price, settings.filter_defaults.min_price),
            max_price=parse_price_bound(max_price, settings.filter_defaults.max_price),
            min_beds=min_beds,
            sort_mode=sort,
        )

        view = session.go_to_page(page)
        if view.page != page:
            logger.info(f"Page {page} is outside 1-{view.total_pages}, showing page {view.page}")

        print(format_page(view))

        if show_favorites:
            print(format_favorites_panel(session.favorite_listings()))

        if export_path:
            target = write_csv(view.results, export_path)
            print(f"✅ Exported {view.result_count} listing(s) to {target}")

        return 0

    except CatalogError as e:
        logger.error(f"Catalog could not be loaded: {e}")
        print(f"\n❌ Error: {str(e)}", file=sys.stderr)
        return 1

    except KeyboardInterrupt:
        logger.info("Search interrupted by user")
        print("\n\n⚠️  Search interrupted by user", file=sys.stderr)
        return 130  # Standard exit code for SIGINT


def sort_mode_arg(value: str) -> SortMode:
    """argparse type for --sort accepting wire names or enum member names."""
    try:
        return SortMode.parse(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def create_argument_parser() -> argparse.ArgumentParser:
    """
    Create and configure the argument parser for CLI.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog="realty-scout",
        description="Search, filter and sort property listings",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Houses only, cheapest first
  realty-scout --type House --sort price-asc

  # Text search with a price range
  realty-scout "kilimani" --min-price 60,000 --max-price 120000

  # Second page of 3+ bedroom listings
  realty-scout --min-beds 3 --page 2

  # Save a favorite and show the saved panel
  realty-scout --toggle-favorite L-1000 --show-favorites

  # Export the filtered results
  realty-scout --type Studio --export listings.csv
        """
    )

    # Positional argument: search text
    parser.add_argument(
        "query",
        nargs="?",
        default="",
        help="Search text matched against title, address and description"
    )

    parser.add_argument(
        "--type",
        dest="property_type",
        choices=[ANY_TYPE] + [t.value for t in PropertyType],
        default=ANY_TYPE,
        help="Property type filter"
    )

    # Price bounds are strings so bad input falls back to defaults
    parser.add_argument(
        "--min-price",
        default=None,
        help="Minimum price (e.g. 60000 or 60,000)"
    )

    parser.add_argument(
        "--max-price",
        default=None,
        help="Maximum price (e.g. 150000)"
    )

    parser.add_argument(
        "--min-beds",
        type=int,
        default=0,
        choices=range(0, 5),
        help="Minimum bedrooms, 0 for any"
    )

    parser.add_argument(
        "--sort",
        type=sort_mode_arg,
        default=SortMode.RELEVANCE.value,
        metavar="{" + ",".join(mode.value for mode in SortMode) + "}",
        help="Sort order (enum names such as PRICE_ASCENDING also accepted)"
    )

    parser.add_argument(
        "--page",
        type=int,
        default=1,
        help="Page number to show"
    )

    parser.add_argument(
        "--page-size",
        type=int,
        default=None,
        help="Listings per page (default from PAGE_SIZE)"
    )

    parser.add_argument(
        "--catalog",
        default=None,
        help="JSON catalog file (default: built-in seed catalog)"
    )

    parser.add_argument(
        "--favorites-file",
        default=None,
        help="File favorites are persisted to"
    )

    parser.add_argument(
        "--toggle-favorite",
        action="append",
        default=[],
        metavar="ID",
        help="Toggle a listing in favorites (repeatable)"
    )

    parser.add_argument(
        "--show-favorites",
        action="store_true",
        help="Print the saved properties panel"
    )

    parser.add_argument(
        "--export",
        dest="export_path",
        default=None,
        metavar="PATH",
        help="Write the filtered results to a CSV file"
    )

    # Optional argument: verbose logging
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging output"
    )

    return parser


def settings_from_args(args: argparse.Namespace) -> AppSettings:
    """Apply command-line overrides to the environment settings."""
    settings = get_app_settings()
    if args.catalog:
        settings.catalog_path = args.catalog
    if args.favorites_file:
        settings.storage.storage_type = "file"
        settings.storage.favorites_file = args.favorites_file
    if args.page_size is not None:
        settings.pagination.page_size = args.page_size
    return settings


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the CLI application.

    Parses command-line arguments and executes the search.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    if args.page_size is not None and args.page_size < 1:
        parser.error("--page-size must be a positive integer")

    return run_search(
        query=args.query,
        property_type=args.property_type,
        min_price=args.min_price,
        max_price=args.max_price,
        min_beds=args.min_beds,
        sort=args.sort,
        page=args.page,
        toggle_favorites=args.toggle_favorite,
        show_favorites=args.show_favorites,
        export_path=args.export_path,
        settings=settings_from_args(args),
        verbose=args.verbose
    )


if __name__ == "__main__":
    sys.exit(main())
