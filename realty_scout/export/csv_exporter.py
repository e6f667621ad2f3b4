"""
CSV export of query results.

Every field is quoted and embedded double quotes are doubled. Rows are
separated by a single newline with no trailing newline, so the same input
always produces byte-identical output.
"""

import csv
import io
import logging
from pathlib import Path
from typing import Iterable, List, Sequence

from realty_scout.models import Listing


logger = logging.getLogger(__name__)

CSV_COLUMNS: List[str] = ["id", "title", "price", "beds", "baths", "type", "address"]
LINE_TERMINATOR = "\n"


def _row(listing: Listing) -> List[str]:
    return [
        listing.id,
        listing.title,
        str(listing.price),
        str(listing.beds),
        str(listing.baths),
        listing.type.value,
        listing.address,
    ]


def to_csv(listings: Iterable[Listing]) -> str:
    """Serialize listings to CSV text.

    Args:
        listings: Ordered result sequence

    Returns:
        CSV text with a header row followed by one row per listing
    """
    buffer = io.StringIO()
    writer = csv.writer(
        buffer,
        quoting=csv.QUOTE_ALL,
        doublequote=True,
        lineterminator=LINE_TERMINATOR,
    )
    writer.writerow(CSV_COLUMNS)
    writer.writerows(_row(listing) for listing in listings)
    return buffer.getvalue()[:-len(LINE_TERMINATOR)]


def write_csv(listings: Sequence[Listing], path: str) -> Path:
    """Write the CSV export of listings to a file.

    Args:
        listings: Ordered result sequence
        path: Destination file

    Returns:
        Path of the written file
    """
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    with open(target, 'w', encoding='utf-8', newline='') as f:
        f.write(to_csv(listings))
    logger.info(f"Exported {len(listings)} listing(s) to {target}")
    return target
