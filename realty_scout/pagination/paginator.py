"""
Pagination controller for ordered result sequences.

Out-of-range pages are reset to page 1 rather than clamped to the last page.
Direct page changes outside the valid range are ignored.
"""

import logging
import math
from dataclasses import dataclass
from typing import Sequence

from realty_scout.models import Listing, PageResult


logger = logging.getLogger(__name__)


def total_pages_for(result_count: int, page_size: int) -> int:
    """Number of pages needed for result_count items, never less than 1."""
    if page_size < 1:
        raise ValueError(f"page_size must be positive, got {page_size}")
    return max(1, math.ceil(result_count / page_size))


def paginate(
    results: Sequence[Listing],
    page: int,
    page_size: int
) -> PageResult:
    """Slice one page out of an ordered result sequence.

    Args:
        results: Ordered result sequence
        page: Requested 1-based page number
        page_size: Items per page

    Returns:
        PageResult with the items, the effective page and total pages. When
        the requested page exceeds the page count the effective page is 1
        and reset is True. Pages below 1 are sliced as page 1.

    Raises:
        ValueError: If page_size is not positive
    """
    total_pages = total_pages_for(len(results), page_size)

    reset = False
    if page > total_pages:
        logger.debug(f"Page {page} exceeds {total_pages} page(s), resetting to page 1")
        page = 1
        reset = True

    effective = max(1, page)
    start = (effective - 1) * page_size
    items = list(results[start:start + page_size])

    return PageResult(items=items, page=effective, total_pages=total_pages, reset=reset)


@dataclass
class PaginationState:
    """Caller-held page position.

    Attributes:
        page: Current 1-based page
        page_size: Items per page
        total_pages: Page count from the most recent sync
    """
    page: int = 1
    page_size: int = 8
    total_pages: int = 1

    def __post_init__(self):
        if self.page_size < 1:
            raise ValueError(f"page_size must be positive, got {self.page_size}")

    def sync(self, result_count: int) -> bool:
        """Recompute the page count after the results changed.

        Args:
            result_count: Number of results in the new sequence

        Returns:
            True if the current page was out of range and reset to 1
        """
        self.total_pages = total_pages_for(result_count, self.page_size)
        if self.page > self.total_pages or self.page < 1:
            self.page = 1
            return True
        return False

    def go_to(self, page: int) -> bool:
        """Move to a page, ignoring requests outside [1, total_pages].

        Returns:
            True if the page changed
        """
        if page < 1 or page > self.total_pages:
            logger.debug(f"Ignoring page {page}, valid range is 1-{self.total_pages}")
            return False
        changed = page != self.page
        self.page = page
        return changed

    def next(self) -> bool:
        """Advance one page; no-op on the last page."""
        return self.go_to(self.page + 1)

    def prev(self) -> bool:
        """Go back one page; no-op on the first page."""
        return self.go_to(self.page - 1)

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def has_prev(self) -> bool:
        return self.page > 1
