"""
Pagination module.

Slices ordered results into fixed-size pages and keeps the current page
within bounds.
"""

from .paginator import PaginationState, paginate, total_pages_for

__all__ = ['PaginationState', 'paginate', 'total_pages_for']
