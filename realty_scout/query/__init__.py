"""
Query module for the listing catalog.

Combines filtering and sorting into a single run over the catalog.
"""

from .query_engine import QueryEngine, sort_listings

__all__ = ['QueryEngine', 'sort_listings']
