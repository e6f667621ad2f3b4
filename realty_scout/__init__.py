"""Realty Scout: listing search, filtering, pagination and favorites."""

__version__ = "0.1.0"
