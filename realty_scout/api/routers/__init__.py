"""API routers"""

from . import favorites, listings

__all__ = ["favorites", "listings"]
