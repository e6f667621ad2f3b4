"""
Session module for Realty Scout.

Holds per-user browsing state and recomputes the displayed view.
"""

from .browse_session import BrowseSession, create_session

__all__ = ['BrowseSession', 'create_session']
