"""
Error handling module for Realty Scout.

Provides the exception hierarchy and best-effort execution with diagnostics.
"""

from .error_handler import ErrorHandler, RealtyScoutError, CatalogError, StorageError

__all__ = ['ErrorHandler', 'RealtyScoutError', 'CatalogError', 'StorageError']
