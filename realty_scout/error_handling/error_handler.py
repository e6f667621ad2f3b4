"""
Error handler for Realty Scout.

Implements best-effort execution for operations whose failure must never
reach the caller, such as favorites persistence.
"""

import logging
from datetime import datetime
from typing import Any, Callable, Dict


# Configure logging
logger = logging.getLogger(__name__)


class RealtyScoutError(Exception):
    """Base class for errors raised by Realty Scout."""


class CatalogError(RealtyScoutError):
    """The listing catalog could not be loaded or failed validation."""


class StorageError(RealtyScoutError):
    """A key-value store backend failed to read or write a value."""


class ErrorHandler:
    """
    Runs operations on a best-effort basis.

    Failures are logged with diagnostic context and replaced by a default
    value so the session can continue with its in-memory state.

    Attributes:
        failures: Number of failures swallowed so far
    """

    def __init__(self, log_level: int = logging.WARNING):
        """
        Initialize error handler.

        Args:
            log_level: Level used when logging a swallowed failure
        """
        self.log_level = log_level
        self.failures = 0

    def best_effort(
        self,
        operation: Callable,
        *args,
        default: Any = None,
        description: str = "",
        **kwargs
    ) -> Any:
        """
        Execute operation, returning default instead of raising.

        Args:
            operation: Synchronous callable to execute
            *args: Positional arguments for the operation
            default: Value returned when the operation raises
            description: Human-readable name for log messages
            **kwargs: Keyword arguments for the operation

        Returns:
            Result of the operation, or default if it raised
        """
        name = description or getattr(operation, '__name__', repr(operation))
        try:
            return operation(*args, **kwargs)
        except Exception as e:
            self.failures += 1
            self._log_error(name, e, args)
            return default

    def _log_error(
        self,
        operation_name: str,
        error: Exception,
        args: tuple
    ) -> None:
        """
        Log error with timestamp, context, and diagnostic data.

        Args:
            operation_name: Name of the operation that failed
            error: The exception that occurred
            args: Positional arguments passed to the operation
        """
        context: Dict[str, Any] = {
            'timestamp': datetime.now().isoformat(),
            'operation': operation_name,
            'error_type': type(error).__name__,
            'error_message': str(error),
            'args': str(args) if args else 'None',
        }

        logger.log(
            self.log_level,
            f"Operation failed: {operation_name} | "
            f"Error: {type(error).__name__}: {str(error)}"
        )
        logger.debug(f"Full error context: {context}")
