"""Tests for best-effort error handling."""

import logging

from realty_scout.error_handling import (
    CatalogError,
    ErrorHandler,
    RealtyScoutError,
    StorageError,
)


def test_best_effort_returns_result_on_success():
    handler = ErrorHandler()

    assert handler.best_effort(lambda a, b=0: a + b, 2, b=3) == 5
    assert handler.failures == 0


def test_best_effort_returns_default_and_logs_on_failure(caplog):
    handler = ErrorHandler()

    def explode():
        raise StorageError("disk full")

    with caplog.at_level(logging.WARNING):
        result = handler.best_effort(explode, default=[], description="save favorites")

    assert result == []
    assert handler.failures == 1
    assert "save favorites" in caplog.text
    assert "StorageError: disk full" in caplog.text


def test_best_effort_uses_operation_name_without_description(caplog):
    handler = ErrorHandler(log_level=logging.ERROR)

    def load_state():
        raise ValueError("bad json")

    with caplog.at_level(logging.ERROR):
        assert handler.best_effort(load_state) is None

    assert "load_state" in caplog.text
    assert caplog.records[-1].levelno == logging.ERROR


def test_exception_hierarchy():
    assert issubclass(CatalogError, RealtyScoutError)
    assert issubclass(StorageError, RealtyScoutError)
