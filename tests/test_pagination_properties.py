"""
Property-based tests for pagination.

These tests verify page sizing, page reconstruction and the page-reset
policy for out-of-range pages.
"""

import math

import pytest
from hypothesis import given, settings, strategies as st

from realty_scout.catalog import generate_seed_catalog
from realty_scout.pagination import PaginationState, paginate, total_pages_for


seed = generate_seed_catalog(40)

result_sets = st.integers(min_value=0, max_value=40).map(lambda n: list(seed[:n]))
page_sizes = st.integers(min_value=1, max_value=12)


@given(results=result_sets, page_size=page_sizes, page=st.integers(min_value=-3, max_value=20))
@settings(max_examples=100)
def test_page_never_exceeds_page_size(results, page_size, page):
    result_page = paginate(results, page, page_size)

    assert len(result_page.items) <= page_size
    assert 1 <= result_page.page <= result_page.total_pages


@given(results=result_sets, page_size=page_sizes)
@settings(max_examples=100)
def test_concatenated_pages_reconstruct_results(results, page_size):
    total_pages = total_pages_for(len(results), page_size)

    rebuilt = []
    for page in range(1, total_pages + 1):
        rebuilt.extend(paginate(results, page, page_size).items)

    assert rebuilt == results


@given(results=result_sets, page_size=page_sizes)
@settings(max_examples=100)
def test_total_pages_formula(results, page_size):
    expected = max(1, math.ceil(len(results) / page_size))
    assert paginate(results, 1, page_size).total_pages == expected


@given(results=result_sets, page_size=page_sizes, extra=st.integers(min_value=1, max_value=10))
@settings(max_examples=100)
def test_page_past_end_resets_to_first_page(results, page_size, extra):
    total_pages = total_pages_for(len(results), page_size)

    result_page = paginate(results, total_pages + extra, page_size)

    assert result_page.reset
    assert result_page.page == 1
    assert result_page.items == results[:page_size]


def test_twenty_four_results_make_three_pages():
    results = list(generate_seed_catalog())

    result_page = paginate(results, 5, 8)

    assert result_page.total_pages == 3
    assert result_page.page == 1
    assert result_page.reset
    assert [listing.id for listing in result_page.items] == [f"L-{1000 + i}" for i in range(8)]


def test_last_page_is_not_clamped_or_reset():
    results = list(generate_seed_catalog(20))

    result_page = paginate(results, 3, 8)

    assert not result_page.reset
    assert result_page.page == 3
    assert len(result_page.items) == 4


def test_empty_results_have_one_empty_page():
    result_page = paginate([], 1, 8)

    assert result_page.total_pages == 1
    assert result_page.items == []
    assert not result_page.reset


def test_page_below_one_slices_first_page():
    results = list(generate_seed_catalog())

    result_page = paginate(results, 0, 8)

    assert result_page.page == 1
    assert result_page.items == results[:8]


def test_invalid_page_size_rejected():
    with pytest.raises(ValueError):
        paginate([], 1, 0)
    with pytest.raises(ValueError):
        PaginationState(page_size=0)


class TestPaginationState:
    """Tests for the caller-held page position guards."""

    def test_sync_resets_out_of_range_page(self):
        state = PaginationState(page=3, page_size=8)
        state.sync(24)
        assert state.page == 3

        assert state.sync(10) is True
        assert state.page == 1
        assert state.total_pages == 2

    def test_sync_keeps_valid_page(self):
        state = PaginationState(page=2, page_size=8)
        assert state.sync(24) is False
        assert state.page == 2

    def test_next_and_prev_stop_at_bounds(self):
        state = PaginationState(page_size=8)
        state.sync(24)

        assert not state.has_prev
        assert state.prev() is False
        assert state.page == 1

        assert state.next() and state.next()
        assert state.page == 3
        assert not state.has_next
        assert state.next() is False
        assert state.page == 3

        assert state.prev() is True
        assert state.page == 2

    @pytest.mark.parametrize("requested", [0, -1, 4, 100])
    def test_out_of_range_direct_write_is_ignored(self, requested):
        state = PaginationState(page=2, page_size=8)
        state.sync(24)

        assert state.go_to(requested) is False
        assert state.page == 2

    def test_direct_write_within_range_applies(self):
        state = PaginationState(page_size=8)
        state.sync(24)

        assert state.go_to(3) is True
        assert state.page == 3
