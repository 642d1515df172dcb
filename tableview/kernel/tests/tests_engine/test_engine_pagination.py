"""
tableview Engine -- Pagination Tests

total_pages = ceil(n / page_size). The requested page is clamped to
[1, max(total_pages, 1)] and the slice is contiguous.
"""

import pytest

from tableview.kernel.engine import clamp_page, compute_total_pages, compute_view, page_slice, refresh
from tableview.kernel.recordset import InMemoryRecordset
from tableview.kernel.types import PAGE_SIZE, Column, ViewState


def make_recordset(n):
    return InMemoryRecordset(
        [Column("fullname", "Full Name")],
        [(f"row_{i:03d}", {"fullname": f"Person {i:03d}"}) for i in range(n)],
    )


class TestHelpers:
    def test_page_size_constant(self):
        assert PAGE_SIZE == 13
        assert ViewState().page_size == 13

    @pytest.mark.parametrize(
        ("n", "expected"),
        [(0, 0), (1, 1), (12, 1), (13, 1), (14, 2), (26, 2), (27, 3), (30, 3), (100, 8)],
    )
    def test_total_pages(self, n, expected):
        assert compute_total_pages(n, 13) == expected

    @pytest.mark.parametrize(
        ("page", "total", "expected"),
        [(1, 3, 1), (3, 3, 3), (5, 3, 3), (0, 3, 1), (-4, 3, 1), (1, 0, 1), (7, 0, 1)],
    )
    def test_clamp_page(self, page, total, expected):
        assert clamp_page(page, total) == expected

    def test_page_slice(self):
        assert page_slice(1, 13) == (0, 13)
        assert page_slice(3, 13) == (26, 39)

    @pytest.mark.parametrize("page_size", [0, -5])
    def test_non_positive_page_size_acts_as_one(self, page_size):
        recordset = make_recordset(3)
        result = compute_view(recordset, ViewState(page=2, page_size=page_size))
        assert result.total_pages == 3
        assert result.page == 2
        assert result.rows == ("row_001",)
        assert compute_total_pages(3, page_size) == 3


class TestPaginationInvariant:
    @pytest.mark.parametrize("n", [0, 1, 12, 13, 14, 25, 26, 27, 40])
    def test_row_counts_for_every_page(self, n):
        recordset = make_recordset(n)
        total = compute_total_pages(n, 13)
        for page in range(1, max(total, 1) + 1):
            result = compute_view(recordset, ViewState(page=page))
            assert result.total_pages == total
            assert result.page == page
            expected = 0 if n == 0 else min(13, n - (page - 1) * 13)
            assert len(result.rows) == expected

    def test_slices_are_contiguous_and_cover_everything(self):
        recordset = make_recordset(40)
        seen = []
        for page in range(1, 5):
            seen.extend(compute_view(recordset, ViewState(page=page)).rows)
        assert seen == list(recordset.row_ids)

    def test_empty_recordset(self):
        result = compute_view(InMemoryRecordset.empty(), ViewState(page=3))
        assert result.rows == ()
        assert result.total_pages == 0
        assert result.page == 1
        assert result.total_rows == 0


class TestClampIdempotence:
    @pytest.mark.parametrize("requested", [4, 5, 99])
    def test_beyond_last_page_equals_last_page(self, numbered_30, requested):
        assert compute_view(numbered_30, ViewState(page=requested)) == compute_view(numbered_30, ViewState(page=3))

    @pytest.mark.parametrize("requested", [0, -1, -50])
    def test_below_first_page_equals_first_page(self, numbered_30, requested):
        assert compute_view(numbered_30, ViewState(page=requested)) == compute_view(numbered_30, ViewState(page=1))

    def test_no_matches_clamps_to_one(self, numbered_30):
        result = compute_view(numbered_30, ViewState(query="nothing here", page=3))
        assert result.page == 1
        assert result.total_pages == 0
        assert result.rows == ()


class TestRefresh:
    def test_clamped_page_is_persisted(self, numbered_30):
        state, result = refresh(numbered_30, ViewState(page=5))
        assert result.page == 3
        assert state.page == 3

    def test_state_unchanged_when_in_range(self, numbered_30):
        original = ViewState(page=2)
        state, _ = refresh(numbered_30, original)
        assert state is original

    def test_narrowing_query_snaps_to_last_valid_page(self, numbered_30):
        # "oslo" matches the 15 odd rows → 2 pages
        state, result = refresh(numbered_30, ViewState(query="oslo", page=3))
        assert result.total_pages == 2
        assert state.page == 2
        assert len(result.rows) == 2
