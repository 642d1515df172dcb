"""
tableview Kernel — View Engine

Pure functions:
  compute_view(recordset, state) → ViewResult   (sort → filter → paginate)
  reduce(state, action)          → ReduceResult (one user action)

No side effects. No IO. Deterministic: same input → same output, always.
The engine holds no state of its own; the host owns the ViewState and
persists the clamped page returned in ViewResult.
"""

from __future__ import annotations

import locale
import math
import re
from dataclasses import replace
from functools import lru_cache
from typing import Any, Sequence

from tableview.kernel.types import (
    ASCENDING_MARK,
    DESCENDING_MARK,
    PRIMARY_COLUMN,
    Action,
    Recordset,
    ReduceResult,
    ViewResult,
    ViewState,
)

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def compute_view(
    recordset: Recordset,
    state: ViewState,
    primary_column: str = PRIMARY_COLUMN,
) -> ViewResult:
    """
    Compute the ordered, filtered, paginated slice for the given state.

    Sorting happens before filtering so the filtered sequence inherits the
    sort order. The returned page is clamped to [1, max(total_pages, 1)];
    callers must carry it back into their state (see refresh).
    """
    ordered = apply_sort(recordset, recordset.row_ids, state.sort_column, state.ascending)
    filtered = apply_filter(recordset, ordered, state.query, primary_column)

    page_size = max(state.page_size, 1)
    total_pages = compute_total_pages(len(filtered), page_size)
    page = clamp_page(state.page, total_pages)
    start, end = page_slice(page, page_size)

    return ViewResult(
        rows=tuple(filtered[start:end]),
        total_pages=total_pages,
        page=page,
        total_rows=len(filtered),
    )


def refresh(
    recordset: Recordset,
    state: ViewState,
    primary_column: str = PRIMARY_COLUMN,
) -> tuple[ViewState, ViewResult]:
    """compute_view, plus the state with the clamped page persisted."""
    result = compute_view(recordset, state, primary_column)
    return state.with_page(result.page), result


def reduce(state: ViewState, action: Action, total_pages: int | None = None) -> ReduceResult:
    """
    Apply one user action to the view state.

    `total_pages` comes from the last ViewResult and bounds "page.next".
    When it is unknown the page advances and compute_view clamps it.

    Pure function. Never raises: unknown or malformed actions come back
    with applied=False and an error string.
    """
    handler = _HANDLERS.get(action.type)
    if handler is None:
        return ReduceResult(state=state, applied=False, error=f"UNKNOWN_ACTION: {action.type}")
    return handler(state, action.payload, total_pages)


def sort_indicator(column_id: str, state: ViewState) -> str:
    """Header mark for the active sort column, empty for every other column."""
    if state.sort_column != column_id:
        return ""
    return ASCENDING_MARK if state.ascending else DESCENDING_MARK


# ---------------------------------------------------------------------------
# Query helpers
# ---------------------------------------------------------------------------


def normalize_query(query: str | None) -> str:
    """Whitespace-only queries behave like the empty query."""
    return (query or "").strip()


def collation_key(value: str | None) -> tuple[str, str]:
    """
    Locale-aware sort key (honours LC_COLLATE).
    Case-insensitive first, then the raw value so ordering is total.
    """
    # strxfrm rejects embedded NULs
    text = (value or "").replace("\x00", "")
    return (locale.strxfrm(text.casefold()), locale.strxfrm(text))


@lru_cache(maxsize=64)
def match_pattern(needle: str) -> re.Pattern[str]:
    """
    Literal, case-insensitive pattern for a normalized query.
    Shared by the filter and the highlighter so both agree on what matches.
    """
    return re.compile(re.escape(needle), re.IGNORECASE)


def apply_sort(
    recordset: Recordset,
    row_ids: Sequence[str],
    sort_column: str | None,
    ascending: bool = True,
) -> list[str]:
    """
    Stable sort of row ids by the formatted value of sort_column.
    Absent values sort as "". No sort column keeps the given order.
    """
    if sort_column is None:
        return list(row_ids)

    keys = {rid: collation_key(recordset.formatted_value(rid, sort_column)) for rid in row_ids}
    # reverse=True keeps equal keys in input order
    return sorted(row_ids, key=keys.__getitem__, reverse=not ascending)


def apply_filter(
    recordset: Recordset,
    row_ids: Sequence[str],
    query: str | None,
    primary_column: str = PRIMARY_COLUMN,
) -> list[str]:
    """Keep the rows matching the query, preserving order."""
    needle = normalize_query(query)
    if not needle:
        return list(row_ids)
    return [rid for rid in row_ids if row_matches(recordset, rid, needle, primary_column)]


def row_matches(
    recordset: Recordset,
    row_id: str,
    needle: str,
    primary_column: str = PRIMARY_COLUMN,
) -> bool:
    """
    True if the primary column or any column contains `needle`,
    ignoring case the same way highlighting does.
    `needle` must already be normalized.

    The primary column is checked first on its own, even though the column
    pass below covers it too.
    """
    if not needle:
        return True
    pattern = match_pattern(needle)

    primary = recordset.formatted_value(row_id, primary_column) or ""
    if pattern.search(primary):
        return True

    for column in recordset.columns:
        value = recordset.formatted_value(row_id, column.id)
        if value and pattern.search(value):
            return True
    return False


# ---------------------------------------------------------------------------
# Pagination helpers
# ---------------------------------------------------------------------------


def compute_total_pages(total_rows: int, page_size: int) -> int:
    """ceil(total_rows / page_size); zero rows means zero pages. page_size is floored at 1."""
    if total_rows <= 0:
        return 0
    return math.ceil(total_rows / max(page_size, 1))


def clamp_page(page: int, total_pages: int) -> int:
    """Clamp to [1, max(total_pages, 1)]. Never 0."""
    return min(max(page, 1), max(total_pages, 1))


def page_slice(page: int, page_size: int) -> tuple[int, int]:
    """Start/end offsets of the given (already clamped) page."""
    start = (page - 1) * page_size
    return start, start + page_size


# ---------------------------------------------------------------------------
# Action handlers
# ---------------------------------------------------------------------------


def _ok(state: ViewState) -> ReduceResult:
    return ReduceResult(state=state, applied=True)


def _noop(state: ViewState) -> ReduceResult:
    return ReduceResult(state=state, applied=False)


def _reject(state: ViewState, msg: str) -> ReduceResult:
    return ReduceResult(state=state, applied=False, error=f"INVALID_PAYLOAD: {msg}")


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _handle_query_change(state: ViewState, payload: dict[str, Any], total_pages: int | None) -> ReduceResult:
    query = payload.get("query", "")
    if query is None:
        query = ""
    if not isinstance(query, str):
        return _reject(state, "query must be a string")
    # A new search always starts from the first page
    return _ok(replace(state, query=query, page=1))


def _handle_sort_toggle(state: ViewState, payload: dict[str, Any], total_pages: int | None) -> ReduceResult:
    column = payload.get("column")
    if not isinstance(column, str) or not column:
        return _reject(state, "column must be a non-empty string")
    if state.sort_column == column:
        return _ok(replace(state, ascending=not state.ascending))
    return _ok(replace(state, sort_column=column, ascending=True))


def _handle_page_previous(state: ViewState, payload: dict[str, Any], total_pages: int | None) -> ReduceResult:
    if state.page <= 1:
        return _noop(state)
    return _ok(state.with_page(state.page - 1))


def _handle_page_next(state: ViewState, payload: dict[str, Any], total_pages: int | None) -> ReduceResult:
    if total_pages is not None and state.page >= total_pages:
        return _noop(state)
    return _ok(state.with_page(state.page + 1))


def _handle_page_select(state: ViewState, payload: dict[str, Any], total_pages: int | None) -> ReduceResult:
    page = payload.get("page")
    if not _is_int(page):
        return _reject(state, "page must be an integer")
    return _ok(state.with_page(page))


_HANDLERS = {
    "query.change": _handle_query_change,
    "sort.toggle": _handle_sort_toggle,
    "page.previous": _handle_page_previous,
    "page.next": _handle_page_next,
    "page.select": _handle_page_select,
}
