"""
tableview Kernel — Shared Types

Data classes used across the engine, highlighter, renderer, and control.
These are the contracts that bind the kernel together.

- `Column` / `Recordset` describe the read-only tabular source
- `ViewState` is the host-owned state (query, sort, page)
- `ViewResult` is what the engine hands to the renderer
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Protocol, Sequence

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

PAGE_SIZE = 13

# Conventional full-name field, checked first by the filter
PRIMARY_COLUMN = "fullname"

ASCENDING_MARK = "▲"
DESCENDING_MARK = "▼"

ACTION_TYPES: set[str] = {
    "query.change",
    "sort.toggle",
    "page.previous",
    "page.next",
    "page.select",
}


# ---------------------------------------------------------------------------
# Recordset
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Column:
    """A column of the recordset. Identity is `id`."""

    id: str
    display_name: str

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "display_name": self.display_name}

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> Column:
        return cls(id=d["id"], display_name=d.get("display_name") or d["id"])


class Recordset(Protocol):
    """
    Read-only view of columns and rows.
    Must not change for the duration of one compute_view call.
    """

    @property
    def columns(self) -> Sequence[Column]: ...

    @property
    def row_ids(self) -> Sequence[str]: ...

    def formatted_value(self, row_id: str, column_id: str) -> str | None: ...


# ---------------------------------------------------------------------------
# View state / result
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ViewState:
    """
    The host-owned state driving compute_view.
    Frozen: transitions return a new ViewState.
    compute_view treats a page_size below 1 as 1.
    """

    query: str = ""
    sort_column: str | None = None
    ascending: bool = True
    page: int = 1
    page_size: int = PAGE_SIZE

    def with_page(self, page: int) -> ViewState:
        if page == self.page:
            return self
        return replace(self, page=page)

    def to_params(self) -> dict[str, str]:
        """Query-string form used by the HTML host. Defaults are omitted."""
        params: dict[str, str] = {}
        if self.query:
            params["q"] = self.query
        if self.sort_column is not None:
            params["sort"] = self.sort_column
            params["dir"] = "asc" if self.ascending else "desc"
        if self.page != 1:
            params["page"] = str(self.page)
        return params

    @classmethod
    def from_params(cls, params: dict[str, str]) -> ViewState:
        """Inverse of to_params. Malformed values fall back to defaults."""
        try:
            page = int(params.get("page", "1"))
        except (TypeError, ValueError):
            page = 1
        sort_column = params.get("sort") or None
        return cls(
            query=params.get("q", ""),
            sort_column=sort_column,
            ascending=params.get("dir", "asc") != "desc",
            page=page,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "query": self.query,
            "sort_column": self.sort_column,
            "ascending": self.ascending,
            "page": self.page,
            "page_size": self.page_size,
        }


@dataclass(frozen=True)
class ViewResult:
    """
    The page slice plus pagination metadata.
    Invariant: 1 <= page <= max(total_pages, 1), len(rows) <= page_size.
    """

    rows: tuple[str, ...]
    total_pages: int
    page: int
    total_rows: int = 0


@dataclass(frozen=True)
class Action:
    """One discrete user action. The reducer reads only `type` and `payload`."""

    type: str
    payload: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class ReduceResult:
    """
    Result of applying one action to a ViewState.
    The reducer never throws; it always returns one of these.
    """

    state: ViewState
    applied: bool
    error: str | None = None


@dataclass(frozen=True)
class Notification:
    """Row-selection message shown in a modal. Presentation only."""

    title: str
    message: str  # HTML, values already escaped
    row_id: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {"title": self.title, "message": self.message, "row_id": self.row_id}


@dataclass
class RenderOptions:
    """Options controlling what the renderer includes in output."""

    title: str = "Contacts"
    include_styles: bool = True
    include_search: bool = True
    base_path: str = "/"
    primary_column: str = PRIMARY_COLUMN
    placeholder: str = "Search by Fullname or other fields..."
