"""View models for the JSON table API."""

from __future__ import annotations

from pydantic import BaseModel


class ViewStateModel(BaseModel):
    """The state the page was computed for, with the clamped page."""

    query: str
    sort_column: str | None
    ascending: bool
    page: int
    page_size: int


class ColumnResponse(BaseModel):
    id: str
    display_name: str
    sort_indicator: str


class CellResponse(BaseModel):
    column: str
    value: str
    highlighted: str


class RowResponse(BaseModel):
    id: str
    cells: list[CellResponse]


class ViewResponse(BaseModel):
    """What GET /api/view returns."""

    state: ViewStateModel
    page: int
    total_pages: int
    total_rows: int
    columns: list[ColumnResponse]
    rows: list[RowResponse]


class NotificationResponse(BaseModel):
    """What GET /api/rows/{row_id}/selection returns."""

    title: str
    message: str
    row_id: str
