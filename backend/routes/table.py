"""
Table routes — the host collaborator for the view engine.

Stateless: the ViewState travels in the query string (q, sort, dir, page),
each request recomputes the view from scratch and renders it.

GET /                               → full HTML page
GET /api/view                       → JSON view of the same state
GET /api/rows/{row_id}/selection    → row-selection notification
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Query, status
from fastapi.responses import HTMLResponse

from backend.config import settings
from backend.models.view import (
    CellResponse,
    ColumnResponse,
    NotificationResponse,
    RowResponse,
    ViewResponse,
    ViewStateModel,
)
from backend.services.recordset_loader import recordset_store
from tableview.kernel.engine import refresh, sort_indicator
from tableview.kernel.highlight import highlight_html
from tableview.kernel.renderer import render_page, selection_notification
from tableview.kernel.types import RenderOptions, ViewState

logger = logging.getLogger(__name__)

router = APIRouter(tags=["table"])


def _state_from_query(q: str, sort: str | None, direction: str, page: str) -> ViewState:
    return ViewState.from_params({"q": q, "sort": sort or "", "dir": direction, "page": page})


@router.get("/", response_class=HTMLResponse)
async def table_page(
    q: str = "",
    sort: str | None = None,
    direction: str = Query("asc", alias="dir"),
    page: str = "1",
    selected: str | None = None,
) -> HTMLResponse:
    """
    Render the table for the requested state.
    `selected` adds the selection modal for that row (ignored if unknown).
    """
    recordset = recordset_store.recordset
    state, result = refresh(recordset, _state_from_query(q, sort, direction, page), settings.PRIMARY_COLUMN)
    logger.debug(
        "table: q=%r sort=%s page=%d/%d rows=%d",
        state.query,
        state.sort_column,
        result.page,
        result.total_pages,
        len(result.rows),
    )

    notification = None
    if selected:
        notification = selection_notification(recordset, selected, settings.PRIMARY_COLUMN)

    options = RenderOptions(title=settings.TITLE, primary_column=settings.PRIMARY_COLUMN)
    return HTMLResponse(content=render_page(recordset, state, result, options, notification))


@router.get("/api/view", response_model=ViewResponse)
async def table_view(
    q: str = "",
    sort: str | None = None,
    direction: str = Query("asc", alias="dir"),
    page: str = "1",
) -> ViewResponse:
    """The page slice as JSON, with raw and highlighted cell values."""
    recordset = recordset_store.recordset
    state, result = refresh(recordset, _state_from_query(q, sort, direction, page), settings.PRIMARY_COLUMN)

    columns = [
        ColumnResponse(id=c.id, display_name=c.display_name, sort_indicator=sort_indicator(c.id, state))
        for c in recordset.columns
    ]
    rows = []
    for row_id in result.rows:
        cells = []
        for column in recordset.columns:
            value = recordset.formatted_value(row_id, column.id) or ""
            cells.append(CellResponse(column=column.id, value=value, highlighted=highlight_html(value, state.query)))
        rows.append(RowResponse(id=row_id, cells=cells))

    return ViewResponse(
        state=ViewStateModel(**state.to_dict()),
        page=result.page,
        total_pages=result.total_pages,
        total_rows=result.total_rows,
        columns=columns,
        rows=rows,
    )


@router.get("/api/rows/{row_id}/selection", response_model=NotificationResponse)
async def row_selection(row_id: str) -> NotificationResponse:
    """The notification shown when a row is clicked."""
    notification = selection_notification(recordset_store.recordset, row_id, settings.PRIMARY_COLUMN)
    if notification is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Row not found")
    return NotificationResponse(title=notification.title, message=notification.message, row_id=row_id)
