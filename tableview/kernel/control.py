"""
tableview Kernel — Table Control

Sits between the pure functions (engine, renderer) and the host.
Owns the current ViewState, applies user actions, recomputes the view and
re-renders the whole fragment on every change.

Lifecycle: init → update_view (per recordset update) → dispatch / select_row
(per user action) → destroy.

Not thread-safe: the host is expected to deliver actions one at a time.
"""

from __future__ import annotations

import logging
from typing import Any

from tableview.kernel.engine import reduce, refresh
from tableview.kernel.recordset import InMemoryRecordset
from tableview.kernel.renderer import escape, render_notification, render_table, selection_notification
from tableview.kernel.types import (
    Action,
    Notification,
    Recordset,
    RenderOptions,
    ViewResult,
    ViewState,
)

logger = logging.getLogger(__name__)


class ControlNotInitialized(Exception):
    """An action arrived before init() or after destroy()."""
    pass


class TableControl:
    """Stateful host adapter around the pure view engine."""

    def __init__(self, options: RenderOptions | None = None) -> None:
        self.options = options or RenderOptions()
        self.state = ViewState()
        self.result: ViewResult | None = None
        self.recordset: Recordset = InMemoryRecordset.empty()
        self.container_id: str | None = None
        self.html = ""
        self.notification: Notification | None = None

    # -- lifecycle ----------------------------------------------------------

    def init(self, container_id: str, recordset: Recordset | None = None) -> None:
        """Attach to a container. The first render happens in update_view."""
        self.container_id = container_id
        if recordset is not None:
            self.recordset = recordset
        logger.debug("table control attached to %s", container_id)

    def update_view(self, recordset: Recordset | None = None) -> str:
        """Recompute and re-render, optionally against a new recordset."""
        self._require_init()
        if recordset is not None:
            self.recordset = recordset

        self.state, self.result = refresh(self.recordset, self.state, self.options.primary_column)
        self.html = self._render()
        return self.html

    def destroy(self) -> None:
        """Clear presentation state and detach."""
        logger.debug("table control detached from %s", self.container_id)
        self.container_id = None
        self.html = ""
        self.notification = None
        self.result = None
        self.state = ViewState()

    # -- user actions -------------------------------------------------------

    def dispatch(self, action_type: str, payload: dict[str, Any] | None = None) -> str:
        """
        Apply one user action and re-render.
        Rejected actions leave the state untouched but still re-render.
        """
        self._require_init()
        total_pages = self.result.total_pages if self.result is not None else None
        outcome = reduce(self.state, Action(action_type, payload or {}), total_pages)
        if outcome.error:
            logger.debug("table control rejected %s: %s", action_type, outcome.error)
        self.state = outcome.state
        self.notification = None
        return self.update_view()

    def search(self, query: str) -> str:
        return self.dispatch("query.change", {"query": query})

    def sort_by(self, column_id: str) -> str:
        return self.dispatch("sort.toggle", {"column": column_id})

    def previous_page(self) -> str:
        return self.dispatch("page.previous")

    def next_page(self) -> str:
        return self.dispatch("page.next")

    def go_to_page(self, page: int) -> str:
        return self.dispatch("page.select", {"page": page})

    def select_row(self, row_id: str) -> Notification | None:
        """Show the selection modal for a row. Does not touch the view state."""
        self._require_init()
        self.notification = selection_notification(self.recordset, row_id, self.options.primary_column)
        if self.notification is not None:
            self.html = self._render()
        return self.notification

    def dismiss_notification(self) -> str:
        """Close the selection modal and re-render the current view."""
        self._require_init()
        self.notification = None
        self.html = self._render()
        return self.html

    # -- internals ----------------------------------------------------------

    def _require_init(self) -> None:
        if self.container_id is None:
            raise ControlNotInitialized("init() must be called before rendering")

    def _render(self) -> str:
        if self.result is None:
            return ""
        parts = [f'<div id="{escape(self.container_id or "")}" class="tableview">']
        parts.append(render_table(self.recordset, self.state, self.result, self.options))
        if self.notification is not None:
            parts.append(render_notification(self.notification, self.state, self.options))
        parts.append("</div>")
        return "\n".join(parts)
