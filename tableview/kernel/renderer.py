"""
tableview Kernel — Renderer

Pure function: (recordset, state, result, options?) → HTML string
No IO. Deterministic: same input → same output, always.

The table is rebuilt from scratch on every state change. Every control is a
plain link whose target is the state the corresponding action produces
(computed with engine.reduce), so the page works without client script.
"""

from __future__ import annotations

from html import escape as _html_escape
from urllib.parse import urlencode

import chevron

from tableview.kernel.engine import reduce, sort_indicator
from tableview.kernel.highlight import highlight_html
from tableview.kernel.types import (
    Action,
    Notification,
    Recordset,
    RenderOptions,
    ViewResult,
    ViewState,
)

NOTIFICATION_TITLE = "Selected Record"
NOTIFICATION_TEMPLATE = "You selected <b>{{value}}</b>."

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def render_page(
    recordset: Recordset,
    state: ViewState,
    result: ViewResult,
    options: RenderOptions | None = None,
    notification: Notification | None = None,
) -> str:
    """
    Render a complete HTML document: styles, table, and (optionally) the
    selection modal.
    """
    opts = options or RenderOptions()
    parts: list[str] = []

    parts.append("<!DOCTYPE html>")
    parts.append('<html lang="en">')
    parts.append("<head>")
    parts.append('  <meta charset="utf-8">')
    parts.append('  <meta name="viewport" content="width=device-width, initial-scale=1">')
    parts.append(f"  <title>{escape(opts.title)}</title>")
    if opts.include_styles:
        parts.append("  <style>")
        parts.append(BASE_CSS.strip())
        parts.append("  </style>")
    parts.append("</head>")
    parts.append("<body>")
    parts.append('  <main class="tableview-page">')
    parts.append(f"    <h1>{escape(opts.title)}</h1>")
    parts.append(render_table(recordset, state, result, opts))
    parts.append("  </main>")
    if notification is not None:
        parts.append(render_notification(notification, state, opts))
    parts.append("</body>")
    parts.append("</html>")

    return "\n".join(parts)


def render_table(
    recordset: Recordset,
    state: ViewState,
    result: ViewResult,
    options: RenderOptions | None = None,
) -> str:
    """Render search box, table and pagination controls as one fragment."""
    opts = options or RenderOptions()
    parts: list[str] = []

    if opts.include_search:
        parts.append(render_search(state, opts))

    parts.append('<table class="tableview-table">')
    parts.append(render_header(recordset, state, opts))
    parts.append(render_body(recordset, state, result, opts))
    parts.append("</table>")
    parts.append(render_pagination(state, result, opts))

    return "\n".join(parts)


def render_search(state: ViewState, options: RenderOptions | None = None) -> str:
    """
    Search form. Sort state rides along in hidden inputs; the page does not,
    so submitting a new query always lands on page 1.
    """
    opts = options or RenderOptions()
    hidden = []
    if state.sort_column is not None:
        hidden.append(f'<input type="hidden" name="sort" value="{escape(state.sort_column)}">')
        hidden.append(f'<input type="hidden" name="dir" value="{"asc" if state.ascending else "desc"}">')
    return (
        f'<form class="search-form" method="get" action="{escape(opts.base_path)}">'
        f'<input type="text" name="q" class="search-input" value="{escape(state.query)}"'
        f' placeholder="{escape(opts.placeholder)}">'
        f"{''.join(hidden)}"
        f"</form>"
    )


def render_header(recordset: Recordset, state: ViewState, options: RenderOptions | None = None) -> str:
    """One sortable header cell per column, in column order."""
    opts = options or RenderOptions()
    cells = []
    for column in recordset.columns:
        target = reduce(state, Action("sort.toggle", {"column": column.id})).state
        label = escape(column.display_name)
        indicator = sort_indicator(column.id, state)
        if indicator:
            label = f'{label} <span class="sort-indicator">{indicator}</span>'
        cells.append(
            f'<th class="sortable-header" data-column="{escape(column.id)}">'
            f'<a href="{escape(state_url(target, opts))}">{label}</a></th>'
        )
    return f"<thead><tr>{''.join(cells)}</tr></thead>"


def render_body(
    recordset: Recordset,
    state: ViewState,
    result: ViewResult,
    options: RenderOptions | None = None,
) -> str:
    """Body rows for the page slice, each cell highlighted against the query."""
    opts = options or RenderOptions()
    columns = list(recordset.columns)

    if not result.rows:
        colspan = max(len(columns), 1)
        return (
            '<tbody><tr class="tableview-empty">'
            f'<td colspan="{colspan}">No matching records.</td>'
            "</tr></tbody>"
        )

    rows = []
    for row_id in result.rows:
        href = escape(state_url(state, opts, selected=row_id))
        cells = []
        for column in columns:
            value = recordset.formatted_value(row_id, column.id) or ""
            cells.append(f'<td><a class="row-select" href="{href}">{highlight_html(value, state.query)}</a></td>')
        rows.append(f'<tr class="tableview-row" data-row-id="{escape(row_id)}">{"".join(cells)}</tr>')

    return "<tbody>\n" + "\n".join(rows) + "\n</tbody>"


def render_pagination(state: ViewState, result: ViewResult, options: RenderOptions | None = None) -> str:
    """
    Previous, one button per page, Next.
    Previous/Next are disabled at the bounds, and both when nothing matched.
    """
    opts = options or RenderOptions()
    current = state.with_page(result.page)
    parts = ['<div class="pagination">']

    previous = reduce(current, Action("page.previous"), result.total_pages)
    parts.append(_page_control("Previous", previous.state, opts, disabled=not previous.applied))

    for number in range(1, result.total_pages + 1):
        target = current.with_page(number)
        css = "page-button active" if number == result.page else "page-button"
        parts.append(f'<a class="{css}" href="{escape(state_url(target, opts))}">{number}</a>')

    following = reduce(current, Action("page.next"), result.total_pages)
    parts.append(_page_control("Next", following.state, opts, disabled=not following.applied))

    parts.append("</div>")
    return "".join(parts)


def selection_notification(
    recordset: Recordset,
    row_id: str,
    primary_column: str,
) -> Notification | None:
    """
    The "you selected X" message for a row click.
    Returns None for rows that are not in the recordset.
    """
    if row_id not in recordset.row_ids:
        return None
    value = recordset.formatted_value(row_id, primary_column) or ""
    # {{value}} is HTML-escaped by chevron
    message = chevron.render(NOTIFICATION_TEMPLATE, {"value": value})
    return Notification(title=NOTIFICATION_TITLE, message=message, row_id=row_id)


def render_notification(
    notification: Notification,
    state: ViewState | None = None,
    options: RenderOptions | None = None,
) -> str:
    """Modal with title, message and an OK link back to the plain view."""
    opts = options or RenderOptions()
    close_href = escape(state_url(state or ViewState(), opts))
    return (
        '<div id="customAlert" class="modal show">'
        f"<h3>{escape(notification.title)}</h3>"
        f"<p>{notification.message}</p>"
        f'<a class="modal-button" href="{close_href}">OK</a>'
        "</div>"
    )


def state_url(state: ViewState, options: RenderOptions | None = None, **extra: str) -> str:
    """URL for a state: base path plus its query-string params."""
    opts = options or RenderOptions()
    params = state.to_params()
    params.update(extra)
    if not params:
        return opts.base_path
    return f"{opts.base_path}?{urlencode(params)}"


def escape(text: str) -> str:
    """HTML-escape user content."""
    return _html_escape(str(text), quote=True)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _page_control(label: str, target: ViewState, opts: RenderOptions, disabled: bool) -> str:
    if disabled:
        return f'<button class="page-button" disabled>{label}</button>'
    return f'<a class="page-button" href="{escape(state_url(target, opts))}">{label}</a>'


BASE_CSS = """
*, *::before, *::after { box-sizing: border-box; }
body { font-family: system-ui, sans-serif; margin: 0; color: #1a1a1a; background: #fafaf9; }
.tableview-page { max-width: 960px; margin: 0 auto; padding: 32px 24px; }
.search-input { width: 100%; padding: 8px; margin-bottom: 12px; font-size: 14px; }
.tableview-table { width: 100%; border-collapse: collapse; font-size: 14px; }
.tableview-table th, .tableview-table td { padding: 6px 8px; border-bottom: 1px solid rgba(0,0,0,0.1); text-align: left; }
.sortable-header a { color: inherit; text-decoration: none; cursor: pointer; }
.row-select { color: inherit; text-decoration: none; display: block; }
.tableview-row:hover { background: #f0f0f0; }
.tableview-empty td { color: #888; font-style: italic; }
.highlight { background: #fff3a3; }
.pagination { margin-top: 12px; display: flex; gap: 4px; }
.page-button { padding: 4px 10px; border: 1px solid #ccc; border-radius: 4px; color: inherit; text-decoration: none; background: #fff; }
.page-button.active { background: #2d3748; color: #fff; }
.page-button[disabled] { opacity: 0.5; }
.modal { position: fixed; top: 30%; left: 50%; transform: translateX(-50%); background: #fff;
  padding: 24px; border-radius: 8px; box-shadow: 0 8px 24px rgba(0,0,0,0.2); }
.modal-button { display: inline-block; margin-top: 12px; padding: 4px 16px; border: 1px solid #ccc; border-radius: 4px; }
"""
