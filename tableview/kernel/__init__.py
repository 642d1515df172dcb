"""
tableview Kernel — the pure view engine.

Components:
  engine    — (recordset, state) → ViewResult, (state, action) → state  (pure)
  highlight — literal, case-insensitive match marking                  (pure)
  renderer  — (recordset, state, result) → HTML                         (pure)
  control   — host lifecycle around the above (holds the ViewState)
"""

from tableview.kernel.control import TableControl
from tableview.kernel.engine import (
    apply_filter,
    apply_sort,
    compute_view,
    reduce,
    refresh,
    sort_indicator,
)
from tableview.kernel.highlight import highlight, highlight_html
from tableview.kernel.recordset import InMemoryRecordset
from tableview.kernel.renderer import render_page, render_table
from tableview.kernel.types import PAGE_SIZE, PRIMARY_COLUMN, Action, Column, ViewResult, ViewState

__all__ = [
    "compute_view",
    "refresh",
    "reduce",
    "apply_sort",
    "apply_filter",
    "sort_indicator",
    "highlight",
    "highlight_html",
    "render_page",
    "render_table",
    "TableControl",
    "InMemoryRecordset",
    "Column",
    "Action",
    "ViewState",
    "ViewResult",
    "PAGE_SIZE",
    "PRIMARY_COLUMN",
]
