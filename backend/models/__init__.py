"""
Pydantic models for tableview.

All data shapes defined here. No imports from routes or services.
"""

from backend.models.recordset import ColumnModel, RecordsetFile, RowModel
from backend.models.view import (
    CellResponse,
    ColumnResponse,
    NotificationResponse,
    RowResponse,
    ViewResponse,
    ViewStateModel,
)

__all__ = [
    "ColumnModel",
    "RowModel",
    "RecordsetFile",
    "ViewStateModel",
    "ColumnResponse",
    "CellResponse",
    "RowResponse",
    "ViewResponse",
    "NotificationResponse",
]
