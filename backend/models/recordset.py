"""Recordset file models — the JSON the backend loads at startup."""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator

from tableview.kernel.recordset import InMemoryRecordset
from tableview.kernel.types import Column


class ColumnModel(BaseModel):
    """One column definition."""

    model_config = {"extra": "forbid"}

    id: str = Field(min_length=1)
    display_name: str | None = None


class RowModel(BaseModel):
    """One row: id plus column_id → value. Missing columns are absent values."""

    model_config = {"extra": "forbid"}

    id: str = Field(min_length=1)
    values: dict[str, str | int | float | bool | None] = Field(default_factory=dict)


class RecordsetFile(BaseModel):
    """Top-level recordset document."""

    model_config = {"extra": "forbid"}

    columns: list[ColumnModel]
    rows: list[RowModel] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_unique_ids(self) -> RecordsetFile:
        column_ids = [c.id for c in self.columns]
        if len(set(column_ids)) != len(column_ids):
            raise ValueError("column ids must be unique")
        row_ids = [r.id for r in self.rows]
        if len(set(row_ids)) != len(row_ids):
            raise ValueError("row ids must be unique")
        return self

    def to_recordset(self) -> InMemoryRecordset:
        columns = [Column(id=c.id, display_name=c.display_name or c.id) for c in self.columns]
        return InMemoryRecordset(columns, [(r.id, r.values) for r in self.rows])
