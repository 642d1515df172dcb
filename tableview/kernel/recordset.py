"""
tableview Kernel — In-memory Recordset

The concrete Recordset used by the backend and the tests.
Immutable after construction: the engine only ever reads through it.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping, Sequence

from tableview.kernel.types import Column


class InMemoryRecordset:
    """Columns plus rows held as row_id -> {column_id: formatted value}."""

    def __init__(
        self,
        columns: Iterable[Column],
        rows: Iterable[tuple[str, Mapping[str, Any]]],
    ) -> None:
        self._columns: tuple[Column, ...] = tuple(columns)
        self._values: dict[str, dict[str, str | None]] = {}
        order: list[str] = []
        for row_id, values in rows:
            if row_id in self._values:
                raise ValueError(f"duplicate row id: {row_id!r}")
            self._values[row_id] = {k: _format(v) for k, v in values.items()}
            order.append(row_id)
        self._row_ids: tuple[str, ...] = tuple(order)

    @property
    def columns(self) -> Sequence[Column]:
        return self._columns

    @property
    def row_ids(self) -> Sequence[str]:
        return self._row_ids

    def formatted_value(self, row_id: str, column_id: str) -> str | None:
        values = self._values.get(row_id)
        if values is None:
            return None
        return values.get(column_id)

    def __contains__(self, row_id: object) -> bool:
        return row_id in self._values

    def __len__(self) -> int:
        return len(self._row_ids)

    def to_dict(self) -> dict[str, Any]:
        return {
            "columns": [c.to_dict() for c in self._columns],
            "rows": [{"id": rid, "values": dict(self._values[rid])} for rid in self._row_ids],
        }

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> InMemoryRecordset:
        columns = [Column.from_dict(c) for c in d.get("columns", [])]
        rows = [(r["id"], r.get("values", {})) for r in d.get("rows", [])]
        return cls(columns, rows)

    @classmethod
    def empty(cls) -> InMemoryRecordset:
        return cls([], [])


def _format(value: Any) -> str | None:
    if value is None or isinstance(value, str):
        return value
    return str(value)
