from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Callable

from pydantic import BaseModel

from motofix_control.app.ui.formatting import EMPTY_VALUE, format_date


@dataclass(frozen=True)
class ColumnDef:
    key: str
    label: str
    render: Callable[[Any], str] | None = None


def normalize_value(value: Any) -> str:
    if value is None:
        return EMPTY_VALUE
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, str):
        clean = value.strip()
        return clean or EMPTY_VALUE
    if isinstance(value, bool):
        return "Yes" if value else "No"
    if isinstance(value, datetime):
        return format_date(value)
    return str(value)


def build_rows(items: list[BaseModel], columns: list[ColumnDef]) -> list[dict[str, str]]:
    rows: list[dict[str, str]] = []
    for item in items:
        raw = item.model_dump()
        row: dict[str, str] = {}
        for column in columns:
            value = raw.get(column.key)
            row[column.key] = column.render(value) if column.render and value is not None else normalize_value(value)
        rows.append(row)
    return rows
