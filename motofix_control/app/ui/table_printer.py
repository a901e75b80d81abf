from __future__ import annotations

from typing import Any

from motofix_control.app.ui.listing_view import ColumnDef, normalize_value


def print_table(title: str, rows: list[dict[str, Any]], columns: list[ColumnDef], empty_message: str = "No results found.") -> None:
    print(f"\n{title}")
    if not rows:
        print(empty_message)
        return

    widths = []
    for column in columns:
        max_cell = max(len(normalize_value(row.get(column.key))) for row in rows)
        widths.append(max(len(column.label), max_cell))

    header_line = " | ".join(column.label.ljust(widths[idx]) for idx, column in enumerate(columns))
    separator = "-+-".join("-" * width for width in widths)
    print(header_line)
    print(separator)

    for row in rows:
        line = " | ".join(normalize_value(row.get(column.key)).ljust(widths[idx]) for idx, column in enumerate(columns))
        print(line)
