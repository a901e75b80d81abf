from __future__ import annotations

from datetime import datetime

EMPTY_VALUE = "—"


def format_ugx(amount: float | int | None, compact: bool = True) -> str:
    """Render an amount in Ugandan shillings.

    Compact mode mirrors the dashboard cards (``UGX 45.6M``, ``UGX 13K``);
    full mode uses thousands separators (``UGX 50,000``).
    """
    value = float(amount or 0)
    if compact:
        if value >= 1_000_000:
            return f"UGX {value / 1_000_000:.1f}M"
        if value >= 1_000:
            return f"UGX {value / 1_000:.0f}K"
    if value == int(value):
        return f"UGX {int(value):,}"
    return f"UGX {value:,.2f}"


def format_percent(part: float | int, whole: float | int) -> str:
    if not whole:
        return "0%"
    return f"{round(part / whole * 100)}%"


def format_date(value: datetime | str | None, with_time: bool = False) -> str:
    if value is None:
        return EMPTY_VALUE
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            return value
    if with_time:
        return value.strftime("%b %d, %Y %H:%M")
    return value.strftime("%b %d, %Y")


def humanize_status(value: str | None) -> str:
    if not value:
        return EMPTY_VALUE
    return value.replace("_", " ")
