from __future__ import annotations

import math
from datetime import datetime, timezone
from typing import Any, Mapping


def normalize_stats(raw: Mapping[str, Any] | None) -> dict[str, Any]:
    raw = raw or {}
    revenue = _to_number(raw.get("revenue_collected_ugx"))
    paid = _to_number(raw.get("paid_to_mechanics_ugx"))
    profit = _to_number(raw.get("profit_ugx"), default=None)
    if profit is None:
        profit = revenue - paid
    return {
        "total_requests": _to_int(raw.get("total_requests")) or 0,
        "completed_jobs": _to_int(raw.get("completed_jobs")) or 0,
        "pending_jobs": _to_int(raw.get("pending_jobs")) or 0,
        "total_mechanics": _to_int(raw.get("total_mechanics")) or 0,
        "verified_mechanics": _to_int(raw.get("verified_mechanics")) or 0,
        "revenue_collected": revenue,
        "paid_to_mechanics": paid,
        "profit": profit,
    }


def revenue_points_from_stats(raw: Mapping[str, Any] | None, now: datetime | None = None) -> list[dict[str, Any]]:
    raw = raw or {}
    as_of = raw.get("as_of")
    if not as_of:
        as_of = (now or datetime.now(tz=timezone.utc)).isoformat()
    return [{"date": str(as_of), "amount": _to_number(raw.get("revenue_collected_ugx"))}]


def payment_stats_from_stats(raw: Mapping[str, Any] | None) -> dict[str, Any]:
    raw = raw or {}
    return {
        "total_collected": _to_number(raw.get("revenue_collected_ugx")),
        "total_paid": _to_number(raw.get("paid_to_mechanics_ugx")),
    }


def normalize_page(payload: Any, *, page: int = 1, page_size: int = 10) -> dict[str, Any]:
    safe_page = max(1, int(page or 1))
    safe_page_size = max(1, int(page_size or 10))

    rows: list[Any] = []
    total: int | None = None
    total_pages: int | None = None

    if isinstance(payload, list):
        rows = payload
    elif isinstance(payload, dict):
        for key in ("data", "items", "rows"):
            if isinstance(payload.get(key), list):
                rows = payload[key]
                break

        total = _to_int(payload.get("total"))
        total_pages = _to_int(payload.get("total_pages")) or _to_int(payload.get("totalPages"))
        safe_page = _to_int(payload.get("page")) or safe_page
        safe_page_size = (
            _to_int(payload.get("page_size"))
            or _to_int(payload.get("pageSize"))
            or _to_int(payload.get("per_page"))
            or safe_page_size
        )

    safe_page = max(1, safe_page)
    safe_page_size = max(1, safe_page_size)

    if total is None:
        total = len(rows) if safe_page == 1 else (safe_page - 1) * safe_page_size + len(rows)
    if total_pages is None:
        total_pages = math.ceil(total / safe_page_size) if total else 0

    return {
        "data": rows,
        "total": total,
        "page": safe_page,
        "page_size": safe_page_size,
        "total_pages": total_pages,
    }


def _to_int(value: Any) -> int | None:
    try:
        if value is None or value == "" or isinstance(value, bool):
            return None
        return int(value)
    except (TypeError, ValueError):
        return None


def _to_number(value: Any, default: float | None = 0) -> float | None:
    if value is None or value == "" or isinstance(value, bool):
        return default
    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    if math.isnan(number):
        return default
    return number
