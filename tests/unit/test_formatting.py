from __future__ import annotations

from datetime import datetime, timezone

from motofix_control.app.ui.formatting import format_date, format_percent, format_ugx, humanize_status
from motofix_control.app.ui.pagination import PaginationState, describe_range, goto_page, next_page, prev_page


def test_format_ugx_compact_and_full() -> None:
    assert format_ugx(45_600_000) == "UGX 45.6M"
    assert format_ugx(13_000) == "UGX 13K"
    assert format_ugx(950) == "UGX 950"
    assert format_ugx(50_000, compact=False) == "UGX 50,000"
    assert format_ugx(None) == "UGX 0"


def test_format_percent_guards_zero_total() -> None:
    assert format_percent(986, 1247) == "79%"
    assert format_percent(3, 0) == "0%"


def test_format_date_and_status() -> None:
    value = datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc)

    assert format_date(value) == "Jan 15, 2024"
    assert format_date("2024-01-15T10:30:00Z", with_time=True) == "Jan 15, 2024 10:30"
    assert format_date(None) == "—"
    assert humanize_status("in_progress") == "in progress"


def test_pagination_bounds() -> None:
    state = PaginationState(page=1, page_size=10)

    prev_page(state)
    assert state.page == 1
    next_page(state, total_pages=2)
    next_page(state, total_pages=2)
    assert state.page == 2
    goto_page(state, 9, total_pages=3)
    assert state.page == 3
    assert describe_range(2, 10, 15) == "Showing 11-15 of 15"
    assert describe_range(1, 10, 0) == "Showing 0 of 0"
