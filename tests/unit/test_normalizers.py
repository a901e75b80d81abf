from __future__ import annotations

from datetime import datetime, timezone

from clients.motofix_client_sdk.normalizers import (
    normalize_page,
    normalize_stats,
    payment_stats_from_stats,
    revenue_points_from_stats,
)


def test_normalize_stats_maps_backend_names() -> None:
    stats = normalize_stats(
        {
            "total_requests": 1247,
            "completed_jobs": 986,
            "pending_jobs": 142,
            "total_mechanics": 89,
            "verified_mechanics": 67,
            "revenue_collected_ugx": 45_600_000,
            "paid_to_mechanics_ugx": 32_400_000,
            "profit_ugx": 13_000_000,
        }
    )

    assert stats["total_requests"] == 1247
    assert stats["revenue_collected"] == 45_600_000
    assert stats["paid_to_mechanics"] == 32_400_000
    assert stats["profit"] == 13_000_000


def test_normalize_stats_derives_profit_and_defaults_missing() -> None:
    stats = normalize_stats({"revenue_collected_ugx": "50000", "paid_to_mechanics_ugx": 20000})

    assert stats["profit"] == 30000
    assert stats["total_requests"] == 0
    assert stats["verified_mechanics"] == 0


def test_normalize_stats_handles_empty_payload() -> None:
    stats = normalize_stats(None)

    assert stats["profit"] == 0
    assert stats["revenue_collected"] == 0


def test_revenue_chart_is_single_point_from_stats() -> None:
    points = revenue_points_from_stats({"as_of": "2024-05-01T00:00:00Z", "revenue_collected_ugx": 900})

    assert points == [{"date": "2024-05-01T00:00:00Z", "amount": 900}]


def test_revenue_chart_uses_now_without_as_of() -> None:
    now = datetime(2024, 5, 2, tzinfo=timezone.utc)

    points = revenue_points_from_stats({}, now=now)

    assert points == [{"date": now.isoformat(), "amount": 0}]


def test_payment_stats_from_stats() -> None:
    assert payment_stats_from_stats({"revenue_collected_ugx": 10, "paid_to_mechanics_ugx": 4}) == {
        "total_collected": 10,
        "total_paid": 4,
    }


def test_normalize_page_accepts_alternate_envelopes() -> None:
    page = normalize_page({"items": [{"id": 1}], "total": 21, "pageSize": 10, "page": 2})

    assert page == {"data": [{"id": 1}], "total": 21, "page": 2, "page_size": 10, "total_pages": 3}


def test_normalize_page_prefers_backend_total_pages() -> None:
    page = normalize_page({"data": [], "total": 0, "totalPages": 4})

    assert page["total_pages"] == 4


def test_normalize_page_bare_list() -> None:
    page = normalize_page([{"id": 1}, {"id": 2}], page=1, page_size=10)

    assert page["total"] == 2
    assert page["total_pages"] == 1
