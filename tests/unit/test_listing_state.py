from __future__ import annotations

import pytest

from clients.motofix_client_sdk.exceptions import ServerError
from clients.motofix_client_sdk.models import Page
from clients.motofix_client_sdk.queries import RequestsQuery

from motofix_control.app.listing_cache import ListingCache, cache_key
from motofix_control.app.ui.listing_state import ListingController, ListingStatus


def _page(rows: list[dict]) -> Page[dict]:
    return Page[dict](data=rows, total=len(rows), page=1, page_size=10, total_pages=1 if rows else 0)


def test_load_moves_to_populated_or_empty() -> None:
    pages = iter([_page([{"id": 1}]), _page([])])
    controller = ListingController(module="requests", fetch=lambda query: next(pages))

    assert controller.snapshot.status is ListingStatus.IDLE
    assert controller.load(RequestsQuery()).status is ListingStatus.POPULATED
    assert controller.load(RequestsQuery(status="cancelled")).status is ListingStatus.EMPTY


def test_error_state_keeps_error_and_reraises() -> None:
    error = ServerError(code="HTTP_ERROR", message="API Error: boom", status_code=500)

    def _fail(query):
        raise error

    controller = ListingController(module="requests", fetch=_fail)

    with pytest.raises(ServerError):
        controller.load(RequestsQuery())

    assert controller.snapshot.status is ListingStatus.ERROR
    assert controller.snapshot.error is error


def test_stale_generation_is_discarded() -> None:
    controller = ListingController(module="requests", fetch=lambda query: _page([]))

    first = controller.begin()
    second = controller.begin()
    assert controller.snapshot.status is ListingStatus.LOADING

    assert controller.resolve(second, _page([{"id": "new"}])) is True
    assert controller.resolve(first, _page([{"id": "old"}])) is False
    assert controller.snapshot.rows == [{"id": "new"}]
    assert controller.reject(first, ServerError(code="X", message="late", status_code=500)) is False
    assert controller.snapshot.status is ListingStatus.POPULATED


def test_cache_serves_repeat_queries_until_invalidated() -> None:
    calls: list[dict] = []

    def _fetch(query):
        calls.append(query.to_params())
        return _page([{"id": len(calls)}])

    controller = ListingController(module="requests", fetch=_fetch, cache=ListingCache(ttl_seconds=30))

    controller.load(RequestsQuery())
    cached = controller.load(RequestsQuery())
    assert len(calls) == 1
    assert cached.from_cache is True

    controller.invalidate()
    controller.load(RequestsQuery())
    assert len(calls) == 2

    controller.load(RequestsQuery(), force_refresh=True)
    assert len(calls) == 3


def test_listing_cache_respects_ttl_and_prefix() -> None:
    current = [100.0]
    cache = ListingCache(ttl_seconds=30, now=lambda: current[0])
    cache.set(cache_key("mechanics", {"page": 1}), "mechanics-page")
    cache.set(cache_key("mechanics-management", {"page": 1}), "management-page")
    cache.set(cache_key("payments", {"page": 1}), "payments-page")

    cache.invalidate_prefix("mechanics:")
    assert cache.get("mechanics:page=1") is None
    assert cache.get("mechanics-management:page=1") == "management-page"

    current[0] = 131.0
    assert cache.get("payments:page=1") is None


def test_cache_key_is_order_independent() -> None:
    assert cache_key("payments", {"type": "payout", "page": 1}) == cache_key("payments", {"page": 1, "type": "payout"})
