from __future__ import annotations

from dataclasses import dataclass
from typing import Any
from urllib.parse import urlencode

ALL = "all"


def _selected(value: str | None) -> str | None:
    if value is None:
        return None
    normalized = value.strip()
    if not normalized or normalized == ALL:
        return None
    return normalized


def _paging_params(page: int | None, page_size: int | None, search: str | None) -> dict[str, Any]:
    params: dict[str, Any] = {}
    if page:
        params["page"] = page
    if page_size:
        params["pageSize"] = page_size
    search_term = (search or "").strip()
    if search_term:
        params["search"] = search_term
    return params


@dataclass
class RequestsQuery:
    page: int | None = 1
    page_size: int | None = 10
    status: str | None = ALL
    search: str | None = None

    def to_params(self) -> dict[str, Any]:
        params: dict[str, Any] = {}
        status = _selected(self.status)
        if status:
            params["status"] = status
        params.update(_paging_params(self.page, self.page_size, self.search))
        return params

    def to_query_string(self) -> str:
        return urlencode(self.to_params())


@dataclass
class MechanicsQuery:
    page: int | None = 1
    page_size: int | None = 10
    verified_only: bool = False
    search: str | None = None

    def to_params(self) -> dict[str, Any]:
        params: dict[str, Any] = {}
        if self.verified_only:
            params["verified"] = "true"
        params.update(_paging_params(self.page, self.page_size, self.search))
        return params

    def to_query_string(self) -> str:
        return urlencode(self.to_params())


@dataclass
class PaymentsQuery:
    page: int | None = 1
    page_size: int | None = 10
    type: str | None = ALL
    status: str | None = ALL
    search: str | None = None

    def to_params(self) -> dict[str, Any]:
        params: dict[str, Any] = {}
        payment_type = _selected(self.type)
        if payment_type:
            params["type"] = payment_type
        status = _selected(self.status)
        if status:
            params["status"] = status
        params.update(_paging_params(self.page, self.page_size, self.search))
        return params

    def to_query_string(self) -> str:
        return urlencode(self.to_params())
