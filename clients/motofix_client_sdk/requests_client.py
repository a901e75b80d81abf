from __future__ import annotations

from dataclasses import dataclass

from .base_client import BaseClient
from .models import Page, ServiceRequest
from .normalizers import normalize_page
from .queries import RequestsQuery

REQUESTS_PATH = "/admin/requests"


@dataclass
class RequestsClient(BaseClient):
    module: str = "requests"

    def list_requests(self, query: RequestsQuery | None = None) -> Page[ServiceRequest]:
        query = query or RequestsQuery()
        payload = self._request("GET", REQUESTS_PATH, "list_requests", params=query.to_params())
        page = normalize_page(payload, page=query.page or 1, page_size=query.page_size or 10)
        return self._parse(Page[ServiceRequest], page)
