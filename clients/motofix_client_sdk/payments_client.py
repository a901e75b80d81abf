from __future__ import annotations

from dataclasses import dataclass

from .base_client import BaseClient
from .models import Page, Payment
from .normalizers import normalize_page
from .queries import PaymentsQuery

PAYMENTS_PATH = "/admin/payments"


@dataclass
class PaymentsClient(BaseClient):
    module: str = "payments"

    def list_payments(self, query: PaymentsQuery | None = None) -> Page[Payment]:
        query = query or PaymentsQuery()
        payload = self._request("GET", PAYMENTS_PATH, "list_payments", params=query.to_params())
        page = normalize_page(payload, page=query.page or 1, page_size=query.page_size or 10)
        return self._parse(Page[Payment], page)
