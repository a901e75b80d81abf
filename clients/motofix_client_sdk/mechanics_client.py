from __future__ import annotations

from dataclasses import dataclass

from .base_client import BaseClient
from .models import Mechanic, MechanicCreate, MechanicUpdate, Page
from .normalizers import normalize_page
from .queries import MechanicsQuery

MECHANICS_PATH = "/admin/mechanics"


@dataclass
class MechanicsClient(BaseClient):
    module: str = "mechanics"

    def list_mechanics(self, query: MechanicsQuery | None = None) -> Page[Mechanic]:
        query = query or MechanicsQuery()
        payload = self._request("GET", MECHANICS_PATH, "list_mechanics", params=query.to_params())
        page = normalize_page(payload, page=query.page or 1, page_size=query.page_size or 10)
        return self._parse(Page[Mechanic], page)

    def create_mechanic(self, data: MechanicCreate) -> Mechanic | None:
        result = self._request("POST", MECHANICS_PATH, "create_mechanic", json_body=data.model_dump())
        return self._parse(Mechanic, result) if isinstance(result, dict) else None

    def update_mechanic(self, mechanic_id: str, data: MechanicUpdate) -> Mechanic | None:
        result = self._request(
            "PATCH",
            f"{MECHANICS_PATH}/{mechanic_id}",
            "update_mechanic",
            json_body=data.changes(),
        )
        return self._parse(Mechanic, result) if isinstance(result, dict) else None

    def set_verified(self, mechanic_id: str, verified: bool) -> Mechanic | None:
        return self.update_mechanic(mechanic_id, MechanicUpdate(is_verified=verified))

    def delete_mechanic(self, mechanic_id: str) -> None:
        self._request("DELETE", f"{MECHANICS_PATH}/{mechanic_id}", "delete_mechanic")
