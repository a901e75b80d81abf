from __future__ import annotations

from dataclasses import dataclass, field

from motofix_control.app.ui.pagination import PaginationState


@dataclass
class ConsoleState:
    """Per-screen filters and paging kept while the operator moves between routes."""

    page_size: int = 10
    filters_by_module: dict[str, dict[str, str]] = field(default_factory=dict)
    search_by_module: dict[str, str] = field(default_factory=dict)
    pagination_by_module: dict[str, PaginationState] = field(default_factory=dict)

    def filters(self, module: str) -> dict[str, str]:
        return self.filters_by_module.setdefault(module, {})

    def pagination(self, module: str) -> PaginationState:
        if module not in self.pagination_by_module:
            self.pagination_by_module[module] = PaginationState(page_size=self.page_size)
        return self.pagination_by_module[module]

    def search(self, module: str) -> str:
        return self.search_by_module.get(module, "")

    def set_search(self, module: str, term: str) -> None:
        self.search_by_module[module] = term.strip()
        self.pagination(module).page = 1

    def set_filter(self, module: str, key: str, value: str) -> None:
        self.filters(module)[key] = value
        self.pagination(module).page = 1

    def clear(self) -> None:
        self.filters_by_module = {}
        self.search_by_module = {}
        self.pagination_by_module = {}
