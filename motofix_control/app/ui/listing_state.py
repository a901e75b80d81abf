from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Generic, TypeVar

from clients.motofix_client_sdk.exceptions import ApiError
from clients.motofix_client_sdk.models import Page

from motofix_control.app.listing_cache import ListingCache, cache_key

T = TypeVar("T")


class ListingStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    ERROR = "error"
    EMPTY = "empty"
    POPULATED = "populated"


@dataclass
class ListingSnapshot(Generic[T]):
    status: ListingStatus = ListingStatus.IDLE
    page: Page[Any] | None = None
    error: ApiError | None = None
    generation: int = 0
    from_cache: bool = False

    @property
    def rows(self) -> list[T]:
        return list(self.page.data) if self.page else []


@dataclass
class ListingController(Generic[T]):
    """Drives one screen's listing through idle/loading/error/empty/populated.

    Every fetch is tagged with a generation number; a completion carrying an
    older generation than the latest ``begin`` is dropped, so a slow response
    for a previous filter can never replace the current one.
    """

    module: str
    fetch: Callable[[Any], Page[Any]]
    cache: ListingCache | None = None
    snapshot: ListingSnapshot[T] = field(default_factory=ListingSnapshot)
    _generation: int = 0

    @property
    def generation(self) -> int:
        return self._generation

    def begin(self) -> int:
        self._generation += 1
        self.snapshot = ListingSnapshot(
            status=ListingStatus.LOADING,
            page=self.snapshot.page,
            generation=self._generation,
        )
        return self._generation

    def resolve(self, generation: int, page: Page[Any], from_cache: bool = False) -> bool:
        if generation != self._generation:
            return False
        status = ListingStatus.POPULATED if page.data else ListingStatus.EMPTY
        self.snapshot = ListingSnapshot(status=status, page=page, generation=generation, from_cache=from_cache)
        return True

    def reject(self, generation: int, error: ApiError) -> bool:
        if generation != self._generation:
            return False
        self.snapshot = ListingSnapshot(status=ListingStatus.ERROR, error=error, generation=generation)
        return True

    def load(self, query: Any, force_refresh: bool = False) -> ListingSnapshot[T]:
        generation = self.begin()
        key = cache_key(self.module, query.to_params())
        if self.cache is not None and not force_refresh:
            cached = self.cache.get(key)
            if cached is not None:
                self.resolve(generation, cached, from_cache=True)
                return self.snapshot
        try:
            page = self.fetch(query)
        except ApiError as error:
            self.reject(generation, error)
            raise
        if self.resolve(generation, page) and self.cache is not None:
            self.cache.set(key, page)
        return self.snapshot

    def invalidate(self) -> None:
        if self.cache is not None:
            self.cache.invalidate_prefix(f"{self.module}:")
