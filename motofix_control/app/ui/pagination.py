from __future__ import annotations

from dataclasses import dataclass


@dataclass
class PaginationState:
    page: int = 1
    page_size: int = 10


def next_page(state: PaginationState, total_pages: int | None) -> PaginationState:
    if total_pages is not None and state.page >= total_pages:
        return state
    state.page += 1
    return state


def prev_page(state: PaginationState) -> PaginationState:
    state.page = max(1, state.page - 1)
    return state


def goto_page(state: PaginationState, page: int, total_pages: int | None = None) -> PaginationState:
    target = max(1, page)
    if total_pages:
        target = min(target, total_pages)
    state.page = target
    return state


def describe_range(page: int, page_size: int, total: int) -> str:
    if total <= 0:
        return "Showing 0 of 0"
    start = (page - 1) * page_size + 1
    end = min(page * page_size, total)
    return f"Showing {start}-{end} of {total}"
