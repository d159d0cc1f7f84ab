"""
pagination.py
-------------
Server-side paging: every page change is a fresh fetch. The button bar is
always PAGE_BUTTONS wide, independent of total_pages.
"""
from __future__ import annotations

from typing import List, NamedTuple

from capsules.client import FetchResult
from capsules.config import PAGE_BUTTONS
from capsules.store import CapsuleStore


class PageButton(NamedTuple):
    number: int
    active: bool


def page_buttons(current_page: int, buttons: int = PAGE_BUTTONS) -> List[PageButton]:
    return [PageButton(i, i == current_page) for i in range(1, buttons + 1)]


class Pagination:
    def __init__(self, store: CapsuleStore, buttons: int = PAGE_BUTTONS):
        self.store = store
        self.buttons = buttons

    @property
    def current_page(self) -> int:
        return self.store.state.current_page

    def go_to_page(self, n: int) -> FetchResult:
        if n < 1:
            raise ValueError(f"page must be >= 1, got {n}")
        self.store.state.current_page = n
        return self.store.load(n)

    def page_buttons(self) -> List[PageButton]:
        return page_buttons(self.current_page, self.buttons)
