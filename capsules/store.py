"""
store.py
--------
Holds the fetched page (source of truth for filtering) and the view derived
from it. The whole set is replaced on every load; nothing is merged.
"""
from __future__ import annotations

import logging
from typing import Optional

from capsules.client import CapsuleClient, FetchResult
from capsules.config import ITEMS_PER_PAGE
from capsules.filters import filter_capsules
from capsules.state import ERROR, LOADING, READY, ListState

log = logging.getLogger(__name__)


class CapsuleStore:
    def __init__(self, client: CapsuleClient, state: Optional[ListState] = None, page_size: int = ITEMS_PER_PAGE):
        self.client = client
        self.state = state if state is not None else ListState()
        self.page_size = page_size

    def load(self, page_number: int) -> FetchResult:
        """Fetch one page and replace the full set; on failure keep the old sets."""
        self.state.status = LOADING
        result = self.client.fetch_page(page_number, self.page_size)

        if not result.ok:
            self.state.status = ERROR
            self.state.error = str(result.error)
            log.error("Load of page %d failed: %s", page_number, result.error)
            return result

        self.state.full = list(result.capsules)
        self.state.view = filter_capsules(self.state.full, self.state.query)
        # mirrors the block's attribute: count of items on this page
        self.state.total_pages = len(result.capsules)
        self.state.status = READY
        self.state.error = None
        log.info("Loaded page %d: %d capsules", page_number, len(self.state.full))
        return result

    def apply_filter(self, query: str) -> None:
        self.state.query = query
        self.state.view = filter_capsules(self.state.full, query)
