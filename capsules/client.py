"""
client.py
---------
Data source client for the capsules proxy endpoint.

One GET per call, no retry, no caching. Failures come back inside a
FetchResult instead of being raised so the store can show an error state.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import requests
from pydantic import ValidationError

from capsules.config import FETCH_TIMEOUT, ITEMS_PER_PAGE, PROXY_BASE_URL, PROXY_PATH, PROXY_TOKEN
from capsules.schema import Capsule
from capsules.utils import format_launch_date

log = logging.getLogger(__name__)


class FetchError(Exception):
    """The proxy answered with an empty body."""


@dataclass
class FetchResult:
    capsules: List[Capsule] = field(default_factory=list)
    error: Optional[Exception] = None
    rejected: int = 0

    @property
    def ok(self) -> bool:
        return self.error is None


def page_offset(page_number: int, page_size: int) -> int:
    """Zero-based offset of the first record on a 1-based page."""
    if page_number < 1:
        raise ValueError(f"page_number must be >= 1, got {page_number}")
    if page_size < 1:
        raise ValueError(f"page_size must be >= 1, got {page_size}")
    return page_size * (page_number - 1)


def parse_capsules(records: List[Dict[str, Any]]) -> FetchResult:
    """Normalize launch dates and validate each raw record."""
    capsules: List[Capsule] = []
    rejected = 0
    for i, raw in enumerate(records):
        if not isinstance(raw, dict):
            log.warning("Rejected record %d: not an object (%s)", i, type(raw).__name__)
            rejected += 1
            continue
        rec = dict(raw)
        rec["original_launch"] = format_launch_date(rec.get("original_launch"))
        try:
            capsules.append(Capsule.model_validate(rec))
        except ValidationError as err:
            log.warning("Rejected record %d (%s): %s", i, rec.get("capsule_serial"), err.errors())
            rejected += 1
    return FetchResult(capsules=capsules, rejected=rejected)


class CapsuleClient:
    def __init__(
        self,
        base_url: str = PROXY_BASE_URL,
        token: Optional[str] = PROXY_TOKEN,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = FETCH_TIMEOUT,
    ):
        self.url = base_url.rstrip("/") + PROXY_PATH
        self.token = token
        self.session = session or requests.Session()
        self.timeout = timeout

    def _headers(self) -> Dict[str, str]:
        if not self.token:
            return {}
        return {"Authorization": f"Bearer {self.token}"}

    def fetch_page(self, page_number: int, page_size: int = ITEMS_PER_PAGE) -> FetchResult:
        offset = page_offset(page_number, page_size)
        params = {"limit": page_size, "offset": offset}
        log.info("GET %s limit=%d offset=%d", self.url, page_size, offset)

        try:
            resp = self.session.get(self.url, params=params, headers=self._headers(), timeout=self.timeout)
            resp.raise_for_status()
            data = resp.json()
        except (requests.RequestException, ValueError) as err:
            log.error("Fetch of page %d failed: %s", page_number, err)
            return FetchResult(error=err)

        if not data and not isinstance(data, list):
            err = FetchError("An error has occurred while processing request")
            log.error("Fetch of page %d failed: empty response", page_number)
            return FetchResult(error=err)
        if not isinstance(data, list):
            err = FetchError(f"Expected a JSON array, got {type(data).__name__}")
            log.error("Fetch of page %d failed: %s", page_number, err)
            return FetchResult(error=err)

        result = parse_capsules(data)
        log.info("Page %d: %d capsules (%d rejected)", page_number, len(result.capsules), result.rejected)
        return result
