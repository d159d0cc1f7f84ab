"""
filters.py
----------
Free-text filter over status, type and launch date.
"""
from __future__ import annotations

from typing import Iterable, List

from capsules.schema import Capsule


def matches(capsule: Capsule, query: str) -> bool:
    """Case-insensitive substring match; `query` must already be lower-cased."""
    if query in capsule.status.lower():
        return True
    if capsule.type and query in capsule.type.lower():
        return True
    if capsule.original_launch and query in capsule.original_launch.lower():
        return True
    return False


def filter_capsules(full_set: Iterable[Capsule], query: str) -> List[Capsule]:
    """New list of the capsules matching `query`; all of them for an empty query."""
    if not query:
        return list(full_set)
    q = query.lower()
    return [c for c in full_set if matches(c, q)]
