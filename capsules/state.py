"""State containers for one capsules block instance."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from capsules.schema import Capsule

LOADING = "loading"
READY = "ready"
ERROR = "error"


@dataclass
class ListState:
    full: List[Capsule] = field(default_factory=list)
    view: List[Capsule] = field(default_factory=list)
    current_page: int = 1
    total_pages: int = 1  # items on the last fetched page, not a true total
    query: str = ""
    status: str = LOADING
    error: Optional[str] = None


@dataclass
class ModalState:
    selected: Optional[Capsule] = None
    is_open: bool = False


@dataclass
class BlockState:
    listing: ListState = field(default_factory=ListState)
    modal: ModalState = field(default_factory=ModalState)
