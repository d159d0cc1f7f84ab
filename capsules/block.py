"""
block.py
--------
The capsules block: one BlockState, and the store, pagination and modal
controllers that mutate it in response to user and lifecycle events.
Also maps the state to and from the host's attribute bag.
"""
from __future__ import annotations

from typing import Any, Dict, Optional

from capsules.client import CapsuleClient, FetchResult
from capsules.modal import ModalController
from capsules.pagination import Pagination
from capsules.render import render_interactive, render_static
from capsules.schema import Capsule
from capsules.state import LOADING, READY, BlockState, ListState, ModalState
from capsules.store import CapsuleStore


def _int_attr(attrs: Dict[str, Any], key: str, default: int) -> int:
    # stored bags may carry null for unset numbers
    value = attrs.get(key)
    return default if value is None else int(value)


class CapsuleBlock:
    def __init__(self, client: Optional[CapsuleClient] = None, state: Optional[BlockState] = None):
        self.state = state if state is not None else BlockState()
        self.store = CapsuleStore(client or CapsuleClient(), self.state.listing)
        self.pagination = Pagination(self.store)
        self.modal = ModalController(self.state.modal)

    # --- events --------------------------------------------------------------

    def mount(self) -> FetchResult:
        return self.store.load(self.state.listing.current_page)

    def filter(self, query: str) -> None:
        self.store.apply_filter(query)

    def go_to_page(self, n: int) -> FetchResult:
        return self.pagination.go_to_page(n)

    def view(self, capsule_serial: str) -> Capsule:
        for capsule in self.state.listing.view:
            if capsule.capsule_serial == capsule_serial:
                self.modal.open(capsule)
                return capsule
        raise KeyError(capsule_serial)

    def close(self) -> None:
        self.modal.close()

    # --- output --------------------------------------------------------------

    def render(self) -> str:
        return render_interactive(self.state)

    def save(self) -> str:
        return render_static(self.state)

    # --- host attribute bag --------------------------------------------------

    def to_attributes(self) -> Dict[str, Any]:
        listing, modal = self.state.listing, self.state.modal
        return {
            "capsules": [c.to_attribute() for c in listing.view],
            "allcapsules": [c.to_attribute() for c in listing.full],
            "totalPages": listing.total_pages,
            "currentPage": listing.current_page,
            "selectedCapsule": modal.selected.to_attribute() if modal.selected else None,
            "modalIsOpen": modal.is_open,
        }

    @classmethod
    def from_attributes(cls, attrs: Dict[str, Any], client: Optional[CapsuleClient] = None) -> "CapsuleBlock":
        """Rebuild a block from stored attributes; dates are taken as already normalized."""
        full = [Capsule.model_validate(c) for c in attrs.get("allcapsules") or []]
        view = [Capsule.model_validate(c) for c in attrs.get("capsules") or []]
        selected = attrs.get("selectedCapsule")
        selected = Capsule.model_validate(selected) if selected else None

        listing = ListState(
            full=full,
            view=view,
            current_page=_int_attr(attrs, "currentPage", 1),
            total_pages=_int_attr(attrs, "totalPages", 1),
            status=READY if full else LOADING,
        )
        modal = ModalState(selected=selected, is_open=bool(attrs.get("modalIsOpen")) and selected is not None)
        return cls(client=client, state=BlockState(listing=listing, modal=modal))
