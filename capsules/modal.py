"""Detail modal: closed, or open with exactly one selected capsule."""

from __future__ import annotations

import logging

from capsules.schema import Capsule
from capsules.state import ModalState

log = logging.getLogger(__name__)


class ModalController:
    def __init__(self, state: ModalState):
        self.state = state

    def open(self, capsule: Capsule) -> None:
        # replaces any previous selection
        self.state.selected = capsule
        self.state.is_open = True
        log.debug("Modal opened for %s", capsule.capsule_id)

    def close(self) -> None:
        self.state.selected = None
        self.state.is_open = False
