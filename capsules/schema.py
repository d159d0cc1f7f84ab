"""
schema.py
---------
Capsule and Mission records as accepted from the proxy endpoint.
Unknown upstream keys are dropped; missing counters default to 0.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Mission(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str
    flight: int = Field(..., ge=0)


class Capsule(BaseModel):
    model_config = ConfigDict(extra="ignore")

    capsule_id: str
    capsule_serial: str
    status: str
    type: Optional[str] = None
    original_launch: Optional[str] = None  # normalized display string
    reuse_count: int = Field(0, ge=0)
    landings: int = Field(0, ge=0)
    details: Optional[str] = None
    missions: List[Mission] = Field(default_factory=list)

    def to_attribute(self) -> Dict[str, Any]:
        """Plain dict in the upstream field layout."""
        return self.model_dump()
