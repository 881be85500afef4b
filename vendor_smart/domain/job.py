"""Job record and the slot key that enforces one job per (location, service)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple, Optional


class Slot(NamedTuple):
    location_id: int
    service_id: int


@dataclass(frozen=True)
class Job:
    service_id: int
    location_id: int
    # None until the registry assigns one
    id: Optional[int] = None

    @property
    def slot(self) -> Slot:
        return Slot(self.location_id, self.service_id)
