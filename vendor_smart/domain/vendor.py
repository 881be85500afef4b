"""Vendor record.

A vendor works at a single location and declares, per service id, whether it
is compliant (True) or not (False). Declaring a service at all, even as
non-compliant, makes the vendor a candidate for that service's job at the
vendor's location.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True)
class Vendor:
    id: int
    location_id: int
    services_compliance: Mapping[int, bool] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Read-only snapshot of the caller's map; vendors never change once created
        object.__setattr__(
            self, "services_compliance", MappingProxyType(dict(self.services_compliance))
        )

    def is_compliant(self, service_id: int) -> bool:
        """True only when the vendor explicitly declared compliance for the service."""
        return self.services_compliance.get(service_id) is True
