"""Domain package: plain in-memory records shared by the catalog and the registry.

Folder intent:
  catalog.py  — Location / Service reference data (read-only after load)
  job.py      — Job and the (location, service) Slot key
  vendor.py   — Vendor with its per-service compliance flags
"""

from vendor_smart.domain.catalog import Location, Service
from vendor_smart.domain.job import Job, Slot
from vendor_smart.domain.vendor import Vendor

__all__ = [
    "Job",
    "Location",
    "Service",
    "Slot",
    "Vendor",
]
