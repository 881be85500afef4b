"""Vendor Smart service: the boundary operations exposed to the HTTP layer.

Translates request DTOs into domain records, delegates to the registry and
turns "absent" results into :class:`NotFoundError`. Registry errors are
AppException subclasses and propagate unchanged.

Rule: No FastAPI here. Pure Python business logic.
"""


from vendor_smart.core.exceptions import NotFoundError
from vendor_smart.domain import Job, Location, Service, Vendor
from vendor_smart.repositories.registry import Registry
from vendor_smart.schemas.job import JobCreate
from vendor_smart.schemas.vendor import VendorCreate

class VendorSmartService:
    def __init__(self, registry: Registry):
        self._registry = registry

    def list_locations(self) -> list[Location]:
        return self._registry.catalog.locations()

    def list_services(self) -> list[Service]:
        return self._registry.catalog.services()

    def create_job(self, data: JobCreate) -> Job:
        return self._registry.register_job(Job(**data.model_dump()))

    def create_vendor(self, data: VendorCreate) -> Vendor:
        return self._registry.register_vendor(Vendor(**data.model_dump()))

    def vendors_for_job(self, job_id: int) -> list[Vendor]:
        vendors = self._registry.vendors_for_job(job_id)
        if vendors is None:
            raise NotFoundError("No vendors found")
        return vendors

    def reachable(self, location_id: int, service_id: int) -> int:
        return self._registry.reachable(location_id, service_id)
