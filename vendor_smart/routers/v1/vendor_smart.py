"""Vendor Smart router: thin HTTP layer over :class:`VendorSmartService`.

Every route requires HTTP Basic credentials. Registry errors surface through
the global AppException handler as 400/409 error envelopes.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Request, status

from vendor_smart.core.response import DataResponse
from vendor_smart.core.security import require_basic_auth
from vendor_smart.repositories.registry import Registry
from vendor_smart.schemas.catalog import LocationOut, ServiceOut
from vendor_smart.schemas.job import JobCreate, JobOut
from vendor_smart.schemas.vendor import ReachableOut, VendorCreate, VendorOut
from vendor_smart.services.vendor_smart import VendorSmartService

router = APIRouter(
    prefix="/vendor-smart",
    tags=["Vendor Smart"],
    dependencies=[Depends(require_basic_auth)],
)


# ------------------------------------------------------------------
# Helper — instantiate service with the app-scoped registry
# ------------------------------------------------------------------

def get_registry(request: Request) -> Registry:
    return request.app.state.registry


def _svc(registry: Registry = Depends(get_registry)) -> VendorSmartService:
    return VendorSmartService(registry)


# ------------------------------------------------------------------
# Endpoints
# ------------------------------------------------------------------

@router.get("/locations", response_model=DataResponse[list[LocationOut]])
async def list_locations(svc: VendorSmartService = Depends(_svc)):
    """Fetch all locations loaded from the catalog file."""
    return {"data": [LocationOut.model_validate(loc) for loc in svc.list_locations()]}


@router.get("/services", response_model=DataResponse[list[ServiceOut]])
async def list_services(svc: VendorSmartService = Depends(_svc)):
    """Fetch all services loaded from the catalog file."""
    return {"data": [ServiceOut.model_validate(s) for s in svc.list_services()]}


@router.post("/jobs", response_model=DataResponse[JobOut], status_code=status.HTTP_201_CREATED)
async def create_job(body: JobCreate, svc: VendorSmartService = Depends(_svc)):
    """Create a job for a (location, service) slot that has none yet."""
    job = svc.create_job(body)
    return {"data": JobOut.model_validate(job)}


@router.post("/vendors", response_model=DataResponse[VendorOut], status_code=status.HTTP_201_CREATED)
async def create_vendor(body: VendorCreate, svc: VendorSmartService = Depends(_svc)):
    """Create a vendor, auto-creating jobs for slots it covers that have none."""
    vendor = svc.create_vendor(body)
    return {"data": VendorOut.model_validate(vendor)}


@router.get("/vendors-for-job", response_model=DataResponse[list[VendorOut]])
async def vendors_for_job(
    job_id: int = Query(alias="jobId", ge=0),
    svc: VendorSmartService = Depends(_svc),
):
    """Fetch all vendors for a job, compliant vendors first."""
    vendors = svc.vendors_for_job(job_id)
    return {"data": [VendorOut.model_validate(v) for v in vendors]}


@router.get("/reachable", response_model=DataResponse[ReachableOut])
async def reachable(
    location_id: int = Query(alias="locationId"),
    service_id: int = Query(alias="serviceId"),
    svc: VendorSmartService = Depends(_svc),
):
    """Count the vendors indexed under the job occupying a (location, service) slot."""
    count = svc.reachable(location_id, service_id)
    return {
        "data": ReachableOut(location_id=location_id, service_id=service_id, vendors=count)
    }
