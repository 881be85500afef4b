"""Vendor Pydantic schemas (request DTOs and response models)."""


from pydantic import Field

from vendor_smart.schemas.common import CamelModel

class VendorCreate(CamelModel):
    id: int
    location_id: int
    services_compliance: dict[int, bool] = Field(min_length=1)

class VendorOut(CamelModel):
    id: int
    location_id: int
    services_compliance: dict[int, bool]

class ReachableOut(CamelModel):
    location_id: int
    service_id: int
    vendors: int
