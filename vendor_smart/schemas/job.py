"""Job Pydantic schemas (request DTO and response model)."""


from pydantic import Field

from vendor_smart.schemas.common import CamelModel

class JobCreate(CamelModel):
    id: int | None = Field(default=None, ge=0)
    service_id: int
    location_id: int

class JobOut(CamelModel):
    id: int
    service_id: int
    location_id: int
