"""Reference catalog response models."""


from vendor_smart.schemas.common import CamelModel

class LocationOut(CamelModel):
    id: int
    state: str
    name: str

class ServiceOut(CamelModel):
    id: int
    name: str
    description: str | None = None
