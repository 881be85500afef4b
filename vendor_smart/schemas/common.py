"""Shared Pydantic schema base with camelCase aliases."""

from __future__ import annotations

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """All API schemas inherit from this to auto-generate camelCase aliases.

    ``from_attributes`` lets response models validate the registry's
    dataclass records directly.
    """

    model_config = {
        "populate_by_name": True,
        "alias_generator": to_camel,
        "from_attributes": True,
    }


class HealthResponse(CamelModel):
    """Health-check response returned by /health."""
    status: str = "ok"
    app: str
    env: str
    locations: int
    services: int
