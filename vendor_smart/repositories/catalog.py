"""Reference catalog: read-only lookup table of locations and services.

Loaded once from two JSON arrays before the registry starts serving. Any
problem while loading raises :class:`CatalogLoadError`; callers treat it as
fatal.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import TypeVar

from pydantic import TypeAdapter, ValidationError

from vendor_smart.core.exceptions import CatalogLoadError
from vendor_smart.domain.catalog import Location, Service

logger = logging.getLogger(__name__)

T = TypeVar("T", Location, Service)

_LOCATIONS = TypeAdapter(list[Location])
_SERVICES = TypeAdapter(list[Service])


def _index(items: Iterable[T], kind: str) -> dict[int, T]:
    indexed: dict[int, T] = {}
    for item in items:
        if item.id in indexed:
            raise CatalogLoadError(f"Duplicate {kind} id {item.id} in catalog")
        indexed[item.id] = item
    return indexed


def _read(path: Path, adapter: TypeAdapter, kind: str) -> list:
    try:
        raw = path.read_bytes()
    except OSError as exc:
        raise CatalogLoadError(f"Cannot read {kind} file '{path}': {exc}") from exc
    try:
        return adapter.validate_json(raw)
    except ValidationError as exc:
        raise CatalogLoadError(f"Invalid {kind} file '{path}': {exc}") from exc


class ReferenceCatalog:
    """Immutable locations/services lookup consumed by the registry."""

    def __init__(self, locations: Iterable[Location] = (), services: Iterable[Service] = ()):
        self._locations = _index(locations, "location")
        self._services = _index(services, "service")

    @classmethod
    def from_files(cls, locations_path: Path, services_path: Path) -> "ReferenceCatalog":
        catalog = cls(
            _read(Path(locations_path), _LOCATIONS, "locations"),
            _read(Path(services_path), _SERVICES, "services"),
        )
        logger.info(
            "Reference catalog loaded: %d locations, %d services",
            len(catalog._locations),
            len(catalog._services),
        )
        return catalog

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def lookup_location(self, location_id: int) -> Location | None:
        return self._locations.get(location_id)

    def lookup_service(self, service_id: int) -> Service | None:
        return self._services.get(service_id)

    def locations(self) -> list[Location]:
        return list(self._locations.values())

    def services(self) -> list[Service]:
        return list(self._services.values())
