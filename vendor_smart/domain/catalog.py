"""Reference data records. Loaded once from JSON and never mutated."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Location:
    id: int
    state: str
    name: str


@dataclass(frozen=True)
class Service:
    id: int
    name: str
    description: Optional[str] = None
