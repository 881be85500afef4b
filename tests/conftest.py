"""
Pytest configuration and shared fixtures.
"""

import pytest
from fastapi.testclient import TestClient

from vendor_smart.core.config import Settings
from vendor_smart.domain import Location, Service
from vendor_smart.main import create_app
from vendor_smart.repositories.catalog import ReferenceCatalog
from vendor_smart.repositories.registry import Registry


@pytest.fixture
def catalog() -> ReferenceCatalog:
    """Locations {1, 2} and services {1, 3, 4}."""
    return ReferenceCatalog(
        locations=[
            Location(id=1, state="TX", name="Travis"),
            Location(id=2, state="TX", name="Harris"),
        ],
        services=[
            Service(id=1, name="Landscaping"),
            Service(id=3, name="Pool Maintenance"),
            Service(id=4, name="HVAC"),
        ],
    )


@pytest.fixture
def registry(catalog) -> Registry:
    return Registry(catalog)


@pytest.fixture
def empty_registry() -> Registry:
    return Registry(ReferenceCatalog())


@pytest.fixture
def settings() -> Settings:
    return Settings(
        app_env="test",
        auth_username="tester",
        auth_password="secret",
    )


@pytest.fixture
def client(settings):
    """Authenticated client over an app built from the packaged catalog files."""
    with TestClient(create_app(settings)) as test_client:
        test_client.auth = ("tester", "secret")
        yield test_client
