"""HTTP-level tests for the /api/v1/vendor-smart routes."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from vendor_smart.core.config import Settings
from vendor_smart.core.exceptions import CatalogLoadError
from vendor_smart.main import create_app

BASE = "/api/v1/vendor-smart"


def _error_code(response) -> str:
    return response.json()["error"]["code"]


class TestCatalogRoutes:
    def test_locations(self, client):
        response = client.get(f"{BASE}/locations")
        assert response.status_code == 200
        first = response.json()["data"][0]
        assert set(first) == {"id", "state", "name"}

    def test_services(self, client):
        response = client.get(f"{BASE}/services")
        assert response.status_code == 200
        assert {s["id"] for s in response.json()["data"]} >= {1, 2, 3}


class TestJobs:
    def test_create_with_assigned_id(self, client):
        response = client.post(f"{BASE}/jobs", json={"locationId": 1, "serviceId": 2})
        assert response.status_code == 201
        assert response.json()["data"] == {"id": 1, "serviceId": 2, "locationId": 1}

    def test_create_with_explicit_id(self, client):
        response = client.post(f"{BASE}/jobs", json={"id": 99, "locationId": 1, "serviceId": 2})
        assert response.json()["data"]["id"] == 99

    def test_duplicate_slot_is_conflict(self, client):
        client.post(f"{BASE}/jobs", json={"id": 99, "locationId": 1, "serviceId": 2})
        response = client.post(f"{BASE}/jobs", json={"locationId": 1, "serviceId": 2})
        assert response.status_code == 409
        assert response.json()["error"] == {
            "code": "DUPLICATE_JOB_FOR_SLOT",
            "message": "A job for this location and service exists: 99",
        }

    @pytest.mark.parametrize(
        "body, code",
        [
            ({"locationId": 321, "serviceId": 321}, "INVALID_SERVICE_REFERENCE"),
            ({"locationId": 321, "serviceId": 1}, "INVALID_LOCATION_REFERENCE"),
        ],
    )
    def test_invalid_references(self, client, body, code):
        response = client.post(f"{BASE}/jobs", json=body)
        assert response.status_code == 400
        assert _error_code(response) == code

    def test_negative_id_rejected(self, client):
        response = client.post(f"{BASE}/jobs", json={"id": -4, "locationId": 1, "serviceId": 1})
        assert response.status_code == 422


class TestVendors:
    def test_create_and_rank(self, client):
        client.post(f"{BASE}/vendors", json={
            "id": 57, "locationId": 1, "servicesCompliance": {"1": False, "3": False},
        })
        created = client.post(f"{BASE}/vendors", json={
            "id": 56, "locationId": 1, "servicesCompliance": {"1": True},
        })
        assert created.status_code == 201
        assert created.json()["data"] == {
            "id": 56, "locationId": 1, "servicesCompliance": {"1": True},
        }

        # vendor 57 auto-provisioned job 1 for (1, 1)
        response = client.get(f"{BASE}/vendors-for-job", params={"jobId": 1})
        assert response.status_code == 200
        assert [v["id"] for v in response.json()["data"]] == [56, 57]

        reachable = client.get(f"{BASE}/reachable", params={"locationId": 1, "serviceId": 1})
        assert reachable.json()["data"] == {"locationId": 1, "serviceId": 1, "vendors": 2}

    def test_duplicate_vendor(self, client):
        body = {"id": 1, "locationId": 1, "servicesCompliance": {"1": True}}
        client.post(f"{BASE}/vendors", json=body)
        response = client.post(f"{BASE}/vendors", json=body)
        assert response.status_code == 409
        assert _error_code(response) == "DUPLICATE_VENDOR"

    def test_invalid_compliance_reference(self, client):
        response = client.post(f"{BASE}/vendors", json={
            "id": 1, "locationId": 1, "servicesCompliance": {"1": True, "999": False},
        })
        assert response.status_code == 400
        assert _error_code(response) == "INVALID_SERVICE_COMPLIANCE_REFERENCE"
        assert client.get(f"{BASE}/vendors-for-job", params={"jobId": 1}).status_code == 404

    def test_invalid_location(self, client):
        response = client.post(f"{BASE}/vendors", json={
            "id": 1, "locationId": 999, "servicesCompliance": {"1": True},
        })
        assert response.status_code == 400
        assert _error_code(response) == "INVALID_LOCATION_REFERENCE"

    def test_empty_compliance_rejected(self, client):
        response = client.post(f"{BASE}/vendors", json={
            "id": 1, "locationId": 1, "servicesCompliance": {},
        })
        assert response.status_code == 422


class TestVendorsForJob:
    def test_unknown_job_is_not_found(self, client):
        response = client.get(f"{BASE}/vendors-for-job", params={"jobId": 2})
        assert response.status_code == 404
        assert response.json()["error"]["message"] == "No vendors found"

    def test_negative_job_id(self, client):
        response = client.get(f"{BASE}/vendors-for-job", params={"jobId": -1})
        assert response.status_code == 422


class TestAuth:
    @pytest.mark.parametrize(
        "method, path",
        [
            ("GET", "/locations"),
            ("GET", "/services"),
            ("GET", "/vendors-for-job?jobId=2"),
            ("GET", "/reachable?locationId=1&serviceId=1"),
            ("POST", "/jobs"),
            ("POST", "/vendors"),
        ],
    )
    @pytest.mark.parametrize("auth", [None, ("shouldfail", "secret"), ("tester", "tttestpass")])
    def test_routes_require_credentials(self, client, method, path, auth):
        response = client.request(method, f"{BASE}{path}", auth=auth)
        assert response.status_code == 401
        assert response.headers["www-authenticate"] == "Basic"
        assert _error_code(response) == "UNAUTHORIZED"

    def test_malformed_basic_header_uses_error_envelope(self, client):
        response = client.get(
            f"{BASE}/locations",
            headers={"Authorization": "Basic %%%not-base64%%%"},
            auth=None,
        )
        assert response.status_code == 401
        assert _error_code(response) == "UNAUTHORIZED"
        assert response.json()["error"]["message"]

    def test_health_is_public(self, client):
        response = client.get("/health", auth=None)
        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "ok"
        assert body["locations"] > 0


def test_startup_fails_without_catalog(tmp_path):
    settings = Settings(locations_file=tmp_path / "missing.json")
    with pytest.raises(CatalogLoadError):
        with TestClient(create_app(settings)):
            pass
