"""Tests for the HTTP API."""

import tempfile

import pytest
from fastapi.testclient import TestClient

from collabmesh.mesh import Mesh
from web.backend.app.main import app
from web.backend.app.middleware.identity import get_mesh


@pytest.fixture
def client():
    with tempfile.TemporaryDirectory() as tmpdir:
        mesh = Mesh(tmpdir)
        app.dependency_overrides[get_mesh] = lambda: mesh
        yield TestClient(app)
        app.dependency_overrides.clear()


def _as(identity: str) -> dict:
    return {"X-Caller-Identity": identity}


ACME = {"designation": "Acme", "verticalTag": "Tech", "region": "US-East"}


def test_health(client):
    assert client.get("/health").json() == {"status": "healthy"}


def test_organization_scenario(client):
    resp = client.post("/api/organizations", json=ACME, headers=_as("A"))
    assert resp.status_code == 201
    assert resp.json()["ok"] is True

    resp = client.get("/api/organizations/A")
    assert resp.status_code == 200
    assert resp.json() == {"identity": "A", **ACME}

    resp = client.post("/api/organizations", json=ACME, headers=_as("A"))
    assert resp.status_code == 409
    assert resp.json()["detail"] == {"error": "DuplicateRegistration", "code": 409}

    updated = {"designation": "Acme2", "verticalTag": "Tech", "region": "US-West"}
    assert client.put("/api/organizations", json=updated, headers=_as("A")).status_code == 200
    assert client.get("/api/organizations/A").json()["designation"] == "Acme2"

    assert client.delete("/api/organizations", headers=_as("A")).status_code == 200
    resp = client.get("/api/organizations/A")
    assert resp.status_code == 404
    assert resp.json()["detail"]["error"] == "EntityNotFound"


def test_missing_identity_header(client):
    assert client.post("/api/organizations", json=ACME).status_code == 401
    assert client.delete("/api/contributors").status_code == 401


def test_profile_absent_distinct_from_not_found(client):
    resp = client.delete("/api/organizations", headers=_as("A"))
    assert resp.status_code == 404
    assert resp.json()["detail"] == {"error": "ProfileAbsent", "code": 404}


def test_validation_errors(client):
    resp = client.post(
        "/api/organizations",
        json={**ACME, "region": ""},
        headers=_as("A"),
    )
    assert resp.status_code == 422
    assert resp.json()["detail"] == {"error": "TerritoryInvalid", "code": 401}

    resp = client.post(
        "/api/contributors",
        json={"identifierTag": "ada", "competencies": [], "region": "EU", "narrative": "bio"},
        headers=_as("C"),
    )
    assert resp.status_code == 422
    assert resp.json()["detail"]["error"] == "NarrativeIncomplete"


def test_capacity_enforced_by_schema(client):
    resp = client.post(
        "/api/organizations",
        json={**ACME, "designation": "x" * 101},
        headers=_as("A"),
    )
    assert resp.status_code == 422
    assert client.get("/api/organizations/A/exists").status_code == 404

    resp = client.post(
        "/api/contributors",
        json={"identifierTag": "ada", "competencies": ["x"] * 11, "region": "EU", "narrative": "bio"},
        headers=_as("C"),
    )
    assert resp.status_code == 422


def test_contributor_lifecycle(client):
    body = {"identifierTag": "ada", "competencies": ["python"], "region": "EU", "narrative": "bio"}
    assert client.post("/api/contributors", json=body, headers=_as("C")).status_code == 201
    assert client.get("/api/contributors/C/exists").json() == {"identity": "C", "exists": True}

    body["competencies"] = ["python", "go"]
    assert client.put("/api/contributors", json=body, headers=_as("C")).status_code == 200
    assert client.get("/api/contributors/C").json()["competencies"] == ["python", "go"]

    assert client.delete("/api/contributors", headers=_as("C")).status_code == 200
    assert client.get("/api/contributors/C").status_code == 404


def test_requisition_sponsor_is_caller(client):
    body = {
        "roleDesignation": "Engineer",
        "specificationSummary": "Build the API",
        "territory": "Remote",
        "requiredCompetencies": ["python"],
        "sponsorIdentity": "someone-else",
    }
    assert client.post("/api/requisitions", json=body, headers=_as("S")).status_code == 201

    data = client.get("/api/requisitions/S").json()
    assert data["sponsorIdentity"] == "S"
    assert client.get("/api/requisitions/someone-else").status_code == 404

    resp = client.put(
        "/api/requisitions",
        json={**body, "requiredCompetencies": []},
        headers=_as("S"),
    )
    assert resp.status_code == 422
    assert resp.json()["detail"]["error"] == "RequisitionMalformed"

    assert client.delete("/api/requisitions", headers=_as("S")).status_code == 200


def test_diagnostics(client):
    assert client.get("/api/diagnostics/integrity").json()["message"] == "Mesh integrity verified"
    assert client.get("/api/diagnostics/analytics").json()["message"] == "Mesh analytics generated"


def test_audit_endpoint(client):
    client.post("/api/organizations", json=ACME, headers=_as("A"))
    events = client.get("/api/audit", params={"actor": "A"}).json()
    assert len(events) == 1
    assert events[0]["registry"] == "organization"
    assert events[0]["action"] == "initialize"

    events = client.get("/api/audit", params={"registry": "contributor"}).json()
    assert events == []


def test_record_bodies_use_stored_keys(client):
    client.post("/api/organizations", json=ACME, headers=_as("A"))
    assert client.get("/api/organizations/A").json() == {
        "identity": "A",
        "designation": "Acme",
        "verticalTag": "Tech",
        "region": "US-East",
    }

    body = {
        "roleDesignation": "Engineer",
        "specificationSummary": "Build the API",
        "territory": "Remote",
        "requiredCompetencies": ["python"],
    }
    client.post("/api/requisitions", json=body, headers=_as("S"))
    assert client.get("/api/requisitions/S").json() == {**body, "sponsorIdentity": "S"}


def test_field_names_accepted_in_requests(client):
    body = {"designation": "Acme", "vertical_tag": "Tech", "region": "US-East"}
    assert client.post("/api/organizations", json=body, headers=_as("A")).status_code == 201
    assert client.get("/api/organizations/A").json()["verticalTag"] == "Tech"
