"""Tests for payload validation and the result contract."""

import pytest

from collabmesh.contributors.models import ContributorRecord
from collabmesh.core.result import Err, ErrorCode, Ok
from collabmesh.core.validation import (
    CapacityError,
    is_valid_contributor,
    is_valid_organization,
    is_valid_requisition,
)
from collabmesh.orgs.models import OrganizationRecord
from collabmesh.requisitions.models import RequisitionRecord


# --- Emptiness predicates ---


def test_organization_predicate():
    assert is_valid_organization("Acme", "Tech", "US-East")
    assert not is_valid_organization("", "Tech", "US-East")
    assert not is_valid_organization("Acme", "", "US-East")
    assert not is_valid_organization("Acme", "Tech", "")


def test_contributor_predicate_requires_competencies():
    assert is_valid_contributor("ada", ["python"], "EU", "Builds things")
    assert not is_valid_contributor("ada", [], "EU", "Builds things")
    assert not is_valid_contributor("ada", ["python", ""], "EU", "Builds things")
    assert not is_valid_contributor("ada", ["python"], "EU", "")


def test_requisition_predicate():
    assert is_valid_requisition("Engineer", "Build the API", "Remote", ["go"])
    assert not is_valid_requisition("Engineer", "", "Remote", ["go"])
    assert not is_valid_requisition("Engineer", "Build the API", "Remote", [])


# --- Structural capacities ---


def test_organization_capacity():
    OrganizationRecord("a" * 100, "t" * 50, "r" * 100)
    with pytest.raises(CapacityError) as exc:
        OrganizationRecord("a" * 101, "Tech", "US")
    assert exc.value.field_name == "designation"
    with pytest.raises(CapacityError):
        OrganizationRecord("Acme", "t" * 51, "US")


def test_contributor_capacity():
    ContributorRecord("ada", ["x"] * 10, "EU", "n" * 500)
    with pytest.raises(CapacityError):
        ContributorRecord("ada", ["x"] * 11, "EU", "bio")
    with pytest.raises(CapacityError):
        ContributorRecord("ada", ["c" * 51], "EU", "bio")
    with pytest.raises(CapacityError):
        ContributorRecord("ada", ["x"], "EU", "n" * 501)


def test_requisition_capacity():
    with pytest.raises(CapacityError):
        RequisitionRecord("Engineer", "s" * 501, "sponsor", "Remote", ["go"])
    with pytest.raises(CapacityError):
        RequisitionRecord("Engineer", "spec", "sponsor", "Remote", ["go"] * 11)


def test_empty_values_are_not_capacity_errors():
    record = OrganizationRecord("", "", "")
    assert record.designation == ""


def test_token_list_rejects_plain_string():
    with pytest.raises(TypeError):
        ContributorRecord("ada", "python", "EU", "bio")


def test_records_require_every_field():
    with pytest.raises(TypeError):
        ContributorRecord()
    with pytest.raises(TypeError):
        ContributorRecord("ada")
    with pytest.raises(TypeError):
        RequisitionRecord("Engineer", "spec", "sponsor", "Remote")


def test_record_dict_uses_stored_keys():
    record = ContributorRecord("ada", ["python"], "EU", "bio")
    data = record.to_dict()
    assert data == {
        "identifierTag": "ada",
        "competencies": ["python"],
        "region": "EU",
        "narrative": "bio",
    }
    assert ContributorRecord.from_dict(data) == record


# --- Result contract ---


def test_error_codes():
    assert ErrorCode.EntityNotFound.code == 404
    assert ErrorCode.DuplicateRegistration.code == 409
    assert ErrorCode.CompetencyMismatch.code == 400
    assert ErrorCode.TerritoryInvalid.code == 401
    assert ErrorCode.NarrativeIncomplete.code == 402
    assert ErrorCode.RequisitionMalformed.code == 403
    assert ErrorCode.ProfileAbsent.code == 404


def test_shared_code_kinds_stay_distinct():
    assert ErrorCode.EntityNotFound.code == ErrorCode.ProfileAbsent.code
    assert ErrorCode.EntityNotFound != ErrorCode.ProfileAbsent
    assert Err(ErrorCode.EntityNotFound) != Err(ErrorCode.ProfileAbsent)


def test_ok_and_err():
    ok = Ok("done")
    assert ok.is_ok
    assert ok.unwrap() == "done"

    err = Err(ErrorCode.ProfileAbsent)
    assert not err.is_ok
    assert err.to_dict() == {"error": "ProfileAbsent", "code": 404}
    with pytest.raises(ValueError):
        err.unwrap()
