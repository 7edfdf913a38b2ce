"""Pydantic models for API request/response serialization.

Record bodies use the same camelCase keys as the persisted tables
(``verticalTag``, ``identifierTag``, ``sponsorIdentity``, ...). Request
models carry the domain field capacities, so an over-capacity payload is
rejected with 422 before it reaches a registry. Emptiness is left to the
registries, which answer with their own error kind.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from collabmesh.core.validation import (
    COMPETENCIES_MAX_COUNT,
    COMPETENCY_MAX,
    DESIGNATION_MAX,
    NARRATIVE_MAX,
    REGION_MAX,
    TAG_MAX,
)

Competency = Annotated[str, Field(max_length=COMPETENCY_MAX)]


class RecordModel(BaseModel):
    """Base for record bodies: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MessageResponse(BaseModel):
    """Confirmation returned by every successful mutation."""

    ok: bool = True
    message: str


class ExistsResponse(BaseModel):
    identity: str
    exists: bool = True


# ---------------------------------------------------------------------------
# Organization models
# ---------------------------------------------------------------------------


class OrganizationRequest(RecordModel):
    """Request body for registering or replacing an organization profile."""

    designation: str = Field(max_length=DESIGNATION_MAX)
    vertical_tag: str = Field(max_length=TAG_MAX)
    region: str = Field(max_length=REGION_MAX)


class OrganizationResponse(RecordModel):
    """Mirrors collabmesh.orgs.models.OrganizationRecord."""

    identity: str
    designation: str
    vertical_tag: str
    region: str


# ---------------------------------------------------------------------------
# Contributor models
# ---------------------------------------------------------------------------


class ContributorRequest(RecordModel):
    """Request body for registering or replacing a contributor profile."""

    identifier_tag: str = Field(max_length=DESIGNATION_MAX)
    competencies: list[Competency] = Field(max_length=COMPETENCIES_MAX_COUNT)
    region: str = Field(max_length=REGION_MAX)
    narrative: str = Field(max_length=NARRATIVE_MAX)


class ContributorResponse(RecordModel):
    """Mirrors collabmesh.contributors.models.ContributorRecord."""

    identity: str
    identifier_tag: str
    competencies: list[str] = Field(default_factory=list)
    region: str
    narrative: str


# ---------------------------------------------------------------------------
# Requisition models
# ---------------------------------------------------------------------------


class RequisitionRequest(RecordModel):
    """Request body for publishing or adjusting a requisition.

    There is no sponsor field: the sponsor is always the caller.
    """

    role_designation: str = Field(max_length=DESIGNATION_MAX)
    specification_summary: str = Field(max_length=NARRATIVE_MAX)
    territory: str = Field(max_length=REGION_MAX)
    required_competencies: list[Competency] = Field(max_length=COMPETENCIES_MAX_COUNT)


class RequisitionResponse(RecordModel):
    """Mirrors collabmesh.requisitions.models.RequisitionRecord."""

    role_designation: str
    specification_summary: str
    sponsor_identity: str
    territory: str
    required_competencies: list[str] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Audit models
# ---------------------------------------------------------------------------


class AuditEntryResponse(BaseModel):
    """Mirrors collabmesh.security.audit_log.AuditEntry."""

    id: str
    timestamp: str
    actor: str
    registry: str
    action: str
