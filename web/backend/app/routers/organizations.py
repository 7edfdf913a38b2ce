"""Organizations router -- the caller's organization profile and public reads."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from collabmesh.mesh import Mesh
from collabmesh.orgs.models import OrganizationRecord
from web.backend.app.errors import unwrap_or_raise
from web.backend.app.middleware.identity import get_caller_identity, get_mesh
from web.backend.app.models.api import (
    ExistsResponse,
    MessageResponse,
    OrganizationRequest,
    OrganizationResponse,
)

router = APIRouter(prefix="/api/organizations", tags=["organizations"])


def _org_response(identity: str, r: OrganizationRecord) -> OrganizationResponse:
    """Convert a domain OrganizationRecord to the Pydantic response model."""
    return OrganizationResponse(identity=identity, **r.to_dict())


# ---------------------------------------------------------------------------
# Self-only mutations
# ---------------------------------------------------------------------------


@router.post(
    "",
    response_model=MessageResponse,
    status_code=201,
    summary="Register the caller's organization",
)
async def initialize_organization(
    body: OrganizationRequest,
    caller: str = Depends(get_caller_identity),
    mesh: Mesh = Depends(get_mesh),
):
    """Register an organization profile keyed by the caller's identity."""
    result = mesh.initialize_organization(caller, body.designation, body.vertical_tag, body.region)
    return MessageResponse(message=unwrap_or_raise(result))


@router.put(
    "",
    response_model=MessageResponse,
    summary="Replace the caller's organization",
)
async def modify_organization(
    body: OrganizationRequest,
    caller: str = Depends(get_caller_identity),
    mesh: Mesh = Depends(get_mesh),
):
    """Replace the whole organization profile. No partial updates."""
    result = mesh.modify_organization(caller, body.designation, body.vertical_tag, body.region)
    return MessageResponse(message=unwrap_or_raise(result))


@router.delete(
    "",
    response_model=MessageResponse,
    summary="Remove the caller's organization",
)
async def terminate_organization(
    caller: str = Depends(get_caller_identity),
    mesh: Mesh = Depends(get_mesh),
):
    return MessageResponse(message=unwrap_or_raise(mesh.terminate_organization(caller)))


# ---------------------------------------------------------------------------
# Reads
# ---------------------------------------------------------------------------


@router.get(
    "/{identity}",
    response_model=OrganizationResponse,
    summary="Get an organization by owner identity",
)
async def fetch_organization(identity: str, mesh: Mesh = Depends(get_mesh)):
    record = unwrap_or_raise(mesh.fetch_organization(identity))
    return _org_response(identity, record)


@router.get(
    "/{identity}/exists",
    response_model=ExistsResponse,
    summary="Check that an organization is registered",
)
async def validate_organization_node(identity: str, mesh: Mesh = Depends(get_mesh)):
    return ExistsResponse(identity=identity, exists=unwrap_or_raise(mesh.validate_organization_node(identity)))
