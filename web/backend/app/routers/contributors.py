"""Contributors router -- the caller's contributor profile and public reads."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from collabmesh.contributors.models import ContributorRecord
from collabmesh.mesh import Mesh
from web.backend.app.errors import unwrap_or_raise
from web.backend.app.middleware.identity import get_caller_identity, get_mesh
from web.backend.app.models.api import (
    ContributorRequest,
    ContributorResponse,
    ExistsResponse,
    MessageResponse,
)

router = APIRouter(prefix="/api/contributors", tags=["contributors"])


def _contributor_response(identity: str, r: ContributorRecord) -> ContributorResponse:
    return ContributorResponse(identity=identity, **r.to_dict())


@router.post(
    "",
    response_model=MessageResponse,
    status_code=201,
    summary="Register the caller's contributor profile",
)
async def establish_contributor(
    body: ContributorRequest,
    caller: str = Depends(get_caller_identity),
    mesh: Mesh = Depends(get_mesh),
):
    result = mesh.establish_contributor(
        caller, body.identifier_tag, body.competencies, body.region, body.narrative
    )
    return MessageResponse(message=unwrap_or_raise(result))


@router.put(
    "",
    response_model=MessageResponse,
    summary="Replace the caller's contributor profile",
)
async def update_contributor(
    body: ContributorRequest,
    caller: str = Depends(get_caller_identity),
    mesh: Mesh = Depends(get_mesh),
):
    result = mesh.update_contributor(
        caller, body.identifier_tag, body.competencies, body.region, body.narrative
    )
    return MessageResponse(message=unwrap_or_raise(result))


@router.delete(
    "",
    response_model=MessageResponse,
    summary="Remove the caller's contributor profile",
)
async def deactivate_contributor(
    caller: str = Depends(get_caller_identity),
    mesh: Mesh = Depends(get_mesh),
):
    return MessageResponse(message=unwrap_or_raise(mesh.deactivate_contributor(caller)))


@router.get(
    "/{identity}",
    response_model=ContributorResponse,
    summary="Get a contributor profile by identity",
)
async def fetch_contributor(identity: str, mesh: Mesh = Depends(get_mesh)):
    record = unwrap_or_raise(mesh.fetch_contributor(identity))
    return _contributor_response(identity, record)


@router.get(
    "/{identity}/exists",
    response_model=ExistsResponse,
    summary="Check that a contributor is registered",
)
async def validate_contributor_node(identity: str, mesh: Mesh = Depends(get_mesh)):
    return ExistsResponse(identity=identity, exists=unwrap_or_raise(mesh.validate_contributor_node(identity)))
