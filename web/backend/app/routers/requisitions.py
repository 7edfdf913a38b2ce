"""Requisitions router -- the caller's published requisition and public reads."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from collabmesh.mesh import Mesh
from collabmesh.requisitions.models import RequisitionRecord
from web.backend.app.errors import unwrap_or_raise
from web.backend.app.middleware.identity import get_caller_identity, get_mesh
from web.backend.app.models.api import (
    ExistsResponse,
    MessageResponse,
    RequisitionRequest,
    RequisitionResponse,
)

router = APIRouter(prefix="/api/requisitions", tags=["requisitions"])


def _requisition_response(r: RequisitionRecord) -> RequisitionResponse:
    return RequisitionResponse(**r.to_dict())


@router.post(
    "",
    response_model=MessageResponse,
    status_code=201,
    summary="Publish the caller's requisition",
)
async def publish_requisition(
    body: RequisitionRequest,
    caller: str = Depends(get_caller_identity),
    mesh: Mesh = Depends(get_mesh),
):
    """Publish a requisition. The sponsor is always the caller."""
    result = mesh.publish_requisition(
        caller,
        body.role_designation,
        body.specification_summary,
        body.territory,
        body.required_competencies,
    )
    return MessageResponse(message=unwrap_or_raise(result))


@router.put(
    "",
    response_model=MessageResponse,
    summary="Replace the caller's requisition",
)
async def adjust_requisition(
    body: RequisitionRequest,
    caller: str = Depends(get_caller_identity),
    mesh: Mesh = Depends(get_mesh),
):
    result = mesh.adjust_requisition(
        caller,
        body.role_designation,
        body.specification_summary,
        body.territory,
        body.required_competencies,
    )
    return MessageResponse(message=unwrap_or_raise(result))


@router.delete(
    "",
    response_model=MessageResponse,
    summary="Withdraw the caller's requisition",
)
async def withdraw_requisition(
    caller: str = Depends(get_caller_identity),
    mesh: Mesh = Depends(get_mesh),
):
    return MessageResponse(message=unwrap_or_raise(mesh.withdraw_requisition(caller)))


@router.get(
    "/{identity}",
    response_model=RequisitionResponse,
    summary="Get the requisition published by a sponsor",
)
async def fetch_requisition(identity: str, mesh: Mesh = Depends(get_mesh)):
    return _requisition_response(unwrap_or_raise(mesh.fetch_requisition(identity)))


@router.get(
    "/{identity}/exists",
    response_model=ExistsResponse,
    summary="Check that a sponsor has a published requisition",
)
async def validate_requisition_entry(identity: str, mesh: Mesh = Depends(get_mesh)):
    return ExistsResponse(identity=identity, exists=unwrap_or_raise(mesh.validate_requisition_entry(identity)))
