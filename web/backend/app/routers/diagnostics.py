"""Diagnostics router -- mesh-wide integrity and analytics placeholders."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from collabmesh.mesh import Mesh
from web.backend.app.errors import unwrap_or_raise
from web.backend.app.middleware.identity import get_mesh
from web.backend.app.models.api import MessageResponse

router = APIRouter(prefix="/api/diagnostics", tags=["diagnostics"])


@router.get("/integrity", response_model=MessageResponse, summary="Verify mesh integrity")
async def verify_mesh_integrity(mesh: Mesh = Depends(get_mesh)):
    return MessageResponse(message=unwrap_or_raise(mesh.verify_mesh_integrity()))


@router.get("/analytics", response_model=MessageResponse, summary="Generate mesh analytics")
async def generate_mesh_analytics(mesh: Mesh = Depends(get_mesh)):
    return MessageResponse(message=unwrap_or_raise(mesh.generate_mesh_analytics()))
