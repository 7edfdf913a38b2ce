"""Audit router -- query committed registry mutations."""

from __future__ import annotations

from dataclasses import asdict
from typing import Optional

from fastapi import APIRouter, Depends, Query

from collabmesh.mesh import Mesh
from web.backend.app.middleware.identity import get_mesh
from web.backend.app.models.api import AuditEntryResponse

router = APIRouter(prefix="/api/audit", tags=["audit"])


@router.get(
    "",
    response_model=list[AuditEntryResponse],
    summary="List audit events, newest first",
)
async def list_audit_events(
    actor: Optional[str] = Query(None),
    registry: Optional[str] = Query(None),
    action: Optional[str] = Query(None),
    limit: int = Query(200, ge=1, le=1000),
    mesh: Mesh = Depends(get_mesh),
):
    entries = mesh.audit.get_events(
        actor=actor, registry=registry, action=action, limit=limit
    )
    return [AuditEntryResponse(**asdict(e)) for e in entries]
