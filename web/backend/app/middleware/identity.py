"""Identity middleware -- FastAPI dependencies for the caller and the mesh.

The hosting gateway authenticates the caller and forwards the resolved
identity in the ``X-Caller-Identity`` header. Self-only routes require it;
read routes take the target identity from the path instead.
"""

from __future__ import annotations

from typing import Optional

from fastapi import Header, HTTPException, status

from collabmesh.mesh import Mesh

# Shared mesh instance
_mesh: Optional[Mesh] = None


def get_mesh() -> Mesh:
    """Return the singleton Mesh instance."""
    global _mesh
    if _mesh is None:
        _mesh = Mesh()
    return _mesh


async def get_caller_identity(
    x_caller_identity: Optional[str] = Header(None, alias="X-Caller-Identity"),
) -> str:
    """FastAPI dependency that returns the caller's identity.

    Raises ``401 Unauthorized`` if the header is missing or blank.
    """
    identity = (x_caller_identity or "").strip()
    if not identity:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing X-Caller-Identity header",
        )
    return identity
