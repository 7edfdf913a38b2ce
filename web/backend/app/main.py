"""FastAPI application for the CollabMesh registry.

Provides REST API endpoints wrapping the collabmesh package for:
- Organization profiles (register, replace, remove, read)
- Contributor profiles
- Sponsor requisitions
- Mesh diagnostics and the audit log
"""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from collabmesh import __version__
from web.backend.app.routers import audit, contributors, diagnostics, organizations, requisitions

app = FastAPI(
    title="CollabMesh API",
    description=(
        "REST API for the CollabMesh registry. Organizations, contributors, "
        "and sponsors each keep one record keyed by their own identity."
    ),
    version=__version__,
)

# ---------------------------------------------------------------------------
# CORS middleware (allow all origins for development)
# ---------------------------------------------------------------------------
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ---------------------------------------------------------------------------
# Include routers
# ---------------------------------------------------------------------------
app.include_router(organizations.router)
app.include_router(contributors.router)
app.include_router(requisitions.router)
app.include_router(diagnostics.router)
app.include_router(audit.router)


# ---------------------------------------------------------------------------
# Root and health-check endpoints
# ---------------------------------------------------------------------------


@app.get("/", tags=["meta"])
async def root():
    """Return basic API information."""
    return {
        "name": "CollabMesh API",
        "version": __version__,
        "description": "Identity-scoped collaboration registry",
        "docs": "/docs",
        "openapi": "/openapi.json",
    }


@app.get("/health", tags=["meta"])
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}
