"""CollabMesh — identity-scoped registry for organizations, contributors, and requisitions."""

__version__ = "0.1.0"
