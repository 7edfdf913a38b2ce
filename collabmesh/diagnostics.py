"""Mesh diagnostics.

Both operations are placeholders: they perform no computation and always
succeed with a fixed message.
"""

from __future__ import annotations

from collabmesh.core.result import Ok, Result

INTEGRITY_MESSAGE = "Mesh integrity verified"
ANALYTICS_MESSAGE = "Mesh analytics generated"


def verify_integrity() -> Result[str]:
    return Ok(INTEGRITY_MESSAGE)


def generate_analytics() -> Result[str]:
    return Ok(ANALYTICS_MESSAGE)
