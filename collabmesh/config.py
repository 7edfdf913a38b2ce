"""Environment configuration.

Values are read once at import. Explicit arguments passed to stores and
loggers always take precedence over these defaults.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

# ---------------------------------------------------------------------------
# Environment configuration
# ---------------------------------------------------------------------------

DATA_DIR = os.environ.get("COLLABMESH_DATA_DIR", "")
AUDIT_DIR = os.environ.get("COLLABMESH_AUDIT_DIR", "")
DEFAULT_IDENTITY = os.environ.get("COLLABMESH_IDENTITY", "")


def data_dir(base_dir: Optional[str | Path] = None) -> Path:
    """Resolve the directory holding the registry tables."""
    if base_dir is not None:
        return Path(base_dir)
    if DATA_DIR:
        return Path(DATA_DIR)
    return Path.home() / ".collabmesh"


def audit_dir(base_dir: Optional[str | Path] = None) -> Path:
    """Resolve the audit log directory.

    Defaults to ``audit_logs/`` inside the data directory.
    """
    if base_dir is not None:
        return Path(base_dir)
    if AUDIT_DIR:
        return Path(AUDIT_DIR)
    return data_dir() / "audit_logs"
