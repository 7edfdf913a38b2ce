"""Organization registry backed by a keyed JSON table.

One record per owner identity, stored in ``organizations.json`` under the
data directory (``~/.collabmesh/`` by default).
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from collabmesh import config
from collabmesh.core.result import Err, ErrorCode, Ok, Result
from collabmesh.core.table import KeyedTable
from collabmesh.core.validation import is_valid_organization
from collabmesh.orgs.models import OrganizationRecord
from collabmesh.security.audit_log import AuditLogger


class OrganizationRegistry:
    """Singleton-per-identity store of organization profiles.

    Every mutating operation acts on the caller's own record only.
    """

    TABLE = "organizations"
    RESOURCE = "organization"

    def __init__(
        self,
        base_dir: Optional[str | Path] = None,
        audit: Optional[AuditLogger] = None,
    ) -> None:
        self._table = KeyedTable(config.data_dir(base_dir), self.TABLE)
        self._audit = audit

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _log(self, caller: str, action: str) -> None:
        # Runs after the commit; an AuditWriteError leaves the mutation in place.
        if self._audit is not None:
            self._audit.record(caller, self.RESOURCE, action)

    # ------------------------------------------------------------------
    # Self-only mutations
    # ------------------------------------------------------------------

    def initialize(
        self, caller: str, designation: str, vertical_tag: str, region: str
    ) -> Result[str]:
        """Register the caller's organization profile."""
        record = OrganizationRecord(designation, vertical_tag, region)
        if self._table.contains(caller):
            return Err(ErrorCode.DuplicateRegistration)
        if not is_valid_organization(designation, vertical_tag, region):
            return Err(ErrorCode.TerritoryInvalid)
        self._table.put(caller, record.to_dict())
        self._log(caller, "initialize")
        return Ok("Organization profile initialized")

    def modify(
        self, caller: str, designation: str, vertical_tag: str, region: str
    ) -> Result[str]:
        """Replace the caller's organization profile."""
        record = OrganizationRecord(designation, vertical_tag, region)
        if not self._table.contains(caller):
            return Err(ErrorCode.ProfileAbsent)
        if not is_valid_organization(designation, vertical_tag, region):
            return Err(ErrorCode.TerritoryInvalid)
        self._table.put(caller, record.to_dict())
        self._log(caller, "modify")
        return Ok("Organization profile updated")

    def terminate(self, caller: str) -> Result[str]:
        """Remove the caller's organization profile."""
        if not self._table.delete(caller):
            return Err(ErrorCode.ProfileAbsent)
        self._log(caller, "terminate")
        return Ok("Organization profile terminated")

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def fetch(self, target: str) -> Result[OrganizationRecord]:
        d = self._table.get(target)
        if d is None:
            return Err(ErrorCode.EntityNotFound)
        return Ok(OrganizationRecord.from_dict(d))

    def exists(self, target: str) -> Result[bool]:
        if not self._table.contains(target):
            return Err(ErrorCode.EntityNotFound)
        return Ok(True)
