"""Contributor registry backed by a keyed JSON table (``contributors.json``)."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence

from collabmesh import config
from collabmesh.contributors.models import ContributorRecord
from collabmesh.core.result import Err, ErrorCode, Ok, Result
from collabmesh.core.table import KeyedTable
from collabmesh.core.validation import is_valid_contributor
from collabmesh.security.audit_log import AuditLogger


class ContributorRegistry:
    """Singleton-per-identity store of contributor profiles."""

    TABLE = "contributors"
    RESOURCE = "contributor"

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

    def _build(
        self,
        identifier_tag: str,
        competencies: Sequence[str],
        region: str,
        narrative: str,
    ) -> ContributorRecord:
        return ContributorRecord(
            identifier_tag=identifier_tag,
            competencies=competencies,
            region=region,
            narrative=narrative,
        )

    # ------------------------------------------------------------------
    # Self-only mutations
    # ------------------------------------------------------------------

    def establish(
        self,
        caller: str,
        identifier_tag: str,
        competencies: Sequence[str],
        region: str,
        narrative: str,
    ) -> Result[str]:
        """Register the caller's contributor profile."""
        record = self._build(identifier_tag, competencies, region, narrative)
        if self._table.contains(caller):
            return Err(ErrorCode.DuplicateRegistration)
        if not is_valid_contributor(
            record.identifier_tag, record.competencies, record.region, record.narrative
        ):
            return Err(ErrorCode.NarrativeIncomplete)
        self._table.put(caller, record.to_dict())
        self._log(caller, "establish")
        return Ok("Contributor profile established")

    def update(
        self,
        caller: str,
        identifier_tag: str,
        competencies: Sequence[str],
        region: str,
        narrative: str,
    ) -> Result[str]:
        """Replace the caller's contributor profile as a whole."""
        record = self._build(identifier_tag, competencies, region, narrative)
        if not self._table.contains(caller):
            return Err(ErrorCode.ProfileAbsent)
        if not is_valid_contributor(
            record.identifier_tag, record.competencies, record.region, record.narrative
        ):
            return Err(ErrorCode.NarrativeIncomplete)
        self._table.put(caller, record.to_dict())
        self._log(caller, "update")
        return Ok("Contributor profile updated")

    def deactivate(self, caller: str) -> Result[str]:
        if not self._table.delete(caller):
            return Err(ErrorCode.ProfileAbsent)
        self._log(caller, "deactivate")
        return Ok("Contributor profile deactivated")

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def fetch(self, target: str) -> Result[ContributorRecord]:
        d = self._table.get(target)
        if d is None:
            return Err(ErrorCode.EntityNotFound)
        return Ok(ContributorRecord.from_dict(d))

    def exists(self, target: str) -> Result[bool]:
        if not self._table.contains(target):
            return Err(ErrorCode.EntityNotFound)
        return Ok(True)
