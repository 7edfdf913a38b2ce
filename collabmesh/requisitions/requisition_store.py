"""Requisition registry backed by a keyed JSON table (``requisitions.json``).

The sponsor identity is denormalized into each record body. It is always
taken from the caller, never from the payload, so it matches the key.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence

from collabmesh import config
from collabmesh.core.result import Err, ErrorCode, Ok, Result
from collabmesh.core.table import KeyedTable
from collabmesh.core.validation import is_valid_requisition
from collabmesh.requisitions.models import RequisitionRecord
from collabmesh.security.audit_log import AuditLogger


class RequisitionRegistry:
    """Singleton-per-identity store of sponsor requisitions."""

    TABLE = "requisitions"
    RESOURCE = "requisition"

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

    @staticmethod
    def _build(
        caller: str,
        role_designation: str,
        specification_summary: str,
        territory: str,
        required_competencies: Sequence[str],
    ) -> RequisitionRecord:
        return RequisitionRecord(
            role_designation=role_designation,
            specification_summary=specification_summary,
            sponsor_identity=caller,
            territory=territory,
            required_competencies=required_competencies,
        )

    @staticmethod
    def _is_valid(r: RequisitionRecord) -> bool:
        return is_valid_requisition(
            r.role_designation,
            r.specification_summary,
            r.territory,
            r.required_competencies,
        )

    # ------------------------------------------------------------------
    # Self-only mutations
    # ------------------------------------------------------------------

    def publish(
        self,
        caller: str,
        role_designation: str,
        specification_summary: str,
        territory: str,
        required_competencies: Sequence[str],
    ) -> Result[str]:
        """Publish the caller's requisition."""
        record = self._build(
            caller, role_designation, specification_summary, territory, required_competencies
        )
        if self._table.contains(caller):
            return Err(ErrorCode.DuplicateRegistration)
        if not self._is_valid(record):
            return Err(ErrorCode.RequisitionMalformed)
        self._table.put(caller, record.to_dict())
        self._log(caller, "publish")
        return Ok("Requisition published")

    def adjust(
        self,
        caller: str,
        role_designation: str,
        specification_summary: str,
        territory: str,
        required_competencies: Sequence[str],
    ) -> Result[str]:
        """Replace the caller's requisition body."""
        record = self._build(
            caller, role_designation, specification_summary, territory, required_competencies
        )
        if not self._table.contains(caller):
            return Err(ErrorCode.ProfileAbsent)
        if not self._is_valid(record):
            return Err(ErrorCode.RequisitionMalformed)
        self._table.put(caller, record.to_dict())
        self._log(caller, "adjust")
        return Ok("Requisition adjusted")

    def withdraw(self, caller: str) -> Result[str]:
        if not self._table.delete(caller):
            return Err(ErrorCode.ProfileAbsent)
        self._log(caller, "withdraw")
        return Ok("Requisition withdrawn")

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def fetch(self, target: str) -> Result[RequisitionRecord]:
        d = self._table.get(target)
        if d is None:
            return Err(ErrorCode.EntityNotFound)
        return Ok(RequisitionRecord.from_dict(d))

    def exists(self, target: str) -> Result[bool]:
        if not self._table.contains(target):
            return Err(ErrorCode.EntityNotFound)
        return Ok(True)
