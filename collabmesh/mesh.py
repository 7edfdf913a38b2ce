"""Mesh — the full operation surface over the three registries.

A ``Mesh`` shares one data directory and one audit logger between the
organization, contributor, and requisition registries. Self-only operations
take the caller identity as their first argument; reads take the target
identity.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence

from collabmesh import config, diagnostics
from collabmesh.contributors.contributor_store import ContributorRegistry
from collabmesh.contributors.models import ContributorRecord
from collabmesh.core.result import Result
from collabmesh.orgs.models import OrganizationRecord
from collabmesh.orgs.org_store import OrganizationRegistry
from collabmesh.requisitions.models import RequisitionRecord
from collabmesh.requisitions.requisition_store import RequisitionRegistry
from collabmesh.security.audit_log import AuditLogger


class Mesh:
    """Entry point used by the CLI and the HTTP API."""

    def __init__(
        self,
        base_dir: Optional[str | Path] = None,
        audit_dir: Optional[str | Path] = None,
    ) -> None:
        self.base_dir = config.data_dir(base_dir)
        if audit_dir is None and base_dir is not None:
            audit_dir = self.base_dir / "audit_logs"
        self.audit = AuditLogger(audit_dir)
        self.organizations = OrganizationRegistry(self.base_dir, self.audit)
        self.contributors = ContributorRegistry(self.base_dir, self.audit)
        self.requisitions = RequisitionRegistry(self.base_dir, self.audit)

    # ── Organizations ────────────────────────────────────────────────

    def initialize_organization(
        self, caller: str, designation: str, vertical_tag: str, region: str
    ) -> Result[str]:
        return self.organizations.initialize(caller, designation, vertical_tag, region)

    def modify_organization(
        self, caller: str, designation: str, vertical_tag: str, region: str
    ) -> Result[str]:
        return self.organizations.modify(caller, designation, vertical_tag, region)

    def terminate_organization(self, caller: str) -> Result[str]:
        return self.organizations.terminate(caller)

    def fetch_organization(self, target: str) -> Result[OrganizationRecord]:
        return self.organizations.fetch(target)

    def validate_organization_node(self, target: str) -> Result[bool]:
        return self.organizations.exists(target)

    # ── Contributors ─────────────────────────────────────────────────

    def establish_contributor(
        self,
        caller: str,
        identifier_tag: str,
        competencies: Sequence[str],
        region: str,
        narrative: str,
    ) -> Result[str]:
        return self.contributors.establish(caller, identifier_tag, competencies, region, narrative)

    def update_contributor(
        self,
        caller: str,
        identifier_tag: str,
        competencies: Sequence[str],
        region: str,
        narrative: str,
    ) -> Result[str]:
        return self.contributors.update(caller, identifier_tag, competencies, region, narrative)

    def deactivate_contributor(self, caller: str) -> Result[str]:
        return self.contributors.deactivate(caller)

    def fetch_contributor(self, target: str) -> Result[ContributorRecord]:
        return self.contributors.fetch(target)

    def validate_contributor_node(self, target: str) -> Result[bool]:
        return self.contributors.exists(target)

    # ── Requisitions ─────────────────────────────────────────────────

    def publish_requisition(
        self,
        caller: str,
        role_designation: str,
        specification_summary: str,
        territory: str,
        required_competencies: Sequence[str],
    ) -> Result[str]:
        return self.requisitions.publish(
            caller, role_designation, specification_summary, territory, required_competencies
        )

    def adjust_requisition(
        self,
        caller: str,
        role_designation: str,
        specification_summary: str,
        territory: str,
        required_competencies: Sequence[str],
    ) -> Result[str]:
        return self.requisitions.adjust(
            caller, role_designation, specification_summary, territory, required_competencies
        )

    def withdraw_requisition(self, caller: str) -> Result[str]:
        return self.requisitions.withdraw(caller)

    def fetch_requisition(self, target: str) -> Result[RequisitionRecord]:
        return self.requisitions.fetch(target)

    def validate_requisition_entry(self, target: str) -> Result[bool]:
        return self.requisitions.exists(target)

    # ── Diagnostics ──────────────────────────────────────────────────

    def verify_mesh_integrity(self) -> Result[str]:
        return diagnostics.verify_integrity()

    def generate_mesh_analytics(self) -> Result[str]:
        return diagnostics.generate_analytics()
