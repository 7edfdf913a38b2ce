"""Requisition domain model."""

from __future__ import annotations

from dataclasses import dataclass

from collabmesh.core.validation import (
    DESIGNATION_MAX,
    NARRATIVE_MAX,
    REGION_MAX,
    enforce_text,
    enforce_tokens,
)


@dataclass
class RequisitionRecord:
    """A role request published by a sponsor.

    ``sponsor_identity`` duplicates the registry key for downstream readers
    and is always set by the registry from the caller.
    """

    role_designation: str
    specification_summary: str
    sponsor_identity: str
    territory: str
    required_competencies: list[str]

    def __post_init__(self) -> None:
        enforce_text("roleDesignation", self.role_designation, DESIGNATION_MAX)
        enforce_text("specificationSummary", self.specification_summary, NARRATIVE_MAX)
        enforce_text("territory", self.territory, REGION_MAX)
        self.required_competencies = enforce_tokens(
            "requiredCompetencies", self.required_competencies
        )

    @classmethod
    def from_dict(cls, d: dict) -> RequisitionRecord:
        return cls(
            role_designation=d["roleDesignation"],
            specification_summary=d["specificationSummary"],
            sponsor_identity=d["sponsorIdentity"],
            territory=d["territory"],
            required_competencies=list(d["requiredCompetencies"]),
        )

    def to_dict(self) -> dict:
        return {
            "roleDesignation": self.role_designation,
            "specificationSummary": self.specification_summary,
            "sponsorIdentity": self.sponsor_identity,
            "territory": self.territory,
            "requiredCompetencies": list(self.required_competencies),
        }
