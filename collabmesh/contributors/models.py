"""Contributor domain model."""

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
class ContributorRecord:
    """Profile registered by an individual contributor."""

    identifier_tag: str
    competencies: list[str]
    region: str
    narrative: str

    def __post_init__(self) -> None:
        enforce_text("identifierTag", self.identifier_tag, DESIGNATION_MAX)
        self.competencies = enforce_tokens("competencies", self.competencies)
        enforce_text("region", self.region, REGION_MAX)
        enforce_text("narrative", self.narrative, NARRATIVE_MAX)

    @classmethod
    def from_dict(cls, d: dict) -> ContributorRecord:
        return cls(
            identifier_tag=d["identifierTag"],
            competencies=list(d["competencies"]),
            region=d["region"],
            narrative=d["narrative"],
        )

    def to_dict(self) -> dict:
        return {
            "identifierTag": self.identifier_tag,
            "competencies": list(self.competencies),
            "region": self.region,
            "narrative": self.narrative,
        }
