"""Organization domain model."""

from __future__ import annotations

from dataclasses import dataclass

from collabmesh.core.validation import (
    DESIGNATION_MAX,
    REGION_MAX,
    TAG_MAX,
    enforce_text,
)


@dataclass
class OrganizationRecord:
    """Profile registered by an organization under its owner identity."""

    designation: str
    vertical_tag: str
    region: str

    def __post_init__(self) -> None:
        enforce_text("designation", self.designation, DESIGNATION_MAX)
        enforce_text("verticalTag", self.vertical_tag, TAG_MAX)
        enforce_text("region", self.region, REGION_MAX)

    @classmethod
    def from_dict(cls, d: dict) -> OrganizationRecord:
        return cls(
            designation=d["designation"],
            vertical_tag=d["verticalTag"],
            region=d["region"],
        )

    def to_dict(self) -> dict:
        return {
            "designation": self.designation,
            "verticalTag": self.vertical_tag,
            "region": self.region,
        }
