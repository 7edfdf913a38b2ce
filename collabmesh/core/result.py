"""Result contract returned by every registry operation.

Callers branch on the variant (``Ok`` vs ``Err``) instead of catching
exceptions for the expected outcomes: not found, duplicate, invalid.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar, Union

T = TypeVar("T")


class ErrorCode(str, Enum):
    """Failure kinds shared by the three registries."""

    EntityNotFound = "EntityNotFound"
    DuplicateRegistration = "DuplicateRegistration"
    CompetencyMismatch = "CompetencyMismatch"  # reserved, never produced
    TerritoryInvalid = "TerritoryInvalid"
    NarrativeIncomplete = "NarrativeIncomplete"
    RequisitionMalformed = "RequisitionMalformed"
    ProfileAbsent = "ProfileAbsent"

    @property
    def code(self) -> int:
        """Return the declared numeric code.

        ``EntityNotFound`` and ``ProfileAbsent`` share 404 but remain
        distinct kinds.
        """
        return {
            ErrorCode.EntityNotFound: 404,
            ErrorCode.DuplicateRegistration: 409,
            ErrorCode.CompetencyMismatch: 400,
            ErrorCode.TerritoryInvalid: 401,
            ErrorCode.NarrativeIncomplete: 402,
            ErrorCode.RequisitionMalformed: 403,
            ErrorCode.ProfileAbsent: 404,
        }[self]


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome carrying a value."""

    value: T

    @property
    def is_ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err:
    """Failed outcome carrying an error code."""

    error: ErrorCode

    @property
    def is_ok(self) -> bool:
        return False

    def unwrap(self) -> Any:
        raise ValueError(f"Called unwrap() on Err({self.error.value})")

    def to_dict(self) -> dict:
        return {"error": self.error.value, "code": self.error.code}


Result = Union[Ok[T], Err]
