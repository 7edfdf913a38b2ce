"""Validation — payload checks applied before a record is committed.

Two layers:
1. Capacity: every field has a declared maximum length (and lists a maximum
   element count). Records enforce it on construction and raise
   ``CapacityError``; an over-capacity payload is never an expected outcome.
2. Emptiness: pure predicates that reject empty strings and empty lists.
   Registries map a failed predicate to their own error code.
"""

from __future__ import annotations

from typing import Iterable, Sequence

DESIGNATION_MAX = 100
TAG_MAX = 50
REGION_MAX = 100
NARRATIVE_MAX = 500
COMPETENCY_MAX = 50
COMPETENCIES_MAX_COUNT = 10


class CapacityError(ValueError):
    """A field exceeds its declared capacity."""

    def __init__(self, field_name: str, limit: int, actual: int) -> None:
        self.field_name = field_name
        self.limit = limit
        self.actual = actual
        super().__init__(f"Field '{field_name}' exceeds capacity {limit} (got {actual})")


def enforce_text(field_name: str, value: str, limit: int) -> str:
    """Check a text field against its capacity. Returns the value."""
    if not isinstance(value, str):
        raise TypeError(f"Field '{field_name}' must be a string")
    if len(value) > limit:
        raise CapacityError(field_name, limit, len(value))
    return value


def enforce_tokens(
    field_name: str,
    tokens: Iterable[str],
    max_count: int = COMPETENCIES_MAX_COUNT,
    token_limit: int = COMPETENCY_MAX,
) -> list[str]:
    """Check a token list against its element count and per-token capacity.

    Returns the tokens as a new list.
    """
    if isinstance(tokens, str):
        raise TypeError(f"Field '{field_name}' must be a list of strings")
    items = list(tokens)
    if len(items) > max_count:
        raise CapacityError(field_name, max_count, len(items))
    for i, token in enumerate(items):
        enforce_text(f"{field_name}[{i}]", token, token_limit)
    return items


# ---------------------------------------------------------------------------
# Emptiness predicates
# ---------------------------------------------------------------------------


def all_present(texts: Sequence[str]) -> bool:
    """Return True if no string is empty."""
    return all(len(t) > 0 for t in texts)


def non_empty_tokens(tokens: Sequence[str]) -> bool:
    """Return True if the list has at least one element and none is empty."""
    return len(tokens) > 0 and all_present(tokens)


def is_valid_organization(designation: str, vertical_tag: str, region: str) -> bool:
    return all_present((designation, vertical_tag, region))


def is_valid_contributor(
    identifier_tag: str,
    competencies: Sequence[str],
    region: str,
    narrative: str,
) -> bool:
    return all_present((identifier_tag, region, narrative)) and non_empty_tokens(competencies)


def is_valid_requisition(
    role_designation: str,
    specification_summary: str,
    territory: str,
    required_competencies: Sequence[str],
) -> bool:
    return (
        all_present((role_designation, specification_summary, territory))
        and non_empty_tokens(required_competencies)
    )
