"""Translate registry ``Err`` outcomes into HTTP errors."""

from __future__ import annotations

from fastapi import HTTPException, status

from collabmesh.core.result import Err, ErrorCode, Result

# Payload rejected by a registry (capacity violations are rejected earlier by the schema)
_UNPROCESSABLE = 422

_STATUS = {
    ErrorCode.EntityNotFound: status.HTTP_404_NOT_FOUND,
    ErrorCode.ProfileAbsent: status.HTTP_404_NOT_FOUND,
    ErrorCode.DuplicateRegistration: status.HTTP_409_CONFLICT,
    ErrorCode.CompetencyMismatch: _UNPROCESSABLE,
    ErrorCode.TerritoryInvalid: _UNPROCESSABLE,
    ErrorCode.NarrativeIncomplete: _UNPROCESSABLE,
    ErrorCode.RequisitionMalformed: _UNPROCESSABLE,
}


def unwrap_or_raise(result: Result):
    """Return the success value, or raise the matching ``HTTPException``.

    The response detail carries the error kind and its declared code, so
    ``EntityNotFound`` and ``ProfileAbsent`` stay distinguishable.
    """
    if isinstance(result, Err):
        raise HTTPException(status_code=_STATUS[result.error], detail=result.to_dict())
    return result.value
