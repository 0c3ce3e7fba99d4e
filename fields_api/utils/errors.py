"""
Error Mapping

Converts failed query results into HTTP errors.
"""

from fastapi import HTTPException

from atomic_offchain import EmptyResultError, LookupFailure, MalformedResultError, Result


def raise_for_result(result: Result, action: str) -> None:
    """
    Raise an HTTPException for a failed result.

    EmptyResultError maps to 404, explorer lookup and payload errors to 502,
    anything else to 500.
    """
    if result.ok:
        return

    error = result.error
    if isinstance(error, EmptyResultError):
        raise HTTPException(status_code=404, detail=str(error))
    if isinstance(error, (LookupFailure, MalformedResultError)):
        raise HTTPException(status_code=502, detail=f"Explorer API error: {str(error)}")
    raise HTTPException(status_code=500, detail=f"Failed to {action}: {str(error)}")
