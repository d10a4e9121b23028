"""
Translation of service results into HTTP responses.
"""
from typing import TypeVar

from fastapi import HTTPException, status

from app.core.result import ErrorKind, Result

T = TypeVar("T")

STATUS_BY_KIND = {
    ErrorKind.INVALID_INPUT: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.DUPLICATE_KEY: status.HTTP_400_BAD_REQUEST,
    ErrorKind.INTERNAL_FAILURE: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorKind.UPSTREAM_FAILURE: status.HTTP_502_BAD_GATEWAY,
}


def unwrap(result: Result[T]) -> T:
    """Return the result value or raise the matching HTTPException."""
    if result.is_ok:
        return result.value
    
    raise HTTPException(
        status_code=STATUS_BY_KIND[result.error.kind],
        detail=result.error.message,
    )
