"""Mapping of domain errors onto HTTP responses."""

import logfire
from fastapi import HTTPException, status

from newsfeed.domain.error import (
    DomainError,
    ForbiddenError,
    InconsistentError,
    InvalidArgumentError,
    InvalidStateError,
    NotFoundError,
    UnauthenticatedError,
)

_STATUS_CODES: list[tuple[type[DomainError], int]] = [
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (InvalidArgumentError, status.HTTP_400_BAD_REQUEST),
    (InvalidStateError, status.HTTP_400_BAD_REQUEST),
    (UnauthenticatedError, status.HTTP_401_UNAUTHORIZED),
    (ForbiddenError, status.HTTP_403_FORBIDDEN),
]


def to_http_exception(error: DomainError) -> HTTPException:
    """Translate a domain error into the HTTP error the caller sees.

    Caller errors keep their message. Integrity failures are logged and
    reported as a generic internal error.

    Args:
        error: Error raised by a use case

    Returns:
        HTTPException to raise from the route
    """
    if isinstance(error, InconsistentError):
        logfire.error("Data integrity failure", error=str(error))
        return HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal error",
        )

    for error_type, status_code in _STATUS_CODES:
        if isinstance(error, error_type):
            return HTTPException(status_code=status_code, detail=str(error))

    logfire.error("Unmapped domain error", error=str(error))
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="Internal error",
    )
