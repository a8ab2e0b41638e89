"""Translation of domain errors into HTTP errors."""

import logfire
from fastapi import HTTPException, status

from commentary.domain.error import DomainError, ErrorKind

STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.INVALID_REFERENCE: status.HTTP_400_BAD_REQUEST,
    ErrorKind.VALIDATION_FAILED: 422,
    ErrorKind.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    ErrorKind.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorKind.INTERNAL: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def to_http_exception(error: Exception, action: str) -> HTTPException:
    """Map an error raised while handling a request to an HTTPException.

    Client errors keep the domain message. Internal errors and anything
    unexpected become a generic 500 so store details never leak.

    Args:
        error: The raised exception
        action: What the route was doing, e.g. "create comment"

    Returns:
        HTTPException to raise
    """
    if isinstance(error, DomainError) and error.kind is not ErrorKind.INTERNAL:
        logfire.warn(
            "Request rejected: {action}",
            action=action,
            kind=error.kind.value,
            error=str(error),
        )
        return HTTPException(status_code=STATUS_BY_KIND[error.kind], detail=str(error))

    logfire.error(
        "Unexpected error: {action}",
        action=action,
        error=str(error),
        error_type=type(error).__name__,
    )
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=f"Failed to {action}",
    )
