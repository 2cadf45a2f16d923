"""Helper utilities shared across API route handlers."""

from fastapi import HTTPException, status

from christ_collective.domain.errors import (
    ForbiddenError,
    LedgerError,
    NotFoundError,
    UnknownNotificationTypeError,
)

NOTIFICATION_NOT_AVAILABLE = "Notification not found or not yours"


def http_error_from(exc: LedgerError, *, detail: str | None = None) -> HTTPException:
    """Translate a domain error into the matching ``HTTPException``.

    ``detail`` overrides the error text, e.g. so that a missing notification
    and someone else's notification read the same to the client.
    """

    if isinstance(exc, NotFoundError):
        code = status.HTTP_404_NOT_FOUND
    elif isinstance(exc, ForbiddenError):
        code = status.HTTP_403_FORBIDDEN
    elif isinstance(exc, UnknownNotificationTypeError):
        return HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        )
    else:
        code = status.HTTP_409_CONFLICT
    return HTTPException(status_code=code, detail=detail or str(exc))


def bad_request(exc: ValueError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
