"""Service-level errors mapped one-to-one onto HTTP status codes."""

from __future__ import annotations

from fastapi import status


class ServiceError(Exception):
    """Base class for request failures; rendered as an empty response."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str = "") -> None:
        super().__init__(message or self.__class__.__name__)
        self.message = message


class BadRequestError(ServiceError):
    status_code = status.HTTP_400_BAD_REQUEST


class UnauthorizedError(ServiceError):
    status_code = status.HTTP_401_UNAUTHORIZED


class ForbiddenError(ServiceError):
    status_code = status.HTTP_403_FORBIDDEN


class NotFoundError(ServiceError):
    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(ServiceError):
    # Taken user names are reported as 422 rather than 409.
    status_code = 422


class PayloadTooLargeError(ServiceError):
    status_code = 413
