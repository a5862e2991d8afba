"""
Error kinds surfaced by the resource handlers.

Only two domain conditions are distinguished at the HTTP boundary:
a duplicate key on create and a missing key on read/update/delete.
Everything else collapses into a generic internal failure that keeps
the original message text.  A single exception type carries the kind;
``integration_error_handler`` turns it into a JSON response.
"""

import enum
import logging

from fastapi import Request, status
from fastapi.responses import JSONResponse


logger = logging.getLogger(__name__)


class ErrorKind(str, enum.Enum):
    ALREADY_EXISTS = "ALREADY_EXISTS"
    NOT_FOUND = "NOT_FOUND"
    INTERNAL = "INTERNAL_ERROR"


STATUS_BY_KIND = {
    ErrorKind.ALREADY_EXISTS: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.INTERNAL: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


class IntegrationError(Exception):
    """Failure raised by a resource handler.

    ``kind`` decides the HTTP status, ``message`` becomes the
    ``detail`` field of the response body.
    """

    def __init__(self, kind: ErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message

    @classmethod
    def already_exists(cls, message: str) -> "IntegrationError":
        return cls(ErrorKind.ALREADY_EXISTS, message)

    @classmethod
    def not_found(cls, message: str) -> "IntegrationError":
        return cls(ErrorKind.NOT_FOUND, message)

    @classmethod
    def internal(cls, message: str) -> "IntegrationError":
        return cls(ErrorKind.INTERNAL, message)

    @property
    def status_code(self) -> int:
        return STATUS_BY_KIND[self.kind]

    def to_dict(self) -> dict:
        return {"detail": self.message, "code": self.kind.value}


async def integration_error_handler(request: Request, exc: IntegrationError) -> JSONResponse:
    """Render an ``IntegrationError`` as ``{"detail": ..., "code": ...}``."""
    if exc.kind is ErrorKind.INTERNAL:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())
