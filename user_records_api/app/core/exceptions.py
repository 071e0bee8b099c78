"""
Domain exceptions and their HTTP mapping.

Services raise the exceptions defined here; the handlers installed by
``register_exception_handlers`` translate them into JSON responses.
Every error body carries a human readable ``detail`` and a machine
readable ``code``, plus any extra context the exception was given.

``StoreError`` is special: its message and cause are logged on the
server but the caller only ever sees an opaque 500 response.
"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class UserRecordsError(Exception):
    """Base exception for the User Records API."""

    def __init__(
        self,
        message: str,
        code: str = "USER_RECORDS_ERROR",
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert the exception to an API response body."""
        result: Dict[str, Any] = {"detail": self.message, "code": self.code}
        result.update(self.details)
        return result


class ValidationError(UserRecordsError):
    """Raised when a request lacks one or more required fields."""

    def __init__(self, missing_fields: List[str]):
        self.missing_fields = list(missing_fields)
        super().__init__(
            message=f"Missing required fields: {', '.join(self.missing_fields)}",
            code="VALIDATION_ERROR",
            status_code=status.HTTP_400_BAD_REQUEST,
            details={"missingFields": self.missing_fields},
        )


class NotFoundError(UserRecordsError):
    """Raised when no user exists for the given email."""

    def __init__(self, email: str):
        self.email = email
        super().__init__(
            message="User not found",
            code="USER_NOT_FOUND",
            status_code=status.HTTP_404_NOT_FOUND,
            details={"email": email},
        )


class ConflictError(UserRecordsError):
    """Raised when creating a user whose email is already taken."""

    def __init__(self, email: str):
        self.email = email
        super().__init__(
            message="User already exists",
            code="USER_EXISTS",
            status_code=status.HTTP_409_CONFLICT,
            details={"email": email},
        )


class StoreError(UserRecordsError):
    """Raised when the record store fails for an unclassified reason.

    ``message`` describes the failed operation for the server log; it is
    never sent to the client.
    """

    def __init__(self, message: str):
        super().__init__(
            message=message,
            code="INTERNAL_ERROR",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {"detail": "Internal server error", "code": self.code}


async def user_records_exception_handler(request: Request, exc: UserRecordsError) -> JSONResponse:
    """Convert a ``UserRecordsError`` into a JSON response."""
    if isinstance(exc, StoreError):
        logger.error(
            "Store failure on %s %s: %s",
            request.method,
            request.url.path,
            exc.message,
            exc_info=exc.__cause__ or exc,
        )
    else:
        logger.info("%s %s -> %s (%s)", request.method, request.url.path, exc.status_code, exc.code)
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def request_validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report unparsable or wrongly shaped request bodies as 400."""
    logger.info("%s %s -> 400 (malformed body): %s", request.method, request.url.path, exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Error parsing JSON", "code": "MALFORMED_REQUEST"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the domain exception handlers on ``app``."""
    app.add_exception_handler(UserRecordsError, user_records_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
