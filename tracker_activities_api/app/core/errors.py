"""
Error types and the exception handlers that shape failure responses.

Services raise ``TrackerError`` subclasses for validation and business
rule failures; the handlers registered by ``register_exception_handlers``
turn them into ``{"error": ...}`` JSON bodies.  Database faults that no
service classified are logged with their traceback and reported to the
client as a generic failure, so internal details never leave the
server.
"""

import logging
import sqlite3
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"
ROUTE_NOT_FOUND_MESSAGE = "Route not found"


class TrackerError(Exception):
    """Base class for errors reported to the client."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"error": self.message}
        if self.details is not None:
            body["details"] = self.details
        return body


class InvalidParameterError(TrackerError):
    """A request parameter is missing or violates its rule."""


class BusinessRuleError(TrackerError):
    """A referenced record does not exist or does not match."""


class DuplicateQualificationError(TrackerError):
    """The student already has a qualification for the activity."""

    status_code = status.HTTP_409_CONFLICT


class IntegrityKind:
    FOREIGN_KEY = "foreign_key"
    UNIQUE = "unique"
    OTHER = "other"


def classify_integrity_error(exc: sqlite3.IntegrityError) -> str:
    """Tell foreign key and unique violations apart from SQLite's message."""
    text = str(exc).upper()
    if "FOREIGN KEY" in text:
        return IntegrityKind.FOREIGN_KEY
    if "UNIQUE" in text:
        return IntegrityKind.UNIQUE
    return IntegrityKind.OTHER


async def tracker_error_handler(request: Request, exc: TrackerError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.debug("Rejected request body on %s: %s", request.url.path, exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "Invalid request body"},
    )


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        message = ROUTE_NOT_FOUND_MESSAGE
    else:
        message = str(exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": message},
        headers=getattr(exc, "headers", None),
    )


async def database_error_handler(request: Request, exc: sqlite3.Error) -> JSONResponse:
    logger.error("Database error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": INTERNAL_ERROR_MESSAGE},
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": INTERNAL_ERROR_MESSAGE},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the handlers producing the uniform error envelope."""
    app.add_exception_handler(TrackerError, tracker_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(sqlite3.Error, database_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
