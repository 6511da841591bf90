"""
Error taxonomy shared by the service layer and the HTTP layer.

Services raise one of the ``MarketplaceError`` subclasses below; the
application installs exception handlers (see ``register_exception_handlers``)
that turn them into a JSON body of the form::

    {"error": "conflict", "detail": "Username already taken"}

with the matching HTTP status code.  Request validation failures raised
by FastAPI itself are reported with the same shape as ``InvalidInput``.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


logger = logging.getLogger(__name__)


class MarketplaceError(Exception):
    """Base class for errors that map onto an HTTP response."""

    status_code: int = status.HTTP_400_BAD_REQUEST
    code: str = "error"

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail


class NotFound(MarketplaceError):
    status_code = status.HTTP_404_NOT_FOUND
    code = "not_found"


class Conflict(MarketplaceError):
    status_code = status.HTTP_409_CONFLICT
    code = "conflict"


class Unauthorized(MarketplaceError):
    status_code = status.HTTP_401_UNAUTHORIZED
    code = "unauthorized"


class InvalidInput(MarketplaceError):
    status_code = 422
    code = "invalid_input"


def error_body(code: str, detail: Any) -> dict:
    return {"error": code, "detail": detail}


async def marketplace_error_handler(request: Request, exc: MarketplaceError) -> JSONResponse:
    logger.warning("%s %s -> %s: %s", request.method, request.url.path, exc.code, exc.detail)
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, Unauthorized) else None
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(exc.code, exc.detail),
        headers=headers,
    )


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning("%s %s -> invalid_input", request.method, request.url.path)
    # The offending input is not echoed: it may not be JSON serialisable (inf, nan).
    errors = [
        {"loc": err.get("loc"), "msg": err.get("msg"), "type": err.get("type")}
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=InvalidInput.status_code,
        content=error_body(InvalidInput.code, jsonable_encoder(errors)),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the error taxonomy handlers to ``app``."""
    app.add_exception_handler(MarketplaceError, marketplace_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
