"""
Error responses.

Every error body has a ``message`` key.  Write failures add an
``error`` key describing the cause, and request validation failures
list the individual pydantic errors under ``error``.

``register_exception_handlers`` installs the handlers on an
application:

* ``ApiError`` → its own status with ``{"message", "error"}``,
* ``HTTPException`` (404s, auth failures) → ``{"message": detail}``,
* ``RequestValidationError`` → 400 ``Invalid request data``.
"""

from typing import Any, Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException


class ApiError(Exception):
    """An error answered with ``{"message": ..., "error": ...}``."""

    def __init__(self, status_code: int, message: str, error: Optional[Any] = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.error = error


def error_body(message: str, error: Optional[Any] = None) -> dict:
    body = {"message": message}
    if error is not None:
        body["error"] = error
    return body


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=jsonable_encoder(error_body(exc.message, exc.error)))


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if isinstance(exc.detail, dict):
        content = exc.detail
    else:
        content = {"message": exc.detail}
    return JSONResponse(
        status_code=exc.status_code,
        content=jsonable_encoder(content),
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg"), "type": err.get("type")}
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=jsonable_encoder(error_body("Invalid request data", errors)),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
