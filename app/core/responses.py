import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.constants import SERVER_ERROR_MESSAGE

logger = logging.getLogger(__name__)

_UNSET = object()
# Blank strings surface as "missing" or fail min_length=1 after stripping.
_MISSING_ERROR_TYPES = ("missing", "string_too_short")


def envelope(data=_UNSET, changes: int | None = None) -> dict:
    """Success envelope: ``{success, data?, changes?}``."""
    body = {"success": True}
    if changes is not None:
        body["changes"] = changes
    if data is not _UNSET:
        body["data"] = jsonable_encoder(data)
    return body


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "message": message},
    )


def describe_validation_errors(errors) -> str:
    missing = []
    invalid = []
    for error in errors:
        loc = [part for part in error.get("loc", ()) if part not in ("body", "query", "path")]
        field = ".".join(str(part) for part in loc) or "body"
        if error.get("type") in _MISSING_ERROR_TYPES:
            if field not in missing:
                missing.append(field)
        elif field not in invalid:
            invalid.append(field)

    parts = []
    if missing:
        parts.append("Missing required fields: {}".format(", ".join(missing)))
    if invalid:
        parts.append("Invalid fields: {}".format(", ".join(invalid)))
    return "; ".join(parts) or "Invalid request"


async def _validation_error_handler(_request: Request, exc: RequestValidationError):
    return error_response(400, describe_validation_errors(exc.errors()))


async def _http_error_handler(_request: Request, exc: StarletteHTTPException):
    return error_response(exc.status_code, str(exc.detail))


async def _server_error_handler(request: Request, exc: Exception):
    logger.error(
        "Request failed: %s %s",
        request.method,
        request.url.path,
        exc_info=(type(exc), exc, exc.__traceback__),
        extra={"method": request.method, "path": request.url.path},
    )
    return error_response(500, SERVER_ERROR_MESSAGE)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, _validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, _http_error_handler)
    app.add_exception_handler(SQLAlchemyError, _server_error_handler)
    app.add_exception_handler(Exception, _server_error_handler)


__all__ = [
    "describe_validation_errors",
    "envelope",
    "error_response",
    "register_exception_handlers",
]
