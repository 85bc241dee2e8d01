"""Exception handlers rendering every error as {"error", "message"}"""

import logging
from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from inspiration_list.errors import InspirationError, ValidationError

logger = logging.getLogger(__name__)

# Location prefixes FastAPI puts in front of the field name
_LOCATION_PARTS = {"body", "query", "path", "header"}


def _describe_validation_error(error: dict) -> str:
    field = ".".join(str(part) for part in error.get("loc", ()) if part not in _LOCATION_PARTS)
    message = error.get("msg", "is invalid")
    return f"{field}: {message}" if field else message


async def inspiration_error_handler(request: Request, exc: InspirationError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """FastAPI's 422 for malformed bodies or query params becomes our 400"""
    messages = [_describe_validation_error(err) for err in exc.errors()]
    error = ValidationError("; ".join(messages) or "Invalid request", messages)
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    try:
        label = HTTPStatus(exc.status_code).phrase
    except ValueError:
        label = "Error"
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": label, "message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(InspirationError, inspiration_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
