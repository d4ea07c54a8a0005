"""Error Handlers — every failure leaves the API as the uniform envelope.

Invariants:
    - SmartSalesError → its own http_status and rendered detail
    - RequestValidationError → 400 "Invalid request data" with a field → message map
    - Any other exception → 500 "An unexpected error occurred", no internals exposed

Design Decisions:
    - 4xx domain errors log at WARNING, 5xx at ERROR
    - Handlers are plain module functions so tests can call them directly
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from smartsales.core.envelope import error_envelope
from smartsales.core.errors import FieldErrors, SmartSalesError

logger = logging.getLogger(__name__)

_STRIPPED_LOCATIONS = ("body", "query", "path")


async def handle_domain_error(request: Request, exc: SmartSalesError) -> JSONResponse:
    logger.log(
        logging.ERROR if exc.http_status >= 500 else logging.WARNING,
        f"{type(exc).__name__}: {exc.message}",
        extra={
            "error_code": exc.code,
            "path": request.url.path,
            "method": request.method,
        },
    )
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


def validation_fields(exc: RequestValidationError) -> dict[str, str]:
    """First pydantic message per field, keyed by dotted location."""
    fields: dict[str, str] = {}
    for error in exc.errors():
        location = [str(part) for part in error["loc"] if part not in _STRIPPED_LOCATIONS]
        fields.setdefault(".".join(location) or "request", error["msg"])
    return fields


async def handle_request_validation(
    request: Request, exc: RequestValidationError,
) -> JSONResponse:
    fields = validation_fields(exc)
    logger.warning(
        f"Rejected request body: {', '.join(fields)}",
        extra={"path": request.url.path, "method": request.method},
    )
    return JSONResponse(
        status_code=400,
        content=error_envelope("Invalid request data", FieldErrors(fields)),
    )


async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        f"Unhandled exception: {exc}",
        exc_info=True,
        extra={"path": request.url.path, "method": request.method},
    )
    return JSONResponse(
        status_code=500, content=error_envelope("An unexpected error occurred"),
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(SmartSalesError, handle_domain_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation)
    app.add_exception_handler(Exception, handle_unexpected)
