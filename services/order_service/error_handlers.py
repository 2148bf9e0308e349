"""Maps every failure leaving the order API to one JSON envelope:

    {"timestamp", "status", "error", "message"[, "fieldErrors"]}

Order service errors get their status code from ERROR_STATUS_CODES.
Request parsing errors from FastAPI become 400s, and anything unhandled
becomes a 500 whose message never carries internal detail.
"""
from datetime import datetime, timezone
from http import HTTPStatus
from typing import Dict, Optional, Type

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from shared.observability import order_errors_total
from .errors import (
    InvalidEnumValueError,
    MissingParameterError,
    OrderNotFoundError,
    OrderServiceError,
    OrderValidationError,
)

logger = structlog.get_logger(__name__)

ERROR_STATUS_CODES: Dict[Type[OrderServiceError], int] = {
    OrderValidationError: 400,
    MissingParameterError: 400,
    InvalidEnumValueError: 400,
    OrderNotFoundError: 404,
}

UNEXPECTED_MESSAGE = "Unexpected error"


def status_code_for(exc: OrderServiceError) -> int:
    for cls in type(exc).__mro__:
        if cls in ERROR_STATUS_CODES:
            return ERROR_STATUS_CODES[cls]
    return 500


def error_body(
    status_code: int, message: str, field_errors: Optional[Dict[str, str]] = None
) -> dict:
    body = {
        "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
        "status": status_code,
        "error": HTTPStatus(status_code).phrase,
        "message": message,
    }
    if field_errors is not None:
        body["fieldErrors"] = field_errors
    return body


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(OrderServiceError, order_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)


async def order_error_handler(request: Request, exc: OrderServiceError):
    status_code = status_code_for(exc)
    field_errors = getattr(exc, "field_errors", None)
    order_errors_total.labels(kind=type(exc).__name__).inc()
    logger.warning(
        "request_rejected",
        kind=type(exc).__name__,
        path=request.url.path,
        status=status_code,
        detail=exc.message,
        field_errors=field_errors,
    )
    return JSONResponse(
        status_code=status_code,
        content=error_body(status_code, exc.message, field_errors),
    )


async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Unparseable or non-object bodies, malformed path or query values.

    Body fields themselves are checked by validate_create_order.
    """
    messages = []
    for err in exc.errors():
        loc = err.get("loc", ())
        if loc and loc[0] in ("path", "query"):
            messages.append(f"Invalid value for {loc[0]} parameter '{loc[-1]}': {err['msg']}")
        else:
            messages.append(f"Malformed request body: {err['msg']}")

    order_errors_total.labels(kind="RequestValidationError").inc()
    logger.warning("request_invalid", path=request.url.path, errors=exc.errors())

    body = error_body(400, "; ".join(messages) or "Invalid request")
    return JSONResponse(status_code=400, content=body)


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    # Unknown routes, wrong methods and the like
    message = exc.detail if isinstance(exc.detail, str) else HTTPStatus(exc.status_code).phrase
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(exc.status_code, message),
        headers=getattr(exc, "headers", None),
    )


async def unexpected_error_handler(request: Request, exc: Exception):
    order_errors_total.labels(kind="Unexpected").inc()
    logger.error(
        "unhandled_exception",
        path=request.url.path,
        exc_info=exc,
    )
    return JSONResponse(
        status_code=500,
        content=error_body(500, UNEXPECTED_MESSAGE),
    )
