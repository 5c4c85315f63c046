"""Error Handlers: map game platform failures onto the REST error envelope.

Invariants:
    - GamePlatformError → its own http_status and to_response() envelope
    - 4xx platform errors log at WARNING, 5xx at ERROR, with game_id/operation attached
    - RequestValidationError → 400 (not FastAPI's 422) with per-field details
    - Exception (catch-all) → 500 that never leaks internal details

Design Decisions:
    - Validation errors share the platform envelope shape (code/category/severity/timestamp)
      so clients parse one error format across every route
"""

import logging
from datetime import datetime, timezone

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from app.core.errors import (
    DataAccessError, ErrorCategory, ErrorSeverity, GamePlatformError,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(GamePlatformError, platform_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)


async def platform_error_handler(request: Request, exc: GamePlatformError):
    log = logger.warning if exc.http_status < 500 else logger.error
    extra = {
        "error_code": exc.code,
        "path": request.url.path,
        "game_id": exc.context.game_id,
        "operation": exc.context.operation,
    }
    if isinstance(exc, DataAccessError):
        log(f"{exc.message} (cause: {type(exc.cause).__name__})", extra=extra)
    else:
        log(exc.message, extra=extra)
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


async def validation_error_handler(request: Request, exc: RequestValidationError):
    details = [
        {
            "field": ".".join(str(loc) for loc in e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]
    logger.warning(
        f"Invalid request body: {[d['field'] for d in details]}",
        extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_envelope(
            "VALIDATION_ERROR", "Invalid request data",
            ErrorCategory.VALIDATION, ErrorSeverity.WARNING, details=details,
        ),
    )


async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error(
        f"Unhandled {type(exc).__name__}: {exc}", exc_info=True,
        extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_envelope(
            "INTERNAL_ERROR", "An unexpected error occurred",
            ErrorCategory.INTERNAL, ErrorSeverity.CRITICAL,
        ),
    )


def _envelope(
    code: str, message: str, category: ErrorCategory, severity: ErrorSeverity,
    **fields,
) -> dict:
    return {
        "error": {
            "code": code,
            "message": message,
            "category": category.value,
            "severity": severity.value,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            **fields,
        },
    }
