"""FastAPI exception handlers producing ``{"error": message}`` bodies."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from keyshorty.errors.exceptions import KeyShortyError, ValidationError
from keyshorty.models.common import ErrorResponse

logger = logging.getLogger(__name__)


def storage_error_message(exc: SQLAlchemyError) -> str:
    """Return the driver's own message for a storage exception."""
    orig = getattr(exc, "orig", None)
    return str(orig) if orig is not None else str(exc)


def _validation_message(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        msg = err.get("msg", "invalid value")
        parts.append(f"{loc}: {msg}" if loc else msg)
    return "; ".join(parts) or "Invalid request"


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(mode="json"),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all custom exception handlers on the FastAPI app."""

    @app.exception_handler(KeyShortyError)
    async def keyshorty_error_handler(request: Request, exc: KeyShortyError):
        logger.warning(
            "request_failed",
            extra={
                "path": request.url.path,
                "method": request.method,
                "trace_id": getattr(request.state, "trace_id", "unknown"),
                "code": exc.code,
                "reason": exc.message,
            },
        )
        return _error_response(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return await keyshorty_error_handler(request, ValidationError(_validation_message(exc)))

    @app.exception_handler(SQLAlchemyError)
    async def storage_error_handler(request: Request, exc: SQLAlchemyError):
        message = storage_error_message(exc)
        logger.warning(
            "storage_error",
            extra={
                "path": request.url.path,
                "method": request.method,
                "trace_id": getattr(request.state, "trace_id", "unknown"),
                "reason": message,
            },
        )
        return _error_response(400, message)
