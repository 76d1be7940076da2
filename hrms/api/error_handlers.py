"""
Error Handlers
==============

Global exception handlers for the employee API.

Request bodies that cannot be parsed into the record shape are reported as
400 Bad Request, not FastAPI's default 422. The rejected input is not echoed
back: it may hold values (NaN, Infinity) that are not valid JSON.
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


def register_error_handlers(application: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    
    @application.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        """Handle unparseable or malformed request bodies."""
        logger.warning(f"Validation error on {request.url.path}: {exc.errors()}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build the 400 body: location, message and type of each error."""
    return {
        "detail": [
            {
                "loc": [str(loc) for loc in e["loc"]],
                "msg": e["msg"],
                "type": e["type"],
            }
            for e in exc.errors()
        ]
    }
