"""
HTTP Error Mapping
==================
Turns auth failures into the JSON envelope clients render.

Known failures keep their message; anything else is logged and replaced
by a generic message so internals never reach the client.
"""

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
import structlog

from altrivo_core.exceptions import AuthServiceError

logger = structlog.get_logger(__name__)

GENERIC_ERROR_MESSAGE = "Something went wrong, please try again"


def to_http_exception(exc: AuthServiceError) -> HTTPException:
    """HTTPException carrying the error envelope as ``detail``."""
    return HTTPException(status_code=exc.status_code, detail=exc.to_dict())


def error_response(exc: Exception) -> JSONResponse:
    """JSONResponse for any exception raised inside an auth handler."""
    if isinstance(exc, AuthServiceError):
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    logger.error("Unhandled auth error", error=str(exc), error_type=type(exc).__name__)
    return JSONResponse(status_code=500, content={"error": GENERIC_ERROR_MESSAGE})


def register_exception_handlers(app: FastAPI) -> None:
    """Install the auth and catch-all error handlers on a FastAPI app."""

    @app.exception_handler(AuthServiceError)
    async def _handle_auth_error(request: Request, exc: AuthServiceError) -> JSONResponse:
        logger.info(
            "Auth request failed",
            method=request.method,
            path=request.url.path,
            code=exc.code,
        )
        return error_response(exc)

    @app.exception_handler(Exception)
    async def _handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        return error_response(exc)
