"""Error Handlers — global exception handlers, the single HTTP translation point.

Invariants:
    - EntityError → translated ValidationError → 400 fail envelope
    - ForumError → its http_status with {"status": "fail"|"error", "message"}
    - RequestValidationError (unparseable body) → 400 fail envelope
    - Exception (catch-all) → 500 error envelope, never leaks internal details
    - ForumErrors logged at WARNING when their severity is WARNING, else ERROR, with
      code, category, and context (user_id, resource_id)

Design Decisions:
    - Handlers registered from one function so main.py stays a wiring file
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from forum.api.error_translation import translate_entity_error
from forum.core.errors import EntityError, ErrorSeverity, ForumError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_entity_error_handler(app)
    _register_forum_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def forum_error_response(request: Request, exc: ForumError) -> JSONResponse:
    """Log at the error's severity with its context, then render it."""
    log = logger.warning if exc.severity is ErrorSeverity.WARNING else logger.error
    log(
        f"{type(exc).__name__}: {exc.message}",
        extra={
            "error_code": exc.code,
            "error_category": exc.category.value,
            "path": request.url.path,
            "user_id": exc.context.user_id,
            "resource_id": exc.context.resource_id,
        },
    )
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


def _register_entity_error_handler(app: FastAPI) -> None:

    @app.exception_handler(EntityError)
    async def entity_error_handler(request: Request, exc: EntityError):
        return forum_error_response(request, translate_entity_error(exc))


def _register_forum_error_handler(app: FastAPI) -> None:

    @app.exception_handler(ForumError)
    async def forum_error_handler(request: Request, exc: ForumError):
        return forum_error_response(request, exc)


def _register_validation_error_handler(app: FastAPI) -> None:
    """Malformed bodies (non-JSON, JSON that is not an object) never reach entities."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "status": "fail",
                "message": "request payload must be a JSON object",
            },
        )


def _register_http_error_handler(app: FastAPI) -> None:
    """Unknown routes and wrong methods keep the envelope shape."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"status": "fail", "message": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all. Never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "status": "error",
                "message": "An unexpected error occurred on our server",
            },
        )
