"""Global exception handlers — translate domain errors to HTTP responses.

Each domain exception maps to a specific HTTP status code and the
standard ``{"status": "error", "message": "..."}`` envelope.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from repo_exporter.domain.exceptions import (
    ApiError,
    ConfigurationError,
    InvalidRepositoryInputError,
    RepoExporterError,
    TreeFetchError,
)

logger = logging.getLogger(__name__)

# Upstream statuses that are meaningful to the caller as-is.
_PASSTHROUGH_STATUSES = frozenset({401, 403, 404})

_EXCEPTION_STATUS: list[tuple[type[RepoExporterError], int]] = [
    (InvalidRepositoryInputError, 422),
    (ConfigurationError, 500),
    (TreeFetchError, 502),
]


def _error_json(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"status": "error", "message": message},
    )


def status_for(exc: RepoExporterError) -> int:
    """Return the HTTP status used to report *exc*."""
    if isinstance(exc, ApiError) and exc.status in _PASSTHROUGH_STATUSES:
        return exc.status
    for exc_type, code in _EXCEPTION_STATUS:
        if isinstance(exc, exc_type):
            return code
    return 500


def register_error_handlers(app: FastAPI) -> None:
    """Attach exception handlers to the FastAPI application."""

    @app.exception_handler(RepoExporterError)
    async def domain_handler(request: Request, exc: RepoExporterError) -> JSONResponse:
        logger.warning("%s: %s", type(exc).__name__, exc)
        return _error_json(status_for(exc), str(exc))

    @app.exception_handler(RequestValidationError)
    async def validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        messages = []
        for err in exc.errors():
            loc = " → ".join(str(p) for p in err.get("loc", []))
            messages.append(f"{loc}: {err.get('msg', 'validation error')}")
        return _error_json(422, "; ".join(messages))

    @app.exception_handler(Exception)
    async def generic_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled exception")
        return _error_json(500, "An unexpected error occurred. Please try again later.")
