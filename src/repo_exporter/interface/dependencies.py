"""FastAPI dependency injection wiring."""

from __future__ import annotations

import httpx

from repo_exporter.infrastructure.config import get_settings
from repo_exporter.infrastructure.factory import build_http_client, build_use_case
from repo_exporter.services.fetch_repo import FetchRepoUseCase

_http_client: httpx.AsyncClient | None = None


async def startup() -> None:
    """Initialise shared resources — called from the lifespan context manager."""
    global _http_client  # noqa: PLW0603

    _http_client = build_http_client(get_settings())


async def shutdown() -> None:
    """Release shared resources."""
    global _http_client  # noqa: PLW0603

    if _http_client:
        await _http_client.aclose()
        _http_client = None


def get_use_case() -> FetchRepoUseCase:
    """Build a use case around the shared HTTP client."""
    assert _http_client is not None, "startup() was not called"
    return build_use_case(get_settings(), _http_client)
