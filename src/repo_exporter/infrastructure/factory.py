"""Wiring helpers — build the adapter and use case from settings."""

from __future__ import annotations

import httpx

from repo_exporter.domain.ports.fetch_listener import FetchListener
from repo_exporter.infrastructure.config import Settings
from repo_exporter.infrastructure.github_rest_adapter import GitHubRestAdapter
from repo_exporter.services.backoff import BackoffPolicy
from repo_exporter.services.fetch_repo import FetchRepoUseCase


def build_http_client(settings: Settings) -> httpx.AsyncClient:
    return httpx.AsyncClient(timeout=httpx.Timeout(settings.request_timeout))


def build_use_case(
    settings: Settings,
    client: httpx.AsyncClient,
    listener: FetchListener | None = None,
) -> FetchRepoUseCase:
    """Assemble the fetch pipeline with values taken from *settings*."""
    adapter = GitHubRestAdapter(
        client=client,
        token=settings.github_token.get_secret_value(),
        api_url=settings.github_api_url,
        user_agent=settings.user_agent,
        max_content_bytes=settings.max_content_bytes,
        backoff=BackoffPolicy(pause_seconds=settings.rate_limit_pause_seconds),
    )
    return FetchRepoUseCase(
        repo_fetcher=adapter,
        pacing_seconds=settings.pacing_seconds,
        listener=listener,
    )
