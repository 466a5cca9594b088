"""GitHub REST API adapter — implements the RepoFetcher port."""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

import httpx

from repo_exporter.domain.entities import (
    EntryKind,
    FetchedFile,
    RateLimitSignal,
    SkipReason,
    TreeEntry,
)
from repo_exporter.domain.exceptions import (
    ApiError,
    DecodeError,
    DecodeErrorKind,
    FileSkipped,
    MalformedTreeError,
    NetworkError,
)
from repo_exporter.domain.value_objects import RepositoryCoordinate
from repo_exporter.services.backoff import BackoffPolicy
from repo_exporter.services.content_decoder import TRANSPORT_ENCODING, decode

logger = logging.getLogger(__name__)

GITHUB_API = "https://api.github.com"
DEFAULT_USER_AGENT = "repo-exporter/1.0"
MAX_CONTENT_BYTES = 1_000_000

_THROTTLE_STATUSES = frozenset({403, 429})


class GitHubRestAdapter:
    """Concrete RepoFetcher backed by the GitHub v3 REST API.

    One request is in flight at a time; callers await each call in turn.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        token: str,
        *,
        api_url: str = GITHUB_API,
        user_agent: str = DEFAULT_USER_AGENT,
        max_content_bytes: int = MAX_CONTENT_BYTES,
        backoff: BackoffPolicy | None = None,
    ) -> None:
        self._client = client
        self._api_url = api_url.rstrip("/")
        self._max_content_bytes = max_content_bytes
        self._backoff = backoff or BackoffPolicy()
        self._headers: dict[str, str] = {
            "Accept": "application/vnd.github.v3+json",
            "Authorization": f"Bearer {token}",
            "User-Agent": user_agent,
        }

    # ── Tree listing ────────────────────────────────────────────────────

    async def fetch_tree(self, coord: RepositoryCoordinate) -> list[TreeEntry]:
        """GET /repos/{owner}/{repo}/git/trees/HEAD?recursive=1 → [TreeEntry]."""
        url = f"{self._repo_url(coord)}/git/trees/HEAD"
        try:
            resp = await self._client.get(
                url, headers=self._headers, params={"recursive": "1"}
            )
        except httpx.HTTPError as exc:
            raise NetworkError(f"Network error fetching {url}: {exc}") from exc

        if not resp.is_success:
            raise ApiError(resp.status_code, _error_message(resp))

        try:
            data = resp.json()
            items = data["tree"]
            entries = [_to_entry(item) for item in items]
        except (ValueError, KeyError, TypeError) as exc:
            raise MalformedTreeError(
                f"Unexpected tree response for {coord.full_name}: {exc}"
            ) from exc

        if data.get("truncated"):
            logger.warning(
                "Tree listing for %s was truncated by GitHub; some files are missing",
                coord.full_name,
            )
        return entries

    # ── File contents ───────────────────────────────────────────────────

    async def fetch_content(self, coord: RepositoryCoordinate, path: str) -> FetchedFile:
        """GET /repos/{owner}/{repo}/contents/{path} → FetchedFile.

        Raises :class:`FileSkipped` with the reason the file was left out.
        """
        url = f"{self._repo_url(coord)}/contents/" + quote(path, safe="/")
        retries = 0

        while True:
            try:
                request = self._client.build_request("GET", url, headers=self._headers)
                resp = await self._client.send(request, stream=True)
            except httpx.HTTPError as exc:
                logger.debug("Network error fetching %s: %s", path, exc)
                raise FileSkipped(path, SkipReason.TRANSIENT_ERROR, str(exc)) from exc

            try:
                if resp.status_code in _THROTTLE_STATUSES:
                    signal = RateLimitSignal.from_headers(resp.headers)
                    if self._backoff.should_pause(signal) and self._backoff.can_retry(retries):
                        retries += 1
                        await resp.aclose()
                        await self._backoff.pause()
                        continue
                    raise FileSkipped(
                        path,
                        SkipReason.FORBIDDEN,
                        f"HTTP {resp.status_code}, remaining={signal.remaining}",
                    )
                return await self._read_content(resp, path)
            finally:
                await resp.aclose()

    async def _read_content(self, resp: httpx.Response, path: str) -> FetchedFile:
        declared = _content_length(resp)
        if declared is not None and declared > self._max_content_bytes:
            raise FileSkipped(path, SkipReason.TOO_LARGE, f"{declared} bytes")

        if not resp.is_success:
            raise FileSkipped(path, SkipReason.TRANSIENT_ERROR, f"HTTP {resp.status_code}")

        try:
            await resp.aread()
        except httpx.HTTPError as exc:
            logger.debug("Network error reading %s: %s", path, exc)
            raise FileSkipped(path, SkipReason.TRANSIENT_ERROR, str(exc)) from exc

        try:
            payload: dict[str, Any] = resp.json()
            encoding = payload.get("encoding")
            raw = payload.get("content")
        except (ValueError, AttributeError) as exc:
            raise FileSkipped(path, SkipReason.DECODE_FAILED, f"bad payload: {exc}") from exc

        if encoding != TRANSPORT_ENCODING or not isinstance(raw, str):
            raise FileSkipped(path, SkipReason.DECODE_FAILED, f"encoding={encoding!r}")

        try:
            text = decode(raw)
        except DecodeError as exc:
            reason = (
                SkipReason.BINARY
                if exc.kind is DecodeErrorKind.NOT_TEXT
                else SkipReason.DECODE_FAILED
            )
            raise FileSkipped(path, reason, str(exc)) from exc

        return FetchedFile(path=path, content=text)

    def _repo_url(self, coord: RepositoryCoordinate) -> str:
        return f"{self._api_url}/repos/{coord.owner}/{coord.name}"


# ── Helpers ─────────────────────────────────────────────────────────────────


def _to_entry(item: dict[str, Any]) -> TreeEntry:
    return TreeEntry(path=item["path"], kind=EntryKind(item["type"]))


def _error_message(resp: httpx.Response) -> str | None:
    """Pull ``message`` out of a GitHub error body, if there is one."""
    try:
        body = resp.json()
    except ValueError:
        return None
    if isinstance(body, dict) and isinstance(body.get("message"), str):
        return body["message"]
    return None


def _content_length(resp: httpx.Response) -> int | None:
    raw = resp.headers.get("content-length")
    if raw is None:
        return None
    try:
        return int(raw)
    except ValueError:
        return None
