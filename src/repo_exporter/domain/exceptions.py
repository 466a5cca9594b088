"""Domain exception hierarchy.

Fatal errors derive from :class:`TreeFetchError` and abort an export run.
:class:`FileSkipped` is the per-file outcome that the use case catches and
reports without stopping.
"""

from __future__ import annotations

from enum import Enum

from repo_exporter.domain.entities import SkipReason


class RepoExporterError(Exception):
    """Base exception for the entire application."""


# ── Input / configuration ───────────────────────────────────────────────────


class InvalidRepositoryInputError(RepoExporterError):
    """The supplied text does not name a GitHub repository."""


class ConfigurationError(RepoExporterError):
    """Required configuration is missing or invalid."""


# ── Tree listing (fatal) ────────────────────────────────────────────────────


class TreeFetchError(RepoExporterError):
    """The repository tree could not be listed; the run cannot continue."""


class ApiError(TreeFetchError):
    """GitHub answered the tree request with a non-success status."""

    UNRECOGNIZED = "<unrecognized>"

    def __init__(self, status: int, message: str | None = None) -> None:
        self.status = status
        self.message = message or self.UNRECOGNIZED
        super().__init__(f"GitHub API error ({status}): {self.message}")


class NetworkError(TreeFetchError):
    """The tree endpoint could not be reached."""


class MalformedTreeError(TreeFetchError):
    """The tree response body was not the expected JSON document."""


# ── Per-file outcomes ───────────────────────────────────────────────────────


class FileSkipped(RepoExporterError):
    """A single file was left out of the export (never fatal)."""

    def __init__(self, path: str, reason: SkipReason, detail: str = "") -> None:
        self.path = path
        self.reason = reason
        self.detail = detail
        text = f"{path}: {reason.value}"
        if detail:
            text = f"{text} ({detail})"
        super().__init__(text)


class DecodeErrorKind(str, Enum):
    MALFORMED = "malformed"
    NOT_TEXT = "not_text"


class DecodeError(RepoExporterError):
    """A transport-encoded payload could not be turned into text."""

    def __init__(self, kind: DecodeErrorKind, detail: str = "") -> None:
        self.kind = kind
        super().__init__(detail or kind.value)
