"""Domain entities — pure data structures with no external dependencies."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from enum import Enum

RATE_LIMIT_REMAINING_HEADER = "x-ratelimit-remaining"


class EntryKind(str, Enum):
    """Kind of an item returned by the git tree listing."""

    BLOB = "blob"
    TREE = "tree"
    COMMIT = "commit"  # submodule pointer
    OTHER = "other"

    @classmethod
    def _missing_(cls, value: object) -> EntryKind:
        return cls.OTHER


class SkipReason(str, Enum):
    """Why a blob was left out of the export."""

    TOO_LARGE = "too_large"
    BINARY = "binary"
    FORBIDDEN = "forbidden"
    DECODE_FAILED = "decode_failed"
    TRANSIENT_ERROR = "transient_error"


@dataclass(frozen=True, slots=True)
class TreeEntry:
    """A single node from the recursive tree listing."""

    path: str
    kind: EntryKind

    @property
    def is_blob(self) -> bool:
        return self.kind is EntryKind.BLOB


@dataclass(frozen=True, slots=True)
class FetchedFile:
    """A retrieved file whose content decoded cleanly as UTF-8 text."""

    path: str
    content: str


@dataclass(frozen=True, slots=True)
class FetchOutcome:
    """Ordered collection of fetched files handed to the exporter."""

    files: tuple[FetchedFile, ...] = ()

    def __len__(self) -> int:
        return len(self.files)

    def __iter__(self) -> Iterator[FetchedFile]:
        return iter(self.files)

    @property
    def is_empty(self) -> bool:
        return not self.files

    def as_pairs(self) -> list[tuple[str, str]]:
        """Return ``(path, content)`` pairs in fetch order."""
        return [(f.path, f.content) for f in self.files]


@dataclass(frozen=True, slots=True)
class RateLimitSignal:
    """Remaining-call count read from a throttled response."""

    remaining: int | None = None

    @classmethod
    def from_headers(cls, headers: Mapping[str, str]) -> RateLimitSignal:
        """Parse ``x-ratelimit-remaining``; missing or garbage yields ``None``."""
        raw = headers.get(RATE_LIMIT_REMAINING_HEADER)
        if raw is None:
            return cls()
        try:
            return cls(remaining=int(raw.strip()))
        except ValueError:
            return cls()

    @property
    def is_exhausted(self) -> bool:
        return self.remaining == 0
