"""Port: progress listener — receives incremental reports during a run."""

from __future__ import annotations

from typing import Protocol

from repo_exporter.domain.entities import FetchedFile, SkipReason


class FetchListener(Protocol):
    def tree_fetched(self, total: int, eligible: int) -> None: ...

    def file_started(self, index: int, total: int, path: str) -> None: ...

    def file_fetched(self, file: FetchedFile) -> None: ...

    def file_skipped(self, path: str, reason: SkipReason) -> None: ...


class NullFetchListener:
    """Listener that ignores every event."""

    def tree_fetched(self, total: int, eligible: int) -> None:
        pass

    def file_started(self, index: int, total: int, path: str) -> None:
        pass

    def file_fetched(self, file: FetchedFile) -> None:
        pass

    def file_skipped(self, path: str, reason: SkipReason) -> None:
        pass
