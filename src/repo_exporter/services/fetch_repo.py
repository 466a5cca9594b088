"""Fetch-repository use case — the main orchestration pipeline.

Lists the tree once, filters it, then reads eligible files strictly one at a
time in listing order.  Only a tree failure ends the run; every per-file
problem is reported and the file is dropped.
"""

from __future__ import annotations

import asyncio
import logging

from repo_exporter.domain.entities import FetchedFile, FetchOutcome
from repo_exporter.domain.exceptions import FileSkipped
from repo_exporter.domain.ports.fetch_listener import FetchListener, NullFetchListener
from repo_exporter.domain.ports.repo_fetcher import RepoFetcher
from repo_exporter.domain.value_objects import RepositoryCoordinate
from repo_exporter.services.path_filter import select_eligible

logger = logging.getLogger(__name__)

DEFAULT_PACING_SECONDS = 0.1


class FetchRepoUseCase:
    """Orchestrates tree discovery → filtering → per-file retrieval.

    Parameters
    ----------
    repo_fetcher:
        Adapter that lists the tree and reads single files.
    pacing_seconds:
        Delay after every file attempt, whatever its outcome.
    listener:
        Receives incremental progress and skip reports.
    """

    def __init__(
        self,
        repo_fetcher: RepoFetcher,
        pacing_seconds: float = DEFAULT_PACING_SECONDS,
        listener: FetchListener | None = None,
    ) -> None:
        self._fetcher = repo_fetcher
        self._pacing = pacing_seconds
        self._listener = listener or NullFetchListener()

    async def execute(self, coord: RepositoryCoordinate) -> FetchOutcome:
        """Run the pipeline; :class:`TreeFetchError` propagates unchanged."""
        logger.info("Fetching repository tree for %s", coord.full_name)
        entries = await self._fetcher.fetch_tree(coord)

        eligible = select_eligible(entries)
        logger.info(
            "%d of %d tree entries eligible for %s",
            len(eligible),
            len(entries),
            coord.full_name,
        )
        self._listener.tree_fetched(len(entries), len(eligible))

        files: list[FetchedFile] = []
        total = len(eligible)
        for index, entry in enumerate(eligible, start=1):
            self._listener.file_started(index, total, entry.path)
            try:
                fetched = await self._fetcher.fetch_content(coord, entry.path)
            except FileSkipped as skip:
                logger.info("Skipped %s (%s) %s", skip.path, skip.reason.value, skip.detail)
                self._listener.file_skipped(entry.path, skip.reason)
            else:
                files.append(fetched)
                self._listener.file_fetched(fetched)
            await asyncio.sleep(self._pacing)

        logger.info(
            "Fetched %d file(s) from %s (%d skipped)",
            len(files),
            coord.full_name,
            total - len(files),
        )
        return FetchOutcome(files=tuple(files))
