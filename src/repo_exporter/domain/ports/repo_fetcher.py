"""Port: repository fetcher — defined by the domain, implemented by infrastructure."""

from __future__ import annotations

from typing import Protocol

from repo_exporter.domain.entities import FetchedFile, TreeEntry
from repo_exporter.domain.value_objects import RepositoryCoordinate


class RepoFetcher(Protocol):
    """Abstract contract for listing and reading a remote repository."""

    async def fetch_tree(self, coord: RepositoryCoordinate) -> list[TreeEntry]:
        """Return the recursive listing of the default branch.

        Raises :class:`~repo_exporter.domain.exceptions.TreeFetchError`.
        """
        ...

    async def fetch_content(self, coord: RepositoryCoordinate, path: str) -> FetchedFile:
        """Return one decoded text file.

        Raises :class:`~repo_exporter.domain.exceptions.FileSkipped`.
        """
        ...
