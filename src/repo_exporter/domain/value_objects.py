"""Value objects — self-validating domain primitives."""

from __future__ import annotations

from dataclasses import dataclass

from repo_exporter.domain.exceptions import InvalidRepositoryInputError

_GITHUB_PREFIXES: tuple[str, ...] = (
    "https://github.com/",
    "http://github.com/",
    "github.com/",
)


@dataclass(frozen=True, slots=True)
class RepositoryCoordinate:
    """Identifies one remote repository for the lifetime of an export run."""

    owner: str
    name: str

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.name}"

    def __str__(self) -> str:
        return self.full_name


def parse_owner_repo(text: str) -> RepositoryCoordinate:
    """Parse ``owner/repo`` (an optional ``.git`` suffix is dropped)."""
    text = text.strip()
    if "/" not in text:
        raise InvalidRepositoryInputError(
            f"Invalid format: '{text}'. "
            "Expected 'owner/repo' (e.g. 'octocat/hello-world')."
        )
    return _split_owner_repo(text)


def parse_github_url(text: str) -> RepositoryCoordinate:
    """Parse ``https://github.com/owner/repo`` and its short forms."""
    text = text.strip()
    for prefix in _GITHUB_PREFIXES:
        if text.startswith(prefix):
            return _split_owner_repo(text[len(prefix):].rstrip("/"))
    raise InvalidRepositoryInputError(
        f"Invalid GitHub URL: '{text}'. "
        "Expected format: https://github.com/<owner>/<repo>"
    )


def parse_repository_input(text: str) -> RepositoryCoordinate:
    """Accept either a GitHub URL or ``owner/repo``."""
    stripped = text.strip()
    if stripped.startswith(_GITHUB_PREFIXES):
        return parse_github_url(stripped)
    return parse_owner_repo(stripped)


def _split_owner_repo(path: str) -> RepositoryCoordinate:
    if path.endswith(".git"):
        path = path[: -len(".git")]
    parts = path.split("/")
    if len(parts) != 2:
        raise InvalidRepositoryInputError(
            "Invalid repository format. Expected 'owner/repo' or a GitHub URL."
        )
    owner, name = (p.strip() for p in parts)
    if not owner or not name:
        raise InvalidRepositoryInputError(
            "Owner and repository name cannot be empty."
        )
    return RepositoryCoordinate(owner=owner, name=name)
