import pytest

from repo_exporter.domain.value_objects import RepositoryCoordinate
from repo_exporter.infrastructure.config import Settings


@pytest.fixture
def coord() -> RepositoryCoordinate:
    return RepositoryCoordinate(owner="octocat", name="hello-world")


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        _env_file=None,
        github_token="test-token",
        pacing_delay_ms=0,
        rate_limit_pause_seconds=0,
        output_dir=tmp_path,
    )
