from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from repo_exporter.domain.entities import FetchedFile, FetchOutcome
from repo_exporter.domain.exceptions import ApiError, NetworkError
from repo_exporter.interface.app import create_app
from repo_exporter.interface.dependencies import get_use_case


@pytest.fixture
def use_case():
    mock = MagicMock()
    mock.execute = AsyncMock(
        return_value=FetchOutcome(files=(FetchedFile("src/lib.rs", "pub fn x() {}"),))
    )
    return mock


@pytest.fixture
def client(use_case):
    app = create_app()
    app.dependency_overrides[get_use_case] = lambda: use_case
    return TestClient(app)


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_export_returns_files_and_markdown(client, use_case):
    resp = client.post("/export", json={"repository": "https://github.com/octo/repo"})

    assert resp.status_code == 200
    data = resp.json()
    assert data["owner"] == "octo"
    assert data["name"] == "repo"
    assert data["file_count"] == 1
    assert data["files"] == [{"path": "src/lib.rs", "content": "pub fn x() {}"}]
    assert data["markdown"].startswith("# Repository Export: octo/repo")
    use_case.execute.assert_awaited_once()


def test_export_without_markdown(client):
    resp = client.post("/export", json={"repository": "octo/repo", "include_markdown": False})
    assert resp.status_code == 200
    assert resp.json()["markdown"] is None


@pytest.mark.parametrize("repository", ["", "no-slash-here"])
def test_export_rejects_bad_repository(client, repository):
    resp = client.post("/export", json={"repository": repository})
    assert resp.status_code == 422
    assert resp.json()["status"] == "error"


@pytest.mark.parametrize(
    ("error", "status"),
    [
        (ApiError(404, "Not Found"), 404),
        (ApiError(401, "Bad credentials"), 401),
        (ApiError(500), 502),
        (NetworkError("connection refused"), 502),
    ],
)
def test_export_maps_fatal_errors(client, use_case, error, status):
    use_case.execute.side_effect = error
    resp = client.post("/export", json={"repository": "octo/repo"})

    assert resp.status_code == status
    assert resp.json() == {"status": "error", "message": str(error)}
