from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from repo_exporter.domain.entities import FetchedFile, FetchOutcome, SkipReason
from repo_exporter.domain.exceptions import ApiError, ConfigurationError
from repo_exporter.domain.value_objects import RepositoryCoordinate
from repo_exporter.interface import cli


def _scripted(*answers: str):
    replies = iter(answers)

    def read(prompt: str) -> str:
        try:
            return next(replies)
        except StopIteration:
            raise EOFError from None

    return read


## Interactive prompt
# ------------------------------

def test_prompt_accepts_url():
    out: list[str] = []
    coord = cli.prompt_for_repository(_scripted("1", "https://github.com/a/b"), out.append)
    assert coord == RepositoryCoordinate("a", "b")


def test_prompt_accepts_owner_repo_after_invalid_choice():
    out: list[str] = []
    coord = cli.prompt_for_repository(_scripted("9", "2", "a/b"), out.append)

    assert coord == RepositoryCoordinate("a", "b")
    assert any("Invalid choice" in line for line in out)


def test_prompt_separate_owner_and_repo_reprompts_on_empty():
    out: list[str] = []
    coord = cli.prompt_for_repository(_scripted("3", "", "3", "octo", "repo"), out.append)

    assert coord == RepositoryCoordinate("octo", "repo")
    assert any("cannot be empty" in line for line in out)


def test_prompt_reprompts_after_parse_error():
    out: list[str] = []
    coord = cli.prompt_for_repository(_scripted("1", "https://example.com/x", "2", "a/b"), out.append)

    assert coord == RepositoryCoordinate("a", "b")
    assert any("Invalid GitHub URL" in line for line in out)


@pytest.mark.parametrize("answers", [("4",), ()])
def test_prompt_exit_or_eof_returns_none(answers):
    assert cli.prompt_for_repository(_scripted(*answers), lambda _: None) is None


## Export run
# ------------------------------

def _fake_use_case(outcome=None, error=None):
    use_case = MagicMock()
    use_case.execute = AsyncMock(return_value=outcome, side_effect=error)
    return use_case


@pytest.mark.asyncio
async def test_run_export_writes_markdown(coord, settings, tmp_path):
    outcome = FetchOutcome(files=(FetchedFile("a.txt", "hello"),))
    out: list[str] = []
    with patch.object(cli, "build_use_case", return_value=_fake_use_case(outcome)):
        code = await cli.run_export(coord, settings, tmp_path, out.append)

    assert code == cli.EXIT_OK
    exports = list(tmp_path.glob("hello-world_repo_export_*.md"))
    assert len(exports) == 1
    assert "## a.txt" in exports[0].read_text(encoding="utf-8")
    assert out[-1].startswith("Export complete:")


@pytest.mark.asyncio
async def test_run_export_empty_outcome_writes_nothing(coord, settings, tmp_path):
    out: list[str] = []
    with patch.object(cli, "build_use_case", return_value=_fake_use_case(FetchOutcome())):
        code = await cli.run_export(coord, settings, tmp_path, out.append)

    assert code == cli.EXIT_OK
    assert not list(tmp_path.iterdir())
    assert "No files found" in out[-1]


@pytest.mark.asyncio
async def test_run_export_fatal_error_prints_causes(coord, settings, tmp_path):
    out: list[str] = []
    with patch.object(cli, "build_use_case", return_value=_fake_use_case(error=ApiError(404, "Not Found"))):
        code = await cli.run_export(coord, settings, tmp_path, out.append)

    assert code == cli.EXIT_FETCH_FAILED
    assert any("Failed to fetch repository" in line for line in out)
    assert "Possible causes" in out[-1]
    assert not list(tmp_path.iterdir())


@pytest.mark.asyncio
async def test_run_export_unwritable_output_dir_reports_failure(coord, settings, tmp_path):
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("", encoding="utf-8")
    outcome = FetchOutcome(files=(FetchedFile("a.txt", "hello"),))
    out: list[str] = []
    with patch.object(cli, "build_use_case", return_value=_fake_use_case(outcome)):
        code = await cli.run_export(coord, settings, blocker / "exports", out.append)

    assert code == cli.EXIT_EXPORT_FAILED
    assert out[-1].startswith("Failed to write export to")


def test_console_listener_reports_progress():
    out: list[str] = []
    listener = cli.ConsoleFetchListener(out.append)
    listener.tree_fetched(5, 2)
    listener.file_started(1, 2, "a.txt")
    listener.file_skipped("b.bin", SkipReason.TOO_LARGE)

    assert out == [
        "Found 2 files to process (5 tree entries)",
        "Processing file 1/2: a.txt",
        "  Skipped b.bin (too_large)",
    ]


## Entry point
# ------------------------------

def test_main_without_token_exits_with_usage_error(capsys):
    with patch.object(cli, "get_settings", side_effect=ConfigurationError("GITHUB_TOKEN environment variable not set")):
        assert cli.main(["a/b"]) == cli.EXIT_USAGE
    assert "GITHUB_TOKEN" in capsys.readouterr().err


def test_main_rejects_invalid_repository(settings):
    with patch.object(cli, "get_settings", return_value=settings):
        assert cli.main(["not-a-repo"]) == cli.EXIT_USAGE


def test_main_runs_export_for_argument(settings, tmp_path):
    run = AsyncMock(return_value=cli.EXIT_OK)
    with patch.object(cli, "get_settings", return_value=settings), patch.object(cli, "run_export", run):
        assert cli.main(["github.com/a/b", "--output-dir", str(tmp_path)]) == cli.EXIT_OK

    coord, passed_settings, output_dir = run.await_args.args
    assert coord == RepositoryCoordinate("a", "b")
    assert passed_settings is settings
    assert output_dir == tmp_path
