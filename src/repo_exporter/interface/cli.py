"""Command-line front end — interactive repository prompt plus export."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from collections.abc import Callable, Sequence
from pathlib import Path

from repo_exporter.domain.entities import FetchedFile, SkipReason
from repo_exporter.domain.exceptions import (
    ConfigurationError,
    InvalidRepositoryInputError,
    TreeFetchError,
)
from repo_exporter.domain.value_objects import (
    RepositoryCoordinate,
    parse_github_url,
    parse_owner_repo,
    parse_repository_input,
)
from repo_exporter.infrastructure.config import Settings, get_settings
from repo_exporter.infrastructure.factory import build_http_client, build_use_case
from repo_exporter.services.markdown_export import write_export

logger = logging.getLogger(__name__)

Reader = Callable[[str], str]
Writer = Callable[[str], None]

MENU = """\
Select input method:
  1. Enter full GitHub URL
  2. Enter in format 'owner/repo'
  3. Enter owner and repo separately
  4. Exit
"""

ERROR_SUGGESTIONS = """\

Possible causes:
  • Repository doesn't exist (check for typos)
  • Repository is private (check your GITHUB_TOKEN permissions)
  • Network issues or GitHub API is down
  • Rate limit exceeded"""

EXIT_OK = 0
EXIT_FETCH_FAILED = 1
EXIT_USAGE = 2
EXIT_EXPORT_FAILED = 3


class ConsoleFetchListener:
    """Prints progress lines as the run advances."""

    def __init__(self, write: Writer = print) -> None:
        self._write = write

    def tree_fetched(self, total: int, eligible: int) -> None:
        self._write(f"Found {eligible} files to process ({total} tree entries)")

    def file_started(self, index: int, total: int, path: str) -> None:
        self._write(f"Processing file {index}/{total}: {path}")

    def file_fetched(self, file: FetchedFile) -> None:
        pass

    def file_skipped(self, path: str, reason: SkipReason) -> None:
        self._write(f"  Skipped {path} ({reason.value})")


def prompt_for_repository(
    read: Reader = input, write: Writer = print
) -> RepositoryCoordinate | None:
    """Ask until a valid repository is entered; ``None`` means the user quit."""
    write(MENU)
    while True:
        try:
            choice = read("Choose an option (1-4): ").strip()
            if choice == "1":
                text = read("Enter the full GitHub URL: ").strip()
                if not text:
                    write("URL cannot be empty. Please try again.\n")
                    continue
                return parse_github_url(text)
            if choice == "2":
                text = read("Enter in format 'owner/repo': ").strip()
                if not text:
                    write("Input cannot be empty. Please try again.\n")
                    continue
                return parse_owner_repo(text)
            if choice == "3":
                owner = read("Enter GitHub username/organization: ").strip()
                if not owner:
                    write("Username/organization cannot be empty. Please try again.\n")
                    continue
                name = read("Enter repository name: ").strip()
                if not name:
                    write("Repository name cannot be empty. Please try again.\n")
                    continue
                return parse_owner_repo(f"{owner}/{name}")
            if choice == "4":
                write("Goodbye!")
                return None
            write("Invalid choice. Please enter 1, 2, 3, or 4.\n")
        except InvalidRepositoryInputError as exc:
            write(f"{exc} Please try again.\n")
        except EOFError:
            return None


async def run_export(
    coord: RepositoryCoordinate,
    settings: Settings,
    output_dir: Path,
    write: Writer = print,
) -> int:
    """Fetch *coord* and write the markdown export; return an exit code."""
    write(f"Fetching repository contents for {coord.full_name}...")
    async with build_http_client(settings) as client:
        use_case = build_use_case(settings, client, ConsoleFetchListener(write))
        try:
            outcome = await use_case.execute(coord)
        except TreeFetchError as exc:
            logger.debug("Tree fetch failed for %s", coord.full_name, exc_info=True)
            write(f"Failed to fetch repository: {exc}")
            write(ERROR_SUGGESTIONS)
            return EXIT_FETCH_FAILED

    if outcome.is_empty:
        write("No files found in the repository or all files were skipped.")
        return EXIT_OK

    try:
        target = write_export(coord, outcome, output_dir)
    except OSError as exc:
        logger.debug("Writing export to %s failed", output_dir, exc_info=True)
        write(f"Failed to write export to {output_dir}: {exc}")
        return EXIT_EXPORT_FAILED
    write(f"Export complete: {target}")
    return EXIT_OK


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="repo-exporter",
        description="Export a GitHub repository's text files into one Markdown document.",
    )
    p.add_argument(
        "repository",
        nargs="?",
        default=None,
        help="GitHub URL or owner/repo. Prompts interactively when omitted.",
    )
    p.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help="Directory for the export (defaults to OUTPUT_DIR or the cwd).",
    )
    return p.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)

    try:
        settings = get_settings()
    except ConfigurationError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return EXIT_USAGE

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
    )

    print("GitHub Repository Exporter")
    print("================================\n")

    if args.repository is not None:
        try:
            coord = parse_repository_input(args.repository)
        except InvalidRepositoryInputError as exc:
            print(str(exc), file=sys.stderr)
            return EXIT_USAGE
    else:
        coord = prompt_for_repository()
        if coord is None:
            return EXIT_OK

    output_dir = args.output_dir or settings.output_dir
    return asyncio.run(run_export(coord, settings, output_dir))


if __name__ == "__main__":
    sys.exit(main())
