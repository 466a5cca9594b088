"""Markdown export — serialise a fetch outcome into a single document."""

from __future__ import annotations

import io
import logging
from datetime import datetime
from pathlib import Path

from repo_exporter.domain.entities import FetchOutcome
from repo_exporter.domain.value_objects import RepositoryCoordinate

logger = logging.getLogger(__name__)


def render_markdown(coord: RepositoryCoordinate, outcome: FetchOutcome) -> str:
    """Build the export document: a title, then one fenced section per file."""
    out = io.StringIO()
    out.write(f"# Repository Export: {coord.full_name}\n\n")
    for path, content in outcome.as_pairs():
        out.write(f"## {path}\n\n")
        out.write(f"```text\n{content}\n```\n")
    return out.getvalue()


def export_filename(coord: RepositoryCoordinate, now: datetime) -> str:
    return f"{coord.name}_repo_export_{now.strftime('%Y%m%d_%H%M%S')}.md"


def write_export(
    coord: RepositoryCoordinate,
    outcome: FetchOutcome,
    directory: Path,
    now: datetime | None = None,
) -> Path:
    """Write the markdown document into *directory* and return its path."""
    directory.mkdir(parents=True, exist_ok=True)
    target = directory / export_filename(coord, now or datetime.now())
    target.write_text(render_markdown(coord, outcome), encoding="utf-8")
    logger.info("Wrote %d file(s) to %s", len(outcome), target)
    return target
