"""API routes — thin controllers that delegate to the use case."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from repo_exporter.domain.value_objects import parse_repository_input
from repo_exporter.interface.dependencies import get_use_case
from repo_exporter.interface.schemas import (
    ErrorResponse,
    ExportedFile,
    ExportRequest,
    ExportResponse,
)
from repo_exporter.services.fetch_repo import FetchRepoUseCase
from repo_exporter.services.markdown_export import render_markdown

router = APIRouter()


@router.post(
    "/export",
    response_model=ExportResponse,
    responses={
        422: {"model": ErrorResponse, "description": "Repository input could not be parsed"},
        401: {"model": ErrorResponse, "description": "Token rejected by GitHub"},
        403: {"model": ErrorResponse, "description": "Token lacks access to the repository"},
        404: {"model": ErrorResponse, "description": "Repository not found"},
        502: {"model": ErrorResponse, "description": "GitHub could not be reached or answered unexpectedly"},
    },
)
async def export(
    body: ExportRequest,
    use_case: FetchRepoUseCase = Depends(get_use_case),
) -> ExportResponse:
    """Fetch every eligible text file of a repository."""
    coord = parse_repository_input(body.repository)
    outcome = await use_case.execute(coord)
    return ExportResponse(
        owner=coord.owner,
        name=coord.name,
        file_count=len(outcome),
        files=[ExportedFile(path=f.path, content=f.content) for f in outcome],
        markdown=render_markdown(coord, outcome) if body.include_markdown else None,
    )
