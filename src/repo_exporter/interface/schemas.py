"""Pydantic request / response DTOs for the API boundary."""

from __future__ import annotations

from pydantic import BaseModel, field_validator


class ExportRequest(BaseModel):
    """Request body for ``POST /export``."""

    repository: str
    include_markdown: bool = True

    @field_validator("repository")
    @classmethod
    def _must_not_be_empty(cls, v: str) -> str:
        stripped = v.strip()
        if not stripped:
            msg = "repository must not be empty."
            raise ValueError(msg)
        return stripped


class ExportedFile(BaseModel):
    path: str
    content: str


class ExportResponse(BaseModel):
    """Successful response from ``POST /export``."""

    owner: str
    name: str
    file_count: int
    files: list[ExportedFile]
    markdown: str | None = None


class ErrorResponse(BaseModel):
    """Standard error envelope returned on all failure paths."""

    status: str = "error"
    message: str
