"""Application configuration — loaded from environment variables."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import SecretStr, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from repo_exporter.domain.exceptions import ConfigurationError


class Settings(BaseSettings):
    """Central configuration loaded from env vars (or ``.env`` file)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    github_token: SecretStr
    github_api_url: str = "https://api.github.com"
    user_agent: str = "repo-exporter/1.0"
    request_timeout: float = 30.0
    pacing_delay_ms: int = 100
    rate_limit_pause_seconds: float = 60.0
    max_content_bytes: int = 1_000_000
    output_dir: Path = Path(".")
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8000

    @property
    def pacing_seconds(self) -> float:
        return self.pacing_delay_ms / 1000


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the singleton application settings (cached after first call)."""
    try:
        return Settings()  # type: ignore[call-arg]
    except ValidationError as exc:
        if any(err.get("loc") == ("github_token",) for err in exc.errors()):
            raise ConfigurationError("GITHUB_TOKEN environment variable not set") from exc
        raise ConfigurationError(f"Invalid configuration: {exc}") from exc
