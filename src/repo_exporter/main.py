from __future__ import annotations
import logging
import sys
import uvicorn
from repo_exporter.domain.exceptions import ConfigurationError
from repo_exporter.infrastructure.config import get_settings

def main() -> None:
    """Start the uvicorn ASGI server."""
    try:
        settings = get_settings()
    except ConfigurationError as exc:
        sys.exit(f"Configuration error: {exc}")
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
    )
    uvicorn.run(
        "repo_exporter.interface.app:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
