"""Backoff policy — how to react to a throttled contents request."""

from __future__ import annotations

import asyncio
import logging

from repo_exporter.domain.entities import RateLimitSignal

logger = logging.getLogger(__name__)

DEFAULT_PAUSE_SECONDS = 60.0


class BackoffPolicy:
    """Fixed pause after a confirmed exhausted quota.

    Parameters
    ----------
    pause_seconds:
        How long to sleep once the remaining-call count reaches zero.
    max_retries:
        How many times the same file may be re-attempted after a pause.
    """

    def __init__(
        self,
        pause_seconds: float = DEFAULT_PAUSE_SECONDS,
        max_retries: int = 1,
    ) -> None:
        if pause_seconds < 0:
            raise ValueError("pause_seconds must not be negative")
        if max_retries < 0:
            raise ValueError("max_retries must not be negative")
        self.pause_seconds = pause_seconds
        self.max_retries = max_retries

    def should_pause(self, signal: RateLimitSignal) -> bool:
        """Only a confirmed ``remaining == 0`` warrants waiting.

        A missing or unreadable count is treated like a plain access denial.
        """
        return signal.is_exhausted

    def can_retry(self, attempts_so_far: int) -> bool:
        return attempts_so_far < self.max_retries

    async def pause(self) -> None:
        logger.warning(
            "GitHub rate limit exhausted, pausing for %.0f seconds", self.pause_seconds
        )
        await asyncio.sleep(self.pause_seconds)
