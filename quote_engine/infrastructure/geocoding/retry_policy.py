from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from tenacity import AsyncRetrying, RetryCallState, retry_if_exception_type, stop_after_attempt

from quote_engine.application.exceptions import GeocoderUpstreamError

SleepFn = Callable[[float], Awaitable[None]]

logger = logging.getLogger(__name__)


def _log_retry(retry_state: RetryCallState) -> None:
    error = retry_state.outcome.exception() if retry_state.outcome else None
    delay = retry_state.next_action.sleep if retry_state.next_action else None
    logger.warning(
        "Geocoder attempt failed, retrying",
        extra={"attempt": retry_state.attempt_number, "delay": delay, "error": str(error)},
    )


@dataclass(frozen=True)
class RetryPolicy:
    """Attempts, backoff and per-attempt timeout for transport-level failures."""

    max_attempts: int = 3
    base_delay_seconds: float = 1.0
    timeout_seconds: float = 10.0

    def __post_init__(self) -> None:
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be >= 1")
        if self.base_delay_seconds < 0 or self.timeout_seconds <= 0:
            raise ValueError("delays must be >= 0 and timeout must be > 0")

    def delay_before(self, attempt_number: int) -> float:
        """Backoff slept after failed attempt ``attempt_number`` (1-based)."""
        return self.base_delay_seconds * 2 ** (attempt_number - 1)

    def _wait(self, retry_state: RetryCallState) -> float:
        return self.delay_before(retry_state.attempt_number)

    def retrying(self, sleep: SleepFn = asyncio.sleep) -> AsyncRetrying:
        return AsyncRetrying(
            sleep=sleep,
            stop=stop_after_attempt(self.max_attempts),
            wait=self._wait,
            retry=retry_if_exception_type(GeocoderUpstreamError),
            before_sleep=_log_retry,
            reraise=True,
        )
