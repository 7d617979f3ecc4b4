"""Retry with exponential backoff for unreliable async operations."""

import asyncio
from dataclasses import dataclass
from functools import wraps
from typing import Any, Awaitable, Callable, List, TypeVar

from tenacity import AsyncRetrying, RetryCallState, stop_after_attempt, wait_exponential

from .config import AppSettings
from .lineup_logging import get_logger

logger = get_logger(__name__)

T = TypeVar('T')

DEFAULT_BASE_DELAY_MS = 1000
BACKOFF_MULTIPLIER = 2

Sleep = Callable[[float], Awaitable[Any]]


def backoff_delays(max_retries: int, base_delay_ms: int = DEFAULT_BASE_DELAY_MS) -> List[int]:
    """Waits in milliseconds before each retry, in order."""
    return [base_delay_ms * BACKOFF_MULTIPLIER ** i for i in range(max_retries)]


def _log_retry(name: str) -> Callable[[RetryCallState], None]:
    """Build a tenacity before_sleep hook that logs the failed attempt."""
    def before_sleep(retry_state: RetryCallState) -> None:
        error = retry_state.outcome.exception()
        logger.warning(
            "Operation failed, retrying",
            retry_name=name,
            attempt=retry_state.attempt_number,
            next_delay_ms=round(retry_state.next_action.sleep * 1000),
            error=str(error),
            exception_type=type(error).__name__,
        )
    return before_sleep


async def retry(
    max_retries: int,
    operation: Callable[[], Awaitable[T]],
    *,
    base_delay_ms: int = DEFAULT_BASE_DELAY_MS,
    sleep: Sleep = asyncio.sleep,
    name: str = "retry",
) -> T:
    """Run ``operation`` until it succeeds or the retry budget runs out.

    Every exception counts as retryable. The first retry waits
    ``base_delay_ms`` and each later one waits twice as long as the one
    before, with no jitter and no upper bound.

    Args:
        max_retries: Retries allowed after the first attempt.
        operation: Zero-argument callable returning an awaitable.
        base_delay_ms: Wait before the first retry, in milliseconds.
        sleep: Coroutine function used to wait, in seconds.
        name: Label attached to retry log events.

    Returns:
        The result of the first successful attempt.

    Raises:
        ValueError: If ``max_retries`` is negative.
        Exception: Whatever the final attempt raised, unchanged.
    """
    if max_retries < 0:
        raise ValueError(f"max_retries must be non-negative (got: {max_retries})")

    retrying = AsyncRetrying(
        stop=stop_after_attempt(max_retries + 1),
        wait=wait_exponential(multiplier=base_delay_ms / 1000.0, exp_base=BACKOFF_MULTIPLIER),
        before_sleep=_log_retry(name),
        sleep=sleep,
        reraise=True,
    )

    try:
        async for attempt in retrying:
            with attempt:
                result = await operation()
                if attempt.retry_state.attempt_number > 1:
                    logger.info(
                        "Operation succeeded after retry",
                        retry_name=name,
                        attempt=attempt.retry_state.attempt_number,
                    )
                return result
    except Exception as e:
        logger.error(
            "Operation failed after all retry attempts",
            retry_name=name,
            attempts=max_retries + 1,
            error=str(e),
            exception_type=type(e).__name__,
        )
        raise


@dataclass(frozen=True)
class RetryPolicy:
    """Reusable retry budget for fetch and submit calls."""

    max_retries: int = 3
    base_delay_ms: int = DEFAULT_BASE_DELAY_MS
    name: str = "retry"

    @classmethod
    def from_settings(cls, settings: AppSettings, name: str = "retry") -> "RetryPolicy":
        return cls(
            max_retries=settings.RETRY_MAX,
            base_delay_ms=settings.RETRY_BASE_DELAY_MS,
            name=name,
        )

    def delays(self) -> List[int]:
        return backoff_delays(self.max_retries, self.base_delay_ms)

    async def run(self, operation: Callable[[], Awaitable[T]], sleep: Sleep = asyncio.sleep) -> T:
        """Run an operation under this policy."""
        return await retry(
            self.max_retries,
            operation,
            base_delay_ms=self.base_delay_ms,
            sleep=sleep,
            name=self.name,
        )

    def __call__(self, func: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
        """Decorator adding this retry policy to an async function."""
        @wraps(func)
        async def wrapper(*args, **kwargs) -> T:
            return await self.run(lambda: func(*args, **kwargs))
        return wrapper
