"""Retry utilities for transport calls using tenacity.

Only transport-level failures are retried (connection errors, timeouts,
protocol errors). A response that arrived with an unexpected status code is
the server's answer and is never retried here.

Examples:
    Retry a best-effort DELETE on transport failure::

        >>> @with_retry(max_attempts=3, min_wait=0.5)
        ... async def delete(http: httpx.AsyncClient, url: str) -> httpx.Response:
        ...     return await http.delete(url)

    ``max_attempts=1`` makes the call single-shot::

        >>> @with_retry(max_attempts=1)
        ... async def create(http: httpx.AsyncClient) -> httpx.Response:
        ...     return await http.post("/game")
"""

import logging
from collections.abc import Callable

import httpx
from tenacity import (
    before_sleep_log,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

logger = logging.getLogger(__name__)


def with_retry[T](
    max_attempts: int = 3,
    min_wait: float = 1,
    max_wait: float = 10,
    extra_exceptions: tuple[type[Exception], ...] = (),
) -> Callable[[Callable[..., T]], Callable[..., T]]:
    """Decorator for retrying async functions with exponential backoff.

    Retries on httpx transport errors plus any additional exception types
    specified via extra_exceptions. The last exception is re-raised once
    attempts are exhausted.

    Args:
        max_attempts: Maximum number of attempts (1 disables retrying).
        min_wait: Minimum wait time between retries in seconds.
        max_wait: Maximum wait time between retries in seconds.
        extra_exceptions: Additional exception types to retry on.

    Returns:
        Decorator that wraps the function with retry logic.
    """
    if max_attempts < 1:
        raise ValueError(f"max_attempts must be >= 1, got {max_attempts}")

    retryable = (httpx.TransportError, *extra_exceptions)
    return retry(
        stop=stop_after_attempt(max_attempts),
        wait=wait_exponential(multiplier=1, min=min_wait, max=max(min_wait, max_wait)),
        retry=retry_if_exception_type(retryable),
        before_sleep=before_sleep_log(logger, logging.WARNING),
        reraise=True,
    )
