"""Retry decorator for GitHub API calls that run into rate limits.

Only rate limit failures are retried. Every other error propagates to the
caller on the first attempt.
"""

import asyncio
import functools
import inspect
import time
from typing import Any, Callable, TypeVar

import structlog
from githubkit.exception import PrimaryRateLimitExceeded, RequestFailed, SecondaryRateLimitExceeded

logger = structlog.get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def _wait_time_from_headers(exc: RequestFailed, fallback: float) -> float:
    """Derive how long to wait from the retry-after or x-ratelimit-reset headers."""
    headers = exc.response.headers
    retry_after = headers.get("retry-after")
    if retry_after:
        try:
            return float(retry_after)
        except ValueError:
            logger.warning("Invalid retry-after header value", retry_after=retry_after)
            return fallback

    rate_limit_reset = headers.get("x-ratelimit-reset")
    if rate_limit_reset:
        try:
            reset_timestamp = int(rate_limit_reset)
        except ValueError:
            logger.warning("Invalid x-ratelimit-reset header value", rate_limit_reset=rate_limit_reset)
            return fallback
        now = int(time.time())
        if reset_timestamp > now:
            return reset_timestamp - now + 1
    return fallback


def _is_rate_limit_failure(exc: RequestFailed) -> bool:
    status_code = exc.response.status_code
    if status_code == 429:
        return True
    return status_code == 403 and ("rate limit" in str(exc).lower() or exc.response.headers.get("x-ratelimit-remaining") == "0")


def retry_on_rate_limit(
    max_retries: int = 5,
    initial_delay: float = 10.0,
    max_delay: float = 300.0,
    exponential_base: float = 2.0,
) -> Callable[[F], F]:
    """Decorator for retrying async GitHub calls that hit a rate limit.

    Args:
        max_retries: Maximum number of retry attempts.
        initial_delay: Delay in seconds before the first retry when GitHub gives no hint.
        max_delay: Upper bound for any single wait.
        exponential_base: Multiplier applied to the fallback delay after each attempt.

    Returns:
        Decorated coroutine function with retry logic.
    """

    def decorator(func: F) -> F:
        if not inspect.iscoroutinefunction(func):
            raise TypeError(f"Function {func.__name__} decorated with @retry_on_rate_limit must be async.")

        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            delay = initial_delay
            for attempt in range(max_retries + 1):
                try:
                    return await func(*args, **kwargs)
                except (PrimaryRateLimitExceeded, SecondaryRateLimitExceeded) as exc:
                    if attempt == max_retries:
                        logger.error("Max retries reached for GitHub rate limit error", function=func.__name__, attempt=attempt + 1)
                        raise
                    if exc.retry_after:
                        wait_time = min(exc.retry_after.total_seconds(), max_delay)
                    else:
                        wait_time = min(delay, max_delay)
                    rate_limit_type = "primary" if isinstance(exc, PrimaryRateLimitExceeded) else "secondary"
                except RequestFailed as exc:
                    if not _is_rate_limit_failure(exc):
                        raise
                    if attempt == max_retries:
                        logger.error(
                            "Max retries reached for rate limit error",
                            function=func.__name__,
                            attempt=attempt + 1,
                            status_code=exc.response.status_code,
                        )
                        raise
                    wait_time = min(_wait_time_from_headers(exc, delay), max_delay)
                    rate_limit_type = f"http-{exc.response.status_code}"

                logger.warning(
                    "GitHub rate limit exceeded, waiting before retrying",
                    function=func.__name__,
                    rate_limit_type=rate_limit_type,
                    attempt=attempt + 1,
                    max_retries=max_retries,
                    wait_time=wait_time,
                )
                await asyncio.sleep(wait_time)
                delay = min(delay * exponential_base, max_delay)

        return wrapper  # type: ignore

    return decorator
