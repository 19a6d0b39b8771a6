"""
Request-level retry policy.

Bounded exponential backoff around a whole pipeline run. Only errors the
domain marks as retryable are attempted again.

Dependencies: tenacity, docqa.core.exceptions
System role: Retry wrapper at the HTTP boundary
"""

import logging
from typing import Any, Awaitable, Callable, TypeVar

from tenacity import (
    AsyncRetrying,
    before_sleep_log,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from docqa.core.exceptions import is_retryable

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def run_with_retries(
    func: Callable[..., Awaitable[T]],
    *args: Any,
    max_attempts: int = 3,
    initial_delay_s: float = 1.0,
    **kwargs: Any,
) -> T:
    """
    Await func until it succeeds, fails permanently, or attempts run out.

    The wait before attempt n+1 is initial_delay_s * 2**(n-1).

    Args:
        func: Coroutine function to run
        *args: Positional arguments for func
        max_attempts: Total attempts, the first included
        initial_delay_s: Wait before the second attempt
        **kwargs: Keyword arguments for func

    Returns:
        The result of func

    Raises:
        Exception: The last error raised by func
    """
    retrying = AsyncRetrying(
        retry=retry_if_exception(is_retryable),
        stop=stop_after_attempt(max_attempts),
        wait=wait_exponential(multiplier=initial_delay_s, min=0, max=60),
        before_sleep=before_sleep_log(logger, logging.WARNING),
        reraise=True,
    )
    return await retrying(func, *args, **kwargs)
