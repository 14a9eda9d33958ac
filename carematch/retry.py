"""Exponential-backoff retries for the job feed client."""
from __future__ import annotations

import functools
import random
import time
from typing import Any, Callable, Tuple, Type

from carematch.log import get_logger

log = get_logger(__name__)

# Request Timeout, Too Many Requests and the transient 5xx family.
RETRYABLE_STATUS: frozenset[int] = frozenset({408, 429, 500, 502, 503, 504})


def should_retry_http_status(status_code: int) -> bool:
    return status_code in RETRYABLE_STATUS


def retry(
    *,
    max_attempts: int = 3,
    base_delay: float = 1.0,
    max_delay: float = 30.0,
    backoff_factor: float = 2.0,
    jitter: bool = True,
    retryable: Tuple[Type[BaseException], ...] = (Exception,),
    giveup: Callable[[BaseException], bool] | None = None,
) -> Callable:
    """Retry the wrapped call on *retryable* errors.

    *giveup*, when given, is asked about every caught error; returning True
    re-raises at once (e.g. a 404 from the feed is not worth retrying).
    """

    def decorator(fn: Callable) -> Callable:
        @functools.wraps(fn)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            for attempt in range(1, max_attempts + 1):
                try:
                    return fn(*args, **kwargs)
                except retryable as exc:
                    if giveup is not None and giveup(exc):
                        log.error("%s failed permanently: %s", fn.__qualname__, exc)
                        raise
                    if attempt >= max_attempts:
                        log.error(
                            "%s gave up after %d attempt(s): %s",
                            fn.__qualname__, attempt, exc,
                        )
                        raise
                    delay = min(base_delay * backoff_factor ** (attempt - 1), max_delay)
                    if jitter:
                        delay *= 0.5 + random.random()
                    log.warning(
                        "%s attempt %d/%d failed (%s), next try in %.1fs",
                        fn.__qualname__, attempt, max_attempts, exc, delay,
                    )
                    time.sleep(delay)
            raise RuntimeError(f"{fn.__qualname__}: max_attempts must be >= 1")

        return wrapper

    return decorator
