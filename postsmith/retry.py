"""Exponential backoff retry decorator."""

import functools
import time

from .log import get_logger


def with_retry(max_retries: int = 3, base_delay: float = 2.0, exceptions=(Exception,), giveup=None):
    """Decorator: retry with exponential backoff on the given exception types.

    Delays: base_delay * 2^attempt. Exceptions outside `exceptions`, or for
    which `giveup(exc)` is true, propagate immediately.
    """
    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            logger = get_logger()
            for attempt in range(max_retries + 1):
                try:
                    return func(*args, **kwargs)
                except exceptions as e:
                    if attempt >= max_retries or (giveup is not None and giveup(e)):
                        logger.debug(
                            "%s failed after %d attempts: %s",
                            func.__name__, attempt + 1, e
                        )
                        raise
                    delay = base_delay * (2 ** attempt)
                    logger.debug(
                        "%s failed (attempt %d/%d): %s, retrying in %.1fs",
                        func.__name__, attempt + 1, max_retries + 1, e, delay
                    )
                    time.sleep(delay)
        return wrapper
    return decorator
