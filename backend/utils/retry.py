import asyncio
from typing import Callable, Any, Tuple, Type
from functools import wraps

from config import logger, RETRY_CONFIG
from config.constants import RetryConfig


def async_retry(
    exceptions: Tuple[Type[BaseException], ...],
    config: RetryConfig = RETRY_CONFIG,
):
    """
    Retry an async callable when it raises one of exceptions.

    Anything else propagates on the first attempt. After config.MAX_ATTEMPTS
    the last error is re-raised unchanged so callers can map it.
    """

    def decorator(func: Callable) -> Callable:
        @wraps(func)
        async def wrapper(*args, **kwargs) -> Any:
            for attempt in range(config.MAX_ATTEMPTS):
                try:
                    return await func(*args, **kwargs)
                except exceptions as e:
                    remaining = config.MAX_ATTEMPTS - attempt - 1
                    if not remaining:
                        logger.error(
                            "%s gave up after %d attempts: %s", func.__name__, config.MAX_ATTEMPTS, e
                        )
                        raise
                    delay = config.delay_for(attempt)
                    logger.warning(
                        "%s failed with %s, %d attempt(s) left, retrying in %.2fs",
                        func.__name__, type(e).__name__, remaining, delay,
                    )
                    await asyncio.sleep(delay)

        return wrapper
    return decorator
