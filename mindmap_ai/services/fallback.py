import logging
from typing import Awaitable, Callable, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def with_fallback(
    primary: Callable[[], Awaitable[T]],
    fallback: Callable[[], T],
    *,
    label: str,
) -> T:
    """
    Await `primary()`; if it raises anything, log it and return `fallback()`.
    The fallback is only built after the primary attempt has failed.
    """
    try:
        return await primary()
    except Exception as e:
        logger.warning(f"[{label}] AI generation failed, using fallback: {str(e)[:200]}")
    result = fallback()
    logger.info(f"[{label}] ✓ Fallback content served")
    return result
