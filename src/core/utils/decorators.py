"""
Utility decorators and helpers for common patterns.
"""

import logging
import time
from contextlib import contextmanager
from functools import wraps
from typing import Callable, Generator, TypeVar

from config import get_settings
from core.exceptions import EffectsException

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable)


@contextmanager
def timer() -> Generator[dict, None, None]:
    """
    Context manager to measure execution time.

    Usage:
        with timer() as t:
            # ... code to time ...
            pass
        print(f"Took {t['ms']}ms")

    Yields:
        Dictionary with 'ms' key containing processing time in milliseconds
    """
    result = {"ms": 0}
    start_time = time.time()
    try:
        yield result
    finally:
        result["ms"] = int((time.time() - start_time) * 1000)


def log_effect(func: F) -> F:
    """
    Decorator that logs an effect call and its duration.

    The first positional argument must be the image the effect works on.
    Engine exceptions propagate untouched; anything else is logged with
    its traceback before being re-raised.
    """

    @wraps(func)
    def wrapper(image, *args, **kwargs):
        with timer() as t:
            try:
                result = func(image, *args, **kwargs)
            except EffectsException:
                raise
            except Exception as e:
                logger.error(f"Effect {func.__name__} failed: {e}", exc_info=True)
                raise

        if get_settings().effects.log_timing:
            logger.debug(
                f"Applied {func.__name__} to {image.width}x{image.height} image in {t['ms']}ms"
            )
        return result

    return wrapper  # type: ignore[return-value]
