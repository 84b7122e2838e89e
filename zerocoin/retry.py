"""
Bounded Retry

Search loops that draw fresh candidates until one is acceptable share the
same shape; ``first_accepted`` is that shape.
"""

import logging
from typing import Callable, TypeVar

from .errors import ExhaustionError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def first_accepted(
    candidate: Callable[[int], T],
    accept: Callable[[T], bool],
    max_attempts: int,
    what: str = "candidate",
) -> T:
    """
    Return the first candidate that passes ``accept``.

    Args:
        candidate: Called with the attempt index to produce a fresh candidate
        accept: Acceptance predicate
        max_attempts: Upper bound on calls to ``candidate``
        what: Name used in log and error messages

    Returns:
        The first accepted candidate

    Raises:
        ValueError: If max_attempts is not positive
        ExhaustionError: If no candidate is accepted within max_attempts

    Example:
        >>> first_accepted(lambda i: i * i, lambda v: v > 10, max_attempts=10)
        16
    """
    if max_attempts <= 0:
        raise ValueError("max_attempts must be positive")

    for attempt in range(max_attempts):
        value = candidate(attempt)
        if accept(value):
            logger.debug(f"Found {what} after {attempt + 1} attempt(s)")
            return value

    logger.warning(f"No acceptable {what} within {max_attempts} attempts")
    raise ExhaustionError(f"Unable to find a {what} (too many attempts: {max_attempts})")
