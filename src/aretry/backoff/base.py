r"""Common definitions for backoff distributions."""

from __future__ import annotations

__all__ = ["BackoffDistribution", "to_millis"]

from collections.abc import Callable
from datetime import timedelta
from typing import TypeAlias

BackoffDistribution: TypeAlias = Callable[[timedelta], timedelta]
"""Function returning the next wait duration given the previous one.

The first wait of a retry run is computed from ``timedelta(0)``.
"""

_ONE_MILLISECOND = timedelta(milliseconds=1)


def to_millis(duration: timedelta) -> int:
    """Convert a duration to a whole number of milliseconds.

    Sub-millisecond precision is truncated toward negative infinity.

    Args:
        duration: The duration to convert.

    Returns:
        The number of milliseconds in ``duration``.

    Example:
        ```pycon
        >>> from datetime import timedelta
        >>> from aretry.backoff import to_millis
        >>> to_millis(timedelta(seconds=1, microseconds=1500))
        1001

        ```
    """
    return duration // _ONE_MILLISECOND
