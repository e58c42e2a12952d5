r"""Linear backoff distribution."""

from __future__ import annotations

__all__ = ["linear"]

from datetime import timedelta
from typing import TYPE_CHECKING

from aretry.validation import validate_non_negative_duration

if TYPE_CHECKING:
    from aretry.backoff.base import BackoffDistribution


def linear(increase: timedelta) -> BackoffDistribution:
    """Return a distribution that grows the wait by a fixed amount.

    Calculates the next wait as: previous + increase, e.g.
    ``linear(1s)``: 1s -> 2s -> 3s -> 4s. Results are capped at
    ``timedelta.max``.

    Args:
        increase: The amount added to the previous wait.

    Returns:
        The distribution.

    Raises:
        ValueError: If ``increase`` is negative.

    Example:
        ```pycon
        >>> from datetime import timedelta
        >>> from aretry.backoff import linear
        >>> distribution = linear(timedelta(milliseconds=5))
        >>> distribution(timedelta(0))
        datetime.timedelta(microseconds=5000)
        >>> distribution(timedelta(milliseconds=5))
        datetime.timedelta(microseconds=10000)

        ```
    """
    validate_non_negative_duration("increase", increase)

    def next_wait(previous_wait: timedelta) -> timedelta:
        try:
            return previous_wait + increase
        except OverflowError:
            return timedelta.max

    return next_wait
