r"""Constant backoff distribution."""

from __future__ import annotations

__all__ = ["constant"]

from typing import TYPE_CHECKING

from aretry.validation import validate_non_negative_duration

if TYPE_CHECKING:
    from datetime import timedelta

    from aretry.backoff.base import BackoffDistribution


def constant(interval: timedelta) -> BackoffDistribution:
    """Return a distribution that always waits the same interval.

    The previous wait is ignored, e.g. ``constant(1s)``: 1s -> 1s -> 1s.

    This distribution is a poor fit for ``to_max_wait``: it either stops
    before the first retry or never stops on wait time.

    Args:
        interval: The fixed wait between two attempts.

    Returns:
        The distribution.

    Raises:
        ValueError: If ``interval`` is negative.

    Example:
        ```pycon
        >>> from datetime import timedelta
        >>> from aretry.backoff import constant
        >>> distribution = constant(timedelta(seconds=2))
        >>> distribution(timedelta(0))
        datetime.timedelta(seconds=2)
        >>> distribution(timedelta(minutes=5))
        datetime.timedelta(seconds=2)

        ```
    """
    validate_non_negative_duration("interval", interval)

    def next_wait(previous_wait: timedelta) -> timedelta:  # noqa: ARG001
        return interval

    return next_wait
