r"""Multiplicative backoff distribution."""

from __future__ import annotations

__all__ = ["multiplicative"]

from datetime import timedelta
from typing import TYPE_CHECKING

from aretry.validation import validate_non_negative_duration, validate_positive_int

if TYPE_CHECKING:
    from aretry.backoff.base import BackoffDistribution


def multiplicative(initial: timedelta, factor: int) -> BackoffDistribution:
    """Return a distribution that multiplies the previous wait.

    The factor is an integer so that whole units of time come out of the
    multiplication, e.g. ``multiplicative(10ms, 2)``: 10ms -> 20ms -> 40ms.
    Results are capped at ``timedelta.max``.

    Args:
        initial: The wait returned when the previous wait is zero or
            negative, i.e. before the first retry.
        factor: The multiplication factor applied to the previous wait.

    Returns:
        The distribution.

    Raises:
        ValueError: If ``factor`` is not a positive int or ``initial`` is
            negative.

    Example:
        ```pycon
        >>> from datetime import timedelta
        >>> from aretry.backoff import multiplicative
        >>> distribution = multiplicative(timedelta(milliseconds=10), 2)
        >>> distribution(timedelta(0))
        datetime.timedelta(microseconds=10000)
        >>> distribution(timedelta(milliseconds=10))
        datetime.timedelta(microseconds=20000)

        ```
    """
    validate_positive_int("factor", factor)
    validate_non_negative_duration("initial", initial)

    def next_wait(previous_wait: timedelta) -> timedelta:
        if previous_wait <= timedelta(0):
            return initial
        try:
            return previous_wait * factor
        except OverflowError:
            return timedelta.max

    return next_wait
