r"""Exponential backoff distribution."""

from __future__ import annotations

__all__ = ["exponential"]

import math
from datetime import timedelta
from typing import TYPE_CHECKING

from aretry.backoff.base import to_millis
from aretry.validation import validate_positive_duration

if TYPE_CHECKING:
    from aretry.backoff.base import BackoffDistribution

_MAX_MILLIS = to_millis(timedelta.max)


def exponential(first_wait: timedelta) -> BackoffDistribution:
    """Return a distribution whose waits are successive powers of the
    first wait, in milliseconds.

    Because this is exponential it grows *extremely* quickly, and
    ``first_wait`` is the time to the first retry, e.g.
    ``exponential(10ms)``: 10ms -> 100ms -> 1s -> 10s -> 100s.

    The distribution is stateless: the power reached so far is recovered
    from the previous wait with a logarithm, rounded to the nearest
    integer so floating point error cannot drift the sequence. A previous
    wait that is not an exact power (e.g. after jitter) snaps to the
    nearest one. Results are capped at ``timedelta.max``.

    Args:
        first_wait: The wait before the first retry. Must be at least one
            millisecond.

    Returns:
        The distribution.

    Raises:
        ValueError: If ``first_wait`` is shorter than one millisecond.

    Example:
        ```pycon
        >>> from datetime import timedelta
        >>> from aretry.backoff import exponential
        >>> distribution = exponential(timedelta(milliseconds=10))
        >>> distribution(timedelta(0))
        datetime.timedelta(microseconds=10000)
        >>> distribution(timedelta(milliseconds=10))
        datetime.timedelta(microseconds=100000)
        >>> distribution(timedelta(milliseconds=100))
        datetime.timedelta(seconds=1)

        ```
    """
    validate_positive_duration("first_wait", first_wait, minimum=timedelta(milliseconds=1))
    base = to_millis(first_wait)

    def next_wait(previous_wait: timedelta) -> timedelta:
        previous = to_millis(previous_wait)
        if previous <= 0 or base == 1:
            return first_wait
        iteration = round(math.log(previous) / math.log(base))
        return timedelta(milliseconds=min(base ** (iteration + 1), _MAX_MILLIS))

    return next_wait
