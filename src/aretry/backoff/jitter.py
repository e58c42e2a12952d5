r"""Jitter decorator for backoff distributions."""

from __future__ import annotations

__all__ = ["jitter"]

import logging
import random
from datetime import timedelta
from typing import TYPE_CHECKING

from aretry.backoff.base import to_millis
from aretry.validation import validate_positive_int

if TYPE_CHECKING:
    from aretry.backoff.base import BackoffDistribution

logger: logging.Logger = logging.getLogger(__name__)


def jitter(
    distribution: BackoffDistribution,
    max_jitter_millis: int,
    rng: random.Random | None = None,
) -> BackoffDistribution:
    """Decorate a distribution with a random extra delay.

    Jitter stops retried requests from many independent callers firing at
    the same time and overloading (or getting rate-limited by) the target.

    The extra delay is drawn uniformly from
    ``[0, min(max(next_ms, 1), max_jitter_millis))`` milliseconds, where
    ``next_ms`` is the wait returned by the decorated distribution. The
    bound is at least one millisecond so a zero wait still gets jitter
    applied, although the drawn value is then always zero.

    Args:
        distribution: The distribution to decorate.
        max_jitter_millis: Upper bound (exclusive) of the extra delay in
            milliseconds.
        rng: Optional random source. Defaults to a new private
            ``random.Random`` owned by the returned distribution.

    Returns:
        The decorated distribution.

    Raises:
        ValueError: If ``max_jitter_millis`` is not a positive int.

    Example:
        ```pycon
        >>> import random
        >>> from datetime import timedelta
        >>> from aretry.backoff import constant, jitter
        >>> distribution = jitter(constant(timedelta(milliseconds=50)), 10, random.Random(0))
        >>> wait = distribution(timedelta(0))
        >>> timedelta(milliseconds=50) <= wait < timedelta(milliseconds=60)
        True

        ```
    """
    validate_positive_int("max_jitter_millis", max_jitter_millis)
    source = rng if rng is not None else random.Random()  # noqa: S311

    def next_wait(previous_wait: timedelta) -> timedelta:
        wait = distribution(previous_wait)
        bound = min(max(to_millis(wait), 1), max_jitter_millis)
        extra = source.randrange(bound)
        logger.debug(f"Adding {extra}ms of jitter to a wait of {wait}")
        return wait + timedelta(milliseconds=extra)

    return next_wait
