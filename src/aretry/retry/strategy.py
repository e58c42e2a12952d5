r"""Retry strategies for resubmitting asynchronous requests.

This module provides the ``RetryStrategy`` base class, its three
variants and the factories used to build them.
"""

from __future__ import annotations

__all__ = [
    "Dont",
    "MaxRetries",
    "MaxWait",
    "RetryStrategy",
    "dont",
    "to_max_retries",
    "to_max_wait",
]

import asyncio
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import timedelta
from typing import TYPE_CHECKING, TypeVar

from aretry.either import Either
from aretry.exceptions import RetryInterruptedError, add_suppressed
from aretry.issue import Issue, exception_thrown
from aretry.validation import validate_max_retries, validate_positive_duration

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from aretry.backoff.base import BackoffDistribution

Q = TypeVar("Q")
R = TypeVar("R")

logger: logging.Logger = logging.getLogger(__name__)


class RetryStrategy(ABC):
    """Strategy to retry a request until an implementation-specific exit
    criterion is met.

    A strategy performs one nominal submission of the request followed
    by the number of retries it allows. Sending the initial request is
    delegated to the strategy rather than done by the caller.

    Strategies are immutable and hold no per-run state, so one instance
    can drive any number of concurrent runs.
    """

    @abstractmethod
    async def retry_if_necessary(
        self, request: Q, submit: Callable[[Q], Awaitable[R]]
    ) -> R:
        """Submit the request and retry it on failure.

        The request is passed alongside the submission function (instead
        of a zero-argument callable) so ``submit`` can be wrapped to
        modify the request between attempts.

        Args:
            request: The request to submit. It is opaque to the strategy
                and resubmitted as is.
            submit: Async function sending one request.

        Returns:
            The result of the first successful submission.

        Raises:
            Exception: The failure of the initial submission, with the
                failures of every retry suppressed on it in order.
            asyncio.CancelledError: If the run is cancelled while waiting
                between two attempts. The original error is re-raised
                with a ``RetryInterruptedError`` suppressed on it, see
                ``aretry.exceptions.get_interruption``.
        """

    async def retry_as_either(
        self, request: Q, submit: Callable[[Q], Awaitable[R]]
    ) -> Either[R, Issue]:
        """Run ``retry_if_necessary`` and encode its outcome as an
        ``Either``.

        Args:
            request: The request to submit.
            submit: Async function sending one request.

        Returns:
            ``Either.of_left(result)`` on success, or
            ``Either.of_right(issue)`` wrapping the final failure.
        """
        try:
            return Either.of_left(await self.retry_if_necessary(request, submit))
        except Exception as exc:
            return Either.of_right(exception_thrown(exc, "Retries exhausted without success."))


@dataclass(frozen=True)
class Dont(RetryStrategy):
    """Strategy that never retries.

    The request is submitted once and its outcome is passed through
    unchanged.
    """

    async def retry_if_necessary(
        self, request: Q, submit: Callable[[Q], Awaitable[R]]
    ) -> R:
        return await submit(request)


@dataclass(frozen=True)
class MaxRetries(RetryStrategy):
    """Strategy that retries up to a maximum number of times.

    Args:
        distribution: The distribution spacing out the retries.
        max_retries: The maximum number of retries after the initial
            submission. Total submissions = max_retries + 1.

    Raises:
        ValueError: If ``max_retries`` is negative.
    """

    distribution: BackoffDistribution
    max_retries: int

    def __post_init__(self) -> None:
        validate_max_retries(self.max_retries)

    async def retry_if_necessary(
        self, request: Q, submit: Callable[[Q], Awaitable[R]]
    ) -> R:
        return await _retry_until(
            request,
            submit,
            self.distribution,
            lambda retry, wait: retry > self.max_retries,  # noqa: ARG005
        )


@dataclass(frozen=True)
class MaxWait(RetryStrategy):
    """Strategy that retries until the wait before the next retry is
    longer than a maximum.

    The stop condition is checked on the next computed wait before
    sleeping, so it depends on the distribution: with ``constant`` it
    either triggers before the first retry or never.

    Args:
        distribution: The distribution spacing out the retries.
        max_wait: The longest wait still followed by a retry.

    Raises:
        ValueError: If ``max_wait`` is zero or negative.
    """

    distribution: BackoffDistribution
    max_wait: timedelta

    def __post_init__(self) -> None:
        validate_positive_duration("max_wait", self.max_wait)

    @staticmethod
    def wait_too_long(wait: timedelta, max_wait: timedelta) -> bool:
        """Return whether ``wait`` is strictly longer than ``max_wait``.

        Example:
            ```pycon
            >>> from datetime import timedelta
            >>> from aretry.retry import MaxWait
            >>> MaxWait.wait_too_long(timedelta(minutes=3), timedelta(minutes=2))
            True
            >>> MaxWait.wait_too_long(timedelta(minutes=2), timedelta(minutes=2))
            False

            ```
        """
        return wait > max_wait

    async def retry_if_necessary(
        self, request: Q, submit: Callable[[Q], Awaitable[R]]
    ) -> R:
        return await _retry_until(
            request,
            submit,
            self.distribution,
            lambda retry, wait: self.wait_too_long(wait, self.max_wait),  # noqa: ARG005
        )


async def _retry_until(
    request: Q,
    submit: Callable[[Q], Awaitable[R]],
    distribution: BackoffDistribution,
    should_stop: Callable[[int, timedelta], bool],
) -> R:
    """Run the retry loop shared by the bounded strategies.

    Args:
        request: The request to submit.
        submit: Async function sending one request.
        distribution: The distribution spacing out the retries.
        should_stop: Predicate called with the number of the next retry
            (1-based) and the wait before it. The run stops when it
            returns ``True``.

    Returns:
        The result of the first successful submission.
    """
    try:
        return await submit(request)
    except Exception as exc:
        failure = exc

    retry = 1
    wait = distribution(timedelta(0))
    while not should_stop(retry, wait):
        logger.debug(f"Retry {retry} scheduled in {wait} after {type(failure).__name__}: {failure}")
        await _sleep_unless_cancelled(retry, wait, failure)
        try:
            return await submit(request)
        except Exception as exc:
            logger.debug(f"Retry {retry} failed with {type(exc).__name__}: {exc}")
            add_suppressed(failure, exc)
        retry += 1
        wait = distribution(wait)

    logger.debug(f"Giving up after {retry - 1} retries (next wait would be {wait})")
    raise failure


async def _sleep_unless_cancelled(retry: int, wait: timedelta, failure: Exception) -> None:
    try:
        await asyncio.sleep(wait.total_seconds())
    except asyncio.CancelledError as exc:
        logger.debug(f"Retry {retry} interrupted while waiting {wait}")
        add_suppressed(exc, RetryInterruptedError(retry, failure))
        raise


def dont() -> RetryStrategy:
    """Return a strategy that never retries.

    Example:
        ```pycon
        >>> import asyncio
        >>> from aretry.retry import dont
        >>> async def submit(request):
        ...     return request.upper()
        ...
        >>> asyncio.run(dont().retry_if_necessary("ping", submit))
        'PING'

        ```
    """
    return Dont()


def to_max_retries(distribution: BackoffDistribution, max_retries: int) -> RetryStrategy:
    """Return a strategy that retries up to ``max_retries`` times, with
    waits following ``distribution``.

    Args:
        distribution: The distribution spacing out the retries.
        max_retries: The maximum number of retries.

    Raises:
        ValueError: If ``max_retries`` is negative.

    Example:
        ```pycon
        >>> from datetime import timedelta
        >>> from aretry.backoff import constant
        >>> from aretry.retry import to_max_retries
        >>> strategy = to_max_retries(constant(timedelta(milliseconds=1)), 3)
        >>> strategy.max_retries
        3

        ```
    """
    return MaxRetries(distribution, max_retries)


def to_max_wait(distribution: BackoffDistribution, max_wait: timedelta) -> RetryStrategy:
    """Return a strategy that retries until the next wait computed by
    ``distribution`` exceeds ``max_wait``.

    Args:
        distribution: The distribution spacing out the retries. It should
            grow, e.g. ``linear`` or ``exponential``.
        max_wait: The longest wait still followed by a retry.

    Raises:
        ValueError: If ``max_wait`` is zero or negative.
    """
    return MaxWait(distribution, max_wait)
