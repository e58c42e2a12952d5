r"""aretry - Asynchronous retries driven by backoff distributions.

This package resubmits failing asynchronous operations according to a
backoff distribution until they succeed, a retry budget is exhausted, or
the run is cancelled. The first failure is reported, with the failure of
every retry suppressed on it.

Key Features:
    - Backoff distributions: constant, linear, multiplicative, exponential
    - Jitter decorator to spread out retries of independent callers
    - Strategies bounded by a number of retries or by a maximum wait
    - Non-blocking waits based on asyncio, cancellable between attempts
    - ``Either`` and ``Issue`` to report failures without raising
    - Helper to retry httpx requests

Example:
    ```pycon
    >>> import asyncio
    >>> from datetime import timedelta
    >>> from aretry import constant, to_max_retries
    >>> strategy = to_max_retries(constant(timedelta(milliseconds=1)), 3)
    >>> calls = []
    >>> async def submit(request):
    ...     calls.append(request)
    ...     if len(calls) < 3:
    ...         raise ConnectionError("unavailable")
    ...     return "done"
    ...
    >>> asyncio.run(strategy.retry_if_necessary("job", submit))
    'done'
    >>> len(calls)
    3

    ```
"""

from __future__ import annotations

__all__ = [
    "BackoffDistribution",
    "Either",
    "Issue",
    "IssueError",
    "RetryInterruptedError",
    "RetryStrategy",
    "__version__",
    "constant",
    "dont",
    "exponential",
    "get_interruption",
    "get_suppressed",
    "jitter",
    "linear",
    "multiplicative",
    "request_async",
    "to_max_retries",
    "to_max_wait",
]

from importlib.metadata import PackageNotFoundError, version

from aretry.backoff import (
    BackoffDistribution,
    constant,
    exponential,
    jitter,
    linear,
    multiplicative,
)
from aretry.either import Either
from aretry.exceptions import RetryInterruptedError, get_interruption, get_suppressed
from aretry.http import request_async
from aretry.issue import Issue, IssueError
from aretry.retry import RetryStrategy, dont, to_max_retries, to_max_wait

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
