r"""Retry strategies driving the asynchronous resubmission of requests.

Public API:
    - RetryStrategy: Base class of all strategies
    - Dont: Strategy that never retries
    - MaxRetries: Strategy bounded by a number of retries
    - MaxWait: Strategy bounded by the wait before the next retry
    - dont, to_max_retries, to_max_wait: Factories for the strategies
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

from aretry.retry.strategy import (
    Dont,
    MaxRetries,
    MaxWait,
    RetryStrategy,
    dont,
    to_max_retries,
    to_max_wait,
)
