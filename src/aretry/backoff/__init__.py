r"""Backoff distributions for spacing out retries.

A backoff distribution is a plain function mapping the previous wait
duration to the next one. This package provides constant, linear,
multiplicative and exponential distributions, plus a jitter decorator
that adds a bounded random delay to any of them.
"""

from __future__ import annotations

__all__ = [
    "BackoffDistribution",
    "constant",
    "exponential",
    "jitter",
    "linear",
    "multiplicative",
    "to_millis",
]

from aretry.backoff.base import BackoffDistribution, to_millis
from aretry.backoff.constant import constant
from aretry.backoff.exponential import exponential
from aretry.backoff.jitter import jitter
from aretry.backoff.linear import linear
from aretry.backoff.multiplicative import multiplicative
