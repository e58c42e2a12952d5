r"""Unit tests for the linear distribution."""

from __future__ import annotations

from datetime import timedelta

import pytest

from aretry.backoff import linear

############################
#     Tests for linear     #
############################


@pytest.mark.parametrize(
    "previous",
    [timedelta(0), timedelta(milliseconds=7), timedelta(seconds=5), timedelta(hours=1)],
)
def test_linear_adds_increase(previous: timedelta) -> None:
    """Test that the increase is added to the previous wait."""
    assert linear(timedelta(milliseconds=5))(previous) == previous + timedelta(milliseconds=5)


def test_linear_sequence() -> None:
    """Test the waits produced by chaining the distribution."""
    distribution = linear(timedelta(seconds=1))
    wait = timedelta(0)
    waits = []
    for _ in range(4):
        wait = distribution(wait)
        waits.append(wait)
    assert waits == [timedelta(seconds=s) for s in (1, 2, 3, 4)]


def test_linear_invalid_increase() -> None:
    """Test that a negative increase raises ValueError."""
    with pytest.raises(ValueError, match=r"increase must be non-negative"):
        linear(timedelta(milliseconds=-5))


def test_linear_capped_at_timedelta_max() -> None:
    """Test that growing past the largest duration returns it instead of
    raising OverflowError."""
    distribution = linear(timedelta(days=1))
    assert distribution(timedelta.max) == timedelta.max
    assert distribution(timedelta.max - timedelta(hours=1)) == timedelta.max
