r"""Unit tests for the constant distribution."""

from __future__ import annotations

from datetime import timedelta

import pytest

from aretry.backoff import constant

##############################
#     Tests for constant     #
##############################


@pytest.mark.parametrize(
    "previous",
    [timedelta(0), timedelta(milliseconds=1), timedelta(seconds=5), timedelta(days=3)],
)
def test_constant_ignores_previous_wait(previous: timedelta) -> None:
    """Test that the interval is returned whatever the previous wait."""
    assert constant(timedelta(seconds=2))(previous) == timedelta(seconds=2)


def test_constant_zero_interval() -> None:
    """Test constant distribution with zero interval."""
    distribution = constant(timedelta(0))
    assert distribution(timedelta(0)) == timedelta(0)
    assert distribution(timedelta(seconds=1)) == timedelta(0)


def test_constant_invalid_interval() -> None:
    """Test that a negative interval raises ValueError."""
    with pytest.raises(ValueError, match=r"interval must be non-negative"):
        constant(timedelta(seconds=-1))
