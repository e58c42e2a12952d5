r"""Parameter validation utilities for backoff distributions and retry
strategies.

This module provides validation functions used at construction time to
ensure the configuration of distributions and strategies meets the
required constraints. All of them raise ``ValueError`` and never return
a value.
"""

from __future__ import annotations

__all__ = [
    "validate_max_retries",
    "validate_non_negative_duration",
    "validate_positive_duration",
    "validate_positive_int",
]

from datetime import timedelta


def validate_non_negative_duration(name: str, value: timedelta) -> None:
    """Validate that a duration is zero or positive.

    Args:
        name: The parameter name, used in the error message.
        value: The duration to validate.

    Raises:
        ValueError: If ``value`` is negative.

    Example:
        ```pycon
        >>> from datetime import timedelta
        >>> from aretry.validation import validate_non_negative_duration
        >>> validate_non_negative_duration("interval", timedelta(seconds=1))
        >>> validate_non_negative_duration("interval", timedelta(0))
        >>> validate_non_negative_duration("interval", timedelta(seconds=-1))
        Traceback (most recent call last):
        ...
        ValueError: interval must be non-negative, got -1 day, 23:59:59

        ```
    """
    if value < timedelta(0):
        msg = f"{name} must be non-negative, got {value}"
        raise ValueError(msg)


def validate_positive_duration(name: str, value: timedelta, minimum: timedelta | None = None) -> None:
    """Validate that a duration is strictly positive.

    Args:
        name: The parameter name, used in the error message.
        value: The duration to validate.
        minimum: Optional smallest accepted value. When provided the
            duration must be ``>= minimum`` instead of ``> 0``.

    Raises:
        ValueError: If ``value`` is zero, negative, or below ``minimum``.
    """
    if minimum is not None:
        if value < minimum:
            msg = f"{name} must be >= {minimum}, got {value}"
            raise ValueError(msg)
    elif value <= timedelta(0):
        msg = f"{name} must be > 0, got {value}"
        raise ValueError(msg)


def validate_max_retries(max_retries: int) -> None:
    """Validate the maximum number of retries.

    Args:
        max_retries: Maximum number of retries after the initial
            submission. A value of 0 means no retries.

    Raises:
        ValueError: If ``max_retries`` is negative.

    Example:
        ```pycon
        >>> from aretry.validation import validate_max_retries
        >>> validate_max_retries(3)
        >>> validate_max_retries(0)
        >>> validate_max_retries(-1)
        Traceback (most recent call last):
        ...
        ValueError: max_retries must be >= 0, got -1

        ```
    """
    if max_retries < 0:
        msg = f"max_retries must be >= 0, got {max_retries}"
        raise ValueError(msg)


def validate_positive_int(name: str, value: int) -> None:
    """Validate that a value is an integer greater than zero.

    Args:
        name: The parameter name, used in the error message.
        value: The value to validate.

    Raises:
        ValueError: If ``value`` is not an int (bools are rejected) or is
            not strictly positive.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"{name} must be an int, got {type(value).__name__}"
        raise ValueError(msg)
    if value <= 0:
        msg = f"{name} must be > 0, got {value}"
        raise ValueError(msg)
