r"""Exceptions and helpers to track suppressed failures.

Python has no native equivalent of a "suppressed" exception. A retry run
reports its first failure as the primary exception and keeps every later
failure on it, in the order they happened. The later failures are stored
on the primary exception and also added as notes, so they show up in
tracebacks.
"""

from __future__ import annotations

__all__ = [
    "NotAnExceptionTypeError",
    "RetryInterruptedError",
    "add_suppressed",
    "get_interruption",
    "get_suppressed",
]

from typing import TypeVar

E = TypeVar("E", bound=BaseException)

_SUPPRESSED_ATTR = "_aretry_suppressed"


def add_suppressed(primary: E, other: BaseException) -> E:
    """Attach ``other`` to ``primary`` as a suppressed exception.

    Args:
        primary: The exception that stays the reported one.
        other: The exception to attach.

    Returns:
        ``primary``, to allow chaining.

    Example:
        ```pycon
        >>> from aretry.exceptions import add_suppressed, get_suppressed
        >>> first = ValueError("first")
        >>> second = ValueError("second")
        >>> add_suppressed(first, second) is first
        True
        >>> get_suppressed(first)
        (ValueError('second'),)

        ```
    """
    suppressed = primary.__dict__.setdefault(_SUPPRESSED_ATTR, [])
    suppressed.append(other)
    primary.add_note(f"Suppressed: {type(other).__name__}: {other}")
    return primary


def get_suppressed(exc: BaseException) -> tuple[BaseException, ...]:
    """Return the exceptions suppressed by ``exc``, oldest first.

    Args:
        exc: The exception to inspect.

    Returns:
        The suppressed exceptions, or an empty tuple.
    """
    return tuple(exc.__dict__.get(_SUPPRESSED_ATTR, ()))


class RetryInterruptedError(Exception):
    """Describes a retry run cancelled while waiting between attempts.

    It is never raised on its own. The original ``asyncio.CancelledError``
    is re-raised unchanged, so ``asyncio.timeout`` and task cancellation
    keep working, and this error is attached to it as suppressed. Use
    ``get_interruption`` to find it from whatever the caller catches.

    Args:
        retry: The number of the retry that was interrupted (1-based).
        failure: The failure accumulated before the interruption, with
            the failures of earlier retries suppressed on it. It is also
            chained as ``__cause__``.
    """

    def __init__(self, retry: int, failure: BaseException) -> None:
        super().__init__(f"Interrupted on retry: {retry}")
        self.retry = retry
        self.failure = failure
        self.__cause__ = failure


def get_interruption(exc: BaseException) -> RetryInterruptedError | None:
    """Find the ``RetryInterruptedError`` attached to a cancellation.

    The exception itself is inspected first, then its ``__cause__`` and
    ``__context__`` chain, so this works on the ``CancelledError`` of a
    cancelled task as well as on the ``TimeoutError`` raised by
    ``asyncio.timeout``.

    Args:
        exc: The exception caught by the caller.

    Returns:
        The interruption, or ``None`` if the retry run was not
        interrupted while waiting.
    """
    seen: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        for suppressed in get_suppressed(current):
            if isinstance(suppressed, RetryInterruptedError):
                return suppressed
        current = current.__cause__ or current.__context__
    return None


class NotAnExceptionTypeError(TypeError):
    """Raised when a value cannot be raised because it is not an
    exception."""

    def __init__(self, value: object) -> None:
        super().__init__(
            f"Unable to implicitly raise non-exception type: {type(value).__name__}"
        )
        self.value = value
