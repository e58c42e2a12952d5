r"""Container holding exactly one of two possible values.

``Either`` makes it easy to return ``Either[value, error]`` instead of
raising, and to convert the error side back into an exception when the
caller prefers to raise it.
"""

from __future__ import annotations

__all__ = ["Either"]

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from aretry.exceptions import NotAnExceptionTypeError

if TYPE_CHECKING:
    from collections.abc import Callable

L = TypeVar("L")
R = TypeVar("R")
T = TypeVar("T")


def _as_exception(value: object) -> BaseException:
    if isinstance(value, BaseException):
        return value
    raise NotAnExceptionTypeError(value)


@dataclass(frozen=True)
class Either(Generic[L, R]):
    """Immutable container with exactly one populated side.

    Build instances with ``Either.of_left`` or ``Either.of_right``. By
    convention the left side holds the value and the right side the
    error.

    Example:
        ```pycon
        >>> from aretry import Either
        >>> result = Either.of_left(21)
        >>> result.map_left(lambda x: x * 2)
        Either(value=42, is_left=True)
        >>> result.apply(lambda x: "ok", lambda e: "error")
        'ok'
        >>> Either.of_right("boom").swap().left
        'boom'

        ```
    """

    value: Any
    is_left: bool

    @classmethod
    def of_left(cls, value: L) -> Either[L, Any]:
        return cls(value, True)

    @classmethod
    def of_right(cls, value: R) -> Either[Any, R]:
        return cls(value, False)

    @property
    def is_right(self) -> bool:
        return not self.is_left

    @property
    def left(self) -> L | None:
        """The left value, or ``None`` if the right side is populated."""
        return self.value if self.is_left else None

    @property
    def right(self) -> R | None:
        """The right value, or ``None`` if the left side is populated."""
        return None if self.is_left else self.value

    def map_left(self, fn: Callable[[L], T]) -> Either[T, R]:
        return Either(fn(self.value), True) if self.is_left else self

    def map_right(self, fn: Callable[[R], T]) -> Either[L, T]:
        return self if self.is_left else Either(fn(self.value), False)

    def flat_map_left(self, fn: Callable[[L], Either[T, R]]) -> Either[T, R]:
        """Compose with a function that itself returns an ``Either``.

        The right side passes through untouched.
        """
        return fn(self.value) if self.is_left else self

    def flat_map_right(self, fn: Callable[[R], Either[L, T]]) -> Either[L, T]:
        """Mirror image of ``flat_map_left``."""
        return self if self.is_left else fn(self.value)

    def swap(self) -> Either[R, L]:
        return Either(self.value, not self.is_left)

    def apply(self, left_fn: Callable[[L], T], right_fn: Callable[[R], T]) -> T:
        """Coalesce both sides to a single result type.

        Args:
            left_fn: Function applied to the left value.
            right_fn: Function applied to the right value.

        Returns:
            The output of whichever function matches the populated side.
        """
        return left_fn(self.value) if self.is_left else right_fn(self.value)

    def peek(
        self, left_fn: Callable[[L], object], right_fn: Callable[[R], object]
    ) -> Either[L, R]:
        """Call the function matching the populated side and return
        ``self``.

        Mostly useful to log the content before doing something with it.
        """
        if self.is_left:
            left_fn(self.value)
        else:
            right_fn(self.value)
        return self

    def or_raise_left(self, to_exception: Callable[[L], BaseException] | None = None) -> R:
        """Return the right value, or raise the left one.

        Args:
            to_exception: Optional converter from the left value to the
                exception to raise. Without it the left value must be an
                exception itself.

        Returns:
            The right value.

        Raises:
            NotAnExceptionTypeError: If the left side is populated with a
                non-exception value and no converter is provided.
        """
        if self.is_left:
            raise (to_exception or _as_exception)(self.value)
        return self.value

    def or_raise_right(self, to_exception: Callable[[R], BaseException] | None = None) -> L:
        """Return the left value, or raise the right one.

        See ``or_raise_left``.
        """
        if self.is_right:
            raise (to_exception or _as_exception)(self.value)
        return self.value
