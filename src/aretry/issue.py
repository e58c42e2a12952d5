r"""Descriptive error values to use alongside ``Either``.

An ``Issue`` describes something that went wrong during normal execution
without raising. Issues can be converted to an ``IssueError`` when they
need to be raised after all, e.g. at the edge of the program.

Most callers should define their own ``Issue`` subclasses; this module
only ships a few generic ones.
"""

from __future__ import annotations

__all__ = [
    "AllOf",
    "ExceptionThrown",
    "Issue",
    "IssueError",
    "NoIssue",
    "all_of",
    "exception_thrown",
    "none",
]

from dataclasses import dataclass, field

from aretry.exceptions import add_suppressed


class Issue:
    """Base class of descriptive error values.

    Attributes:
        summary: A human-readable description, used as the message of
            ``IssueError``.
    """

    summary: str

    def as_exception(self) -> Exception:
        """Return the issue wrapped in an exception that can be raised.

        Override this in subclasses that want to raise a dedicated
        exception type.
        """
        return IssueError(self)


@dataclass(frozen=True)
class NoIssue(Issue):
    """There is no issue."""

    summary: str = field(default="There is no issue.", init=False)


@dataclass(frozen=True)
class ExceptionThrown(Issue):
    """An exception demoted to an issue.

    Args:
        summary: Description of what was being done.
        exception: The exception that was raised.
    """

    summary: str
    exception: BaseException


@dataclass(frozen=True)
class AllOf(Issue):
    """Several distinct issues reported together.

    Args:
        summary: Description of the combined issue.
        issues: The individual issues.
    """

    summary: str
    issues: tuple[Issue, ...]


class IssueError(RuntimeError):
    """Exception wrapping an ``Issue``.

    It can be raised, caught higher up in the program and unwrapped to
    inspect the ``Issue``. For an ``ExceptionThrown`` the wrapped
    exception is the cause. Every exception found in the issue, including
    inside nested ``AllOf``, is attached as suppressed.

    Args:
        issue: The issue to wrap.
    """

    def __init__(self, issue: Issue) -> None:
        super().__init__(issue.summary)
        self.issue = issue
        if isinstance(issue, ExceptionThrown):
            self.__cause__ = issue.exception
        self._suppress_all(issue)

    def _suppress_all(self, issue: Issue) -> None:
        if isinstance(issue, ExceptionThrown):
            add_suppressed(self, issue.exception)
        elif isinstance(issue, AllOf):
            for child in issue.issues:
                self._suppress_all(child)


def none() -> NoIssue:
    return NoIssue()


def exception_thrown(
    exception: BaseException,
    summary: str = "Encountered an exception while running.",
) -> ExceptionThrown:
    """Demote an exception to an issue.

    Example:
        ```pycon
        >>> from aretry.issue import exception_thrown
        >>> issue = exception_thrown(OSError("disk full"), "Unable to write the file.")
        >>> issue.summary
        'Unable to write the file.'
        >>> str(issue.as_exception().__cause__)
        'disk full'

        ```
    """
    return ExceptionThrown(summary, exception)


def all_of(*issues: Issue, summary: str | None = None) -> AllOf:
    """Combine several issues into one.

    Args:
        *issues: The issues to combine.
        summary: Optional summary. Defaults to the summaries of
            ``issues``, one per line.
    """
    if summary is None:
        summary = "\n".join(issue.summary for issue in issues)
    return AllOf(summary, issues)
