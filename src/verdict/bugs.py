"""Bug annotations attached to failure reports."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Comment(Protocol):
    """Anything that can add free text to a failure report."""

    def get_bug_info(self) -> str: ...


class Bug:
    """Diagnostic text built from a ``%``-style format and its arguments.

    Formatting happens once, at construction; malformed formats raise the
    same errors as the ``%`` operator.
    """

    __slots__ = ("_info",)

    def __init__(self, format: str, *args: Any) -> None:
        self._info = format % args

    def get_bug_info(self) -> str:
        return self._info

    def __repr__(self) -> str:
        return f"Bug({self._info!r})"


def bug(format: str, *args: Any) -> Bug:
    """Create a :class:`Bug` annotation.

    Example:
        >>> bug("a %d bc", 42).get_bug_info()
        'a 42 bc'
    """
    return Bug(format, *args)


def get_bug_info(annotation: Comment) -> str:
    """Return the text of an annotation verbatim."""
    return annotation.get_bug_info()
