"""Checkers for nil values."""

from __future__ import annotations

from typing import Any

from verdict.checkers.base import BaseChecker
from verdict.reflection import is_nil as _is_nil


class IsNilChecker(BaseChecker):
    """Passes when the value is ``None`` or a nil reference.

    A nil :class:`~verdict.reflection.Ref` or a dead ``weakref.ref`` is nil;
    concrete values such as ``0`` or ``[]`` never are.
    """

    params = ("value",)

    def check(self, params: list[Any], names: list[str]) -> tuple[bool, str]:
        return _is_nil(params[0]), ""


class NotNilChecker(BaseChecker):
    """Passes when the value is not nil."""

    params = ("value",)

    def check(self, params: list[Any], names: list[str]) -> tuple[bool, str]:
        return not _is_nil(params[0]), ""


is_nil = IsNilChecker()
not_nil = NotNilChecker()
