"""Negation wrapper for checkers."""

from __future__ import annotations

from typing import Any

from verdict.checkers.base import BaseChecker, Checker, CheckerInfo


class Not(BaseChecker):
    """Checker that inverts the result of another checker.

    The wrapped checker's parameters are kept as-is and its error text is
    passed through verbatim; only the boolean is inverted.

    Parameters
    ----------
    inner : Checker
        Checker whose result is negated.

    Examples
    --------
    >>> Not(is_nil).info().name
    'Not(IsNil)'
    >>> Not(is_nil)("a")
    (True, '')
    """

    def __init__(self, inner: Checker) -> None:
        if not isinstance(inner, Checker):
            raise TypeError(f"Not() expects a checker, got {type(inner).__name__}")
        self.inner = inner
        inner_info = inner.info()
        self._info = CheckerInfo(name=f"Not({inner_info.name})", params=inner_info.params)

    def check(self, params: list[Any], names: list[str]) -> tuple[bool, str]:
        ok, error = self.inner.check(params, names)
        return not ok, error
