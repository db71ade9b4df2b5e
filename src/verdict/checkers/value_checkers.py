"""Checkers comparing values: equality, pattern matching and length."""

from __future__ import annotations

import re
from typing import Any

from verdict.checkers.base import BaseChecker, CheckerUsageError, checker
from verdict.reflection import deep_equal, stringify, type_name, type_of


class EqualsChecker(BaseChecker):
    """Passes when obtained and expected have the same type and content.

    Values of different dynamic types are never equal, so ``42`` does not
    equal ``42.0`` and ``True`` does not equal ``1``. Values of the same type
    are compared structurally with :func:`~verdict.reflection.deep_equal`;
    two distinct refs to equal values are equal.
    """

    params = ("obtained", "expected")

    def check(self, params: list[Any], names: list[str]) -> tuple[bool, str]:
        return deep_equal(params[0], params[1]), ""


class MatchesChecker(BaseChecker):
    """Passes when the value matches a regular expression in full.

    The value must be a string or stringifiable (an exception, or an object
    whose class defines ``__str__``). The pattern has to match the whole
    string: ``"ab"`` does not match ``"abc"``.
    """

    params = ("value", "regex")

    def check(self, params: list[Any], names: list[str]) -> tuple[bool, str]:
        value, regex = params
        text = stringify(value)
        if text is None:
            return False, "Obtained value is not a string and has no .String()"
        if not isinstance(regex, str):
            return False, "Regex must be a string"
        try:
            pattern = re.compile(regex)
        except re.error as exc:
            return False, f"Can't compile regex: {exc}"
        return pattern.fullmatch(text) is not None, ""


equals = EqualsChecker()
matches = MatchesChecker()


@checker(name="HasLen", params=("obtained", "n"))
def has_len(obtained: Any, n: Any) -> bool:
    """Passes when ``len(obtained) == n``."""
    if not isinstance(n, int) or isinstance(n, bool):
        raise CheckerUsageError("n must be an int")
    try:
        return len(obtained) == n
    except TypeError:
        raise CheckerUsageError(
            f"obtained value type has no length: {type_name(type_of(obtained))}"
        ) from None


@checker(name="ErrorMatches", params=("value", "regex"))
def error_matches(value: Any, regex: Any) -> bool:
    """Passes when ``value`` is an exception whose message matches ``regex``."""
    if not isinstance(value, BaseException):
        raise CheckerUsageError("Value is not an error")
    ok, error = matches.check([str(value), regex], ["value", "regex"])
    if error:
        raise CheckerUsageError(error)
    return ok
