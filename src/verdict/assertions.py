"""Running checkers the way an assertion harness does."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel, ConfigDict

from verdict.bugs import Comment, get_bug_info
from verdict.checkers.base import Checker
from verdict.config import get_settings
from verdict.reflection import type_name, type_of


logger = logging.getLogger(__name__)


class CheckResult(BaseModel):
    """Result of running one checker against its parameters.

    Attributes
    ----------
    checker_name : str
        Name reported by the checker's ``info()``.
    passed : bool
        Whether the check passed.
    error : str
        Usage error reported by the checker; empty for a plain mismatch.
    params : list[Any]
        Parameter values as left by the checker after the call.
    names : list[str]
        Parameter names as left by the checker after the call.
    message : str or None
        Rendered failure report; ``None`` when the check passed.
    comment : str or None
        Text of the bug annotation passed with the check, if any.

    Notes
    -----
    ``bool(result)`` is equivalent to ``result.passed``.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    checker_name: str
    passed: bool
    error: str = ""
    params: list[Any]
    names: list[str]
    message: str | None = None
    comment: str | None = None

    def __bool__(self) -> bool:
        return self.passed


class AssertionFailedError(AssertionError):
    """AssertionError with attached CheckResult."""

    def __init__(self, result: CheckResult):
        self.check_result = result
        message = f"{result.checker_name} failed"
        if result.message:
            message += f":\n{result.message}"
        super().__init__(message)


def check_that(obtained: Any, checker: Checker, *args: Any, comment: Comment | None = None) -> CheckResult:
    """Run ``checker`` on ``obtained`` and ``args``.

    Parameters
    ----------
    obtained : Any
        Value under test; the checker's first parameter.
    checker : Checker
        Checker to run.
    *args : Any
        Remaining checker parameters (e.g. the expected value).
    comment : Comment or None
        Annotation such as :func:`verdict.bugs.bug` whose text is appended to
        the failure report.

    Returns
    -------
    CheckResult
        The outcome, with a rendered message on failure.
    """
    info = checker.info()
    params = [obtained, *args]
    names = list(info.params)
    comment_text = get_bug_info(comment) if comment is not None else None

    if len(params) != len(names):
        passed = False
        error = f"Wrong number of parameters for {info.name}: want {len(names)}, got {len(params)}"
    else:
        passed, error = checker.check(params, names)
        if error:
            passed = False

    if error:
        logger.debug("%s reported a usage error: %s", info.name, error)

    return CheckResult(
        checker_name=info.name,
        passed=passed,
        error=error,
        params=params,
        names=names,
        message=None if passed else render_failure(params, names, error, comment_text),
        comment=comment_text,
    )


def assert_that(obtained: Any, checker: Checker, *args: Any, comment: Comment | None = None) -> CheckResult:
    """Like :func:`check_that`, but raise on failure.

    Raises
    ------
    AssertionFailedError
        If the check fails or reports a usage error.
    """
    result = check_that(obtained, checker, *args, comment=comment)
    if not result.passed:
        raise AssertionFailedError(result)
    return result


def render_failure(params: list[Any], names: list[str], error: str, comment: str | None = None) -> str:
    """Render a failure report, one ``...`` line per parameter.

    Example output::

        ... obtained int = 42
        ... expected int = 43
    """
    max_len = get_settings().repr_max_length
    lines = []
    for name, value in zip(names, params):
        if value is None:
            lines.append(f"... {name} = None")
        else:
            lines.append(f"... {name} {type_name(type_of(value))} = {_truncate(repr(value), max_len)}")
    if error:
        lines.append(f"... {error}")
    if comment:
        lines.append(f"... {comment}")
    return "\n".join(lines)


def _truncate(text: str, max_len: int) -> str:
    return text if len(text) <= max_len else text[:max_len] + "..."
