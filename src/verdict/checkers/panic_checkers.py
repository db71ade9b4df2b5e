"""Checker for functions expected to panic, and the recovery scope it uses."""

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, NoReturn

from verdict.checkers.base import BaseChecker
from verdict.checkers.value_checkers import equals, matches
from verdict.reflection import stringify


logger = logging.getLogger(__name__)


class Panic(Exception):
    """Exception carrying an arbitrary panic value."""

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(value)


def panic(value: Any) -> NoReturn:
    """Abort the current function with ``value`` as the panic payload."""
    raise Panic(value)


@dataclass
class Recovered:
    """Outcome of a :func:`recovery_scope`.

    Attributes
    ----------
    panicked
        Whether an exception was intercepted.
    value
        The recovered value: the payload of a :class:`Panic`, or the
        exception object for any other exception.
    """

    panicked: bool = False
    value: Any = None


@contextmanager
def recovery_scope() -> Iterator[Recovered]:
    """Intercept any exception raised in the block and record it.

    ``KeyboardInterrupt`` and ``SystemExit`` are not panics and propagate.

    Example:
        >>> with recovery_scope() as recovered:
        ...     panic("BOOM")
        >>> recovered.value
        'BOOM'
    """
    recovered = Recovered()
    try:
        yield recovered
    except Panic as exc:
        recovered.panicked = True
        recovered.value = exc.value
    except Exception as exc:
        recovered.panicked = True
        recovered.value = exc
    if recovered.panicked:
        logger.debug("Recovered panic: %r", recovered.value)


def _takes_zero_arguments(function: Any) -> bool:
    if not callable(function):
        return False
    try:
        inspect.signature(function).bind()
    except TypeError:
        return False
    except ValueError:
        # No introspectable signature; let the call itself decide
        return True
    return True


class PanicsChecker(BaseChecker):
    """Passes when calling the function panics with the expected value.

    A string ``expected`` is a regular expression matched in full against the
    string form of the panic value; anything else is compared with
    :data:`~verdict.checkers.value_checkers.equals`.

    Once a panic is captured the first parameter is replaced by the panic
    value and renamed ``"panic"``, so the failure report shows the payload
    rather than the function.
    """

    params = ("function", "expected")

    def check(self, params: list[Any], names: list[str]) -> tuple[bool, str]:
        function, expected = params
        if not _takes_zero_arguments(function):
            return False, "Function must take zero arguments"

        with recovery_scope() as recovered:
            function()
        if not recovered.panicked:
            return False, "Function has not panicked"

        params[0] = recovered.value
        names[0] = "panic"

        if isinstance(expected, str):
            text = stringify(recovered.value)
            if text is None:
                text = str(recovered.value)
            return matches.check([text, expected], ["panic", "regex"])
        return equals.check([recovered.value, expected], ["panic", "expected"])


panics = PanicsChecker()
