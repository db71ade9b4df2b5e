"""Base checker classes and the checker protocol."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from functools import update_wrapper
from typing import Any, ClassVar, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict


logger = logging.getLogger(__name__)


class CheckerInfo(BaseModel):
    """Identity of a checker and the role of each positional parameter.

    Attributes
    ----------
    name
        Checker name shown in failure reports (e.g. ``"Equals"``).
    params
        Names of the positional parameters ``check`` consumes, in order
        (e.g. ``("obtained", "expected")``).
    """

    model_config = ConfigDict(frozen=True)

    name: str
    params: tuple[str, ...]


class CheckerUsageError(Exception):
    """Raised by a checker body when its inputs are unsuitable.

    Checkers built with :func:`checker` turn this into the error string of
    the check result instead of letting it propagate.
    """


@runtime_checkable
class Checker(Protocol):
    """Protocol every checker implements.

    ``info()`` is pure and returns the same :class:`CheckerInfo` on every call.

    ``check(params, names)`` receives exactly ``len(info().params)`` values and
    returns ``(ok, error)``:

    - ``(True, "")`` when the condition holds;
    - ``(False, "")`` when the inputs are well-formed but the condition fails;
    - ``(False, error)`` when the inputs are unsuitable for the checker.

    ``params`` and ``names`` belong to the caller but may be rewritten in
    place to improve the failure report, so callers must read them again after
    the call.
    """

    def info(self) -> CheckerInfo: ...

    def check(self, params: list[Any], names: list[str]) -> tuple[bool, str]: ...


class BaseChecker(ABC):
    """Base class for checkers.

    Subclasses set ``params`` and implement :meth:`check`. ``name`` defaults to
    the class name without a trailing ``Checker``.
    """

    name: ClassVar[str]
    params: ClassVar[tuple[str, ...]] = ("obtained", "expected")

    _info: CheckerInfo | None = None

    def __init_subclass__(cls, **kwargs):
        """Auto-generate name from class name if not provided."""
        super().__init_subclass__(**kwargs)
        if "name" not in cls.__dict__:
            cls.name = cls.__name__.removesuffix("Checker")

    def info(self) -> CheckerInfo:
        if self._info is None:
            self._info = CheckerInfo(name=self.name, params=self.params)
        return self._info

    @abstractmethod
    def check(self, params: list[Any], names: list[str]) -> tuple[bool, str]:
        """Evaluate the checker; see :class:`Checker` for the contract."""

    def __call__(self, *params: Any) -> tuple[bool, str]:
        """Run :meth:`check` on ``params`` with the declared parameter names."""
        return self.check(list(params), list(self.info().params))

    def __repr__(self) -> str:
        return self.info().name


class FunctionChecker(BaseChecker):
    """Checker backed by a plain predicate function."""

    def __init__(self, func: Callable[..., bool], info: CheckerInfo) -> None:
        self._func = func
        self._info = info
        update_wrapper(self, func)

    def check(self, params: list[Any], names: list[str]) -> tuple[bool, str]:
        try:
            return bool(self._func(*params)), ""
        except CheckerUsageError as exc:
            return False, str(exc)


def checker(
    name: str | None = None,
    params: Sequence[str] = ("obtained", "expected"),
) -> Callable[[Callable[..., bool]], FunctionChecker]:
    """Decorator to convert a predicate function into a full Checker.

    The function receives the check parameters positionally and returns a
    truthy value when the condition holds. Raising :class:`CheckerUsageError`
    reports a usage error instead of a mismatch.

    Args:
        name: Checker name; defaults to the function name in CamelCase.
        params: Names of the positional parameters.

    Returns:
        A decorator producing a checker following the Checker protocol.

    Example:
        >>> @checker(params=("obtained", "n"))
        >>> def has_len(obtained, n):
        >>>     return len(obtained) == n
        >>>
        >>> has_len([1, 2], 2)
        (True, '')
    """

    def decorate(func: Callable[..., bool]) -> FunctionChecker:
        info = CheckerInfo(name=name or _camel_case(func.__name__), params=tuple(params))
        logger.debug("Built checker %s%s from %s", info.name, info.params, func.__qualname__)
        return FunctionChecker(func, info)

    return decorate


def _camel_case(snake: str) -> str:
    return "".join(part[:1].upper() + part[1:] for part in snake.split("_"))
