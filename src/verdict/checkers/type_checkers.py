"""Checkers for dynamic types and interface satisfaction."""

from __future__ import annotations

from typing import Any

from verdict.checkers.base import BaseChecker
from verdict.reflection import Ref, is_interface, satisfies_interface, type_of


class FitsTypeOfChecker(BaseChecker):
    """Passes when obtained has exactly the dynamic type of sample.

    Type identity is nominal: a ``Ref`` to ``Point`` does not fit ``Point``,
    and a subclass instance does not fit its base class.
    """

    params = ("obtained", "sample")

    def check(self, params: list[Any], names: list[str]) -> tuple[bool, str]:
        obtained, sample = params
        if sample is None:
            return False, "Invalid sample value"
        if obtained is None:
            return False, ""
        return type_of(obtained) == type_of(sample), ""


class ImplementsChecker(BaseChecker):
    """Passes when obtained provides the interface named by ``ifaceptr``.

    ``ifaceptr`` must be a :class:`~verdict.reflection.Ref` declared with an
    interface type, e.g. ``Ref.var(SupportsClose)`` where ``SupportsClose`` is a
    ``typing.Protocol`` or an abstract class.
    """

    params = ("obtained", "ifaceptr")

    def check(self, params: list[Any], names: list[str]) -> tuple[bool, str]:
        obtained, ifaceptr = params
        if not isinstance(ifaceptr, Ref) or not is_interface(ifaceptr.elem_type):
            return False, "ifaceptr should be a pointer to an interface variable"
        if obtained is None:
            return False, ""
        return satisfies_interface(obtained, ifaceptr.elem_type), ""


fits_type_of = FitsTypeOfChecker()
implements = ImplementsChecker()
