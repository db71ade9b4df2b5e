"""Checkers library for test assertions."""

from .base import BaseChecker, Checker, CheckerInfo, CheckerUsageError, FunctionChecker, checker
from .negation import Not
from .nil_checkers import is_nil, not_nil
from .panic_checkers import Panic, Recovered, panic, panics, recovery_scope
from .type_checkers import fits_type_of, implements
from .value_checkers import equals, error_matches, has_len, matches


CHECKER_REGISTRY: dict[str, Checker] = {
    c.info().name: c
    for c in (
        is_nil,
        not_nil,
        equals,
        matches,
        panics,
        fits_type_of,
        implements,
        has_len,
        error_matches,
    )
}

__all__ = [
    # Checker abstractions
    "Checker",
    "CheckerInfo",
    "CheckerUsageError",
    "BaseChecker",
    "FunctionChecker",
    "CHECKER_REGISTRY",
    "checker",
    # Negation
    "Not",
    # Nil checkers
    "is_nil",
    "not_nil",
    # Value checkers
    "equals",
    "matches",
    "has_len",
    "error_matches",
    # Panic checkers
    "panics",
    "panic",
    "Panic",
    "Recovered",
    "recovery_scope",
    # Type checkers
    "fits_type_of",
    "implements",
]
