"""Verdict - pluggable checkers for test assertions."""

from .assertions import AssertionFailedError, CheckResult, assert_that, check_that
from .bugs import Bug, Comment, bug, get_bug_info
from .checkers import (
    CHECKER_REGISTRY,
    BaseChecker,
    Checker,
    CheckerInfo,
    CheckerUsageError,
    Not,
    Panic,
    checker,
    equals,
    error_matches,
    fits_type_of,
    has_len,
    implements,
    is_nil,
    matches,
    not_nil,
    panic,
    panics,
)
from .reflection import Ref
from .version import __version__


__all__ = [
    # Checker protocol
    "Checker",
    "CheckerInfo",
    "CheckerUsageError",
    "BaseChecker",
    "CHECKER_REGISTRY",
    "checker",
    # Built-in checkers
    "Not",
    "is_nil",
    "not_nil",
    "equals",
    "matches",
    "has_len",
    "error_matches",
    "panics",
    "fits_type_of",
    "implements",
    # Panics
    "panic",
    "Panic",
    # References
    "Ref",
    # Bug annotations
    "Bug",
    "Comment",
    "bug",
    "get_bug_info",
    # Harness adapter
    "check_that",
    "assert_that",
    "CheckResult",
    "AssertionFailedError",
]
