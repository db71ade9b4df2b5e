"""Demonstrates how to use Verdict checkers.

* Every checker exposes `info()` (its name and parameter names) and
  `check(params, names)` returning `(ok, error)`.
* `check_that` / `assert_that` run a checker the way a test harness does and
  render a failure report.
* Custom checkers can be written as a `BaseChecker` subclass or with the
  `@checker` decorator.
"""

from dataclasses import dataclass
from typing import Protocol

from verdict import (
    Not,
    Ref,
    assert_that,
    bug,
    check_that,
    checker,
    equals,
    fits_type_of,
    implements,
    is_nil,
    matches,
    panic,
    panics,
)


@dataclass
class Order:
    id: int
    items: list[str]


class Closer(Protocol):
    def close(self) -> None: ...


class Connection:
    def close(self) -> None:
        pass


@checker(params=("obtained", "prefix"))
def starts_with(obtained, prefix):
    return str(obtained).startswith(prefix)


def withdraw(balance: int, amount: int) -> int:
    if amount > balance:
        panic(ValueError(f"insufficient funds: {balance} < {amount}"))
    return balance - amount


if __name__ == "__main__":
    assert_that(Order(1, ["tea"]), equals, Order(1, ["tea"]))
    assert_that(Ref.to(Order(1, [])), equals, Ref.to(Order(1, [])))
    assert_that("order-42", matches, r"order-\d+")
    assert_that(None, is_nil)
    assert_that("x", Not(is_nil))
    assert_that(lambda: withdraw(10, 20), panics, "insufficient funds: .*")
    assert_that(Connection(), implements, Ref.var(Closer))
    assert_that(1, fits_type_of, 0)
    assert_that("order-42", starts_with, "order-")

    result = check_that(42, equals, 42.0, comment=bug("ids must stay ints, see #%d", 17))
    print(result.message)
