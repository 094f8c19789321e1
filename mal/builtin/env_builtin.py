"""Built-in functions for the mal root environment.

This module defines integer arithmetic, comparison, list construction and
inspection, and printing, plus the registration helper that installs them.
Every primitive checks the number and kind of its arguments before computing
and reports a mismatch as ArityOrTypeMismatch naming itself.
"""
from __future__ import annotations

from typing import Callable

from mal import LispValue
from mal.errors import ArityOrTypeMismatch, DivisionByZero, IntegerOverflow
from mal.printer import to_text
from mal.types.environment import Environment
from mal.types.function import NativeFunction, PrimitiveFn
from mal.types.integer import fits_int64, is_integer, truncating_div
from mal.types.nil import Nil
from mal.types.ordering import compare
from mal.types.sequences import List, is_equal


# -------------------------------
# Arithmetic
# -------------------------------
def _arithmetic(name: str, op: Callable[[int, int], int]) -> PrimitiveFn:
    def primitive(env: Environment, args: list[LispValue]) -> int:
        if len(args) != 2 or not all(is_integer(a) for a in args):
            raise ArityOrTypeMismatch(name, args)
        result = op(*args)
        if not fits_int64(result):
            raise IntegerOverflow(name, args)
        return result

    return primitive


def add(x: int, y: int) -> int:
    return x + y


def sub(x: int, y: int) -> int:
    return x - y


def mul(x: int, y: int) -> int:
    return x * y


def div(x: int, y: int) -> int:
    if y == 0:
        raise DivisionByZero("/", [x, y])
    return truncating_div(x, y)


# -------------------------------
# Comparison
# -------------------------------
def equals(env: Environment, args: list[LispValue]) -> bool:
    if len(args) != 2:
        raise ArityOrTypeMismatch("=", args)
    return is_equal(args[0], args[1])


def _ordering(name: str, test: Callable[[int], bool]) -> PrimitiveFn:
    def primitive(env: Environment, args: list[LispValue]) -> bool:
        if len(args) != 2:
            raise ArityOrTypeMismatch(name, args)
        try:
            return test(compare(args[0], args[1]))
        except TypeError:
            raise ArityOrTypeMismatch(name, args) from None

    return primitive


# -------------------------------
# List operations
# -------------------------------
def list_builtin(env: Environment, args: list[LispValue]) -> List:
    return List(args)


def is_list(env: Environment, args: list[LispValue]) -> bool:
    """True iff the single argument is a List."""
    return len(args) == 1 and isinstance(args[0], List)


def is_empty(env: Environment, args: list[LispValue]) -> bool:
    """True iff the single argument is an empty List."""
    return len(args) == 1 and isinstance(args[0], List) and not args[0]


def count(env: Environment, args: list[LispValue]) -> int:
    match args:
        case [List() as items]:
            return len(items)
    raise ArityOrTypeMismatch("count", args)


# -------------------------------
# Printing
# -------------------------------
def pr_str(env: Environment, args: list[LispValue]) -> str:
    return " ".join(to_text(a, readably=True) for a in args)


def str_builtin(env: Environment, args: list[LispValue]) -> str:
    return "".join(to_text(a, readably=False) for a in args)


def prn(env: Environment, args: list[LispValue]):
    print(" ".join(to_text(a, readably=True) for a in args))
    return Nil


def println(env: Environment, args: list[LispValue]):
    print(" ".join(to_text(a, readably=False) for a in args))
    return Nil


# -------------------------------
# Registration
# -------------------------------
BUILTINS: dict[str, PrimitiveFn] = {
    "+": _arithmetic("+", add),
    "-": _arithmetic("-", sub),
    "*": _arithmetic("*", mul),
    "/": _arithmetic("/", div),
    "=": equals,
    "<": _ordering("<", lambda c: c < 0),
    ">": _ordering(">", lambda c: c > 0),
    "<=": _ordering("<=", lambda c: c <= 0),
    ">=": _ordering(">=", lambda c: c >= 0),
    "list": list_builtin,
    "list?": is_list,
    "empty?": is_empty,
    "count": count,
    "pr-str": pr_str,
    "str": str_builtin,
    "prn": prn,
    "println": println,
}


def register(env: Environment) -> None:
    env.update({name: NativeFunction(name, fn) for name, fn in BUILTINS.items()})


def make_root_env() -> Environment:
    """A fresh outermost scope holding the builtin library."""
    env = Environment()
    register(env)
    return env
