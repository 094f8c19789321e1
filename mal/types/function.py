"""Function values: a closed union of native primitives and closures."""

from __future__ import annotations

from typing import Callable

from mal import LispValue, SExpression
from mal.errors import ArityOrTypeMismatch, MalformedSpecialForm
from mal.types.environment import Environment
from mal.types.sequences import List
from mal.types.symbol import Symbol

# Marks the parameter that collects the remaining arguments: (fn* (a & rest) ...)
VARIADIC_MARKER = Symbol("&")

PrimitiveFn = Callable[[Environment, list[LispValue]], LispValue]


class Function:
    """Base of every applicable value."""

    __slots__ = ()


class NativeFunction(Function):
    """A primitive implemented in Python, called as ``fn(env, args)``."""

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: PrimitiveFn):
        self.name = name
        self.fn = fn

    def __call__(self, env: Environment, args: list[LispValue]) -> LispValue:
        return self.fn(env, args)

    def __repr__(self) -> str:
        return f"NativeFunction({self.name!r})"


class Closure(Function):
    """A user function: parameter names, a body and the scope it was built in."""

    __slots__ = ("params", "rest", "body", "env")

    def __init__(
        self,
        params: list[Symbol],
        body: SExpression,
        env: Environment,
        rest: Symbol | None = None,
    ):
        self.params = params
        self.rest = rest
        self.body = body
        self.env = env

    def extend_env(self, args: list[LispValue]) -> Environment:
        """Bind ``args`` to the parameters in a fresh scope over the captured one."""
        arity = len(self.params)
        if len(args) < arity or (self.rest is None and len(args) > arity):
            raise ArityOrTypeMismatch("#<function>", args)
        scope = Environment(outer=self.env)
        for name, value in zip(self.params, args):
            scope.set(name, value)
        if self.rest is not None:
            scope.set(self.rest, List(args[arity:]))
        return scope

    def __repr__(self) -> str:
        return f"Closure({self.params!r}, rest={self.rest!r})"


def split_params(
    params: list[SExpression], form: SExpression = None
) -> tuple[list[Symbol], Symbol | None]:
    """Split a parameter list into positional names and an optional rest name.

    `form` is the enclosing form reported by MalformedSpecialForm.
    """
    if form is None:
        form = List(params)
    positional: list[Symbol] = []
    for i, p in enumerate(params):
        if p == VARIADIC_MARKER:
            tail = params[i + 1:]
            if len(tail) != 1 or not isinstance(tail[0], Symbol):
                raise MalformedSpecialForm(form, "'&' must be followed by exactly one symbol")
            return positional, tail[0]
        if not isinstance(p, Symbol):
            raise MalformedSpecialForm(form, "function parameters must be symbols")
        positional.append(p)
    return positional, None
