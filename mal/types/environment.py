"""Runtime environment for mal.

An Environment is one scope: a mapping from symbol names to evaluated values
plus an optional link to the enclosing scope. Scopes are ordinary Python objects
shared by reference, so a closure that captures a scope keeps it alive for as
long as the closure itself is reachable.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from mal import LispValue
from mal.errors import UnknownSymbol
from mal.types.symbol import Symbol


def _key(name: Symbol | str) -> str:
    if isinstance(name, Symbol):
        return name.id
    if isinstance(name, str):
        return name
    raise TypeError(f"Cannot bind {name!r}: environment keys must be symbols")


class Environment:
    """Hierarchical mapping from symbol names to mal values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[str, LispValue] = {}
        self.outer: Environment | None = outer

    def set(self, name: Symbol | str, value: LispValue) -> LispValue:
        """Bind `name` to `value` in this scope only.

        Shadows, but never touches, a binding of the same name in an outer scope.
        """
        self.vars[_key(name)] = value
        return value

    def find(self, name: Symbol | str) -> Optional[Environment]:
        """Find the nearest scope in the chain that binds `name`."""
        key = _key(name)
        env: Optional[Environment] = self
        while env is not None:
            if key in env.vars:
                return env
            env = env.outer
        return None

    def get(self, name: Symbol | str) -> Optional[LispValue]:
        """Return the innermost binding of `name`, or None when it is unbound."""
        env = self.find(name)
        if env is None:
            return None
        return env.vars[_key(name)]

    def lookup(self, name: Symbol | str) -> LispValue:
        """Like get(), but raises UnknownSymbol if `name` is unbound."""
        env = self.find(name)
        if env is None:
            raise UnknownSymbol(_key(name))
        return env.vars[_key(name)]

    def update(self, mapping: dict[Symbol | str, LispValue]) -> None:
        """Bulk-bind a mapping in the current scope."""
        for k, v in mapping.items():
            self.set(k, v)

    def root(self) -> Environment:
        env = self
        while env.outer is not None:
            env = env.outer
        return env

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this scope's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")  # indicate parent exists
            return buffer.getvalue()

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            chain = []
            env = self
            while env is not None:
                env_buf = StringIO()
                env._write_vars(env_buf)
                chain.append(env_buf.getvalue())
                env = env.outer
            buffer.write(" -> ".join(chain))
            buffer.write(">")
            return buffer.getvalue()
