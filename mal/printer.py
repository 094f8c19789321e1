"""Printer: renders expressions back to source text.

``to_text(expr)`` is the inverse of the reader for every variant except
functions, which print as an opaque ``#<function>`` token.
"""

from __future__ import annotations

from mal import SExpression
from mal.types.function import Closure, NativeFunction
from mal.types.nil import NilType
from mal.types.sequences import List, MapLiteral, Vector
from mal.types.symbol import Keyword, Symbol

BRACKETS: dict[type, tuple[str, str]] = {
    List: ("(", ")"),
    Vector: ("[", "]"),
    MapLiteral: ("{", "}"),
}


def escape_string(s: str) -> str:
    return s.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")


def to_text(expr: SExpression, readably: bool = True) -> str:
    """Render `expr`; with ``readably`` strings are quoted and escaped."""
    match expr:
        case bool():
            return "true" if expr else "false"
        case int():
            return str(expr)
        case NilType():
            return "nil"
        case str():
            return f'"{escape_string(expr)}"' if readably else expr
        case Symbol() | Keyword():
            return str(expr)
        case List() | Vector() | MapLiteral():
            opener, closer = BRACKETS[type(expr)]
            return opener + " ".join(to_text(e, readably) for e in expr) + closer
        case NativeFunction():
            return f"#<function {expr.name}>"
        case Closure():
            return "#<function>"
    raise TypeError(f"Cannot print {expr!r}")
