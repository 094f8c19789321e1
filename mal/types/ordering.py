"""Total ordering over mal values used by the comparison primitives.

Values of different variants order by variant tag; values of the same variant
order by their contents, sequences lexicographically.
"""

from __future__ import annotations

from typing import Any

from mal.types.function import Function
from mal.types.nil import NilType
from mal.types.sequences import List, MapLiteral, Vector
from mal.types.symbol import Keyword, Symbol

# Variant rank, in data-model order.
_TAGS: tuple[type, ...] = (int, bool, NilType, Symbol, Keyword, str, List, Vector, MapLiteral)


def variant_tag(value: Any) -> int:
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return 1
    for i, t in enumerate(_TAGS):
        if isinstance(value, t):
            return i
    raise TypeError(f"{value!r} has no ordering")


def compare(a: Any, b: Any) -> int:
    """Return a negative, zero or positive int as `a` sorts before, with or after `b`.

    Raises TypeError for values that have no ordering (functions).
    """
    if isinstance(a, Function) or isinstance(b, Function):
        raise TypeError("functions are not ordered")
    ta, tb = variant_tag(a), variant_tag(b)
    if ta != tb:
        return ta - tb
    if isinstance(a, NilType):
        return 0
    if isinstance(a, list):
        for x, y in zip(a, b):
            c = compare(x, y)
            if c:
                return c
        return len(a) - len(b)
    if isinstance(a, (Symbol, Keyword)):
        a, b = a.id, b.id
    return (a > b) - (a < b)
