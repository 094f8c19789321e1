"""Sequence variants of the expression tree.

List, Vector and MapLiteral are all Python lists underneath, but equality is
structural *and* tagged: a List never equals a Vector with the same elements,
and an Integer element never equals a Bool element.
"""

from __future__ import annotations

from typing import Any


def is_equal(a: Any, b: Any) -> bool:
    """Structural equality: variant tag first, then contents."""
    if a is b:
        return True
    if type(a) is not type(b):
        return False
    if isinstance(a, list):
        if len(a) != len(b):
            return False
        return all(is_equal(x, y) for x, y in zip(a, b))
    return a == b


class _Sequence(list):
    __slots__ = ()

    def __eq__(self, other: object) -> bool:
        return is_equal(self, other)

    def __ne__(self, other: object) -> bool:
        return not is_equal(self, other)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list.__repr__(self)})"


class List(_Sequence):
    """Parenthesized sequence."""
    __slots__ = ()


class Vector(_Sequence):
    """Bracketed sequence."""
    __slots__ = ()


class MapLiteral(_Sequence):
    """Braced sequence of alternating keys and values, kept in source order."""
    __slots__ = ()
