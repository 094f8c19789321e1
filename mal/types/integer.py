"""Signed 64-bit integer helpers.

Python ints are unbounded and ``bool`` is a subclass of ``int``; these helpers
keep mal's Integer variant exact, 64-bit and distinct from Bool.
"""

from __future__ import annotations

from typing import Any

INT_MIN = -(2**63)
INT_MAX = 2**63 - 1


def is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def fits_int64(value: int) -> bool:
    return INT_MIN <= value <= INT_MAX


def truncating_div(x: int, y: int) -> int:
    """Integer division rounding toward zero (Python's ``//`` floors)."""
    q = abs(x) // abs(y)
    return q if (x < 0) == (y < 0) else -q
