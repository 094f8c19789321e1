from mal.types.symbol import Symbol, Keyword
from mal.types.nil import Nil, NilType
from mal.types.sequences import List, Vector, MapLiteral, is_equal
from mal.types.environment import Environment
from mal.types.function import Function, NativeFunction, Closure
from mal.types.integer import INT_MIN, INT_MAX, is_integer

__all__ = [
    "Symbol",
    "Keyword",
    "Nil",
    "NilType",
    "List",
    "Vector",
    "MapLiteral",
    "is_equal",
    "Environment",
    "Function",
    "NativeFunction",
    "Closure",
    "INT_MIN",
    "INT_MAX",
    "is_integer",
]
