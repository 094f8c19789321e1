# Core type aliases for mal's data model.
# Plain Python types carry most values (int, bool, str); the remaining variants
# (Symbol, Keyword, Nil, List, Vector, MapLiteral, Function) live in mal.types.
#
# Naming guidance:
# - SExpression: Use in reader/printer code to denote syntactic forms (code-as-data).
# - LispValue:  Use in evaluator/runtime code to denote evaluated values.
# Both aliases resolve to `Any` and are interchangeable.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
SExpression = LispValue

# Evaluator function type: passed to special forms to avoid circular imports
EvaluatorFn = Callable[..., LispValue]

__version__ = "0.1.0"
