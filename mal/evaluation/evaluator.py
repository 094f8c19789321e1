"""Core evaluator for the mal interpreter.

Recognizes special forms by their head symbol before falling back to ordinary
function application. Evaluation is plain recursion, so nesting depth is bounded
by Python's recursion limit.
"""

from __future__ import annotations

from mal import SExpression, LispValue
from mal.evaluation.apply import apply
from mal.evaluation.special_forms import SPECIAL_FORMS, VECTOR_SPECIAL_FORMS
from mal.types.environment import Environment
from mal.types.sequences import List, Vector
from mal.types.symbol import Symbol


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """Evaluate `expr` in `env` and return its value.

    Raises an EvalError subclass on failure; `env` keeps every binding made
    before the failure.
    """
    match expr:
        case List() | Vector() if not expr:
            return expr

        case List() | Vector():
            head = expr[0]
            if isinstance(head, Symbol) and head in SPECIAL_FORMS:
                if isinstance(expr, List) or head in VECTOR_SPECIAL_FORMS:
                    return SPECIAL_FORMS[head](expr, env, evaluate)

            # Generic application: every element, head included, left to right.
            values = [evaluate(e, env) for e in expr]
            return apply(values[0], values[1:], env, evaluate)

        case Symbol():
            return env.lookup(expr)

    # --- Atoms return as-is ---
    return expr
