"""Application engine for mal.

Both kinds of Function go through this one entry point:
- NativeFunction is called with the caller's environment and the argument list.
- Closure binds the arguments in a fresh scope over the scope it captured and
  evaluates its body there.
"""

from mal import LispValue, EvaluatorFn
from mal.errors import NotAFunction
from mal.types.environment import Environment
from mal.types.function import Closure, NativeFunction


def apply(
    head: LispValue,
    args: list[LispValue],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply an evaluated head to already-evaluated arguments.

    Raises NotAFunction if `head` is not a Function.
    """
    if isinstance(head, Closure):
        return evaluate_fn(head.body, head.extend_env(args))
    if isinstance(head, NativeFunction):
        return head(env, args)
    raise NotAFunction(head)
