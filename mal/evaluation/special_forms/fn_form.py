from mal import EvaluatorFn
from mal import SExpression, LispValue
from mal.errors import MalformedSpecialForm
from mal.types.environment import Environment
from mal.types.function import Closure, split_params
from mal.types.sequences import List, Vector


def fn_form(
    form: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (fn* (param ... [& rest]) body)
    The closure holds on to `env`, keeping the defining scope alive as long as it is.
    """
    if len(form) != 3 or not isinstance(form[1], (List, Vector)):
        raise MalformedSpecialForm(form, "expected (fn* (symbol ...) body)")

    _, params, body = form
    positional, rest = split_params(list(params), form)
    return Closure(positional, body, env, rest)
