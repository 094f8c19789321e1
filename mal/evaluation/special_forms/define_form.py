from mal import EvaluatorFn
from mal import SExpression, LispValue
from mal.errors import MalformedSpecialForm
from mal.types.environment import Environment
from mal.types.symbol import Symbol


def define_form(
    form: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (def! name value)
    Binds in the current scope only, so a def! inside a let* body stays local to it.
    """
    if len(form) != 3 or not isinstance(form[1], Symbol):
        raise MalformedSpecialForm(form, "expected (def! symbol value)")

    _, name, val_expr = form
    value = evaluate_fn(val_expr, env)
    env.set(name, value)
    return value
