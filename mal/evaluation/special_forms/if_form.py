from mal import EvaluatorFn
from mal import SExpression, LispValue
from mal.errors import MalformedSpecialForm
from mal.types.environment import Environment
from mal.types.nil import Nil, NilType


def is_truthy(value: LispValue) -> bool:
    """Only nil and false are false."""
    return not (value is False or isinstance(value, NilType))


def if_form(
    form: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (if test then [else])
    A missing else branch yields nil.
    """
    if len(form) not in (3, 4):
        raise MalformedSpecialForm(form, "expected (if test then [else])")

    if is_truthy(evaluate_fn(form[1], env)):
        return evaluate_fn(form[2], env)
    if len(form) == 4:
        return evaluate_fn(form[3], env)
    return Nil
